"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from fsguard.config import Settings, SettingsValidationError, load_settings, parse_mode
from fsguard.platform.logging import setup_logger
from fsguard.ui.cli.args.options import (
    AbsArgs,
    CatArgs,
    CLIArgs,
    ListArgs,
    PruneArgs,
    RemoveArgs,
    TypeArgs,
    WriteArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="fsguard",
            description="fsguard - inspect, list, read and write files with typed errors.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="CONFIG_PATH",
            help="Settings file to use instead of the default location",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show every filesystem change as it happens",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        type_parser = subparsers.add_parser("type", help="Classify one or more paths")
        _ = type_parser.add_argument("paths", nargs="+", metavar="PATH")

        abs_parser = subparsers.add_parser(
            "abs", help="Print the absolute form of a path, expanding a leading ~"
        )
        _ = abs_parser.add_argument("path", metavar="PATH")

        ls_parser = subparsers.add_parser("ls", help="List regular files or subdirectories")
        _ = ls_parser.add_argument("path", metavar="DIR")
        _ = ls_parser.add_argument(
            "--ext",
            type=str,
            default="",
            metavar="EXT",
            help="Only list files ending in .EXT ('*' lists everything)",
        )
        _ = ls_parser.add_argument(
            "--max",
            type=int,
            dest="max_count",
            metavar="N",
            help="Enumerate at most N entries (0 for unlimited)",
        )
        _ = ls_parser.add_argument(
            "--dirs",
            action="store_true",
            help="List subdirectories instead of files",
        )

        cat_parser = subparsers.add_parser("cat", help="Write a file's content to stdout")
        _ = cat_parser.add_argument("path", metavar="FILE")
        _ = cat_parser.add_argument(
            "--max-bytes",
            type=int,
            metavar="N",
            help="Refuse files larger than N bytes (0 for unlimited)",
        )

        write_parser = subparsers.add_parser("write", help="Write stdin to a file")
        _ = write_parser.add_argument("path", metavar="FILE")
        _ = write_parser.add_argument(
            "--mode",
            type=str,
            metavar="OCTAL",
            help="Permission bits for the file, e.g. 0640",
        )
        _ = write_parser.add_argument(
            "--append",
            action="store_true",
            help="Append instead of overwriting; --mode only applies to new files",
        )

        rm_parser = subparsers.add_parser("rm", help="Delete a regular file")
        _ = rm_parser.add_argument("path", metavar="FILE")
        _ = rm_parser.add_argument(
            "--prune-parent",
            action="store_true",
            help="Also remove the parent directory if it ends up empty",
        )

        prune_parser = subparsers.add_parser("prune", help="Remove a directory if it is empty")
        _ = prune_parser.add_argument("path", metavar="DIR")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Typed arguments with settings defaults applied.

        Raises:
            SystemExit: On usage errors.
            SettingsError: When the settings file cannot be loaded.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        _ = setup_logger(console_level=log_level)
        settings = load_settings(path=parsed_args.config)
        if settings.log_file is not None:
            _ = setup_logger(log_file=settings.log_file, console_level=log_level)

        try:
            return ArgumentParser._build_args(parsed_args, settings)
        except SettingsValidationError as exc:
            parser.error(str(exc))

    @staticmethod
    def _build_args(parsed_args: argparse.Namespace, settings: Settings) -> CLIArgs:
        command: str = parsed_args.command

        if command == "type":
            return TypeArgs(command="type", paths=[Path(raw) for raw in parsed_args.paths])

        if command == "abs":
            return AbsArgs(command="abs", path=parsed_args.path)

        if command == "ls":
            max_count = parsed_args.max_count
            return ListArgs(
                command="ls",
                path=Path(parsed_args.path),
                extension=parsed_args.ext,
                max_count=settings.max_entries if max_count is None else max_count,
                directories=parsed_args.dirs,
            )

        if command == "cat":
            max_bytes = parsed_args.max_bytes
            return CatArgs(
                command="cat",
                path=Path(parsed_args.path),
                max_bytes=settings.max_read_bytes if max_bytes is None else max_bytes,
            )

        if command == "write":
            mode = settings.file_mode if parsed_args.mode is None else parse_mode(parsed_args.mode)
            return WriteArgs(
                command="write",
                path=Path(parsed_args.path),
                mode=mode,
                append=parsed_args.append,
            )

        if command == "rm":
            return RemoveArgs(
                command="rm",
                path=Path(parsed_args.path),
                prune_parent=parsed_args.prune_parent,
            )

        assert command == "prune"
        return PruneArgs(command="prune", path=Path(parsed_args.path))
