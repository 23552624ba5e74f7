"""src/fsguard/ui/cli/commands/executor.py
What: Run a parsed CLI command against the fsguard library.
Why: Keep argument parsing, filesystem calls, and presentation in separate layers.
"""

import sys
from typing import BinaryIO

from fsguard.core import (
    append_file,
    classify_path,
    list_files,
    list_subdirectories,
    read_file,
    remove_file,
    remove_if_empty,
    resolve_absolute,
    write_file,
)
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
from fsguard.ui.cli.display.result import ResultDisplay


class CommandExecutor:
    """Dispatch typed CLI arguments to library calls."""

    result_display: ResultDisplay
    stdin: BinaryIO
    stdout: BinaryIO

    def __init__(
        self,
        result_display: ResultDisplay | None = None,
        stdin: BinaryIO | None = None,
        stdout: BinaryIO | None = None,
    ) -> None:
        self.result_display = result_display or ResultDisplay()
        self.stdin = stdin or sys.stdin.buffer
        self.stdout = stdout or sys.stdout.buffer

    def execute(self, args: CLIArgs) -> int:
        """Execute ``args`` and return the process exit code.

        Library errors propagate to the caller, which maps them to exit codes.
        """
        match args:
            case TypeArgs():
                results = [(path, classify_path(path)) for path in args.paths]
                self.result_display.show_classifications(results)
            case AbsArgs():
                self.result_display.show_path(resolve_absolute(args.path))
            case ListArgs(directories=True):
                self.result_display.show_names(list_subdirectories(args.path, args.max_count))
            case ListArgs():
                self.result_display.show_names(
                    list_files(args.path, args.extension, args.max_count)
                )
            case CatArgs():
                _ = self.stdout.write(read_file(args.path, args.max_bytes))
                self.stdout.flush()
            case WriteArgs(append=True):
                append_file(args.path, self.stdin.read(), args.mode)
            case WriteArgs():
                write_file(args.path, self.stdin.read(), args.mode)
            case RemoveArgs():
                remove_file(args.path, prune_parent=args.prune_parent)
            case PruneArgs():
                self.result_display.show_removal(args.path, remove_if_empty(args.path))
        return 0
