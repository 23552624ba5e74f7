"""Command line interface for fsguard."""

from collections.abc import Sequence
from typing import final

from fsguard.config import SettingsError
from fsguard.core import FsGuardError
from fsguard.platform.logging import logger
from fsguard.ui.cli.args import ArgumentParser
from fsguard.ui.cli.commands import CommandExecutor


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        executor: CommandExecutor | None = None,
    ) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            executor: Executor to run the command with (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args = ArgumentParser.process_args(args_list)
            return (executor or CommandExecutor()).execute(args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except (FsGuardError, SettingsError, OSError) as e:
            logger.error("%s", e)
            return 1


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()
