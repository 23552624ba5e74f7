"""CLI command execution."""

from fsguard.ui.cli.commands.executor import CommandExecutor

__all__ = ["CommandExecutor"]
