"""Command line interface package."""

from fsguard.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
