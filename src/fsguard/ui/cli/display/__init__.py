"""Console display helpers for the CLI."""

from fsguard.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
