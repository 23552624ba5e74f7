"""Command line argument handling package."""

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
from fsguard.ui.cli.args.parser import ArgumentParser

__all__ = [
    "AbsArgs",
    "ArgumentParser",
    "CLIArgs",
    "CatArgs",
    "ListArgs",
    "PruneArgs",
    "RemoveArgs",
    "TypeArgs",
    "WriteArgs",
]
