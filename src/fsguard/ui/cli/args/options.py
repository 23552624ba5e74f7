"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class TypeArgs:
    """Arguments for the ``type`` subcommand."""

    command: Literal["type"]
    paths: list[Path]


@final
@dataclass(slots=True)
class AbsArgs:
    """Arguments for the ``abs`` subcommand."""

    command: Literal["abs"]
    # Kept as text so the ``~`` shorthand survives until resolution.
    path: str


@final
@dataclass(slots=True)
class ListArgs:
    """Arguments for the ``ls`` subcommand."""

    command: Literal["ls"]
    path: Path
    extension: str
    max_count: int
    directories: bool


@final
@dataclass(slots=True)
class CatArgs:
    """Arguments for the ``cat`` subcommand."""

    command: Literal["cat"]
    path: Path
    max_bytes: int


@final
@dataclass(slots=True)
class WriteArgs:
    """Arguments for the ``write`` subcommand."""

    command: Literal["write"]
    path: Path
    mode: int
    append: bool


@final
@dataclass(slots=True)
class RemoveArgs:
    """Arguments for the ``rm`` subcommand."""

    command: Literal["rm"]
    path: Path
    prune_parent: bool


@final
@dataclass(slots=True)
class PruneArgs:
    """Arguments for the ``prune`` subcommand."""

    command: Literal["prune"]
    path: Path


CLIArgs = TypeArgs | AbsArgs | ListArgs | CatArgs | WriteArgs | RemoveArgs | PruneArgs

__all__ = [
    "AbsArgs",
    "CLIArgs",
    "CatArgs",
    "ListArgs",
    "PruneArgs",
    "RemoveArgs",
    "TypeArgs",
    "WriteArgs",
]
