"""Rendering of command results on the console."""

from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from fsguard.core import PathType


class ResultDisplay:
    """Render fsguard command results with Rich."""

    _TYPE_STYLES: ClassVar[dict[PathType, str]] = {
        PathType.FILE: "green",
        PathType.DIRECTORY: "blue",
        PathType.NOT_EXIST: "dim",
        PathType.IRREGULAR: "yellow",
        PathType.BAD: "red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def show_classifications(self, results: Sequence[tuple[Path, PathType]]) -> None:
        """Print one ``TYPE  PATH`` line per classified path."""

        width = max((len(path_type.value) for _, path_type in results), default=0)
        for path, path_type in results:
            style = self._TYPE_STYLES.get(path_type, "white")
            label = path_type.value.ljust(width)
            self.console.print(f"[{style}]{label}[/{style}]  {escape(str(path))}")

    def show_names(self, names: Sequence[str]) -> None:
        """Print listed entry names, one per line."""

        for name in names:
            self.console.print(escape(name), highlight=False)

    def show_path(self, path: Path) -> None:
        """Print a single resolved path."""

        self.console.print(escape(str(path)), highlight=False)

    def show_removal(self, path: Path, removed: bool) -> None:
        """Report whether a directory prune removed anything."""

        if removed:
            self.console.print(f"[yellow]removed[/yellow] {escape(str(path))}")
        else:
            self.console.print(f"[dim]kept (not empty)[/dim] {escape(str(path))}")
