"""Rich console handler that renders filesystem events with compact paths.

Where: platform/logging/handlers.py
What: ``PathRichHandler``, which styles the ``FsEvent`` records emitted by the core.
Why: Keep event styling out of logger setup so configuration stays concise.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from fsguard.core.events import FsEvent


class PathRichHandler(RichHandler):
    """Rich handler that renders ``fs_event`` records as icon plus path."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        FsEvent.FILE_WRITE: ("📝", "green", "Wrote"),
        FsEvent.FILE_APPEND: ("➕", "green", "Appended"),
        FsEvent.FILE_REMOVE: ("🗑️", "yellow", "Removed file"),
        FsEvent.DIRECTORY_REMOVE: ("📁", "yellow", "Removed directory"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def format_path(self, path: str) -> Text:
        """Render ``path`` keeping only the last few segments, separators in magenta."""

        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT :]
            display = f"…{separator}" + separator.join(body_parts)
        else:
            prefix = anchor.rstrip("\\/") + separator if anchor else ""
            display = prefix + separator.join(body_parts)

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "fs_event", None)
        path = getattr(record, "path", None)
        if not isinstance(event, str) or not isinstance(path, str):
            return super().render_message(record, message)

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", event))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(f"{label} ", style=Style(color=color))
        _ = text.append_text(self.format_path(path))
        return text


__all__ = ["FsEvent", "PathRichHandler"]
