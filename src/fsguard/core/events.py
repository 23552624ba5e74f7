"""Where: src/fsguard/core/events.py
What: The package logger and the ``FsEvent`` identifiers attached to its records.
Why: Core helpers log without importing the Rich console stack.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Final

LOGGER_NAME: Final[str] = "fsguard"


class FsEvent(StrEnum):
    """Structured event identifiers attached to log records as ``fs_event``."""

    FILE_WRITE = "fs.file.write"
    FILE_APPEND = "fs.file.append"
    FILE_REMOVE = "fs.file.remove"
    DIRECTORY_REMOVE = "fs.directory.remove"


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = ["FsEvent", "LOGGER_NAME", "logger"]
