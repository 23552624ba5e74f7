"""Where: src/fsguard/core/errors.py
What: Typed failures raised by the filesystem helpers.
Why: Let callers branch on a closed set of error kinds while platform errors pass through.
"""

from __future__ import annotations

import os
from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Discriminator shared by every ``FsGuardError`` subclass."""

    NOT_A_DIRECTORY = "not_a_directory"
    NOT_A_FILE = "not_a_file"
    FILE_TOO_LARGE = "file_too_large"
    HOME_DIRECTORY_UNRESOLVED = "home_directory_unresolved"


class FsGuardError(Exception):
    """Base exception for failures detected by fsguard itself.

    Platform failures (``FileNotFoundError``, ``PermissionError`` and other
    ``OSError`` subclasses) are never wrapped in this hierarchy unless a more
    specific kind applies, in which case the original error is chained as
    ``__cause__``.
    """

    kind: ClassVar[ErrorKind]
    default_message: ClassVar[str] = "filesystem error"

    def __init__(self, path: str | os.PathLike[str] | None = None, message: str | None = None) -> None:
        self.path: str | None = os.fspath(path) if path is not None else None
        text = message or self.default_message
        if self.path is not None:
            text = f"{text}: {self.path}"
        super().__init__(text)


class NotDirectoryError(FsGuardError):
    """Raised when an operation required a directory."""

    kind = ErrorKind.NOT_A_DIRECTORY
    default_message = "not a directory"


class NotFileError(FsGuardError):
    """Raised when an operation required a regular file."""

    kind = ErrorKind.NOT_A_FILE
    default_message = "not a file"


class FileTooLargeError(FsGuardError):
    """Raised when a bounded read exceeds the caller's ceiling."""

    kind = ErrorKind.FILE_TOO_LARGE
    default_message = "file is too large"

    def __init__(self, path: str | os.PathLike[str], size: int, limit: int) -> None:
        super().__init__(path, f"file is too large ({size} > {limit} bytes)")
        self.size: int = size
        self.limit: int = limit


class HomeDirectoryError(FsGuardError):
    """Raised when ``~`` expansion is requested but the home directory is unknown."""

    kind = ErrorKind.HOME_DIRECTORY_UNRESOLVED
    default_message = "cannot resolve home directory"


__all__ = [
    "ErrorKind",
    "FileTooLargeError",
    "FsGuardError",
    "HomeDirectoryError",
    "NotDirectoryError",
    "NotFileError",
]
