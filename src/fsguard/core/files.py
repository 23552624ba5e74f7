"""Where: src/fsguard/core/files.py
What: Whole-file read, write, append, and remove with size and mode control.
Why: Bound memory on reads and make the final permission bits predictable on writes.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Final

from fsguard.core.directory import remove_if_empty
from fsguard.core.errors import FileTooLargeError, NotFileError
from fsguard.core.path_type import PathType, classify_path
from fsguard.core.events import FsEvent, logger

DEFAULT_FILE_MODE: Final[int] = 0o644


def read_file(path: str | os.PathLike[str], max_bytes: int = 0) -> bytes:
    """Read the whole file at ``path`` into memory.

    Args:
        path: File to read.
        max_bytes: When positive, refuse files strictly larger than this many
            bytes. ``<= 0`` skips the size check entirely.

    Returns:
        bytes: The file content.

    Raises:
        NotFileError: ``max_bytes`` is positive and ``path`` is a directory.
        FileTooLargeError: The file is larger than ``max_bytes``.
        OSError: Stat or read failures, unchanged.
    """

    if max_bytes > 0:
        st = os.stat(path)
        if stat.S_ISDIR(st.st_mode):
            raise NotFileError(path)
        if st.st_size > max_bytes:
            raise FileTooLargeError(path, size=st.st_size, limit=max_bytes)

    with open(path, "rb") as handle:
        return handle.read()


def write_file(path: str | os.PathLike[str], data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
    """Overwrite ``path`` with ``data`` and then set its permission bits to ``mode``.

    The file is created when missing, but its parent directory must exist.
    The mode is applied on every call, including when an existing file is
    overwritten.
    """

    with open(path, "wb") as handle:
        _ = handle.write(data)
    os.chmod(path, mode)

    logger.debug(
        "Wrote %d bytes to %s",
        len(data),
        path,
        extra={"fs_event": FsEvent.FILE_WRITE, "path": os.fspath(path)},
    )


def append_file(path: str | os.PathLike[str], data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
    """Append ``data`` to ``path``, creating it with ``mode`` when missing.

    An existing file keeps its permission bits; ``mode`` only applies to a
    file this call creates. The parent directory must exist.
    """

    flags = os.O_WRONLY | os.O_APPEND | getattr(os, "O_BINARY", 0)
    try:
        fd = os.open(path, flags | os.O_CREAT | os.O_EXCL, mode)
        created = True
    except FileExistsError:
        # A dangling symlink fails the exclusive open but its target can still be created.
        created = not os.path.exists(path)
        fd = os.open(path, flags | os.O_CREAT, mode)

    with os.fdopen(fd, "ab") as handle:
        if created:
            # Creation mode is filtered by the umask.
            os.chmod(path, mode)
        _ = handle.write(data)

    logger.debug(
        "Appended %d bytes to %s",
        len(data),
        path,
        extra={"fs_event": FsEvent.FILE_APPEND, "path": os.fspath(path)},
    )


def remove_file(path: str | os.PathLike[str], prune_parent: bool = False) -> None:
    """Delete the regular file at ``path``.

    Args:
        path: File to delete. Directories, missing paths and irregular
            entries are rejected with ``NotFileError``.
        prune_parent: Also remove the file's parent directory when it is
            empty after the deletion.

    Raises:
        NotFileError: ``path`` is not a regular file.
        OSError: Deletion or parent cleanup failed. A cleanup failure is
            raised after the file itself has already been removed.
    """

    if classify_path(path) is not PathType.FILE:
        raise NotFileError(path)

    os.remove(path)
    logger.debug(
        "Removed file %s",
        path,
        extra={"fs_event": FsEvent.FILE_REMOVE, "path": os.fspath(path)},
    )

    if not prune_parent:
        return

    _ = remove_if_empty(Path(os.path.abspath(path)).parent)


__all__ = ["DEFAULT_FILE_MODE", "append_file", "read_file", "remove_file", "write_file"]
