"""Where: src/fsguard/core/directory.py
What: List directory entries by kind and detect or remove empty directories.
Why: Callers get plain name lists and typed errors instead of raw scandir handling.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from itertools import islice
from typing import Final

from fsguard.core.errors import NotDirectoryError
from fsguard.core.events import FsEvent, logger

ANY_EXTENSION: Final[str] = "*"


@contextmanager
def _open_directory(path: str | os.PathLike[str]) -> Iterator[Iterator[os.DirEntry[str]]]:
    """Yield a scandir iterator, translating "not a directory" into ``NotDirectoryError``."""

    try:
        entries = os.scandir(path)
    except NotADirectoryError as exc:
        raise NotDirectoryError(path) from exc

    with entries:
        yield entries


def _collect(
    path: str | os.PathLike[str],
    max_count: int,
    keep: Callable[[os.DirEntry[str]], bool],
) -> list[str]:
    with _open_directory(path) as entries:
        bounded = islice(entries, max_count) if max_count > 0 else entries
        return [entry.name for entry in bounded if keep(entry)]


def list_files(
    path: str | os.PathLike[str],
    extension: str = "",
    max_count: int = 0,
) -> list[str]:
    """Return names of regular files directly inside ``path``.

    Args:
        path: Directory to enumerate.
        extension: ``""`` or ``"*"`` keeps every file; otherwise only names
            ending in ``"." + extension`` (case-sensitive) are kept.
        max_count: Maximum number of entries to enumerate before filtering;
            ``<= 0`` enumerates everything.

    Returns:
        list[str]: Entry names in enumeration order, possibly empty.

    Raises:
        NotDirectoryError: ``path`` is not a directory.
        OSError: Any other failure opening or reading the directory.
    """

    suffix = "" if extension in {"", ANY_EXTENSION} else f".{extension}"

    def keep(entry: os.DirEntry[str]) -> bool:
        if not entry.is_file(follow_symlinks=False):
            return False
        return not suffix or entry.name.endswith(suffix)

    return _collect(path, max_count, keep)


def list_subdirectories(path: str | os.PathLike[str], max_count: int = 0) -> list[str]:
    """Return names of directories directly inside ``path``.

    Same bounds and errors as ``list_files``; no extension filter applies.
    """

    return _collect(path, max_count, lambda entry: entry.is_dir(follow_symlinks=False))


def is_empty_directory(path: str | os.PathLike[str]) -> bool:
    """Return whether the directory at ``path`` has no entries."""

    with _open_directory(path) as entries:
        return next(entries, None) is None


def remove_if_empty(path: str | os.PathLike[str]) -> bool:
    """Remove ``path`` if it is an empty directory.

    Returns:
        bool: ``True`` when the directory was removed, ``False`` when it was
        left in place because it still has entries.
    """

    if not is_empty_directory(path):
        return False

    os.rmdir(path)
    logger.debug(
        "Removed empty directory %s",
        path,
        extra={"fs_event": FsEvent.DIRECTORY_REMOVE, "path": os.fspath(path)},
    )
    return True


__all__ = [
    "ANY_EXTENSION",
    "is_empty_directory",
    "list_files",
    "list_subdirectories",
    "remove_if_empty",
]
