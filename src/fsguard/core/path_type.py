"""Where: src/fsguard/core/path_type.py
What: Classify what currently exists at a filesystem path.
Why: Every other helper validates its input through this single stat-based check.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Collection
from enum import StrEnum


class PathType(StrEnum):
    """Snapshot classification of a path at the instant it was queried."""

    NOT_EXIST = "not_exist"
    DIRECTORY = "directory"
    FILE = "file"
    IRREGULAR = "irregular"
    BAD = "bad"


def classify_path(path: str | os.PathLike[str]) -> PathType:
    """Return the ``PathType`` of ``path``.

    Symbolic links are followed, so a link to a regular file is a ``FILE`` and
    a dangling link does not exist. Never raises: stat failures other than a
    missing entry are reported as ``PathType.BAD``.
    """

    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return PathType.NOT_EXIST
    except (OSError, ValueError):
        return PathType.BAD

    if stat.S_ISDIR(st.st_mode):
        return PathType.DIRECTORY
    if stat.S_ISREG(st.st_mode):
        return PathType.FILE
    return PathType.IRREGULAR


def matches_any_type(path: str | os.PathLike[str], expected: Collection[PathType]) -> bool:
    """Return whether ``path`` is any of ``expected``; an empty collection accepts anything."""

    if not expected:
        return True
    return classify_path(path) in expected


__all__ = ["PathType", "classify_path", "matches_any_type"]
