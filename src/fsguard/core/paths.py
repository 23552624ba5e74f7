"""Where: src/fsguard/core/paths.py
What: Expand the ``~`` shorthand and normalise paths to absolute form.
Why: Keep home lookup failures typed instead of leaking a literal ``~`` downstream.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from fsguard.core.errors import HomeDirectoryError

HOME_SHORTHAND: Final[str] = "~"


def home_directory() -> Path | None:
    """Return the current user's home directory, or ``None`` when it is unknown."""

    # An empty HOME makes the platform lookup fall back to the filesystem root.
    if os.name != "nt" and os.environ.get("HOME") == "":
        return None

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None

    if str(home) in {"", ".", HOME_SHORTHAND}:
        return None
    return home


def _has_home_prefix(raw: str) -> bool:
    if raw == HOME_SHORTHAND:
        return True
    separators = {"/", os.sep}
    return len(raw) >= 2 and raw[0] == HOME_SHORTHAND and raw[1] in separators


def resolve_absolute(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` as an absolute, lexically cleaned path.

    A bare ``~`` or a leading ``~/`` is replaced by the home directory before
    normalisation. Only the home lookup touches the system; the result is not
    checked for existence and symbolic links are not resolved.

    Raises:
        HomeDirectoryError: ``path`` uses the shorthand but the home directory
            cannot be determined.
    """

    raw = os.fspath(path)
    if _has_home_prefix(raw):
        home = home_directory()
        if home is None:
            raise HomeDirectoryError(raw)
        remainder = raw[2:].lstrip("/" + os.sep)
        raw = os.path.join(home, remainder) if remainder else os.fspath(home)

    cleaned = os.path.abspath(raw)
    # POSIX keeps exactly two leading slashes; collapse them like any other run.
    if cleaned.startswith("//"):
        cleaned = cleaned[1:]
    return Path(cleaned)


__all__ = ["HOME_SHORTHAND", "home_directory", "resolve_absolute"]
