"""Where: src/fsguard/config/settings.py
What: Command-line defaults loaded from an optional TOML settings file.
Why: Let users pin read ceilings, listing bounds, and file modes without repeating flags.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from fsguard.config.paths import resolve_config_path
from fsguard.core.files import DEFAULT_FILE_MODE
from fsguard.platform.logging import logger

_MAX_MODE: Final[int] = 0o7777
_KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {"max_read_bytes", "max_entries", "file_mode", "log_file"}
)


class SettingsError(Exception):
    """Base exception for settings file errors."""


class SettingsParseError(SettingsError):
    """Raised when the TOML document cannot be parsed."""


class SettingsValidationError(SettingsError):
    """Raised when the parsed document is semantically invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Defaults applied by the command-line front end."""

    # Ceiling for ``cat``; 0 reads any size.
    max_read_bytes: int = 0
    # Entries enumerated by ``ls``; 0 lists everything.
    max_entries: int = 0
    file_mode: int = DEFAULT_FILE_MODE
    log_file: Path | None = None


def parse_mode(value: object) -> int:
    """Convert an integer or octal string (``"0640"``, ``"0o640"``) into mode bits."""

    if isinstance(value, bool):
        raise SettingsValidationError(f"Invalid file mode: {value!r}")

    if isinstance(value, int):
        mode = value
    elif isinstance(value, str):
        text = value.strip().lower().removeprefix("0o")
        try:
            mode = int(text, 8)
        except ValueError as exc:
            raise SettingsValidationError(f"Invalid octal file mode: {value!r}") from exc
    else:
        raise SettingsValidationError(f"Invalid file mode: {value!r}")

    if not 0 <= mode <= _MAX_MODE:
        raise SettingsValidationError(f"File mode out of range: {oct(mode)}")
    return mode


def _non_negative_int(document: Mapping[str, Any], key: str) -> int:
    value = document.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsValidationError(f"'{key}' must be an integer")
    if value < 0:
        raise SettingsValidationError(f"'{key}' must not be negative")
    return value


def settings_from_mapping(document: Mapping[str, Any]) -> Settings:
    """Build ``Settings`` from a parsed TOML document."""

    unknown = sorted(set(document) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown settings keys: %s", ", ".join(unknown))

    log_file_raw = document.get("log_file")
    if log_file_raw is not None and not isinstance(log_file_raw, str):
        raise SettingsValidationError("'log_file' must be a string")

    return Settings(
        max_read_bytes=_non_negative_int(document, "max_read_bytes"),
        max_entries=_non_negative_int(document, "max_entries"),
        file_mode=parse_mode(document.get("file_mode", DEFAULT_FILE_MODE)),
        log_file=Path(log_file_raw).expanduser() if log_file_raw and log_file_raw.strip() else None,
    )


def load_settings(
    *, path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> Settings:
    """Load settings from TOML, returning defaults when no file exists.

    Args:
        path: Optional explicit settings file.
        env: Optional environment mapping consulted for ``FSGUARD_CONFIG``.

    Returns:
        Settings: Parsed settings or defaults.
    """

    resolved_path = resolve_config_path(path, env)
    if not resolved_path.exists():
        logger.debug("No settings file at %s; using defaults", resolved_path)
        return Settings()

    try:
        with resolved_path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsParseError(f"Invalid TOML in settings file: {resolved_path}") from exc
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file: {resolved_path}") from exc

    settings = settings_from_mapping(document)
    logger.debug("Settings loaded from %s", resolved_path)
    return settings


__all__ = [
    "Settings",
    "SettingsError",
    "SettingsParseError",
    "SettingsValidationError",
    "load_settings",
    "parse_mode",
    "settings_from_mapping",
]
