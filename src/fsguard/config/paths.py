"""Shared path utilities for configuration locations.

Policy:
- Config: ``$XDG_CONFIG_HOME/fsguard/config.toml``, falling back to
  ``~/.config/fsguard/config.toml``.
- ``FSGUARD_CONFIG`` overrides the default; an explicit path overrides both.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "FSGUARD_CONFIG"
_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the per-user configuration directory for fsguard."""

    mapping = env if env is not None else os.environ
    xdg_home = (mapping.get(_XDG_CONFIG_HOME) or "").strip()
    base = Path(xdg_home) if xdg_home else Path("~") / ".config"
    return (base / "fsguard").expanduser()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default path to the TOML settings file."""

    return default_config_dir(env) / "config.toml"


def resolve_config_path(
    explicit_path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> Path:
    """Resolve where settings should be read from."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: default_config_path(env),
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_dir",
    "default_config_path",
    "resolve_config_path",
    "resolve_overridable_path",
]
