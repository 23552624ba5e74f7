"""Configuration for the fsguard command-line front end."""

from .paths import CONFIG_ENV_VAR, default_config_path, resolve_config_path
from .settings import (
    Settings,
    SettingsError,
    SettingsParseError,
    SettingsValidationError,
    load_settings,
    parse_mode,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "Settings",
    "SettingsError",
    "SettingsParseError",
    "SettingsValidationError",
    "default_config_path",
    "load_settings",
    "parse_mode",
    "resolve_config_path",
]
