"""Configuration loading and path discovery."""

from __future__ import annotations

from .config import (
    LEVEL_NAMES,
    Config,
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
)
from .paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)

__all__ = [
    "LEVEL_NAMES",
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
