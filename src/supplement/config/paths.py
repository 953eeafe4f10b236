"""Shared path utilities for configuration and log locations.

This module centralizes how the library discovers locations for its
config file and log output. Nothing here depends on the working
directory, so a host application's own files are never picked up.

Policy (XDG by default):
- Config: ``$SUPPLEMENT_CONFIG_PATH``, else
  ``$XDG_CONFIG_HOME/supplement/config.toml``, else
  ``~/.config/supplement/config.toml``.
- Logs: ``$SUPPLEMENT_LOG_DIR``, else ``$XDG_STATE_HOME/supplement/logs``,
  else ``~/.local/state/supplement/logs``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


APP_DIR_NAME: Final[str] = "supplement"
ENV_CONFIG_PATH: Final[str] = "SUPPLEMENT_CONFIG_PATH"
ENV_LOG_DIR: Final[str] = "SUPPLEMENT_LOG_DIR"
LOG_FILE_NAME: Final[str] = "supplement.log"


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


def _xdg_base(env: Mapping[str, str] | None, env_var: str, fallback: str) -> Path:
    """Return the XDG base directory named by ``env_var`` or ``~/<fallback>``.

    Relative values are ignored, as the XDG base directory spec requires.
    """
    mapping = env if env is not None else os.environ
    candidate = (mapping.get(env_var) or "").strip()
    if candidate and Path(candidate).is_absolute():
        return Path(candidate)
    return Path.home() / fallback


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: _xdg_base(env, "XDG_CONFIG_HOME", ".config")
        / APP_DIR_NAME
        / "config.toml",
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_LOG_DIR,
        default_factory=lambda: _xdg_base(env, "XDG_STATE_HOME", ".local/state")
        / APP_DIR_NAME
        / "logs",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return (default_log_dir(env) / LOG_FILE_NAME).resolve()


__all__ = [
    "APP_DIR_NAME",
    "ENV_CONFIG_PATH",
    "ENV_LOG_DIR",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
