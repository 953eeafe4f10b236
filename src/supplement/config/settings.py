"""Where: src/supplement/config/settings.py
What: Derived logging settings sourced from persisted configuration.
Why: Turn validated config values into what the logging bootstrap consumes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from supplement.config.config import Config


@dataclass(slots=True, frozen=True)
class LoggingSettings:
    """Numeric levels and optional log file for ``setup_logger``."""

    log_file: Path | None
    console_level: int
    file_level: int


def logging_settings(config: Config | None = None) -> LoggingSettings:
    """Derive logging settings from ``config`` or the loaded configuration.

    Config is read only when this is called, never at import time.
    """
    source = config if config is not None else Config.load()
    levels = logging.getLevelNamesMapping()
    return LoggingSettings(
        log_file=source.log_file,
        console_level=levels[source.console_log_level],
        file_level=levels[source.file_log_level],
    )


__all__ = ["LoggingSettings", "logging_settings"]
