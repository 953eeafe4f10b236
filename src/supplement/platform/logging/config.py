"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the shared library logger and opt-in handler setup.
Why: Importing the library must stay silent; hosts decide where logs go.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from supplement.config.config import Config
from supplement.config.settings import logging_settings

from .handlers import PathHighlightRichHandler

LOGGER_NAME: Final[str] = "supplement"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Attach the Rich console handler and an optional rotating file handler.

    Existing handlers are closed and replaced, so calling this again
    reconfigures the logger in place.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = PathHighlightRichHandler(
        console=console or Console(stderr=True, soft_wrap=True)
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logger_from_config(
    config: Config | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the logger from ``config`` (default: ``Config.load()``)."""

    settings = logging_settings(config)
    return setup_logger(
        log_file=settings.log_file,
        console_level=settings.console_level,
        file_level=settings.file_level,
        console=console,
    )


def reset_logger() -> logging.Logger:
    """Drop configured handlers and return the logger to its silent default."""

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.addHandler(logging.NullHandler())
    return logger


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = [
    "LOGGER_NAME",
    "logger",
    "reset_logger",
    "setup_logger",
    "setup_logger_from_config",
]
