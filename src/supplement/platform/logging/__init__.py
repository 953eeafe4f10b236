"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the library logger, setup helpers, and Rich handler.
Why: Provide a single canonical import path for library modules.
"""

from __future__ import annotations

from .config import (
    LOGGER_NAME,
    logger,
    reset_logger,
    setup_logger,
    setup_logger_from_config,
)
from .handlers import PathHighlightRichHandler

__all__ = [
    "LOGGER_NAME",
    "PathHighlightRichHandler",
    "logger",
    "reset_logger",
    "setup_logger",
    "setup_logger_from_config",
]
