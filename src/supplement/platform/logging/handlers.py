"""Summary: Rich console handler that highlights filesystem paths in log lines.
Why: Deletion logs are mostly paths; coloured separators keep them scannable.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Final

from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:/[^/\s]+)+/?|[A-Za-z]:\\[^\s\\]+(?:\\[^\s\\]+)*"
)

_LEVEL_STYLES: Final[tuple[tuple[int, str, str], ...]] = (
    (logging.ERROR, "✖ ", "red"),
    (logging.WARNING, "! ", "yellow"),
    (logging.INFO, "› ", "blue"),
    (logging.NOTSET, "· ", "bright_black"),
)

SEPARATOR_STYLE: Final[Style] = Style(color="magenta")
SEGMENT_STYLE: Final[Style] = Style(color="bright_white")


class PathHighlightRichHandler(RichHandler):
    """Rich handler that renders path segments in white with coloured separators."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs["show_level"] = False
        kwargs["markup"] = False
        kwargs["rich_tracebacks"] = True
        super().__init__(*args, **kwargs)

    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Render ``message`` with a level marker and highlighted paths.

        When the record carries a ``removed_path`` extra it is appended after
        the message so the path is visible even if the text omits it.
        """
        marker, colour = _level_marker(record.levelno)
        text = Text()
        text.append(marker, style=Style(color=colour, bold=True))

        cursor = 0
        for match in _PATH_PATTERN.finditer(message):
            text.append(message[cursor : match.start()], style=Style(color=colour))
            append_path(text, match.group(0))
            cursor = match.end()
        text.append(message[cursor:], style=Style(color=colour))

        removed_path = getattr(record, "removed_path", None)
        if removed_path and str(removed_path) not in message:
            text.append(" ")
            append_path(text, str(removed_path))

        return text


def append_path(text: Text, path: str) -> None:
    """Append ``path`` to ``text`` styling segments and separators separately."""

    separator = "\\" if "\\" in path else "/"
    for index, part in enumerate(path.split(separator)):
        if index:
            text.append(separator, style=SEPARATOR_STYLE)
        if part:
            text.append(part, style=SEGMENT_STYLE)


def _level_marker(levelno: int) -> tuple[str, str]:
    for threshold, marker, colour in _LEVEL_STYLES:
        if levelno >= threshold:
            return marker, colour
    return _LEVEL_STYLES[-1][1], _LEVEL_STYLES[-1][2]


__all__ = ["PathHighlightRichHandler", "append_path"]
