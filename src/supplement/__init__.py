"""Calendar, directory and Roman-numeral helpers.

Each helper is a plain function over explicit values::

    from supplement import easter_western, nuke, to_roman

    easter_western(2024)   # CalendarDate(year=2024, month=3, day=31)
    to_roman(1994)         # 'MCMXCIV'
"""

from __future__ import annotations

from supplement.features.calendar import (
    EASTER,
    as_tuple,
    easter,
    easter_date,
    easter_western,
    first_of_month,
    iso_week_start,
    quarter,
    to_datetime,
    week_start,
    workday_after,
)
from supplement.features.filesystem import nuke, prune_empty_ancestors
from supplement.features.numerals import InvalidRomanNumeralError, from_roman, to_roman
from supplement.shared import CalendarDate, PathReference

__version__ = "0.1.0"

__all__ = [
    "EASTER",
    "CalendarDate",
    "InvalidRomanNumeralError",
    "PathReference",
    "as_tuple",
    "easter",
    "easter_date",
    "easter_western",
    "first_of_month",
    "from_roman",
    "iso_week_start",
    "nuke",
    "prune_empty_ancestors",
    "quarter",
    "to_datetime",
    "to_roman",
    "week_start",
    "workday_after",
]
