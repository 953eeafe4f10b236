"""Summary: Western Easter Sunday computed with Knuth's closed-form algorithm.
Why: Easter anchors the movable feasts, so callers need it for any year.
"""

from __future__ import annotations

from datetime import date
from typing import Final

from supplement.shared import CalendarDate

EASTER: Final[str] = "Easter"


def easter_western(year: int) -> CalendarDate:
    """Return the date of Western (Catholic/Protestant) Easter Sunday.

    The arithmetic follows Donald E. Knuth and runs on the proleptic
    Gregorian calendar, so every integer year yields a result. Years
    outside the calendar's practical range are the caller's concern.

        >>> easter_western(2000)
        CalendarDate(year=2000, month=4, day=23)
    """
    golden = year % 19 + 1
    century = year // 100 + 1
    leap_correction = 3 * century // 4 - 12
    moon_correction = (8 * century + 5) // 25 - 5
    # March((-sunday) % 7) is a Sunday
    sunday = 5 * year // 4 - leap_correction - 10

    epact = (11 * golden + 20 + moon_correction - leap_correction) % 30
    if (epact == 25 and golden > 11) or epact == 24:
        epact += 1

    full_moon = 44 - epact
    if full_moon < 21:
        full_moon += 30

    month = 3
    day = full_moon + 7 - (sunday + full_moon) % 7
    if day > 31:
        month = 4
        day -= 31
    return CalendarDate(year, month, day)


easter = easter_western


def easter_date(year: int) -> date:
    """Return Easter Sunday of ``year`` as a :class:`datetime.date`."""

    return easter_western(year).to_date()


__all__ = ["EASTER", "easter", "easter_date", "easter_western"]
