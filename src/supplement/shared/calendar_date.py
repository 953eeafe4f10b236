"""Shared calendar value object returned by the date computations."""

from __future__ import annotations

from datetime import date
from typing import NamedTuple


class CalendarDate(NamedTuple):
    """Immutable ``(year, month, day)`` triple.

    Unlike :class:`datetime.date` it accepts any integer year, so
    proleptic results for years before 1 remain representable.
    """

    year: int
    month: int
    day: int

    def to_date(self) -> date:
        """Convert to :class:`datetime.date`.

        Raises:
            ValueError: The year lies outside ``datetime.MINYEAR..MAXYEAR``.
        """
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)
