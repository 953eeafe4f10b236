"""Summary: Small date helpers for workdays, quarters and week boundaries.
Why: Scheduling code keeps reaching for the same one-line calendar rules.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo as TzInfo

from supplement.shared import CalendarDate

# date.weekday() numbering
_SATURDAY = 5
_SUNDAY = 6


def as_tuple(value: date) -> CalendarDate:
    """Return ``value`` as an immutable ``(year, month, day)`` triple."""

    return CalendarDate.from_date(value)


def workday_after(value: date, days: int) -> date:
    """Return the date ``days`` after ``value``, moved off the weekend.

    A result on Saturday moves forward two days and one on Sunday moves
    forward one day, so the answer is always a Monday-to-Friday date.
    Negative ``days`` count backwards but the weekend shift still goes
    forward.
    """
    result = value + timedelta(days=days)
    weekday = result.weekday()
    if weekday == _SUNDAY:
        result += timedelta(days=1)
    elif weekday == _SATURDAY:
        result += timedelta(days=2)
    return result


def quarter(value: date) -> int:
    """Return the calendar quarter (1-4) containing ``value``."""

    return (value.month - 1) // 3 + 1


def week_start(value: date) -> date:
    """Return the Sunday on or before ``value``."""

    return value - timedelta(days=(value.weekday() + 1) % 7)


def iso_week_start(value: date) -> date:
    """Return the Monday on or before ``value`` (ISO-8601 week)."""

    return value - timedelta(days=value.isoweekday() - 1)


def first_of_month(value: date) -> date:
    if value.day == 1:
        return value
    return value.replace(day=1)


def to_datetime(value: date, *time_parts: int, tzinfo: TzInfo | None = None) -> datetime:
    """Combine ``value`` with ``hour, minute, second, microsecond`` parts.

    Missing parts default to zero, e.g. ``to_datetime(d, 9, 30)`` is 09:30.

    Raises:
        TypeError: More than four time parts were supplied.
    """
    if len(time_parts) > 4:
        raise TypeError(
            f"to_datetime() takes at most 4 time parts ({len(time_parts)} given)"
        )
    return datetime(value.year, value.month, value.day, *time_parts, tzinfo=tzinfo)


__all__ = [
    "as_tuple",
    "first_of_month",
    "iso_week_start",
    "quarter",
    "to_datetime",
    "week_start",
    "workday_after",
]
