"""Summary: Calendar helpers (Easter, workdays, quarter and week boundaries).
Why: Give callers one import surface for the date computations.
"""

from .dates import (
    as_tuple,
    first_of_month,
    iso_week_start,
    quarter,
    to_datetime,
    week_start,
    workday_after,
)
from .easter import EASTER, easter, easter_date, easter_western

__all__ = [
    "EASTER",
    "as_tuple",
    "easter",
    "easter_date",
    "easter_western",
    "first_of_month",
    "iso_week_start",
    "quarter",
    "to_datetime",
    "week_start",
    "workday_after",
]
