# Where: supplement.shared.__init__
# What: Value types shared between feature packages.
# Why: One definition for dates and path arguments across the library.

from .calendar_date import CalendarDate
from .path_reference import PathReference

__all__ = ["CalendarDate", "PathReference"]
