"""Locale formatting helpers.

Pure functions over a LocaleContext:
    derive_pattern - CLDR pattern, timezone and UTC offset for a format length
    format_date - Render a date with the derived pattern
    derive_names - Month or weekday names
    is_dst - Daylight saving time predicate
    first_day_of_week - ISO weekday the locale's week starts on

Python 3.13+. Uses Babel CLDR data.
"""

from .calendar import derive_names, first_day_of_week, is_dst
from .patterns import LocaleDateFormatSpec, current_timezone_name, derive_pattern, format_date

__all__ = [
    "LocaleDateFormatSpec",
    "current_timezone_name",
    "derive_names",
    "derive_pattern",
    "first_day_of_week",
    "format_date",
    "is_dst",
]
