"""Enumerations for globalization option values.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they serialize into host
payloads without boilerplate.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "FormatLength",
    "NameItem",
    "NameType",
    "Selector",
]


class FormatLength(StrEnum):
    """Length of a date/time display pattern.

    Values match the keys of DATE_TIME_SKELETONS.
    """

    SHORT = "SHORT"
    MEDIUM = "MEDIUM"
    LONG = "LONG"
    FULL = "FULL"


class Selector(StrEnum):
    """Which parts of a date the caller wants.

    StrEnum provides automatic string conversion: str(Selector.DATE) == "date"
    """

    DATE = "date"
    """Date fields only"""

    TIME = "time"
    """Time fields only"""

    DATE_AND_TIME = "date and time"
    """Both date and time fields"""


class NameItem(StrEnum):
    """Calendar name table to read."""

    MONTHS = "months"
    DAYS = "days"


class NameType(StrEnum):
    """Width of calendar names.

    NARROW selects the CLDR abbreviated width, WIDE the full names.
    """

    NARROW = "narrow"
    WIDE = "wide"
