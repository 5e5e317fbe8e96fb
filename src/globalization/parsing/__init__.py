"""Parsing of locale-formatted date strings back into structured fields.

Public API:
    parse_date_string - Returns datetime, raises DateParseError
    parse_to_structured - Returns {year, month, day, hour, minute, second, millisecond}
        filtered by the requested date/time parts

Python 3.13+. Uses Babel CLDR patterns + python-dateutil.
"""

from .dates import parse_date_string, parse_to_structured

__all__ = [
    "parse_date_string",
    "parse_to_structured",
]
