"""Runtime state for the formatting helpers.

Exports:
    LocaleContext: Immutable locale + timezone container with the long date
        format token table
    DateFieldOptions: Format length and date/time selection
    NameOptions: Calendar name list selection

Python 3.13+.
"""

from .locale_context import LocaleContext
from .options import DateFieldOptions, NameOptions, parse_format_length

__all__ = [
    "DateFieldOptions",
    "LocaleContext",
    "NameOptions",
    "parse_format_length",
]
