"""globalization - Locale-aware date services for hybrid application shells.

Derives display patterns from a locale's long date format table, formats and
parses dates, and reports calendar facts (month/weekday names, DST, first day
of week). A bridge layer exposes these to a host in its callback convention.

Public API:
    GlobalizationPlugin - Host entry points (getDatePattern, dateToString, ...)
    LocaleContext - Locale + timezone container with the long date format table
    DateFieldOptions - Format length and date/time selection
    NameOptions - Calendar name list selection
    derive_pattern - Display pattern, timezone and UTC offset
    format_date - Render a date with the derived pattern
    derive_names - Month or weekday names
    is_dst - Daylight saving time predicate
    first_day_of_week - ISO weekday the locale's week starts on
    parse_to_structured - Parse a date string into structured fields

Exceptions:
    GlobalizationError - Base exception class
    ArgumentError - Missing or malformed host arguments
    LocaleDataError - Invalid format length or missing locale data
    DateParseError - Unparseable date string
    UnsupportedOperationError - Operation not provided

Submodules:
    globalization.bridge - Host entry points and result reporting
    globalization.diagnostics - Error codes, templates and formatting
    globalization.formatting - Pattern derivation and calendar facts
    globalization.parsing - Date string parsing
    globalization.runtime - LocaleContext and option types
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .bridge import GlobalizationPlugin
from .diagnostics import (
    ArgumentError,
    DateParseError,
    GlobalizationError,
    LocaleDataError,
    UnsupportedOperationError,
)
from .formatting import derive_names, derive_pattern, first_day_of_week, format_date, is_dst
from .parsing import parse_to_structured
from .runtime import DateFieldOptions, LocaleContext, NameOptions

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("globalization")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgumentError",
    "DateFieldOptions",
    "DateParseError",
    "GlobalizationError",
    "GlobalizationPlugin",
    "LocaleContext",
    "LocaleDataError",
    "NameOptions",
    "UnsupportedOperationError",
    "__version__",
    "derive_names",
    "derive_pattern",
    "first_day_of_week",
    "format_date",
    "is_dst",
    "parse_to_structured",
]
