"""Shared constants for the globalization plugin.

Centralized configuration values used by the formatting helpers and the
bridge layer. Placing them here avoids circular imports between
``runtime``, ``formatting`` and ``bridge``.

Constants are grouped by domain:
- Pattern skeletons: Format length to long-date-format token skeletons
- Option defaults: Values used when callers omit an option
- Cache limits: Memory bounds for LocaleContext caching
- Host conventions: Weekday numbering expected by the application shell

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern skeletons
    "DATE_TIME_SKELETONS",
    "TIME_TOKEN",
    # Option defaults
    "DEFAULT_FORMAT_LENGTH",
    "DEFAULT_NAME_ITEM",
    "DEFAULT_NAME_TYPE",
    "FALLBACK_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Host conventions
    "ISO_SUNDAY",
    "HOST_SUNDAY",
    "HOST_MONDAY",
    # Messages
    "UNSUPPORTED_MESSAGE",
]

# ============================================================================
# PATTERN SKELETONS
# ============================================================================
#
# Each format length maps to a skeleton of long-date-format tokens. Tokens are
# expanded through LocaleContext.long_date_format():
#
#   L     short date           LT    short time
#   lll   medium date + LT     LLL   long date + LT
#   LLLL  full date + LT
#
# The composite tokens (lll, LLL, LLLL) expand to a date pattern that still
# contains the literal "LT". derive_pattern() resolves it in a second pass.

DATE_TIME_SKELETONS: dict[str, str] = {
    "SHORT": "L LT",
    "MEDIUM": "lll",
    "LONG": "LLL",
    "FULL": "LLLL",
}

TIME_TOKEN: str = "LT"

# ============================================================================
# OPTION DEFAULTS
# ============================================================================

DEFAULT_FORMAT_LENGTH: str = "SHORT"
DEFAULT_NAME_ITEM: str = "months"
DEFAULT_NAME_TYPE: str = "wide"

# Locale used when the requested locale is unknown to Babel
FALLBACK_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of LocaleContext instances kept by LocaleContext.create()
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# HOST CONVENTIONS
# ============================================================================

# ISO 8601 numbers weekdays 1 (Monday) to 7 (Sunday). The application shell
# numbers them from 1 (Sunday), and only distinguishes Sunday and Monday starts.
ISO_SUNDAY: int = 7
HOST_SUNDAY: int = 1
HOST_MONDAY: int = 2

UNSUPPORTED_MESSAGE: str = "not supported"
