"""Diagnostic codes and data structures.

Defines the closed set of error codes reported by the formatting helpers
and the bridge entry points.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (bridge payload decoding)
        2000-2999: Locale data errors (token table and name lookups)
        3000-3999: Parsing errors (free-form date strings)
        4000-4999: Capability errors (entry points without an implementation)
    """

    # Argument errors (1000-1999)
    MISSING_ARGUMENT = 1001
    MALFORMED_ARGUMENTS = 1002

    # Locale data errors (2000-2999)
    INVALID_FORMAT_LENGTH = 2001
    MISSING_LOCALE_DATA = 2002

    # Parsing errors (3000-3999)
    UNPARSEABLE_DATE = 3001

    # Capability errors (4000-4999)
    UNSUPPORTED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Short human-readable description, safe to hand to the host
        hint: Suggestion for fixing the error
        action: Bridge action that produced the error, if any
        argument_name: Payload key or option that caused the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    action: str | None = None
    argument_name: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[MISSING_ARGUMENT]: Cannot parse date string: Missing string argument
              = action: stringToDate
              = argument: dateString
              = help: Pass the string to parse as 'dateString'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
