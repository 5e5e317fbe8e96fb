"""Globalization exception hierarchy with structured diagnostics.

Every exception carries a Diagnostic so the bridge can report a closed
error code alongside the short human-readable message.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class GlobalizationError(Exception):
    """Base exception for all globalization errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize GlobalizationError.

        Args:
            diagnostic: Diagnostic describing the failure
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.format_error())

    @property
    def code(self) -> DiagnosticCode:
        """Error code of the underlying diagnostic."""
        return self.diagnostic.code

    @property
    def message(self) -> str:
        """Short message suitable for the host failure path."""
        return self.diagnostic.message


class ArgumentError(GlobalizationError):
    """Bridge payload is absent, undecodable, or lacks a required key.

    Codes: MISSING_ARGUMENT, MALFORMED_ARGUMENTS.
    """


class LocaleDataError(GlobalizationError):
    """Locale table lookup failed.

    Raised for format lengths outside the skeleton table and for long date
    format tokens or name tables the locale does not provide.

    Codes: INVALID_FORMAT_LENGTH, MISSING_LOCALE_DATA.
    """


class DateParseError(GlobalizationError):
    """No parsing strategy could read a date string.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize DateParseError.

        Args:
            diagnostic: Diagnostic describing the failure
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
        """
        super().__init__(diagnostic)
        self.input_value = input_value
        self.locale_code = locale_code


class UnsupportedOperationError(GlobalizationError):
    """Entry point has no implementation on this platform.

    Number and currency entry points always raise this.
    """
