"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from globalization.constants import DATE_TIME_SKELETONS, UNSUPPORTED_MESSAGE

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Messages stay short because the bridge hands them to the host unchanged;
    details go into hint and argument_name.
    """

    @staticmethod
    def missing_argument(
        context: str, argument: str, *, action: str | None = None
    ) -> Diagnostic:
        """Required payload or payload key is absent.

        Args:
            context: What the entry point was doing (e.g., "format date string")
            argument: Human name of the missing argument (e.g., "date")
            action: Bridge action name

        Returns:
            Diagnostic for MISSING_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_ARGUMENT,
            message=f"Cannot {context}: Missing {argument} argument",
            hint="Pass a URI-encoded JSON object as the first argument",
            action=action,
            argument_name=argument,
        )

    @staticmethod
    def malformed_arguments(
        context: str, reason: str, *, action: str | None = None
    ) -> Diagnostic:
        """Payload present but not a decodable JSON object.

        Args:
            context: What the entry point was doing
            reason: Decoder error detail, kept out of the host message
            action: Bridge action name

        Returns:
            Diagnostic for MALFORMED_ARGUMENTS
        """
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_ARGUMENTS,
            message=f"Cannot {context}: Malformed arguments",
            hint=reason,
            action=action,
        )

    @staticmethod
    def invalid_format_length(value: str) -> Diagnostic:
        """Format length outside the skeleton table.

        Args:
            value: The format length as given by the caller

        Returns:
            Diagnostic for INVALID_FORMAT_LENGTH
        """
        valid = ", ".join(name.lower() for name in DATE_TIME_SKELETONS)
        return Diagnostic(
            code=DiagnosticCode.INVALID_FORMAT_LENGTH,
            message=f"Invalid format length '{value}'",
            hint=f"Use one of: {valid}",
            argument_name="formatLength",
        )

    @staticmethod
    def missing_locale_data(locale_code: str, item: str) -> Diagnostic:
        """Locale lacks a long date format token or a name table.

        Args:
            locale_code: Locale whose data was consulted
            item: The token or table that was not found

        Returns:
            Diagnostic for MISSING_LOCALE_DATA
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_LOCALE_DATA,
            message=f"Locale '{locale_code}' has no data for '{item}'",
            hint="Check the token name or choose a locale with complete CLDR data",
        )

    @staticmethod
    def unparseable_date(value: str, locale_code: str) -> Diagnostic:
        """Date string matched no parsing strategy.

        Args:
            value: The input string
            locale_code: Locale used for parsing

        Returns:
            Diagnostic for UNPARSEABLE_DATE
        """
        return Diagnostic(
            code=DiagnosticCode.UNPARSEABLE_DATE,
            message=f"Cannot parse date string '{value}'",
            hint=f"Use ISO 8601 or a {locale_code} CLDR date pattern",
            argument_name="dateString",
        )

    @staticmethod
    def unsupported(action: str) -> Diagnostic:
        """Entry point without an implementation.

        Args:
            action: Bridge action name

        Returns:
            Diagnostic for UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED,
            message=UNSUPPORTED_MESSAGE,
            action=action,
        )

    @staticmethod
    def unknown_action(action: str) -> Diagnostic:
        """Host requested an action the plugin does not register.

        Args:
            action: The requested action name

        Returns:
            Diagnostic for UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED,
            message=f"Unknown action '{action}'",
            hint="Check the action name against GlobalizationPlugin.actions()",
            action=action,
        )
