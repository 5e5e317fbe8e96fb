"""Tests for diagnostic codes, templates, exceptions and formatting."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from globalization.constants import UNSUPPORTED_MESSAGE
from globalization.diagnostics import (
    ArgumentError,
    DateParseError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    GlobalizationError,
    LocaleDataError,
    UnsupportedOperationError,
)


class TestDiagnosticCode:
    """Closed error code set."""

    def test_codes_are_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    def test_expected_members(self) -> None:
        """The closed set of error kinds."""
        assert {code.name for code in DiagnosticCode} == {
            "MISSING_ARGUMENT",
            "MALFORMED_ARGUMENTS",
            "INVALID_FORMAT_LENGTH",
            "MISSING_LOCALE_DATA",
            "UNPARSEABLE_DATE",
            "UNSUPPORTED",
        }


class TestErrorTemplate:
    """Host-facing messages."""

    def test_missing_argument_message(self) -> None:
        """Missing payload message names the context and the argument."""
        diagnostic = ErrorTemplate.missing_argument("format date string", "date")

        assert diagnostic.message == "Cannot format date string: Missing date argument"
        assert diagnostic.code is DiagnosticCode.MISSING_ARGUMENT
        assert diagnostic.argument_name == "date"

    def test_malformed_arguments_keeps_reason_out_of_message(self) -> None:
        """Decoder detail goes to the hint."""
        diagnostic = ErrorTemplate.malformed_arguments(
            "parse date string", "Expecting value: line 1 column 1", action="stringToDate"
        )

        assert diagnostic.message == "Cannot parse date string: Malformed arguments"
        assert diagnostic.hint == "Expecting value: line 1 column 1"
        assert diagnostic.action == "stringToDate"

    def test_unsupported_message(self) -> None:
        """Unsupported operations report exactly 'not supported'."""
        diagnostic = ErrorTemplate.unsupported("numberToString")

        assert diagnostic.message == UNSUPPORTED_MESSAGE == "not supported"
        assert diagnostic.code is DiagnosticCode.UNSUPPORTED

    def test_invalid_format_length_lists_choices(self) -> None:
        """The hint lists the valid lengths."""
        diagnostic = ErrorTemplate.invalid_format_length("tiny")

        assert "tiny" in diagnostic.message
        assert diagnostic.hint is not None
        assert "short" in diagnostic.hint
        assert "full" in diagnostic.hint


class TestExceptions:
    """Exception hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [ArgumentError, LocaleDataError, DateParseError, UnsupportedOperationError],
    )
    def test_hierarchy(self, error_type: type[GlobalizationError]) -> None:
        """Every error derives from GlobalizationError."""
        assert issubclass(error_type, GlobalizationError)

    def test_error_exposes_code_and_message(self) -> None:
        """code and message come from the diagnostic."""
        error = ArgumentError(ErrorTemplate.missing_argument("parse date string", "string"))

        assert error.code is DiagnosticCode.MISSING_ARGUMENT
        assert error.message == "Cannot parse date string: Missing string argument"
        assert str(error).startswith("error[MISSING_ARGUMENT]: Cannot parse date string")

    def test_date_parse_error_context(self) -> None:
        """DateParseError carries the input and locale."""
        error = DateParseError(
            ErrorTemplate.unparseable_date("xyzzy", "en-US"),
            input_value="xyzzy",
            locale_code="en-US",
        )

        assert error.input_value == "xyzzy"
        assert error.locale_code == "en-US"

    def test_diagnostic_str_is_message(self) -> None:
        """str(Diagnostic) is the bare message."""
        assert str(ErrorTemplate.unsupported("x")) == "not supported"


class TestDiagnosticFormatter:
    """Compiler-style rendering."""

    def test_rust_style(self) -> None:
        """Compiler style with action, argument and help lines."""
        diagnostic = ErrorTemplate.missing_argument(
            "parse date string", "string", action="stringToDate"
        )
        output = DiagnosticFormatter().format(diagnostic)

        assert output.splitlines() == [
            "error[MISSING_ARGUMENT]: Cannot parse date string: Missing string argument",
            "  = action: stringToDate",
            "  = argument: string",
            "  = help: Pass a URI-encoded JSON object as the first argument",
        ]

    def test_message_only(self) -> None:
        """A diagnostic without action, argument or hint renders as one line."""
        diagnostic = Diagnostic(code=DiagnosticCode.UNPARSEABLE_DATE, message="Cannot parse")

        assert DiagnosticFormatter().format(diagnostic) == "error[UNPARSEABLE_DATE]: Cannot parse"

    @given(st.text(min_size=1, max_size=200).filter(lambda s: "\n" not in s))
    def test_property_first_line_carries_message(self, message: str) -> None:
        """PROPERTY: the first rendered line is the code name followed by the message."""
        diagnostic = Diagnostic(code=DiagnosticCode.MALFORMED_ARGUMENTS, message=message)
        output = DiagnosticFormatter().format(diagnostic)

        assert output.split("\n", 1)[0] == f"error[MALFORMED_ARGUMENTS]: {message}"

    def test_exception_message_uses_formatter(self) -> None:
        """GlobalizationError's str() is the formatted diagnostic."""
        diagnostic = ErrorTemplate.unsupported("getNumberPattern")

        error = UnsupportedOperationError(diagnostic)

        assert str(error) == DiagnosticFormatter().format(diagnostic)
