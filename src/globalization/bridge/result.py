"""Success/failure reporting toward the host.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping
from typing import Any

from globalization.diagnostics import DiagnosticCode, GlobalizationError

__all__ = [
    "Callback",
    "FailureReport",
    "PluginResult",
]

type Callback = Callable[[Any], object]


class FailureReport(str):
    """What the failure callback receives.

    A plain string holding the short human-readable message ("not supported",
    "Cannot parse date string: Malformed arguments"), so string-only hosts
    compare it directly. The closed error kind rides along as code.

    Attributes:
        code: Error kind

    Example:
        >>> from globalization.diagnostics import ErrorTemplate, UnsupportedOperationError
        >>> report = FailureReport.from_error(
        ...     UnsupportedOperationError(ErrorTemplate.unsupported("numberToString"))
        ... )
        >>> report == "not supported", report.code.name
        (True, 'UNSUPPORTED')
    """

    code: DiagnosticCode

    def __new__(cls, message: str, code: DiagnosticCode) -> "FailureReport":
        report = super().__new__(cls, message)
        report.code = code
        return report

    @property
    def message(self) -> str:
        """The message as a plain str."""
        return str.__str__(self)

    @classmethod
    def from_error(cls, error: GlobalizationError) -> "FailureReport":
        """Build a report from a raised GlobalizationError."""
        return cls(error.message, error.code)

    def __repr__(self) -> str:
        return f"FailureReport({self.message!r}, code={self.code.name})"


class PluginResult:
    """Routes one entry point's outcome to the host callbacks.

    Exactly one of ok() or error() should be called per invocation.

    Attributes:
        action: Entry point name, for diagnostics
        env: Opaque host environment, passed through untouched
    """

    __slots__ = ("_failure", "_success", "action", "env")

    def __init__(
        self,
        success: Callback,
        failure: Callback,
        *,
        action: str,
        env: Any = None,
    ) -> None:
        self._success = success
        self._failure = failure
        self.action = action
        self.env = env

    def ok(self, payload: Mapping[str, Any]) -> None:
        """Invoke the success callback with a plain dict payload."""
        self._success(dict(payload))

    def error(self, error: GlobalizationError) -> None:
        """Invoke the failure callback with the error message as a FailureReport."""
        self._failure(FailureReport.from_error(error))

    def __repr__(self) -> str:
        return f"PluginResult(action={self.action!r})"
