"""Diagnostic system for globalization errors.

Provides structured error diagnostics with codes, hints, and the exception
hierarchy raised by the formatting helpers and the bridge.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArgumentError,
    DateParseError,
    GlobalizationError,
    LocaleDataError,
    UnsupportedOperationError,
)
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "ArgumentError",
    "DateParseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GlobalizationError",
    "LocaleDataError",
    "UnsupportedOperationError",
]
