"""Diagnostic rendering for exception messages.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders a diagnostic in compiler style.

    The first line carries the code name and the host message; action,
    argument and hint follow as ``  = key: value`` lines when present.

    Example:
        >>> from globalization.diagnostics import ErrorTemplate
        >>> print(DiagnosticFormatter().format(ErrorTemplate.unsupported("numberToString")))
        error[UNSUPPORTED]: not supported
          = action: numberToString
    """

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        parts = [f"error[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.action:
            parts.append(f"  = action: {diagnostic.action}")

        if diagnostic.argument_name:
            parts.append(f"  = argument: {diagnostic.argument_name}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)
