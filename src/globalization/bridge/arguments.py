"""Decoding of host call arguments.

The host passes a sequence of strings; the first one, if present, is a
URI-encoded JSON object. Dates inside that object are milliseconds since the
epoch (the host's Date.valueOf()) or ISO 8601 strings.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any
from urllib.parse import unquote

from globalization.diagnostics import ArgumentError, ErrorTemplate

__all__ = [
    "decode_payload",
    "payload_datetime",
    "payload_string",
]


def decode_payload(
    args: Sequence[str] | None,
    *,
    context: str,
    argument: str,
    action: str,
) -> dict[str, Any]:
    """Decode args[0] into a JSON object.

    Args:
        args: Host argument list
        context: What the entry point does, for messages ("parse date string")
        argument: Name reported when the payload is absent ("string")
        action: Bridge action name

    Returns:
        Decoded JSON object

    Raises:
        ArgumentError: MISSING_ARGUMENT when args is empty,
            MALFORMED_ARGUMENTS when args[0] is not a URI-encoded JSON object

    Example:
        >>> decode_payload(["%7B%22date%22%3A0%7D"], context="x", argument="date", action="a")
        {'date': 0}
    """
    if not args or args[0] is None:
        raise ArgumentError(ErrorTemplate.missing_argument(context, argument, action=action))

    raw = args[0]
    if not isinstance(raw, str):
        raise ArgumentError(
            ErrorTemplate.malformed_arguments(
                context, f"expected string, got {type(raw).__name__}", action=action
            )
        )
    try:
        payload = json.loads(unquote(raw))
    except json.JSONDecodeError as e:
        raise ArgumentError(
            ErrorTemplate.malformed_arguments(context, str(e), action=action)
        ) from e
    if not isinstance(payload, dict):
        raise ArgumentError(
            ErrorTemplate.malformed_arguments(
                context, f"expected JSON object, got {type(payload).__name__}", action=action
            )
        )
    return payload


def payload_datetime(
    payload: dict[str, Any],
    key: str,
    *,
    context: str,
    action: str,
) -> datetime:
    """Read a date from payload[key].

    Numbers are epoch milliseconds (aware, UTC). Strings are ISO 8601 and may
    be naive.

    Raises:
        ArgumentError: MISSING_ARGUMENT when the key is absent or null,
            MALFORMED_ARGUMENTS when the value is not a usable date
    """
    value = payload.get(key)
    if value is None:
        raise ArgumentError(ErrorTemplate.missing_argument(context, key, action=action))

    try:
        if isinstance(value, bool):
            msg = "boolean is not a date"
            raise TypeError(msg)
        if isinstance(value, int | float):
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        if isinstance(value, str):
            return datetime.fromisoformat(value)
        msg = f"{type(value).__name__} is not a date"
        raise TypeError(msg)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise ArgumentError(
            ErrorTemplate.malformed_arguments(context, f"{key}: {e}", action=action)
        ) from e


def payload_string(
    payload: dict[str, Any],
    key: str,
    *,
    context: str,
    argument: str,
    action: str,
) -> str:
    """Read a required string from payload[key].

    Raises:
        ArgumentError: MISSING_ARGUMENT when absent or null,
            MALFORMED_ARGUMENTS when not a string
    """
    value = payload.get(key)
    if value is None:
        raise ArgumentError(ErrorTemplate.missing_argument(context, argument, action=action))
    if not isinstance(value, str):
        raise ArgumentError(
            ErrorTemplate.malformed_arguments(
                context, f"{key}: expected string, got {type(value).__name__}", action=action
            )
        )
    return value
