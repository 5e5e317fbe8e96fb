"""Locale and timezone utilities.

Centralizes locale format normalization (BCP-47 to POSIX and back) and the
platform detection used to build the default LocaleContext.

Python 3.13+.
"""

from __future__ import annotations

import locale
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import tzinfo

__all__ = [
    "get_system_locale",
    "get_system_timezone",
    "normalize_locale",
    "to_language_tag",
]

logger = logging.getLogger(__name__)

# Environment variables governing date formatting, highest precedence first
_TIME_LOCALE_VARS = ("LC_ALL", "LC_TIME", "LANG")

_PSEUDO_LOCALES = frozenset({"C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def to_language_tag(locale_code: str) -> str:
    """Convert a POSIX locale code to the BCP-47 tag reported to the host.

    Strips any encoding or modifier suffix.

    Example:
        >>> to_language_tag("de_DE.UTF-8")
        'de-DE'
        >>> to_language_tag("sr_Latn_RS@euro")
        'sr-Latn-RS'
    """
    code = locale_code.split(".")[0].split("@")[0]
    return code.replace("_", "-")


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the locale the platform formats dates in.

    Follows POSIX precedence for the time category: LC_ALL, then LC_TIME,
    then LANG. The interpreter's LC_TIME setting (set via locale.setlocale)
    is consulted last. "C" and "POSIX" are skipped, and encoding or
    modifier suffixes are dropped ("de_DE.UTF-8@euro" -> "de_DE").

    Args:
        raise_on_failure: If True, raise RuntimeError when no locale is set.
            If False (default), return "en_US".

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set.
    """
    candidates = [os.environ.get(var) for var in _TIME_LOCALE_VARS]
    try:
        candidates.append(locale.getlocale(locale.LC_TIME)[0])
    except ValueError:
        logger.debug("Interpreter LC_TIME setting is not a known locale")

    for candidate in candidates:
        code = candidate.split(".")[0].split("@")[0] if candidate else ""
        if code and code not in _PSEUDO_LOCALES:
            return normalize_locale(code)

    if raise_on_failure:
        msg = "Could not determine system locale. Set LC_ALL, LC_TIME, or LANG."
        raise RuntimeError(msg)

    return "en_US"


def get_system_timezone() -> tzinfo:
    """Detect the platform timezone.

    Uses the TZ environment variable when it names a known zone, otherwise
    Babel's detected local timezone.

    Returns:
        A tzinfo that knows its DST transitions (zoneinfo-backed where possible)
    """
    from babel.dates import LOCALTZ, get_timezone  # noqa: PLC0415

    zone = os.environ.get("TZ", "").lstrip(":")
    if zone:
        try:
            return get_timezone(zone)
        except LookupError:
            logger.warning("Unknown timezone in TZ='%s'. Using local timezone", zone)
    return LOCALTZ
