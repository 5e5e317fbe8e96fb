"""Locale context for explicit, per-call locale state.

This module replaces the date library's process-wide "current locale" with an
immutable value that every formatting helper receives explicitly.
Uses Babel for CLDR date/time patterns and calendar names.

Architecture:
    - LocaleContext: Immutable locale + timezone configuration container
    - long_date_format(): Token table (LT, L, LL, lll, LLL, LLLL, ...) derived
      from CLDR patterns
    - No dependency on Python's locale module for formatting (avoids global state)

Design Principles:
    - Explicit over implicit (locale and timezone always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state outside the guarded cache)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError

from globalization.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE, TIME_TOKEN
from globalization.diagnostics import ErrorTemplate, LocaleDataError
from globalization.locale_utils import get_system_timezone, normalize_locale, to_language_tag

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

type PatternStyle = Literal["short", "medium", "long", "full"]

# Long date format tokens that combine a date pattern with the time placeholder
_COMPOSITE_TOKENS: dict[str, PatternStyle] = {
    "lll": "medium",
    "LLL": "long",
    "LLLL": "full",
}

# Long date format tokens that expand to a plain CLDR date pattern
_DATE_TOKENS: dict[str, PatternStyle] = {
    "L": "short",
    "l": "short",
    "ll": "medium",
    "LL": "long",
}

# Long date format tokens that expand to a plain CLDR time pattern
_TIME_TOKENS: dict[str, PatternStyle] = {
    TIME_TOKEN: "short",
    "LTS": "medium",
}


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for date/time helpers.

    Use LocaleContext.create() factory to construct instances with proper
    validation and caching.

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> ctx = LocaleContext.create('en-US', ZoneInfo('America/New_York'))
        >>> ctx.long_date_format('L')
        'M/d/yy'
        >>> ctx.long_date_format('lll')
        'MMM d, y LT'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations
        are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[tuple[str, tzinfo], "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    tz: tzinfo
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str, tz: tzinfo | None = None) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US
        while keeping the requested locale_code.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g., 'en-US', 'de_DE')
            tz: Timezone for "now" and for localizing dates (default: platform timezone)

        Returns:
            Cached LocaleContext instance
        """
        tz = tz if tz is not None else get_system_timezone()
        cache_key = (normalize_locale(locale_code), tz)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key[0])
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                FALLBACK_LOCALE,
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True

        ctx = cls(
            locale_code=locale_code,
            _babel_locale=babel_locale,
            tz=tz,
            is_fallback=used_fallback,
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str, tz: tzinfo | None = None) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(
            locale_code=locale_code,
            _babel_locale=babel_locale,
            tz=tz if tz is not None else get_system_timezone(),
        )

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def language_tag(self) -> str:
        """BCP 47 tag of the requested locale, as reported to the host."""
        return to_language_tag(self.locale_code)

    def now(self) -> datetime:
        """Current moment in the context timezone."""
        return datetime.now(self.tz)

    def localize(self, value: date | datetime) -> datetime:
        """Return value as an aware datetime in the context timezone.

        Naive datetimes are taken to be wall-clock time in the context
        timezone; plain dates become midnight of that day.
        """
        if not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)
        if value.tzinfo is None:
            return value.replace(tzinfo=self.tz)
        return value.astimezone(self.tz)

    def long_date_format(self, token: str) -> str:
        """Expand a long date format token into a CLDR pattern.

        Composite tokens (lll, LLL, LLLL) keep the literal ``LT`` time
        placeholder, placed before or after the date according to the
        locale's date-time glue pattern.

        Args:
            token: One of LT, LTS, L, l, LL, ll, lll, LLL, LLLL

        Returns:
            CLDR date/time pattern string

        Raises:
            LocaleDataError: If the token is unknown or the locale lacks the pattern
        """
        if token in _TIME_TOKENS:
            return self._pattern(self._babel_locale.time_formats, _TIME_TOKENS[token], token)
        if token in _DATE_TOKENS:
            return self._pattern(self._babel_locale.date_formats, _DATE_TOKENS[token], token)
        if token in _COMPOSITE_TOKENS:
            style = _COMPOSITE_TOKENS[token]
            date_pattern = self._pattern(self._babel_locale.date_formats, style, token)
            if self._time_first(style):
                return f"{TIME_TOKEN} {date_pattern}"
            return f"{date_pattern} {TIME_TOKEN}"
        raise LocaleDataError(ErrorTemplate.missing_locale_data(self.locale_code, token))

    def _pattern(self, formats: object, style: PatternStyle, token: str) -> str:
        try:
            return str(formats[style].pattern)  # type: ignore[index]
        except (KeyError, AttributeError, TypeError) as e:
            raise LocaleDataError(
                ErrorTemplate.missing_locale_data(self.locale_code, token)
            ) from e

    def _time_first(self, style: PatternStyle) -> bool:
        """Whether the locale's date-time glue places {0} (time) before {1} (date)."""
        glue = str(
            self._babel_locale.datetime_formats.get(style)
            or self._babel_locale.datetime_formats.get("medium")
            or "{1} {0}"
        )
        time_idx = glue.find("{0}")
        date_idx = glue.find("{1}")
        return -1 < time_idx < date_idx
