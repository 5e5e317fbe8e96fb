"""Host-facing entry points.

Every entry point has the host calling convention
``(success, failure, args=None, env=None)``. ``args[0]``, when required, is a
URI-encoded JSON object. Each call ends in exactly one callback:
``success(payload_dict)`` or ``failure(FailureReport)``.

Only GlobalizationError is turned into a failure callback. Anything else is a
bug and propagates to the host.

Python 3.13+.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import tzinfo
from functools import cache
from typing import Any

from globalization.constants import HOST_MONDAY, HOST_SUNDAY, ISO_SUNDAY
from globalization.diagnostics import (
    ArgumentError,
    ErrorTemplate,
    GlobalizationError,
    UnsupportedOperationError,
)
from globalization.formatting import (
    derive_names,
    derive_pattern,
    first_day_of_week,
    format_date,
    is_dst,
)
from globalization.locale_utils import get_system_locale, get_system_timezone
from globalization.parsing import parse_to_structured
from globalization.runtime import DateFieldOptions, LocaleContext, NameOptions

from .arguments import decode_payload, payload_datetime, payload_string
from .registry import ActionRegistry
from .result import Callback, PluginResult

__all__ = ["GlobalizationPlugin", "default_plugin"]

logger = logging.getLogger(__name__)

type Args = Sequence[str] | None
type Payload = Mapping[str, Any]


class GlobalizationPlugin:
    """Locale services exposed to a hybrid application shell.

    The locale and timezone are fixed at construction. By default they come
    from the platform (see get_system_locale and get_system_timezone).

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> plugin = GlobalizationPlugin("en-US", ZoneInfo("America/New_York"))
        >>> plugin.get_locale_name(print, print)
        {'value': 'en-US'}
    """

    __slots__ = ("_context", "_registry")

    def __init__(
        self,
        locale_code: str | None = None,
        tz: tzinfo | None = None,
        *,
        context: LocaleContext | None = None,
    ) -> None:
        if context is None:
            context = LocaleContext.create(
                locale_code or get_system_locale(),
                tz if tz is not None else get_system_timezone(),
            )
        self._context = context
        self._registry = ActionRegistry()
        for entry_point in (
            self.get_preferred_language,
            self.get_locale_name,
            self.date_to_string,
            self.string_to_date,
            self.get_date_pattern,
            self.get_date_names,
            self.is_day_light_savings_time,
            self.get_first_day_of_week,
            self.number_to_string,
            self.string_to_number,
            self.get_number_pattern,
            self.get_currency_pattern,
        ):
            self._registry.register(entry_point)

    @property
    def context(self) -> LocaleContext:
        """Locale context every entry point works in."""
        return self._context

    @property
    def registry(self) -> ActionRegistry:
        """Host action names mapped to entry points."""
        return self._registry

    def actions(self) -> list[str]:
        """Host action names this plugin answers, in registration order."""
        return self._registry.list_actions()

    def dispatch(
        self,
        action: str,
        success: Callback,
        failure: Callback,
        args: Args = None,
        env: Any = None,
    ) -> None:
        """Invoke an entry point by its host action name (e.g. "getDatePattern").

        Raises:
            UnsupportedOperationError: If action is not a known entry point
        """
        self._registry.call(action, success, failure, args, env)

    # ------------------------------------------------------------------
    # Locale identity
    # ------------------------------------------------------------------

    def get_preferred_language(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Report the BCP 47 language tag of the platform locale."""
        self._run("getPreferredLanguage", success, failure, env, self._language_tag)

    def get_locale_name(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Report the BCP 47 tag of the formatting locale."""
        self._run("getLocaleName", success, failure, env, self._language_tag)

    def _language_tag(self) -> Payload:
        return {"value": self._context.language_tag}

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def date_to_string(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Format payload ``date`` (epoch ms or ISO 8601) per payload ``options``."""
        action = "dateToString"
        context = "format date string"

        def compute() -> Payload:
            payload = decode_payload(args, context=context, argument="date", action=action)
            value = payload_datetime(payload, "date", context=context, action=action)
            options = DateFieldOptions.from_mapping(
                _options(payload, context=context, action=action)
            )
            return {"value": format_date(value, options, self._context)}

        self._run(action, success, failure, env, compute)

    def string_to_date(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Parse payload ``dateString`` into year/month/day/hour/... fields."""
        action = "stringToDate"
        context = "parse date string"

        def compute() -> Payload:
            payload = decode_payload(args, context=context, argument="string", action=action)
            text = payload_string(
                payload, "dateString", context=context, argument="string", action=action
            )
            options = DateFieldOptions.from_mapping(
                _options(payload, context=context, action=action)
            )
            return parse_to_structured(text, options, self._context)

        self._run(action, success, failure, env, compute)

    def get_date_pattern(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Report pattern, timezone, utc_offset and dst_offset for payload ``options``."""
        action = "getDatePattern"
        context = "get date pattern"

        def compute() -> Payload:
            payload = decode_payload(args, context=context, argument="options", action=action)
            options = DateFieldOptions.from_mapping(
                _options(payload, context=context, action=action)
            )
            return derive_pattern(options, self._context).to_dict()

        self._run(action, success, failure, env, compute)

    def get_date_names(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Report month or weekday names selected by payload ``options``."""
        action = "getDateNames"
        context = "get date names"

        def compute() -> Payload:
            payload = decode_payload(args, context=context, argument="options", action=action)
            options = NameOptions.from_mapping(_options(payload, context=context, action=action))
            return {"value": list(derive_names(options, self._context))}

        self._run(action, success, failure, env, compute)

    def is_day_light_savings_time(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Report whether DST is in effect at payload ``date``."""
        action = "isDayLightSavingsTime"
        context = "check daylight saving time"

        def compute() -> Payload:
            payload = decode_payload(args, context=context, argument="date", action=action)
            value = payload_datetime(payload, "date", context=context, action=action)
            return {"dst": is_dst(value, self._context)}

        self._run(action, success, failure, env, compute)

    def get_first_day_of_week(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Report the first day of the week: 1 for Sunday, 2 for any other day."""

        def compute() -> Payload:
            iso_day = first_day_of_week(self._context)
            return {"value": HOST_SUNDAY if iso_day == ISO_SUNDAY else HOST_MONDAY}

        self._run("getFirstDayOfWeek", success, failure, env, compute)

    # ------------------------------------------------------------------
    # Numbers (not provided)
    # ------------------------------------------------------------------

    def number_to_string(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Always fails with "not supported"."""
        self._unsupported("numberToString", success, failure, env)

    def string_to_number(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Always fails with "not supported"."""
        self._unsupported("stringToNumber", success, failure, env)

    def get_number_pattern(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Always fails with "not supported"."""
        self._unsupported("getNumberPattern", success, failure, env)

    def get_currency_pattern(
        self, success: Callback, failure: Callback, args: Args = None, env: Any = None
    ) -> None:
        """Always fails with "not supported"."""
        self._unsupported("getCurrencyPattern", success, failure, env)

    def _unsupported(self, action: str, success: Callback, failure: Callback, env: Any) -> None:
        result = PluginResult(success, failure, action=action, env=env)
        result.error(UnsupportedOperationError(ErrorTemplate.unsupported(action)))

    def _run(
        self,
        action: str,
        success: Callback,
        failure: Callback,
        env: Any,
        compute: Callable[[], Payload],
    ) -> None:
        result = PluginResult(success, failure, action=action, env=env)
        try:
            payload = compute()
        except GlobalizationError as e:
            logger.debug("%s failed: %s", action, e.message)
            result.error(e)
            return
        result.ok(payload)

    def __repr__(self) -> str:
        return f"GlobalizationPlugin(locale={self._context.locale_code!r})"


def _options(payload: Payload, *, context: str, action: str) -> Mapping[str, Any] | None:
    options = payload.get("options")
    if options is not None and not isinstance(options, Mapping):
        raise ArgumentError(
            ErrorTemplate.malformed_arguments(
                context,
                f"options: expected JSON object, got {type(options).__name__}",
                action=action,
            )
        )
    selector = options.get("selector") if options is not None else None
    if selector is not None and not isinstance(selector, str):
        raise ArgumentError(
            ErrorTemplate.malformed_arguments(
                context,
                f"options.selector: expected string, got {type(selector).__name__}",
                action=action,
            )
        )
    return options


@cache
def default_plugin() -> GlobalizationPlugin:
    """Process-wide plugin built from the platform locale and timezone.

    Built on first use and reused afterwards.
    """
    return GlobalizationPlugin()
