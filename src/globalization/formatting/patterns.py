"""Date/time display pattern derivation.

Builds a CLDR pattern for a format length from the locale's long date format
token table, and reports the timezone the pattern will be rendered in.

Two-pass expansion:
    1. Every skeleton token except ``LT`` is replaced by its long date format
       expansion. Composite tokens (lll, LLL, LLLL) expand to a date pattern
       that still carries a literal ``LT``.
    2. Every literal ``LT`` left in the joined string is replaced by the
       short time pattern when time is requested, or removed otherwise.

Thread-safe. Uses Babel CLDR patterns.

Python 3.13+.
"""

import logging
import re
from dataclasses import asdict, dataclass
from datetime import date, datetime

from babel import dates as babel_dates

from globalization.constants import DATE_TIME_SKELETONS, TIME_TOKEN
from globalization.diagnostics import ErrorTemplate, LocaleDataError
from globalization.runtime import DateFieldOptions, LocaleContext

__all__ = [
    "LocaleDateFormatSpec",
    "current_timezone_name",
    "derive_pattern",
    "format_date",
]

logger = logging.getLogger(__name__)

# Runs of plain spaces left behind when the time placeholder is removed.
# CLDR patterns may contain U+202F and U+00A0, which must survive untouched.
_SPACE_RUN = re.compile(r" {2,}")

# tzname() values that are offsets rather than names ("-03", "+0530", "UTC+05:00")
_OFFSET_ONLY_NAME = re.compile(r"^(?:UTC|GMT)?[+-]\d")

# CLDR pattern for an RFC 822 offset (+HHMM / -HHMM)
_OFFSET_PATTERN = "Z"


@dataclass(frozen=True, slots=True)
class LocaleDateFormatSpec:
    """Pattern and timezone details for rendering dates.

    Attributes:
        pattern: CLDR date/time pattern, trimmed
        timezone: Timezone name, or a +HHMM offset when no name is known
        utc_offset: Current UTC offset in seconds (east of UTC is positive)
        dst_offset: Always 0; DST offset is not computed
    """

    pattern: str
    timezone: str
    utc_offset: int
    dst_offset: int = 0

    def to_dict(self) -> dict[str, str | int]:
        """Host payload form."""
        return asdict(self)


def current_timezone_name(ctx: LocaleContext, moment: datetime | None = None) -> str:
    """Name of the timezone in effect at moment (default: now).

    Falls back to a signed +HHMM offset when the timezone only knows its
    offset.

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> ctx = LocaleContext.create("en-US", ZoneInfo("America/New_York"))
        >>> current_timezone_name(ctx, datetime(2023, 1, 1, tzinfo=ctx.tz))
        'EST'
    """
    moment = ctx.localize(moment) if moment is not None else ctx.now()
    name = moment.tzname()
    if name and not _OFFSET_ONLY_NAME.match(name):
        return name
    return str(
        babel_dates.format_datetime(
            moment, format=_OFFSET_PATTERN, tzinfo=ctx.tz, locale=ctx.babel_locale
        )
    )


def derive_pattern(
    options: DateFieldOptions | None,
    ctx: LocaleContext,
    *,
    moment: datetime | None = None,
) -> LocaleDateFormatSpec:
    """Derive the display pattern for the requested format length and parts.

    Args:
        options: Format length and date/time selection (default: SHORT, both)
        ctx: Locale context supplying the long date format table
        moment: Instant used for timezone name and offset (default: now)

    Returns:
        LocaleDateFormatSpec with trimmed pattern

    Raises:
        LocaleDataError: INVALID_FORMAT_LENGTH for a length outside the
            skeleton table, MISSING_LOCALE_DATA if the locale lacks a pattern

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> ctx = LocaleContext.create("en-US", ZoneInfo("America/New_York"))
        >>> derive_pattern(DateFieldOptions(date=True), ctx).pattern
        'M/d/yy'
    """
    options = options if options is not None else DateFieldOptions()
    show_date, show_time = options.resolve()

    pattern = ""
    if show_date:
        try:
            skeleton = DATE_TIME_SKELETONS[options.format_length]
        except KeyError:
            raise LocaleDataError(
                ErrorTemplate.invalid_format_length(str(options.format_length))
            ) from None

        components = [
            token if token == TIME_TOKEN else ctx.long_date_format(token)
            for token in skeleton.split()
        ]
        pattern = " ".join(components)
        pattern = pattern.replace(
            TIME_TOKEN, ctx.long_date_format(TIME_TOKEN) if show_time else ""
        )
    elif show_time:
        pattern = ctx.long_date_format(TIME_TOKEN)

    pattern = _SPACE_RUN.sub(" ", pattern).strip()

    moment = ctx.localize(moment) if moment is not None else ctx.now()
    offset = moment.utcoffset()
    spec = LocaleDateFormatSpec(
        pattern=pattern,
        timezone=current_timezone_name(ctx, moment),
        utc_offset=int(offset.total_seconds()) if offset is not None else 0,
    )
    logger.debug(
        "Derived pattern %r for %s (length=%s, date=%s, time=%s)",
        spec.pattern,
        ctx.locale_code,
        options.format_length,
        show_date,
        show_time,
    )
    return spec


def format_date(
    value: date | datetime,
    options: DateFieldOptions | None,
    ctx: LocaleContext,
) -> str:
    """Format value with the pattern derived for options.

    Naive datetimes are taken as wall-clock time in the context timezone;
    aware datetimes are converted to it.

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> ctx = LocaleContext.create("en-US", ZoneInfo("America/New_York"))
        >>> format_date(datetime(2011, 4, 11, 10, 30), DateFieldOptions(date=True), ctx)
        '4/11/11'
    """
    local = ctx.localize(value)
    pattern = derive_pattern(options, ctx, moment=local).pattern
    if not pattern:
        return ""
    return str(
        babel_dates.format_datetime(local, format=pattern, tzinfo=ctx.tz, locale=ctx.babel_locale)
    )
