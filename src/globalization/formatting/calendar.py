"""Calendar facts for a locale: name lists, DST, first day of week.

Python 3.13+. Uses Babel for CLDR calendar data.
"""

from datetime import date, datetime, timedelta

from globalization.diagnostics import ErrorTemplate, LocaleDataError
from globalization.enums import NameItem, NameType
from globalization.runtime import LocaleContext, NameOptions

__all__ = [
    "derive_names",
    "first_day_of_week",
    "is_dst",
]

# Host "narrow" names are CLDR abbreviated names
_CLDR_WIDTHS: dict[NameType, str] = {
    NameType.NARROW: "abbreviated",
    NameType.WIDE: "wide",
}


def derive_names(options: NameOptions | None, ctx: LocaleContext) -> tuple[str, ...]:
    """Month or weekday names for the context locale.

    Names come in CLDR order: January..December, Monday..Sunday.

    Args:
        options: Item and width selection (default: wide month names)
        ctx: Locale context

    Returns:
        Tuple of names (12 for months, 7 for days)

    Raises:
        LocaleDataError: MISSING_LOCALE_DATA if the locale has no such table

    Example:
        >>> ctx = LocaleContext.create("en-US")
        >>> derive_names(NameOptions(item=NameItem.DAYS, type=NameType.NARROW), ctx)[:2]
        ('Mon', 'Tue')
    """
    options = options if options is not None else NameOptions()
    width = _CLDR_WIDTHS[options.type]
    if options.item is NameItem.DAYS:
        table = ctx.babel_locale.days
    else:
        table = ctx.babel_locale.months

    try:
        names = table["format"][width]
    except (KeyError, TypeError):
        names = None
    if not names:
        raise LocaleDataError(
            ErrorTemplate.missing_locale_data(ctx.locale_code, f"{options.item}/{width}")
        )
    return tuple(names[key] for key in sorted(names))


def is_dst(value: date | datetime, ctx: LocaleContext) -> bool:
    """Whether daylight saving time is in effect at value in the context timezone."""
    offset = ctx.localize(value).dst()
    return bool(offset)


def first_day_of_week(ctx: LocaleContext) -> int:
    """ISO weekday (1=Monday..7=Sunday) on which the locale's week starts.

    Walks back from today to the first day of the current locale week and
    reads its ISO weekday. The walk always lands on the locale's week start,
    so the result is first_week_day + 1 whatever today's date is.
    """
    today = ctx.now().date()
    days_into_week = (today.weekday() - ctx.babel_locale.first_week_day) % 7
    return (today - timedelta(days=days_into_week)).isoweekday()
