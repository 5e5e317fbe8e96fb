"""Free-form date string parsing into structured fields.

- parse_date_string() returns an aware or naive datetime, or raises DateParseError
- parse_to_structured() returns the year/month/day/hour/... mapping for the host

Parsing strategies, tried in order:
    1. ISO 8601 via datetime.fromisoformat()
    2. The locale's CLDR date, time and date-time patterns, converted to
       strptime directives. Localized month and weekday names are replaced
       by their numbers from Babel's name tables first, so strings written
       with the locale's display patterns read back
    3. python-dateutil's heuristic parser, with day/month order taken from
       the locale's short date pattern

Ambiguous strings ("4/11/2011") resolve by whichever strategy matches
first. Results for such input can differ between locales; they are not
treated as errors.

Thread-safe. Uses Babel CLDR patterns + python-dateutil.

Python 3.13+.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from functools import cache
from typing import Literal

from babel import Locale
from dateutil import parser as dateutil_parser

from globalization.diagnostics import DateParseError, ErrorTemplate
from globalization.runtime import DateFieldOptions, LocaleContext

__all__ = [
    "parse_date_string",
    "parse_to_structured",
]

logger = logging.getLogger(__name__)

type StructuredDate = dict[str, int]
type NameField = Literal["months", "days"]
type NameWidth = Literal["wide", "abbreviated"]
type _Conversion = tuple[str, tuple[tuple[NameField, NameWidth], ...]]

_PARSE_STYLES: tuple[Literal["short", "medium", "long", "full"], ...] = (
    "short",
    "medium",
    "long",
    "full",
)
_TIME_PARSE_STYLES: tuple[Literal["short", "medium"], ...] = ("short", "medium")


def parse_date_string(value: str, ctx: LocaleContext) -> datetime:
    """Parse a locale-formatted or ISO 8601 date string.

    Args:
        value: Date string (e.g., "2011-04-11T10:30:00", "4/11/11, 10:30 AM")
        ctx: Locale context whose CLDR patterns are tried

    Returns:
        Parsed datetime. Aware results are converted to the context timezone.

    Raises:
        DateParseError: If no strategy can read the string

    Examples:
        >>> ctx = LocaleContext.create("en-US")
        >>> parse_date_string("2011-04-11T10:30:00", ctx)
        datetime.datetime(2011, 4, 11, 10, 30)
    """
    if not isinstance(value, str) or not value.strip():
        raise DateParseError(
            ErrorTemplate.unparseable_date(str(value), ctx.locale_code),
            input_value=str(value),
            locale_code=ctx.locale_code,
        )

    text = value.strip()
    parsed = _parse_iso(text)
    strategy = "iso"
    if parsed is None:
        parsed = _parse_cldr(text, str(ctx.babel_locale))
        strategy = "cldr"
    if parsed is None:
        parsed = _parse_heuristic(text, str(ctx.babel_locale))
        strategy = "heuristic"
    if parsed is None:
        raise DateParseError(
            ErrorTemplate.unparseable_date(value, ctx.locale_code),
            input_value=value,
            locale_code=ctx.locale_code,
        )

    logger.debug("Parsed %r with %s strategy for %s", value, strategy, ctx.locale_code)
    if parsed.tzinfo is not None:
        return parsed.astimezone(ctx.tz)
    return parsed


def parse_to_structured(
    value: str,
    options: DateFieldOptions | None,
    ctx: LocaleContext,
) -> StructuredDate:
    """Parse value and decompose it into the requested fields.

    Date fields: year, month (0-11), day (1-31).
    Time fields: hour, minute, second, millisecond.

    Example:
        >>> ctx = LocaleContext.create("en-US")
        >>> parse_to_structured("2011-04-11T10:30:00", DateFieldOptions(date=True), ctx)
        {'year': 2011, 'month': 3, 'day': 11}
    """
    options = options if options is not None else DateFieldOptions()
    show_date, show_time = options.resolve()
    parsed = parse_date_string(value, ctx)

    result: StructuredDate = {}
    if show_date:
        result["year"] = parsed.year
        result["month"] = parsed.month - 1
        result["day"] = parsed.day
    if show_time:
        result["hour"] = parsed.hour
        result["minute"] = parsed.minute
        result["second"] = parsed.second
        result["millisecond"] = parsed.microsecond // 1000
    return result


def _parse_iso(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _parse_cldr(value: str, locale_key: str) -> datetime | None:
    for pattern in _get_strptime_patterns(locale_key):
        try:
            return pattern.parse(value)
        except ValueError:
            continue
    return None


def _parse_heuristic(value: str, locale_key: str) -> datetime | None:
    dayfirst, yearfirst = _get_field_order(locale_key)
    try:
        return dateutil_parser.parse(value, dayfirst=dayfirst, yearfirst=yearfirst)
    except (ValueError, OverflowError):
        return None


@cache
def _get_field_order(locale_key: str) -> tuple[bool, bool]:
    """(dayfirst, yearfirst) as implied by the locale's short date pattern.

    Results are cached per locale.
    """
    try:
        pattern = Locale.parse(locale_key).date_formats["short"].pattern
    except (KeyError, AttributeError, ValueError):
        return (False, False)

    order = [
        text[0]
        for text, is_field in _tokenize_babel_pattern(pattern)
        if is_field and text[0] in "yMLd"
    ]
    if not order:
        return (False, False)
    first = order[0]
    if first == "y":
        return (False, True)
    return (first == "d", False)


# ==============================================================================
# LOCALIZED NAMES
# ==============================================================================
#
# strptime's %B/%b/%A/%a only read English names. Month and weekday names are
# therefore replaced by their numbers before strptime runs, and the pattern
# reads them with %m and %w instead.


@dataclass(frozen=True, slots=True)
class _NameTable:
    """Localized names of one width and the number strptime reads in their place.

    Attributes:
        regex: Alternation of every name, longest first, matched case-insensitively
        numbers: Lowercased name -> number string
    """

    regex: re.Pattern[str]
    numbers: dict[str, str]

    def substitute(self, value: str) -> str:
        return self.regex.sub(
            lambda match: self.numbers.get(match.group(0).lower(), match.group(0)), value
        )


@dataclass(frozen=True, slots=True)
class _StrptimePattern:
    """A strptime pattern plus the name tables its input needs rewritten with."""

    directives: str
    names: tuple[_NameTable, ...] = ()

    def parse(self, value: str) -> datetime:
        for table in self.names:
            value = table.substitute(value)
        return datetime.strptime(value, self.directives)


@cache
def _get_name_table(locale_key: str, item: NameField, width: NameWidth) -> _NameTable | None:
    """Month or weekday names of one width, format and stand-alone context.

    Months number 1-12 (%m). Weekdays number 0-6 from Sunday (%w); Babel keys
    them 0-6 from Monday. Results are cached per locale, item and width.
    """
    locale = Locale.parse(locale_key)
    data = locale.months if item == "months" else locale.days

    numbers: dict[str, str] = {}
    for context in ("format", "stand-alone"):
        try:
            names = data[context][width]
        except KeyError:
            continue
        for key, name in names.items():
            number = key if item == "months" else (key + 1) % 7
            numbers.setdefault(str(name).lower(), str(number))
    if not numbers:
        return None

    alternatives = "|".join(re.escape(name) for name in sorted(numbers, key=len, reverse=True))
    regex = re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)", re.IGNORECASE)
    return _NameTable(regex=regex, numbers=numbers)


@cache
def _get_strptime_patterns(locale_key: str) -> tuple[_StrptimePattern, ...]:
    """strptime patterns for the locale's CLDR date, time and date-time formats.

    Date-time patterns come first so a full string is not cut short by a
    date-only match. Besides the CLDR glue patterns, every date pattern is
    also joined to every time pattern by a single space, the way display
    patterns are derived. Results are cached per locale.

    Args:
        locale_key: Babel locale identifier (e.g., "en_US")

    Returns:
        Tuple of strptime patterns. Empty if the locale cannot be loaded.
    """
    try:
        locale = Locale.parse(locale_key)
    except ValueError:
        return ()

    date_patterns = _collect(locale.date_formats, _PARSE_STYLES)
    time_patterns = _collect(locale.time_formats, _TIME_PARSE_STYLES)

    combined: list[str] = []
    for date_pattern in date_patterns:
        for time_pattern in time_patterns:
            for style in _PARSE_STYLES:
                glue = str(locale.datetime_formats.get(style) or "{1} {0}")
                combined.append(glue.replace("{1}", date_pattern).replace("{0}", time_pattern))
            combined.append(f"{date_pattern} {time_pattern}")
            combined.append(f"{time_pattern} {date_pattern}")

    seen: set[_Conversion] = set()
    patterns: list[_StrptimePattern] = []
    for babel_pattern in (*combined, *date_patterns, *time_patterns):
        converted = _babel_to_strptime(babel_pattern)
        if converted is None or converted in seen:
            continue
        seen.add(converted)
        directives, name_fields = converted
        tables = tuple(
            table
            for field, width in name_fields
            if (table := _get_name_table(locale_key, field, width)) is not None
        )
        patterns.append(_StrptimePattern(directives, tables))
    return tuple(patterns)


def _collect(formats: object, styles: tuple[str, ...]) -> list[str]:
    found: list[str] = []
    for style in styles:
        try:
            pattern = formats[style].pattern  # type: ignore[index]
        except (KeyError, AttributeError):
            continue
        if pattern not in found:
            found.append(pattern)
    return found


# ==============================================================================
# TOKEN-BASED BABEL-TO-STRPTIME CONVERTER
# ==============================================================================
#
# CLDR patterns are tokenized into letter runs, quoted literals and single
# punctuation characters, then each letter run is mapped to a strptime
# directive. Patterns containing a token without a strptime equivalent
# (era, timezone names, week-based fields) are skipped entirely; the
# heuristic strategy covers that input instead.

_BABEL_TOKEN_MAP: dict[str, str] = {
    # Year
    "yyyy": "%Y",
    "yy": "%y",
    "y": "%Y",
    # Numeric month (format and stand-alone context)
    "MM": "%m",
    "M": "%m",
    "LL": "%m",
    "L": "%m",
    # Day
    "dd": "%d",
    "d": "%d",
    # Hour
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%I",
    "kk": "%H",
    "k": "%H",
    "KK": "%I",
    "K": "%I",
    # Minute / second / fraction
    "mm": "%M",
    "m": "%M",
    "ss": "%S",
    "s": "%S",
    "SSS": "%f",
    "SS": "%f",
    "S": "%f",
    # AM/PM
    "a": "%p",
    # UTC offsets
    "ZZZZZ": "%z",
    "ZZZ": "%z",
    "ZZ": "%z",
    "Z": "%z",
    "xxx": "%z",
    "xx": "%z",
    "XXX": "%z",
    "XX": "%z",
}

# Name fields: directive read after substitution, and the name table it needs
_BABEL_NAME_TOKENS: dict[str, tuple[str, NameField, NameWidth]] = {
    "MMMM": ("%m", "months", "wide"),
    "MMM": ("%m", "months", "abbreviated"),
    "LLLL": ("%m", "months", "wide"),
    "LLL": ("%m", "months", "abbreviated"),
    "EEEE": ("%w", "days", "wide"),
    "EEE": ("%w", "days", "abbreviated"),
    "EE": ("%w", "days", "abbreviated"),
    "E": ("%w", "days", "abbreviated"),
    "cccc": ("%w", "days", "wide"),
    "ccc": ("%w", "days", "abbreviated"),
}


def _tokenize_babel_pattern(pattern: str) -> list[tuple[str, bool]]:
    """Tokenize Babel CLDR pattern into (text, is_field) tokens.

    Field tokens are runs of one pattern letter; everything else, quoted
    text included, is literal.

    CLDR quote escaping rules:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote

    Examples:
        "h 'o''clock' a" -> h, " ", "o'clock", " ", a
        "d.MM.yyyy" -> d, ".", MM, ".", yyyy
    """
    tokens: list[tuple[str, bool]] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(("'", False))
                i += 2
                continue

            i += 1
            literal_chars: list[str] = []
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1

            if literal_chars:
                tokens.append(("".join(literal_chars), False))
            continue

        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append((pattern[i:j], True))
            i = j
            continue

        tokens.append((char, False))
        i += 1

    return tokens


def _babel_to_strptime(babel_pattern: str) -> _Conversion | None:
    """Convert a Babel CLDR pattern to a strptime pattern.

    Month and weekday names become %m and %w; the second element lists the
    (item, width) name tables input must be rewritten with first.

    Returns None when the pattern contains a field strptime cannot read, or
    the same directive twice (strptime rejects repeated fields).
    Literal text is escaped for strptime ('%' becomes '%%').

    Examples:
        >>> _babel_to_strptime("d.MM.yy")
        ('%d.%m.%y', ())
        >>> _babel_to_strptime("EEEE d MMMM y")
        ('%w %d %m %Y', (('days', 'wide'), ('months', 'wide')))
    """
    parts: list[str] = []
    used: set[str] = set()
    name_fields: list[tuple[NameField, NameWidth]] = []
    for text, is_field in _tokenize_babel_pattern(babel_pattern):
        if not is_field:
            parts.append(text.replace("%", "%%"))
            continue
        if text in _BABEL_NAME_TOKENS:
            directive, item, width = _BABEL_NAME_TOKENS[text]
            name_fields.append((item, width))
        else:
            directive = _BABEL_TOKEN_MAP.get(text, "")
        if not directive or directive in used:
            return None
        used.add(directive)
        parts.append(directive)
    return ("".join(parts), tuple(name_fields))
