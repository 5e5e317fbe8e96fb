"""Typed option objects for the formatting helpers.

The host passes loosely-typed option bags ({formatLength, selector},
{item, type}). These frozen dataclasses are the only place where such bags
are interpreted and where defaults are applied.

Default resolution for date/time selection (one rule, used everywhere):
    - date and time both None  -> both requested
    - otherwise                -> each requested only when truthy

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from globalization.constants import DEFAULT_FORMAT_LENGTH, DEFAULT_NAME_ITEM, DEFAULT_NAME_TYPE
from globalization.diagnostics import ErrorTemplate, LocaleDataError
from globalization.enums import FormatLength, NameItem, NameType, Selector

__all__ = [
    "DateFieldOptions",
    "NameOptions",
    "parse_format_length",
]


def parse_format_length(value: str | None) -> FormatLength:
    """Parse a caller-supplied format length, case-insensitively.

    Args:
        value: 'short', 'medium', 'long', 'full' in any case, or None

    Returns:
        FormatLength member (SHORT when value is None or empty)

    Raises:
        LocaleDataError: INVALID_FORMAT_LENGTH for any other value
    """
    if not value:
        return FormatLength(DEFAULT_FORMAT_LENGTH)
    try:
        return FormatLength(str(value).upper())
    except ValueError:
        raise LocaleDataError(ErrorTemplate.invalid_format_length(str(value))) from None


@dataclass(frozen=True, slots=True)
class DateFieldOptions:
    """Which parts of a date to render or extract, and at what length.

    Attributes:
        format_length: Pattern length (default SHORT)
        date: Date part requested; None means "not specified"
        time: Time part requested; None means "not specified"
    """

    format_length: FormatLength = FormatLength.SHORT
    date: bool | None = None
    time: bool | None = None

    @classmethod
    def from_selector(
        cls, format_length: str | None = None, selector: str | None = None
    ) -> "DateFieldOptions":
        """Build options from the host's {formatLength, selector} pair.

        A selector of 'date' or 'date and time' sets date=True; 'time' or
        'date and time' sets time=True. Fields not selected stay None, so an
        absent or unknown selector requests both parts.

        Example:
            >>> DateFieldOptions.from_selector("long", "Date ")
            DateFieldOptions(format_length=<FormatLength.LONG: 'LONG'>, date=True, time=None)
        """
        normalized = selector.lower().strip() if selector else ""
        date = normalized in (Selector.DATE, Selector.DATE_AND_TIME) or None
        time = normalized in (Selector.TIME, Selector.DATE_AND_TIME) or None
        return cls(format_length=parse_format_length(format_length), date=date, time=time)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "DateFieldOptions":
        """Build options from a host option bag (keys formatLength, selector)."""
        options = options or {}
        return cls.from_selector(options.get("formatLength"), options.get("selector"))

    def resolve(self) -> tuple[bool, bool]:
        """Apply the default rule.

        Returns:
            (show_date, show_time)
        """
        if self.date is None and self.time is None:
            return (True, True)
        return (bool(self.date), bool(self.time))


@dataclass(frozen=True, slots=True)
class NameOptions:
    """Which calendar name list to return.

    Attributes:
        item: Month or weekday names (default months)
        type: Abbreviated (narrow) or full (wide) names (default wide)
    """

    item: NameItem = NameItem.MONTHS
    type: NameType = NameType.WIDE

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "NameOptions":
        """Build options from a host option bag (keys item, type).

        Matching is case-insensitive. Any item other than 'days' reads month
        names; any type other than 'narrow' reads wide names.
        """
        options = options or {}
        item = str(options.get("item") or DEFAULT_NAME_ITEM).lower()
        kind = str(options.get("type") or DEFAULT_NAME_TYPE).lower()
        return cls(
            item=NameItem.DAYS if item == NameItem.DAYS else NameItem.MONTHS,
            type=NameType.NARROW if kind == NameType.NARROW else NameType.WIDE,
        )
