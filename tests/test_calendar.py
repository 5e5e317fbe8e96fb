"""Tests for calendar facts: name lists, DST, first day of week."""

from __future__ import annotations

from datetime import UTC, date, datetime
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest
from hypothesis import given
from hypothesis import strategies as st

from globalization.diagnostics import DiagnosticCode, LocaleDataError
from globalization.enums import NameItem, NameType
from globalization.formatting import derive_names, first_day_of_week, is_dst
from globalization.runtime import LocaleContext, NameOptions

NEW_YORK = ZoneInfo("America/New_York")


class TestDeriveNames:
    """Month and weekday name lists."""

    def test_default_is_wide_months(self, en_us_ctx: LocaleContext) -> None:
        """No options gives the twelve wide month names."""
        names = derive_names(None, en_us_ctx)

        assert len(names) == 12
        assert names[0] == "January"
        assert names[-1] == "December"

    def test_narrow_days(self, en_us_ctx: LocaleContext) -> None:
        """days/narrow gives seven abbreviated names starting Monday."""
        names = derive_names(NameOptions(item=NameItem.DAYS, type=NameType.NARROW), en_us_ctx)

        assert len(names) == 7
        assert names[0] == "Mon"
        assert names[-1] == "Sun"

    def test_wide_days(self, en_us_ctx: LocaleContext) -> None:
        """days/wide gives full weekday names."""
        names = derive_names(NameOptions(item=NameItem.DAYS), en_us_ctx)

        assert names == (
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        )

    def test_narrow_months(self, en_us_ctx: LocaleContext) -> None:
        """months/narrow gives abbreviated month names."""
        names = derive_names(NameOptions(type=NameType.NARROW), en_us_ctx)

        assert len(names) == 12
        assert names[0] == "Jan"

    def test_german_months(self, de_ctx: LocaleContext) -> None:
        """Names follow the context locale."""
        names = derive_names(NameOptions(), de_ctx)

        assert names[0] == "Januar"
        assert names[2] == "März"

    def test_from_host_mapping(self, en_us_ctx: LocaleContext) -> None:
        """Host option bags are matched case-insensitively."""
        options = NameOptions.from_mapping({"item": "DAYS", "type": "Narrow"})

        assert len(derive_names(options, en_us_ctx)) == 7

    @given(
        locale=st.sampled_from(("en-US", "de-DE", "fr-FR", "ja-JP", "ru-RU", "ar-EG")),
        item=st.sampled_from(list(NameItem)),
        kind=st.sampled_from(list(NameType)),
    )
    def test_property_counts(self, locale: str, item: NameItem, kind: NameType) -> None:
        """PROPERTY: 12 months or 7 days, all non-empty."""
        ctx = LocaleContext.create(locale, NEW_YORK)
        names = derive_names(NameOptions(item=item, type=kind), ctx)

        assert len(names) == (7 if item is NameItem.DAYS else 12)
        assert all(names)

    def test_missing_table_raises(self, en_us_ctx: LocaleContext) -> None:
        """A locale without the requested table raises MISSING_LOCALE_DATA."""

        class _EmptyLocale:
            months: dict[str, dict[str, dict[int, str]]] = {"format": {}}
            days: dict[str, dict[str, dict[int, str]]] = {"format": {}}

        ctx = LocaleContext(
            locale_code="xx",
            _babel_locale=_EmptyLocale(),  # type: ignore[arg-type]
            tz=NEW_YORK,
        )

        with pytest.raises(LocaleDataError) as exc_info:
            derive_names(NameOptions(), ctx)

        assert exc_info.value.code is DiagnosticCode.MISSING_LOCALE_DATA


class TestIsDst:
    """Daylight saving time predicate."""

    def test_new_york_winter_and_summer_differ(self, en_us_ctx: LocaleContext) -> None:
        """January is standard time, July is daylight time."""
        assert is_dst(date(2023, 1, 1), en_us_ctx) is False
        assert is_dst(date(2023, 7, 1), en_us_ctx) is True

    def test_aware_instant(self, en_us_ctx: LocaleContext) -> None:
        """Aware values are converted before the check."""
        assert is_dst(datetime(2023, 7, 1, 12, 0, tzinfo=UTC), en_us_ctx) is True

    def test_utc_never_observes_dst(self) -> None:
        """UTC has no DST."""
        ctx = LocaleContext.create("en-US", UTC)

        assert is_dst(date(2023, 7, 1), ctx) is False

    def test_southern_hemisphere(self) -> None:
        """Sydney observes DST in January."""
        ctx = LocaleContext.create("en-AU", ZoneInfo("Australia/Sydney"))

        assert is_dst(date(2023, 1, 1), ctx) is True
        assert is_dst(date(2023, 7, 1), ctx) is False


class TestFirstDayOfWeek:
    """Locale week start."""

    def test_en_us_starts_sunday(self, en_us_ctx: LocaleContext) -> None:
        """US weeks start on Sunday (ISO 7)."""
        assert first_day_of_week(en_us_ctx) == 7

    def test_german_starts_monday(self, de_ctx: LocaleContext) -> None:
        """German weeks start on Monday (ISO 1)."""
        assert first_day_of_week(de_ctx) == 1

    def test_idempotent(self, en_us_ctx: LocaleContext) -> None:
        """Repeated calls agree."""
        assert first_day_of_week(en_us_ctx) == first_day_of_week(en_us_ctx)

    @given(locale=st.sampled_from(("en-US", "en-GB", "de-DE", "ar-EG", "pt-BR", "fr-FR")))
    def test_property_matches_cldr(self, locale: str) -> None:
        """PROPERTY: result is the ISO form of CLDR's first_week_day."""
        ctx = LocaleContext.create(locale, NEW_YORK)

        assert first_day_of_week(ctx) == ctx.babel_locale.first_week_day + 1

    @given(today=st.dates(min_value=date(2000, 1, 1), max_value=date(2100, 12, 31)))
    def test_property_independent_of_today(self, today: date) -> None:
        """PROPERTY: the result does not depend on the current date."""
        ctx = LocaleContext.create("en-US", NEW_YORK)
        moment = datetime(today.year, today.month, today.day, 12, tzinfo=NEW_YORK)

        with patch.object(LocaleContext, "now", return_value=moment):
            assert first_day_of_week(ctx) == 7
