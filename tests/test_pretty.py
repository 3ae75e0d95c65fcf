"""Tests for the default pretty (relative) date strategy.

The clock is fixed at Wednesday 2024-05-15 13:37 UTC.

Python 3.13+.
"""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from intlformat import IntlConfig, IntlExtension, get_default_pretty_format
from intlformat.diagnostics import NoPrettyStrategyConfiguredError
from intlformat.enums import DateStyle
from intlformat.runtime import DateFormatter, DefaultPrettyFormat, PrettyFormatStrategy


def _plain(text: str) -> str:
    return text.replace("\u202f", " ").replace("\xa0", " ")


@pytest.fixture
def pretty_ext(fixed_clock: Callable[[], datetime]) -> IntlExtension:
    """Extension with an English FULL/FULL UTC prototype and the default strategy."""
    prototype = DateFormatter("en", DateStyle.FULL, DateStyle.FULL, "UTC")
    return IntlExtension(
        prototype,
        None,
        get_default_pretty_format(),
        config=IntlConfig(default_locale="en"),
        clock=fixed_clock,
    )


class TestStrategyProtocol:
    def test_default_is_strategy(self) -> None:
        strategy = get_default_pretty_format()
        assert isinstance(strategy, DefaultPrettyFormat)
        assert isinstance(strategy, PrettyFormatStrategy)
        assert repr(strategy) == "DefaultPrettyFormat()"

    def test_custom_callable(self, fixed_clock: Callable[[], datetime]) -> None:
        def shout(date_time: datetime, formatter: DateFormatter) -> str:
            return formatter.format(date_time).upper()

        ext = IntlExtension(
            None, None, shout, config=IntlConfig(default_locale="en"), clock=fixed_clock
        )
        assert ext.format_date_pretty("2024-05-01", "long") == "MAY 1, 2024"

    def test_missing_strategy(self, ext: IntlExtension) -> None:
        with pytest.raises(NoPrettyStrategyConfiguredError, match="without a pretty format strategy"):
            ext.format_datetime_pretty("2024-05-15")


class TestDefaultStrategy:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-05-15 13:37:00", "1:37 PM"),
            ("2024-05-15 12:37:00", "12:37 PM"),
            ("2024-05-15 14:37:00", "2:37 PM"),
            (datetime(2024, 5, 15, 11, 37, tzinfo=UTC), "11:37 AM"),
            (datetime(2024, 5, 14, 13, 37, tzinfo=UTC), "yesterday 1:37 PM"),
            ("2024-05-12 10:00:00", "Sunday"),
            ("2024-05-09", "Thursday"),
            ("2024-05-01", "Wednesday, May 1, 2024"),
            ("2024-05-16 13:37:00", "Thursday, May 16, 2024"),
            ("2024-06-15", "Saturday, June 15, 2024"),
        ],
    )
    def test_datetime_pretty(self, pretty_ext: IntlExtension, value: object, expected: str) -> None:
        assert _plain(pretty_ext.format_datetime_pretty(value)) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-05-15", "today"),
            ("2024-05-15 08:00", "today"),
            ("2024-05-14", "yesterday"),
            ("2024-05-11", "Saturday"),
            ("2024-05-08", "Wednesday, May 8, 2024"),
        ],
    )
    def test_date_pretty(self, pretty_ext: IntlExtension, value: object, expected: str) -> None:
        assert pretty_ext.format_date_pretty(value) == expected

    def test_now(self, pretty_ext: IntlExtension) -> None:
        assert _plain(pretty_ext.format_datetime_pretty()) == "1:37 PM"

    def test_base_date_style_for_old_dates(self, pretty_ext: IntlExtension) -> None:
        assert pretty_ext.format_date_pretty("2024-01-02", "short") == "1/2/24"

    def test_localized(self, pretty_ext: IntlExtension) -> None:
        assert pretty_ext.format_date_pretty("2024-05-14", locale="de") == "gestern"
        assert pretty_ext.format_date_pretty("2024-05-12", locale="fr") == "dimanche"

    def test_day_boundary_in_formatter_zone(self, pretty_ext: IntlExtension) -> None:
        # 13:37 UTC is 22:37 in Tokyo; 2024-05-14 20:00 UTC is the 15th there
        assert pretty_ext.format_date_pretty(
            datetime(2024, 5, 14, 20, 0, tzinfo=UTC), timezone="Asia/Tokyo"
        ) == "today"

    def test_without_prototype_uses_medium(self, fixed_clock: Callable[[], datetime]) -> None:
        ext = IntlExtension(
            pretty_format=get_default_pretty_format(),
            config=IntlConfig(default_locale="en"),
            clock=fixed_clock,
        )
        assert ext.format_datetime_pretty("2024-05-01 09:00") == "May 1, 2024"
