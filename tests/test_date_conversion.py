"""Tests for DateConverter and the timezone helpers.

Python 3.13+.
"""

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from intlformat.diagnostics import DiagnosticCode, FormatFailureError
from intlformat.runtime import DateConverter, resolve_timezone, timezone_name
from intlformat.runtime.date_conversion import attach_timezone

NOW = datetime(2024, 5, 15, 13, 37, tzinfo=UTC)


def _converter(zone: str = "UTC") -> DateConverter:
    return DateConverter(zone, lambda: NOW)


class TestResolveTimezone:
    def test_identifier(self) -> None:
        assert timezone_name(resolve_timezone("Europe/Paris")) == "Europe/Paris"

    def test_tzinfo_passthrough(self) -> None:
        zone = ZoneInfo("Asia/Tokyo")
        assert resolve_timezone(zone) is zone

    @pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", ""])
    def test_unknown(self, zone: str) -> None:
        with pytest.raises(FormatFailureError) as exc_info:
            resolve_timezone(zone)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNKNOWN_TIMEZONE


class TestTimezoneName:
    def test_none(self) -> None:
        assert timezone_name(None) is None

    def test_zoneinfo_key(self) -> None:
        assert timezone_name(ZoneInfo("America/New_York")) == "America/New_York"

    def test_utc(self) -> None:
        assert timezone_name(UTC) == "UTC"

    def test_fixed_offset(self) -> None:
        assert timezone_name(timezone(timedelta(hours=2))) == "UTC+02:00"


class TestConvert:
    @pytest.mark.parametrize("value", [None, "", "now", " NOW "])
    def test_now(self, value: object) -> None:
        assert _converter().convert(value) == NOW

    def test_aware_datetime_moved_to_default_zone(self) -> None:
        converted = _converter("Europe/Paris").convert(NOW)
        assert converted.hour == 15
        assert timezone_name(converted.tzinfo) == "Europe/Paris"

    def test_naive_datetime_is_default_wall_time(self) -> None:
        converted = _converter("Europe/Paris").convert(datetime(2024, 5, 15, 12, 0))
        assert converted.isoformat() == "2024-05-15T12:00:00+02:00"

    def test_date_is_midnight(self) -> None:
        converted = _converter().convert(date(2024, 5, 15))
        assert converted == datetime(2024, 5, 15, tzinfo=UTC)

    def test_iso_string(self) -> None:
        converted = _converter().convert("2020-02-22 13:37:30", "Europe/Amsterdam")
        assert converted.isoformat() == "2020-02-22T14:37:30+01:00"

    def test_iso_string_with_offset(self) -> None:
        converted = _converter().convert("2020-02-22T13:37:30+02:00")
        assert converted.hour == 11

    @pytest.mark.parametrize("value", [0, 0.0, Decimal(0), "0"])
    def test_timestamps(self, value: object) -> None:
        assert _converter().convert(value) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_negative_timestamp_string(self) -> None:
        assert _converter().convert("-86400") == datetime(1969, 12, 31, tzinfo=UTC)

    def test_timezone_false_keeps_own_zone(self) -> None:
        value = datetime(2024, 5, 15, 9, 0, tzinfo=ZoneInfo("America/New_York"))
        converted = _converter("Europe/Paris").convert(value, False)
        assert converted.tzinfo is value.tzinfo
        assert converted.hour == 9

    def test_target_zone_object(self) -> None:
        converted = _converter().convert(NOW, ZoneInfo("Asia/Tokyo"))
        assert converted.hour == 22

    @pytest.mark.parametrize("value", ["yesterday-ish", True, [2024], object()])
    def test_rejected(self, value: object) -> None:
        with pytest.raises(FormatFailureError) as exc_info:
            _converter().convert(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_DATE

    def test_unknown_target_zone(self) -> None:
        with pytest.raises(FormatFailureError, match="Unknown timezone"):
            _converter().convert(NOW, "Nowhere/City")

    def test_timestamp_overflow(self) -> None:
        with pytest.raises(FormatFailureError):
            _converter().convert(10**20)


class TestConverterState:
    def test_properties(self) -> None:
        converter = _converter("Europe/Paris")
        assert timezone_name(converter.default_timezone) == "Europe/Paris"
        assert converter.clock() == NOW
        assert converter.now().hour == 15

    def test_now_without_target_zone_stays_local(self) -> None:
        converter = _converter("Europe/Paris")
        assert converter.convert(None, False).hour == 15
        assert converter.convert("now", False).utcoffset() == timedelta(hours=2)

    def test_default_clock_is_aware(self) -> None:
        assert DateConverter().now().tzinfo is not None


class TestAttachTimezone:
    def test_zoneinfo(self) -> None:
        attached = attach_timezone(datetime(2024, 1, 1, 12), ZoneInfo("Europe/Paris"))
        assert attached.utcoffset() == timedelta(hours=1)
