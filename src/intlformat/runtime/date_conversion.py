"""Conversion of template values to timezone-aware datetimes.

Templates hand the date filters whatever they have: a datetime, a date,
an ISO-8601 string, a Unix timestamp, or nothing at all ("now"). The
converter turns all of these into one aware ``datetime`` and moves it to
the target timezone.

Timezone argument semantics:
    None   -> the default timezone
    False  -> leave the value in its own zone
    str    -> IANA identifier, resolved through Babel
    tzinfo -> used directly

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, date, datetime, time, tzinfo
from decimal import Decimal
from typing import Literal

from babel.dates import get_timezone

from intlformat.diagnostics import ErrorTemplate, FormatFailureError

__all__ = [
    "Clock",
    "DateConverter",
    "TimezoneArg",
    "attach_timezone",
    "resolve_timezone",
    "system_clock",
    "timezone_name",
]

logger = logging.getLogger(__name__)

type Clock = Callable[[], datetime]
"""Zero-argument callable returning the current aware datetime."""

type TimezoneArg = str | tzinfo | Literal[False] | None
"""Target timezone as accepted by the date entry points."""


def system_clock() -> datetime:
    """Current time, timezone-aware (UTC)."""
    return datetime.now(UTC)


def resolve_timezone(zone: str | tzinfo) -> tzinfo:
    """Resolve an IANA identifier (or pass a tzinfo through).

    Raises:
        FormatFailureError: If the identifier is unknown
    """
    if isinstance(zone, tzinfo):
        return zone
    if not isinstance(zone, str) or not zone:
        raise FormatFailureError(ErrorTemplate.unknown_timezone(zone), fallback_value=str(zone))
    try:
        return get_timezone(zone)
    except (LookupError, ValueError) as e:
        raise FormatFailureError(ErrorTemplate.unknown_timezone(zone), fallback_value=zone) from e


def timezone_name(zone: tzinfo | None) -> str | None:
    """IANA name of a tzinfo, when it has one.

    zoneinfo exposes ``key``, pytz ``zone``; fixed offsets fall back to
    ``tzname``.
    """
    if zone is None:
        return None
    for attribute in ("key", "zone"):
        name = getattr(zone, attribute, None)
        if isinstance(name, str):
            return name
    if zone is UTC:
        return "UTC"
    return zone.tzname(None) or str(zone)


class DateConverter:
    """Converts template values into aware datetimes.

    Args:
        default_timezone: Zone for naive values and for ``timezone=None``
        clock: Source of "now" (injectable for tests)

    Example:
        >>> converter = DateConverter("Europe/Paris")
        >>> converter.convert("2024-05-15 12:00").isoformat()
        '2024-05-15T12:00:00+02:00'
        >>> converter.convert(0, "UTC").isoformat()
        '1970-01-01T00:00:00+00:00'
    """

    __slots__ = ("_clock", "_default_timezone")

    def __init__(self, default_timezone: str | tzinfo = "UTC", clock: Clock | None = None) -> None:
        self._default_timezone = resolve_timezone(default_timezone)
        self._clock = clock or system_clock

    @property
    def default_timezone(self) -> tzinfo:
        """Zone applied to naive values."""
        return self._default_timezone

    @property
    def clock(self) -> Clock:
        """The clock this converter reads "now" from."""
        return self._clock

    def now(self) -> datetime:
        """Current time in the default timezone."""
        return self._attach(self._clock()).astimezone(self._default_timezone)

    def convert(self, value: object, timezone: TimezoneArg = None) -> datetime:
        """Convert a value to an aware datetime in the target timezone.

        Args:
            value: None or "now", datetime, date, ISO-8601 string, or Unix
                timestamp (int, float, Decimal or digit string)
            timezone: Target zone, see module docstring

        Returns:
            Timezone-aware datetime

        Raises:
            FormatFailureError: If the value cannot be interpreted or the
                timezone is unknown
        """
        converted = self._to_datetime(value)
        if timezone is False:
            return converted
        target = self._default_timezone if timezone is None else resolve_timezone(timezone)
        return converted.astimezone(target)

    def _to_datetime(self, value: object) -> datetime:
        if isinstance(value, bool):
            raise FormatFailureError(ErrorTemplate.invalid_date(value), fallback_value=str(value))

        match value:
            case None:
                return self.now()
            case datetime():
                return self._attach(value)
            case date():
                return self._attach(datetime.combine(value, time()))
            case int() | float() | Decimal():
                return self._from_timestamp(value)
            case str():
                return self._from_string(value)
            case _:
                raise FormatFailureError(ErrorTemplate.invalid_date(value), fallback_value=str(value))

    def _from_string(self, value: str) -> datetime:
        text = value.strip()
        if not text or text.lower() == "now":
            return self.now()
        if text.lstrip("-").isdigit():
            return self._from_timestamp(int(text))
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise FormatFailureError(
                ErrorTemplate.invalid_date(value, "not ISO 8601 format"), fallback_value=value
            ) from e
        return self._attach(parsed)

    def _from_timestamp(self, value: float | Decimal) -> datetime:
        try:
            return datetime.fromtimestamp(float(value), UTC)
        except (OverflowError, OSError, ValueError) as e:
            raise FormatFailureError(
                ErrorTemplate.invalid_date(value, str(e)), fallback_value=str(value)
            ) from e

    def _attach(self, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            return attach_timezone(value.replace(tzinfo=None), self._default_timezone)
        return value


def attach_timezone(value: datetime, zone: tzinfo) -> datetime:
    """Interpret a naive datetime as wall time in ``zone``."""
    # pytz zones need localize() to pick the right offset
    localize = getattr(zone, "localize", None)
    if localize is not None:
        return localize(value)
    return value.replace(tzinfo=zone)
