"""Immutable date/time formatter backed by Babel CLDR data.

A formatter is fixed at construction: locale, date style, time style,
timezone, calendar and an optional explicit pattern. Formatting converts
the value into the formatter timezone and renders it with Babel's
``format_date`` / ``format_time`` / ``format_datetime``, combining date
and time with the locale's CLDR date-time glue pattern.

Style semantics (ICU ``IntlDateFormatter``):
    - a non-empty pattern overrides both styles
    - NONE for both styles renders ``yyyyMMdd hh:mm a``
    - RELATIVE_* date styles render "yesterday" / "today" / "tomorrow"
      when the calendar day is adjacent and the locale has the names;
      otherwise they render as the plain style

Thread Safety:
    Immutable after construction; safe to share.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, tzinfo
from typing import TYPE_CHECKING

from babel.dates import format_date, format_datetime, format_time

from intlformat.constants import RELATIVE_DAY_NAMES, UNSTYLED_DATETIME_PATTERN
from intlformat.enums import Calendar, DateStyle
from intlformat.locale_utils import get_babel_locale
from intlformat.runtime.date_conversion import (
    Clock,
    attach_timezone,
    resolve_timezone,
    system_clock,
    timezone_name,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["DateFormatter"]

logger = logging.getLogger(__name__)

# Babel style names for the absolute styles
_STYLE_NAMES: dict[DateStyle, str] = {
    DateStyle.FULL: "full",
    DateStyle.LONG: "long",
    DateStyle.MEDIUM: "medium",
    DateStyle.SHORT: "short",
}


class DateFormatter:
    """Locale date/time formatter with ICU-style getters.

    Relative date styles name yesterday, today and tomorrow only for the
    languages in ``RELATIVE_DAY_NAMES`` (de, en, es, fr, it, lv, nl, pl, pt,
    ru). Every other language, and every other day, renders with the
    matching absolute style.

    Example:
        >>> from datetime import datetime, UTC
        >>> fmt = DateFormatter("en_US", DateStyle.LONG, DateStyle.NONE, "UTC")
        >>> fmt.format(datetime(2024, 5, 15, 13, 37, tzinfo=UTC))
        'May 15, 2024'
        >>> fmt.get_resolved_pattern()
        'MMMM d, y'
    """

    __slots__ = ("_calendar", "_clock", "_date_type", "_locale", "_pattern", "_time_type", "_timezone")

    def __init__(
        self,
        locale: str | Locale,
        date_type: DateStyle | int = DateStyle.MEDIUM,
        time_type: DateStyle | int = DateStyle.MEDIUM,
        timezone: str | tzinfo | None = None,
        calendar: Calendar | int = Calendar.GREGORIAN,
        pattern: str = "",
        *,
        clock: Clock | None = None,
        default_timezone: str | tzinfo = "UTC",
    ) -> None:
        """Create a formatter.

        Args:
            locale: Locale code (BCP-47 or POSIX) or Babel Locale
            date_type: Date style
            time_type: Time style
            timezone: Formatter zone; None uses ``default_timezone``
            calendar: Calendar kind (rendered with Gregorian data)
            pattern: Explicit CLDR pattern, overrides the styles when non-empty
            clock: Source of "now" for relative styles
            default_timezone: Zone used when ``timezone`` is None

        Raises:
            babel.core.UnknownLocaleError: If locale is not recognized
            FormatFailureError: If a timezone identifier is unknown
            ValueError: If a style or calendar code is unknown
        """
        self._locale: Locale = get_babel_locale(locale) if isinstance(locale, str) else locale
        self._date_type = DateStyle(date_type)
        self._time_type = DateStyle(time_type)
        self._timezone = resolve_timezone(default_timezone if timezone is None else timezone)
        self._calendar = Calendar(calendar)
        self._pattern = pattern or ""
        self._clock = clock or system_clock
        logger.debug(
            "Created date formatter locale=%s date=%s time=%s tz=%s pattern=%r",
            self._locale,
            self._date_type.name,
            self._time_type.name,
            self.get_timezone_id(),
            self._pattern,
        )

    def __repr__(self) -> str:
        return (
            f"DateFormatter(locale={str(self._locale)!r}, date_type={self._date_type.name}, "
            f"time_type={self._time_type.name}, timezone={self.get_timezone_id()!r}, "
            f"pattern={self._pattern!r})"
        )

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    def get_locale(self) -> str:
        """Locale identifier (POSIX form)."""
        return str(self._locale)

    @property
    def babel_locale(self) -> Locale:
        """Underlying Babel Locale."""
        return self._locale

    def get_date_type(self) -> DateStyle:
        return self._date_type

    def get_time_type(self) -> DateStyle:
        return self._time_type

    def get_timezone(self) -> tzinfo:
        return self._timezone

    def get_timezone_id(self) -> str:
        """IANA name of the formatter zone."""
        return timezone_name(self._timezone) or ""

    def get_calendar(self) -> Calendar:
        return self._calendar

    def get_pattern(self) -> str:
        """Explicit pattern given at construction ("" for style-based formatters)."""
        return self._pattern

    def get_resolved_pattern(self) -> str:
        """Pattern actually used for rendering.

        Relative date styles report the pattern of their plain counterpart.
        """
        if self._pattern:
            return self._pattern
        date_style = self._date_type.absolute
        time_style = self._time_type.absolute
        if date_style is DateStyle.NONE and time_style is DateStyle.NONE:
            return UNSTYLED_DATETIME_PATTERN
        if time_style is DateStyle.NONE:
            return str(self._locale.date_formats[_STYLE_NAMES[date_style]].pattern)
        time_pattern = str(self._locale.time_formats[_STYLE_NAMES[time_style]].pattern)
        if date_style is DateStyle.NONE:
            return time_pattern
        date_pattern = str(self._locale.date_formats[_STYLE_NAMES[date_style]].pattern)
        glue = str(self._locale.datetime_formats[_STYLE_NAMES[date_style]])
        return glue.replace("{0}", time_pattern).replace("{1}", date_pattern)

    @property
    def clock(self) -> Clock:
        return self._clock

    def now(self) -> datetime:
        """Current time in the formatter timezone."""
        return self._clock().astimezone(self._timezone)

    def derive(
        self, date_type: DateStyle | int, time_type: DateStyle | int, pattern: str = ""
    ) -> DateFormatter:
        """New formatter with this one's locale, timezone, calendar and clock."""
        return DateFormatter(
            self._locale,
            date_type,
            time_type,
            self._timezone,
            self._calendar,
            pattern,
            clock=self._clock,
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def localize(self, value: datetime | date) -> datetime:
        """Value as an aware datetime in the formatter timezone.

        Naive datetimes and plain dates are taken as wall time in the
        formatter timezone.
        """
        if not isinstance(value, datetime):
            value = datetime.combine(value, time())
        if value.tzinfo is None or value.utcoffset() is None:
            return attach_timezone(value.replace(tzinfo=None), self._timezone)
        return value.astimezone(self._timezone)

    def format(self, value: datetime | date) -> str:
        """Render a date/time.

        Args:
            value: datetime (aware or naive) or date

        Returns:
            Localized text

        Raises:
            ValueError, KeyError: If Babel rejects the
                pattern or has no data for the style
        """
        moment = self.localize(value)
        if self._pattern:
            return str(format_datetime(moment, self._pattern, tzinfo=self._timezone, locale=self._locale))

        date_style = self._date_type
        time_style = self._time_type.absolute
        if date_style is DateStyle.NONE and time_style is DateStyle.NONE:
            return str(
                format_datetime(
                    moment, UNSTYLED_DATETIME_PATTERN, tzinfo=self._timezone, locale=self._locale
                )
            )

        date_text = self._format_date_part(moment, date_style) if date_style is not DateStyle.NONE else ""
        if time_style is DateStyle.NONE:
            return date_text
        time_text = str(
            format_time(moment, _STYLE_NAMES[time_style], tzinfo=self._timezone, locale=self._locale)
        )
        if date_style is DateStyle.NONE:
            return time_text

        glue = str(self._locale.datetime_formats[_STYLE_NAMES[date_style.absolute]])
        return glue.replace("'", "").replace("{0}", time_text).replace("{1}", date_text)

    def _format_date_part(self, moment: datetime, style: DateStyle) -> str:
        if style.is_relative:
            relative = self._relative_day_name(moment)
            if relative is not None:
                return relative
            logger.debug(
                "No relative day name for %s in %s, using %s",
                moment.date(),
                self._locale,
                style.absolute.name,
            )
        return str(format_date(moment, _STYLE_NAMES[style.absolute], locale=self._locale))

    def _relative_day_name(self, moment: datetime) -> str | None:
        names = RELATIVE_DAY_NAMES.get(self._locale.language)
        if names is None:
            return None
        offset = (moment.date() - self.now().date()).days
        return names.get(offset)
