"""Date/time formatter resolution and caching.

Precedence with a prototype formatter:
    - pattern: the prototype pattern is adopted only when no style was
      requested, the locale is absent or equal to the prototype locale,
      and the caller pattern is empty
    - absent styles, timezone and locale fall back to the prototype
    - a falsy calendar (TRADITIONAL) falls back to the prototype calendar

Without a prototype absent styles default to MEDIUM.

Date formatters are immutable, so only cache get-or-create is locked.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import TYPE_CHECKING

from intlformat.constants import DATE_FORMATS, DEFAULT_CALENDAR, NO_TIMEZONE_KEY
from intlformat.diagnostics import ErrorTemplate, UnknownDateFormatError, UnknownTimeFormatError
from intlformat.enums import Calendar, DateStyle
from intlformat.locale_utils import locale_key
from intlformat.runtime.cache import FormatterCache
from intlformat.runtime.date_conversion import Clock, timezone_name
from intlformat.runtime.date_formatter import DateFormatter

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["DateFormatterResolver", "date_cache_key"]

logger = logging.getLogger(__name__)


def date_cache_key(
    locale: str,
    date_type: DateStyle,
    time_type: DateStyle,
    timezone: tzinfo | None,
    calendar: Calendar,
    pattern: str,
) -> str:
    """Canonical key for a date formatter configuration.

    Example:
        >>> date_cache_key("en", DateStyle.LONG, DateStyle.NONE, None, Calendar.GREGORIAN, "")
        'en|1|-1|(none)|1|'
    """
    zone = timezone_name(timezone) if timezone is not None else NO_TIMEZONE_KEY
    return f"{locale}|{int(date_type)}|{int(time_type)}|{zone}|{int(calendar)}|{pattern}"


class DateFormatterResolver:
    """Resolves and caches date formatters.

    Args:
        prototype: Formatter supplying fallbacks (read only)
        default_locale: Locale used when neither call nor prototype gives one
        default_timezone: Zone of formatters built without a timezone
        clock: Source of "now" handed to every formatter
        cache_size: LRU bound of the formatter cache (None = unbounded)
    """

    __slots__ = ("_cache", "_clock", "_default_locale", "_default_timezone", "_prototype")

    def __init__(
        self,
        prototype: DateFormatter | None = None,
        *,
        default_locale: str,
        default_timezone: str | tzinfo = "UTC",
        clock: Clock | None = None,
        cache_size: int | None = None,
    ) -> None:
        self._prototype = prototype
        self._default_locale = default_locale
        self._default_timezone = default_timezone
        self._clock = clock
        self._cache: FormatterCache[DateFormatter] = FormatterCache(cache_size)

    @property
    def cache(self) -> FormatterCache[DateFormatter]:
        return self._cache

    @property
    def prototype(self) -> DateFormatter | None:
        return self._prototype

    def resolve(
        self,
        locale: str | Locale | None = None,
        date_format: str | None = None,
        time_format: str | None = None,
        pattern: str = "",
        timezone: tzinfo | None = None,
        calendar: str = DEFAULT_CALENDAR,
    ) -> DateFormatter:
        """Return the formatter for the request.

        Args:
            locale: Locale, None for the prototype's or the default
            date_format: Date style name, None for absent
            time_format: Time style name, None for absent
            pattern: Explicit pattern ("" for none)
            timezone: Resolved zone, None for absent
            calendar: "gregorian" selects GREGORIAN, anything else TRADITIONAL

        Raises:
            UnknownDateFormatError: If date_format is not a style name
            UnknownTimeFormatError: If time_format is not a style name
        """
        if date_format is not None and date_format not in DATE_FORMATS:
            raise UnknownDateFormatError(
                ErrorTemplate.unknown_date_format(date_format, DATE_FORMATS.names),
                value=date_format,
                choices=DATE_FORMATS.names,
            )
        if time_format is not None and time_format not in DATE_FORMATS:
            raise UnknownTimeFormatError(
                ErrorTemplate.unknown_time_format(time_format, DATE_FORMATS.names),
                value=time_format,
                choices=DATE_FORMATS.names,
            )

        calendar_code = Calendar.GREGORIAN if calendar == DEFAULT_CALENDAR else Calendar.TRADITIONAL
        date_type = DATE_FORMATS[date_format] if date_format is not None else None
        time_type = DATE_FORMATS[time_format] if time_format is not None else None
        pattern = pattern or ""
        locale_code = locale_key(locale) if locale else None

        prototype = self._prototype
        if prototype is not None:
            if (
                date_format is None
                and time_format is None
                and (locale_code is None or locale_code == prototype.get_locale())
            ):
                pattern = pattern or prototype.get_pattern()
            if date_type is None:
                date_type = prototype.get_date_type()
            if time_type is None:
                time_type = prototype.get_time_type()
            if timezone is None:
                timezone = prototype.get_timezone()
            calendar_code = calendar_code or prototype.get_calendar()
            locale_code = locale_code or prototype.get_locale()
        else:
            if date_type is None:
                date_type = DateStyle.MEDIUM
            if time_type is None:
                time_type = DateStyle.MEDIUM

        resolved_locale = locale_code or self._default_locale
        key = date_cache_key(resolved_locale, date_type, time_type, timezone, calendar_code, pattern)
        return self._cache.get_or_create(
            key,
            lambda: DateFormatter(
                resolved_locale,
                date_type,
                time_type,
                timezone,
                calendar_code,
                pattern,
                clock=self._clock,
                default_timezone=self._default_timezone,
            ),
        )
