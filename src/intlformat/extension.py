"""IntlExtension: locale-aware formatting for templates.

The facade validates option names, delegates formatter configuration to
the number and date resolvers, applies the formatter and maps capability
failures to FormatFailureError. Display-name lookups go through the
lookup adapter and never fail.

Thread Safety:
    Safe to share. Number formatting runs under the number cache lock
    (formatters are reconfigured per call); date formatters are immutable.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from datetime import date, datetime, tzinfo
from functools import partial
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from intlformat.config import IntlConfig
from intlformat.constants import DEFAULT_CALENDAR, NUMBER_STYLES, NUMBER_TYPES
from intlformat.diagnostics import (
    ErrorTemplate,
    FormatFailureError,
    NoPrettyStrategyConfiguredError,
    UnknownNumericTypeError,
)
from intlformat.enums import NameKind
from intlformat.introspection.lookup import country_timezones, lookup_name
from intlformat.runtime.date_conversion import Clock, DateConverter, TimezoneArg, resolve_timezone
from intlformat.runtime.date_resolver import DateFormatterResolver
from intlformat.runtime.number_resolver import NumberFormatterResolver

if TYPE_CHECKING:
    from intlformat.runtime.date_formatter import DateFormatter
    from intlformat.runtime.number_formatter import NumberFormatter
    from intlformat.runtime.pretty import PrettyFormatStrategy

__all__ = ["IntlExtension"]

logger = logging.getLogger(__name__)

type DateValue = datetime | date | str | int | float | None
"""Anything the date converter accepts; None means now."""

# Exceptions raised by Babel or the formatter capabilities on bad input
_CAPABILITY_ERRORS = (
    UnknownLocaleError,
    ValueError,
    LookupError,
    ArithmeticError,
)


@contextmanager
def _capability_failures(what: str, value: object, locale: object) -> Iterator[None]:
    """Re-raise capability failures as FormatFailureError, chained."""
    locale_code = None if locale is None else str(locale)
    try:
        yield
    except FormatFailureError as e:
        raise FormatFailureError(
            ErrorTemplate.formatting_failed(what, value, locale_code, str(e)),
            fallback_value=e.fallback_value or str(value),
        ) from e
    except _CAPABILITY_ERRORS as e:
        raise FormatFailureError(
            ErrorTemplate.formatting_failed(what, value, locale_code, str(e)),
            fallback_value=str(value),
        ) from e


class IntlExtension:
    """Locale-aware formatting of names, numbers, currencies and dates.

    Args:
        date_formatter_prototype: Supplies default styles, pattern, timezone,
            calendar and locale to every date resolution
        number_formatter_prototype: Supplies numeric attributes, text
            attributes and symbols to every number resolution
        pretty_format: Strategy behind the ``*_pretty`` operations
        config: Defaults and cache bound (default: ``IntlConfig()``)
        clock: Source of "now" (default: current UTC time)

    Example:
        >>> from intlformat import IntlConfig, IntlExtension
        >>> ext = IntlExtension(config=IntlConfig(default_locale="en"))
        >>> ext.format_number(1234.5)
        '1,234.5'
        >>> ext.format_currency(1000, "EUR", locale="de")
        '1.000,00\\xa0€'
        >>> ext.get_country_name("FR", "de")
        'Frankreich'
    """

    __slots__ = (
        "_config",
        "_converter",
        "_date_resolver",
        "_default_locale",
        "_number_resolver",
        "_pretty_format",
    )

    def __init__(
        self,
        date_formatter_prototype: DateFormatter | None = None,
        number_formatter_prototype: NumberFormatter | None = None,
        pretty_format: PrettyFormatStrategy | None = None,
        *,
        config: IntlConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config or IntlConfig()
        self._default_locale = self._config.resolved_locale
        self._converter = DateConverter(self._config.default_timezone, clock)
        self._pretty_format = pretty_format
        self._date_resolver = DateFormatterResolver(
            date_formatter_prototype,
            default_locale=self._default_locale,
            default_timezone=self._converter.default_timezone,
            clock=self._converter.clock,
            cache_size=self._config.cache_size,
        )
        self._number_resolver = NumberFormatterResolver(
            number_formatter_prototype,
            default_locale=self._default_locale,
            cache_size=self._config.cache_size,
        )
        logger.info(
            "IntlExtension ready (locale=%s, timezone=%s, cache_size=%s)",
            self._default_locale,
            self._config.default_timezone,
            self._config.cache_size,
        )

    @property
    def config(self) -> IntlConfig:
        return self._config

    @property
    def default_locale(self) -> str:
        """Locale used when a call passes none."""
        return self._default_locale

    @property
    def date_resolver(self) -> DateFormatterResolver:
        return self._date_resolver

    @property
    def number_resolver(self) -> NumberFormatterResolver:
        return self._number_resolver

    # ------------------------------------------------------------------
    # Display names
    # ------------------------------------------------------------------

    def _name(self, kind: NameKind, code: str | None, locale: str | None) -> str:
        return lookup_name(kind, code, locale, default_locale=self._default_locale)

    def get_country_name(self, country: str | None, locale: str | None = None) -> str:
        """Localized country name ("" for None, the code when unknown)."""
        return self._name(NameKind.COUNTRY, country, locale)

    def get_currency_name(self, currency: str | None, locale: str | None = None) -> str:
        """Localized currency name ("" for None, the code when unknown)."""
        return self._name(NameKind.CURRENCY, currency, locale)

    def get_currency_symbol(self, currency: str | None, locale: str | None = None) -> str:
        """Localized currency symbol ("" for None, the code when unknown)."""
        return self._name(NameKind.CURRENCY_SYMBOL, currency, locale)

    def get_language_name(self, language: str | None, locale: str | None = None) -> str:
        """Localized language name ("" for None, the code when unknown)."""
        return self._name(NameKind.LANGUAGE, language, locale)

    def get_locale_name(self, data: str | None, locale: str | None = None) -> str:
        """Localized locale name ("" for None, the code when unknown)."""
        return self._name(NameKind.LOCALE, data, locale)

    def get_timezone_name(self, timezone: str | None, locale: str | None = None) -> str:
        """Localized timezone name ("" for None, the identifier when unknown)."""
        return self._name(NameKind.TIMEZONE, timezone, locale)

    def get_country_timezones(self, country: str) -> list[str]:
        """IANA zones of a country ([] when unknown)."""
        return country_timezones(country)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def format_currency(
        self,
        amount: object,
        currency: str,
        attrs: Mapping[str, object] | None = None,
        locale: str | None = None,
    ) -> str:
        """Format a monetary amount.

        Raises:
            UnknownAttributeError: (and the other attribute errors) on bad attrs
            FormatFailureError: If the amount or currency is rejected
        """
        with (
            _capability_failures("currency", amount, locale),
            self._number_resolver.acquire(locale, "currency", attrs) as formatter,
        ):
            return formatter.format_currency(amount, currency)

    def format_number(
        self,
        number: object,
        attrs: Mapping[str, object] | None = None,
        style: str = "decimal",
        numeric_type: str = "default",
        locale: str | None = None,
    ) -> str:
        """Format a number in a style.

        Raises:
            UnknownNumericTypeError: If numeric_type is not a type name
            UnknownStyleError: If style is not a style name
            UnknownAttributeError: (and the other attribute errors) on bad attrs
            FormatFailureError: If the value is rejected
        """
        if numeric_type not in NUMBER_TYPES:
            raise UnknownNumericTypeError(
                ErrorTemplate.unknown_numeric_type(numeric_type, NUMBER_TYPES.names),
                value=numeric_type,
                choices=NUMBER_TYPES.names,
            )
        with (
            _capability_failures("number", number, locale),
            self._number_resolver.acquire(locale, style, attrs) as formatter,
        ):
            return formatter.format(number, NUMBER_TYPES[numeric_type])

    def format_number_style(
        self,
        style: str,
        number: object,
        attrs: Mapping[str, object] | None = None,
        numeric_type: str = "default",
        locale: str | None = None,
    ) -> str:
        """Style-first variant of format_number (``format_<style>_number``)."""
        return self.format_number(number, attrs, style, numeric_type, locale)

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def _formatter_for_date(
        self,
        moment: datetime,
        date_format: str | None,
        time_format: str | None,
        pattern: str,
        timezone: TimezoneArg,
        calendar: str,
        locale: str | None,
    ) -> DateFormatter:
        zone: tzinfo | None
        if timezone is False:
            zone = moment.tzinfo
        elif isinstance(timezone, str):
            zone = resolve_timezone(timezone)
        else:
            zone = timezone
        return self._date_resolver.resolve(locale, date_format, time_format, pattern, zone, calendar)

    def format_datetime(
        self,
        value: DateValue = None,
        date_format: str | None = None,
        time_format: str | None = None,
        pattern: str = "",
        timezone: TimezoneArg = None,
        calendar: str = DEFAULT_CALENDAR,
        locale: str | None = None,
    ) -> str:
        """Format a date and time.

        Args:
            value: datetime, date, ISO-8601 string, Unix timestamp, or None for now
            date_format: Date style name (None: prototype's, else medium)
            time_format: Time style name (None: prototype's, else medium)
            pattern: Explicit CLDR pattern, overrides the styles
            timezone: Target zone; None for the default, False for the value's own
            calendar: "gregorian" or anything else for the traditional calendar
            locale: Display locale

        Raises:
            UnknownDateFormatError: If date_format is not a style name
            UnknownTimeFormatError: If time_format is not a style name
            FormatFailureError: If the value, zone or pattern is rejected
        """
        with _capability_failures("date", value, locale):
            moment = self._converter.convert(value, timezone)
            formatter = self._formatter_for_date(
                moment, date_format, time_format, pattern, timezone, calendar, locale
            )
            return formatter.format(moment)

    def format_date(
        self,
        value: DateValue = None,
        date_format: str | None = None,
        pattern: str = "",
        timezone: TimezoneArg = None,
        calendar: str = DEFAULT_CALENDAR,
        locale: str | None = None,
    ) -> str:
        """Format the date part only."""
        return self.format_datetime(value, date_format, "none", pattern, timezone, calendar, locale)

    def format_time(
        self,
        value: DateValue = None,
        time_format: str | None = None,
        pattern: str = "",
        timezone: TimezoneArg = None,
        calendar: str = DEFAULT_CALENDAR,
        locale: str | None = None,
    ) -> str:
        """Format the time part only."""
        return self.format_datetime(value, "none", time_format, pattern, timezone, calendar, locale)

    def format_datetime_pretty(
        self,
        value: DateValue = None,
        date_format: str | None = None,
        time_format: str | None = None,
        pattern: str = "",
        timezone: TimezoneArg = None,
        calendar: str = DEFAULT_CALENDAR,
        locale: str | None = None,
    ) -> str:
        """Format relative to now ("today", "yesterday 1:37 PM", "Monday"...).

        Raises:
            NoPrettyStrategyConfiguredError: If no pretty_format was given
            UnknownDateFormatError: If date_format is not a style name
            UnknownTimeFormatError: If time_format is not a style name
            FormatFailureError: If the value or zone is rejected
        """
        with _capability_failures("date", value, locale):
            moment = self._converter.convert(value, timezone)
            formatter = self._formatter_for_date(
                moment, date_format, time_format, pattern, timezone, calendar, locale
            )
        if self._pretty_format is None:
            raise NoPrettyStrategyConfiguredError(ErrorTemplate.no_pretty_strategy())
        # the strategy's exceptions propagate unchanged
        return self._pretty_format(moment, formatter)

    def format_date_pretty(
        self,
        value: DateValue = None,
        date_format: str | None = None,
        pattern: str = "",
        timezone: TimezoneArg = None,
        calendar: str = DEFAULT_CALENDAR,
        locale: str | None = None,
    ) -> str:
        """Relative format without time ("today", "yesterday", "Monday"...)."""
        return self.format_datetime_pretty(
            value, date_format, "none", pattern, timezone, calendar, locale
        )

    # ------------------------------------------------------------------
    # Template surface
    # ------------------------------------------------------------------

    def get_filters(self) -> dict[str, Callable[..., object]]:
        """Filter name -> callable, including ``format_<style>_number`` per style."""
        filters: dict[str, Callable[..., object]] = {
            "country_name": self.get_country_name,
            "currency_name": self.get_currency_name,
            "currency_symbol": self.get_currency_symbol,
            "language_name": self.get_language_name,
            "locale_name": self.get_locale_name,
            "timezone_name": self.get_timezone_name,
            "format_currency": self.format_currency,
            "format_number": self.format_number,
        }
        for style in NUMBER_STYLES:
            filters[f"format_{style}_number"] = partial(self.format_number_style, style)
        filters.update(
            {
                "format_datetime": self.format_datetime,
                "format_date": self.format_date,
                "format_time": self.format_time,
                "format_datetime_pretty": self.format_datetime_pretty,
                "format_date_pretty": self.format_date_pretty,
            }
        )
        return filters

    def get_functions(self) -> dict[str, Callable[..., object]]:
        """Function name -> callable."""
        return {"country_timezones": self.get_country_timezones}

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        """Drop every cached formatter."""
        self._date_resolver.cache.clear()
        self._number_resolver.cache.clear()
        logger.debug("Formatter caches cleared")

    def get_cache_stats(self) -> dict[str, dict[str, int | float | None]]:
        """Statistics of the date and number formatter caches."""
        return {
            "date": self._date_resolver.cache.get_stats(),
            "number": self._number_resolver.cache.get_stats(),
        }

