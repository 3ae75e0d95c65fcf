"""Locale introspection: localized names of countries, currencies, languages,
locales and timezones, plus the timezones of a country.

Python 3.13+.
"""

from .lookup import country_timezones, lookup_name
from .names import (
    country_name,
    currency_name,
    currency_symbol,
    language_name,
    locale_name,
    timezone_name,
)

__all__ = [
    "country_name",
    "country_timezones",
    "currency_name",
    "currency_symbol",
    "language_name",
    "locale_name",
    "lookup_name",
    "timezone_name",
]
