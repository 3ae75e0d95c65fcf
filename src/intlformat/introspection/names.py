"""Raw display-name lookups over Babel CLDR data.

Every function returns the localized name or raises ResourceNotFoundError:
unknown codes and unknown display locales are both "not found". The
lookup adapter (``intlformat.introspection.lookup``) turns that into a
fallback; these functions never fall back on their own.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError
from babel.core import get_global
from babel.dates import get_timezone, get_timezone_name

from intlformat.diagnostics import ErrorTemplate, ResourceNotFoundError
from intlformat.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from collections.abc import Mapping

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "country_name",
    "currency_name",
    "currency_symbol",
    "language_name",
    "locale_name",
    "timezone_name",
    "country_timezones",
]


def _display_locale(locale: str) -> Locale:
    try:
        return get_babel_locale(locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ResourceNotFoundError(ErrorTemplate.unknown_locale(locale)) from e


def _lookup(kind: str, table: Mapping[str, str], code: str, locale: str) -> str:
    name = table.get(code) if isinstance(code, str) else None
    if not name:
        raise ResourceNotFoundError(ErrorTemplate.resource_not_found(kind, code, locale))
    return str(name)


def country_name(code: str, locale: str) -> str:
    """Localized name of an ISO 3166-1 alpha-2 country code (exact case).

    Example:
        >>> country_name("FR", "en")
        'France'
    """
    display = _display_locale(locale)
    # Territory table also holds regions ("001", "EU"); countries are alpha-2
    if not (isinstance(code, str) and len(code) == 2 and code.isalpha() and code.isupper()):
        raise ResourceNotFoundError(ErrorTemplate.resource_not_found("country", code, locale))
    return _lookup("country", display.territories, code, locale)


def currency_name(code: str, locale: str) -> str:
    """Localized name of an ISO 4217 currency code.

    Example:
        >>> currency_name("EUR", "fr")
        'euro'
    """
    return _lookup("currency", _display_locale(locale).currencies, code, locale)


def currency_symbol(code: str, locale: str) -> str:
    """Localized symbol of a currency; the code itself when the locale has none.

    Example:
        >>> currency_symbol("USD", "en_US")
        '$'
    """
    display = _display_locale(locale)
    _lookup("currency", display.currencies, code, locale)
    return str(display.currency_symbols.get(code, code))


def language_name(code: str, locale: str) -> str:
    """Localized name of a language code.

    Example:
        >>> language_name("de", "en")
        'German'
    """
    return _lookup("language", _display_locale(locale).languages, code, locale)


def locale_name(code: str, locale: str) -> str:
    """Localized display name of a locale identifier.

    Example:
        >>> locale_name("fr_CA", "en")
        'French (Canada)'
    """
    display = _display_locale(locale)
    try:
        described = Locale.parse(normalize_locale(code))
    except (UnknownLocaleError, ValueError, TypeError, AttributeError) as e:
        raise ResourceNotFoundError(ErrorTemplate.resource_not_found("locale", code, locale)) from e
    name = described.get_display_name(display)
    if not name:
        raise ResourceNotFoundError(ErrorTemplate.resource_not_found("locale", code, locale))
    return str(name)


def timezone_name(zone: str, locale: str) -> str:
    """Localized generic name of an IANA timezone.

    Example:
        >>> timezone_name("America/Los_Angeles", "en")
        'Pacific Time'
    """
    display = _display_locale(locale)
    if not isinstance(zone, str) or not zone:
        raise ResourceNotFoundError(ErrorTemplate.resource_not_found("timezone", zone, locale))
    try:
        tz = get_timezone(zone)
    except (LookupError, ValueError) as e:
        raise ResourceNotFoundError(ErrorTemplate.resource_not_found("timezone", zone, locale)) from e
    return str(get_timezone_name(tz, locale=display))


def country_timezones(country: str) -> list[str]:
    """IANA zones of a country, sorted.

    Raises:
        ResourceNotFoundError: If the country has no zones in the tz data

    Example:
        >>> country_timezones("FR")
        ['Europe/Paris']
    """
    zones = sorted(
        zone for zone, territory in get_global("zone_territories").items() if territory == country
    )
    if not zones:
        raise ResourceNotFoundError(ErrorTemplate.resource_not_found("country", country, None))
    return zones
