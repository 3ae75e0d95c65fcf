"""Locale lookup adapter.

Template-facing wrapper over the raw name lookups: a missing code renders
as the empty string and an unknown code renders as itself, so a template
never fails on display names.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from intlformat.diagnostics import ResourceNotFoundError
from intlformat.enums import NameKind
from intlformat.introspection import names
from intlformat.locale_utils import get_system_locale, locale_key

__all__ = ["country_timezones", "lookup_name"]

logger = logging.getLogger(__name__)

_LOOKUPS: dict[NameKind, Callable[[str, str], str]] = {
    NameKind.COUNTRY: names.country_name,
    NameKind.CURRENCY: names.currency_name,
    NameKind.CURRENCY_SYMBOL: names.currency_symbol,
    NameKind.LANGUAGE: names.language_name,
    NameKind.LOCALE: names.locale_name,
    NameKind.TIMEZONE: names.timezone_name,
}


def lookup_name(
    kind: NameKind | str,
    code: str | None,
    locale: str | None = None,
    *,
    default_locale: str | None = None,
) -> str:
    """Localized display name, falling back to the code.

    Args:
        kind: Which table to search
        code: Code to look up; None renders as ""
        locale: Display locale; None uses ``default_locale``
        default_locale: Fallback display locale; None detects the system locale

    Returns:
        Display name, "" for a None code, or the code itself when not found

    Raises:
        ValueError: If kind is not a NameKind

    Example:
        >>> lookup_name("country", "FR", "fr")
        'France'
        >>> lookup_name("country", "XX", "fr")
        'XX'
        >>> lookup_name("country", None)
        ''
    """
    if code is None:
        return ""
    lookup = _LOOKUPS[NameKind(kind)]
    display = locale_key(locale) if locale else (default_locale or get_system_locale())
    try:
        return lookup(code, display)
    except ResourceNotFoundError as e:
        logger.debug("Falling back to code for %s lookup: %s", kind, e)
        return code


def country_timezones(country: str) -> list[str]:
    """IANA zones of a country; [] when the country is unknown.

    Example:
        >>> country_timezones("FR")
        ['Europe/Paris']
        >>> country_timezones("XX")
        []
    """
    try:
        return names.country_timezones(country)
    except ResourceNotFoundError as e:
        logger.debug("No timezones for country: %s", e)
        return []
