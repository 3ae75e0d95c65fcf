"""Locale identifiers: normalization, Babel lookup, system detection.

Every component keys its caches by the POSIX form of a locale, so that
"fr-FR", "fr_FR" and ``Locale("fr", "FR")`` share one formatter.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from intlformat.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "locale_key",
    "normalize_locale",
]

# Environment categories that drive number and date rendering, most specific first
_LOCALE_ENV_VARS = ("LC_ALL", "LC_NUMERIC", "LC_TIME", "LANG")
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """BCP-47 or POSIX code -> POSIX code ("pt-BR" -> "pt_BR").

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace("-", "_")


def _strip_env_suffixes(value: str) -> str:
    # "de_DE.UTF-8@euro" -> "de_DE"
    return value.split(".", 1)[0].split("@", 1)[0]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parsed Babel Locale for a code, memoized.

    Raises:
        babel.core.UnknownLocaleError: If there is no CLDR data for the code
        ValueError: If the code is malformed

    Example:
        >>> get_babel_locale("en-US").territory
        'US'
    """
    # Babel loads CLDR data lazily; importing here keeps module import cheap
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def locale_key(locale: str | Locale) -> str:
    """Canonical cache-key form of a locale ("fr-FR" and Locale("fr", "FR") -> "fr_FR")."""
    if isinstance(locale, str):
        return normalize_locale(locale)
    return str(locale)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale of the running process, for use when nothing else is configured.

    Tries ``locale.getlocale()`` first, then LC_ALL, LC_NUMERIC, LC_TIME
    and LANG. "C"/"POSIX" and encoding or modifier suffixes are discarded.

    Args:
        raise_on_failure: Raise RuntimeError instead of returning "en_US"
            when nothing usable is found

    Returns:
        POSIX locale code

    Raises:
        RuntimeError: If raise_on_failure is True and detection failed
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        detected, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        detected = None
    if detected and detected not in _PSEUDO_LOCALES:
        return normalize_locale(_strip_env_suffixes(detected))

    for var in _LOCALE_ENV_VARS:
        value = _strip_env_suffixes(os.environ.get(var, ""))
        if value not in _PSEUDO_LOCALES:
            return normalize_locale(value)

    if raise_on_failure:
        msg = "Could not determine system locale. Set LC_ALL, LC_NUMERIC, LC_TIME or LANG."
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
