"""Configuration for IntlExtension.

Provides a single frozen dataclass holding the defaults the facade falls
back to: display locale, timezone for naive values, and the formatter
cache bound.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from intlformat.constants import DEFAULT_TIMEZONE
from intlformat.locale_utils import get_system_locale, normalize_locale

__all__ = ["IntlConfig"]


@dataclass(frozen=True, slots=True)
class IntlConfig:
    """Immutable configuration for IntlExtension.

    All fields have defaults; ``IntlConfig()`` is a usable configuration.

    Attributes:
        default_locale: Locale used when a call passes no locale. None means
            the detected system locale (``get_system_locale()``).
        default_timezone: IANA zone applied to naive values and to
            formatters for which no timezone was resolved (default: "UTC").
        cache_size: Maximum formatters kept per cache. None (default) keeps
            every formatter ever built; a positive int evicts least recently
            used entries.

    Example:
        >>> from intlformat import IntlExtension
        >>> from intlformat.config import IntlConfig
        >>> config = IntlConfig(default_locale="de-DE", cache_size=64)
        >>> config.resolved_locale
        'de_DE'
        >>> ext = IntlExtension(config=config)
    """

    default_locale: str | None = None
    default_timezone: str = DEFAULT_TIMEZONE
    cache_size: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If cache_size is not positive, or default_locale or
                default_timezone is an empty string.
        """
        if self.cache_size is not None and self.cache_size <= 0:
            msg = "cache_size must be positive or None"
            raise ValueError(msg)
        if self.default_locale is not None and not self.default_locale.strip():
            msg = "default_locale must not be empty"
            raise ValueError(msg)
        if not self.default_timezone.strip():
            msg = "default_timezone must not be empty"
            raise ValueError(msg)

    @property
    def resolved_locale(self) -> str:
        """Default locale in POSIX form, detecting the system locale if unset."""
        if self.default_locale is not None:
            return normalize_locale(self.default_locale)
        return _detected_locale()


@functools.cache
def _detected_locale() -> str:
    return get_system_locale()
