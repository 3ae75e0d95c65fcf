"""Number formatter resolution and caching.

Turns (locale, style, attributes) into a configured NumberFormatter:

    1. Validate the style
    2. Default the locale
    3. Merge prototype settings: every numeric attribute the caller did not
       give, plus ALL text attributes and symbols
    4. Build the cache key from the merged configuration
    5. Get or construct the formatter
    6. Apply numeric attributes in sorted-name order, then text attributes
       and symbols, on every call

Step 6 mutates a shared formatter, so concurrent callers must use
``acquire()``, which holds the cache lock from configuration to use.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING

from intlformat.constants import (
    NUMBER_ATTRIBUTES,
    NUMBER_PADDING_ATTRIBUTES,
    NUMBER_ROUNDING_ATTRIBUTES,
    NUMBER_STYLES,
    NUMBER_SYMBOLS,
    NUMBER_TEXT_ATTRIBUTES,
)
from intlformat.diagnostics import (
    ErrorTemplate,
    UnknownAttributeError,
    UnknownPaddingPositionError,
    UnknownRoundingModeError,
    UnknownStyleError,
)
from intlformat.locale_utils import locale_key
from intlformat.runtime.cache import FormatterCache
from intlformat.runtime.number_formatter import NumberFormatter

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["NumberFormatterResolver", "number_cache_key"]

logger = logging.getLogger(__name__)

type FormatOptionSet = Mapping[str, object]
"""Symbolic attribute name -> value, as passed from templates."""


def _dumps(values: Mapping[str, object]) -> str:
    return json.dumps(values, ensure_ascii=False, default=str, separators=(",", ":"))


def number_cache_key(
    locale: str,
    style: str,
    attributes: Mapping[str, object],
    text_attributes: Mapping[str, str],
    symbols: Mapping[str, str],
) -> str:
    """Canonical key for a number formatter configuration.

    Attributes are ordered by name so that insertion order never yields a
    different key; text attributes and symbols keep table order.

    Example:
        >>> number_cache_key("fr", "decimal", {"b": 1, "a": 2}, {}, {})
        'fr|decimal|{"a":2,"b":1}|{}|{}'
    """
    ordered = {str(name): value for name, value in sorted(attributes.items(), key=lambda i: str(i[0]))}
    return f"{locale}|{style}|{_dumps(ordered)}|{_dumps(text_attributes)}|{_dumps(symbols)}"


class NumberFormatterResolver:
    """Resolves and caches number formatters.

    Args:
        prototype: Formatter whose settings are merged into every resolution
            (read only, never mutated)
        default_locale: Locale used when a call passes none
        cache_size: LRU bound of the formatter cache (None = unbounded)
    """

    __slots__ = ("_cache", "_default_locale", "_prototype")

    def __init__(
        self,
        prototype: NumberFormatter | None = None,
        *,
        default_locale: str,
        cache_size: int | None = None,
    ) -> None:
        self._prototype = prototype
        self._default_locale = default_locale
        self._cache: FormatterCache[NumberFormatter] = FormatterCache(cache_size)

    @property
    def cache(self) -> FormatterCache[NumberFormatter]:
        return self._cache

    @property
    def prototype(self) -> NumberFormatter | None:
        return self._prototype

    def resolve(
        self,
        locale: str | Locale | None = None,
        style: str = "decimal",
        attributes: FormatOptionSet | None = None,
    ) -> NumberFormatter:
        """Return a formatter configured for the request.

        Not safe for concurrent use of the returned formatter; see acquire().

        Raises:
            UnknownStyleError: If style is not a number style
            UnknownAttributeError: If an attribute name does not exist
            UnknownRoundingModeError: If rounding_mode has an unknown value
            UnknownPaddingPositionError: If padding_position has an unknown value
        """
        if style not in NUMBER_STYLES:
            raise UnknownStyleError(
                ErrorTemplate.unknown_style(style, NUMBER_STYLES.names),
                value=style,
                choices=NUMBER_STYLES.names,
            )

        locale_code = locale_key(locale) if locale is not None else self._default_locale

        # None means "not given", so the prototype value wins
        attrs = {name: value for name, value in (attributes or {}).items() if value is not None}
        text_attrs: dict[str, str] = {}
        symbols: dict[str, str] = {}
        if self._prototype is not None:
            attrs.update(self._prototype_attributes(self._prototype, attrs))
            text_attrs = {
                name: self._prototype.get_text_attribute(code)
                for name, code in NUMBER_TEXT_ATTRIBUTES.items()
            }
            symbols = {
                name: self._prototype.get_symbol(code) for name, code in NUMBER_SYMBOLS.items()
            }

        key = number_cache_key(locale_code, style, attrs, text_attrs, symbols)
        formatter = self._cache.get_or_create(
            key, lambda: NumberFormatter(locale_code, NUMBER_STYLES[style])
        )

        for name, value in sorted(attrs.items(), key=lambda item: str(item[0])):
            code, value = self._validate_attribute(name, value)
            formatter.set_attribute(code, value)
        for name, text in text_attrs.items():
            formatter.set_text_attribute(NUMBER_TEXT_ATTRIBUTES[name], text)
        for name, text in symbols.items():
            formatter.set_symbol(NUMBER_SYMBOLS[name], text)

        return formatter

    @contextmanager
    def acquire(
        self,
        locale: str | Locale | None = None,
        style: str = "decimal",
        attributes: FormatOptionSet | None = None,
    ) -> Iterator[NumberFormatter]:
        """Resolve and yield a formatter while holding the cache lock.

        Example:
            >>> with resolver.acquire("de", "decimal", {"fraction_digit": 2}) as fmt:
            ...     fmt.format(1234.5)
            '1.234,50'
        """
        with self._cache.lock:
            yield self.resolve(locale, style, attributes)

    @staticmethod
    def _prototype_attributes(
        prototype: NumberFormatter, given: Mapping[str, object]
    ) -> dict[str, object]:
        merged: dict[str, object] = {}
        for name, code in NUMBER_ATTRIBUTES.items():
            if name in given:
                continue
            value = prototype.get_attribute(code)
            if name == "rounding_mode":
                merged[name] = NUMBER_ROUNDING_ATTRIBUTES.name_of(int(value))
            elif name == "padding_position":
                merged[name] = NUMBER_PADDING_ATTRIBUTES.name_of(int(value))
            else:
                merged[name] = value
        return merged

    @staticmethod
    def _validate_attribute(name: object, value: object) -> tuple[int, object]:
        if not isinstance(name, str) or name not in NUMBER_ATTRIBUTES:
            raise UnknownAttributeError(
                ErrorTemplate.unknown_attribute(name, NUMBER_ATTRIBUTES.names),
                value=name,
                choices=NUMBER_ATTRIBUTES.names,
            )
        if name == "rounding_mode":
            if value not in NUMBER_ROUNDING_ATTRIBUTES:
                raise UnknownRoundingModeError(
                    ErrorTemplate.unknown_rounding_mode(value, NUMBER_ROUNDING_ATTRIBUTES.names),
                    value=value,
                    choices=NUMBER_ROUNDING_ATTRIBUTES.names,
                )
            value = NUMBER_ROUNDING_ATTRIBUTES[value]  # type: ignore[index]
        elif name == "padding_position":
            if value not in NUMBER_PADDING_ATTRIBUTES:
                raise UnknownPaddingPositionError(
                    ErrorTemplate.unknown_padding_position(value, NUMBER_PADDING_ATTRIBUTES.names),
                    value=value,
                    choices=NUMBER_PADDING_ATTRIBUTES.names,
                )
            value = NUMBER_PADDING_ATTRIBUTES[value]  # type: ignore[index]
        return NUMBER_ATTRIBUTES[name], value
