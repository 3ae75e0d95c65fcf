"""intlformat - locale-aware formatting of dates, numbers, currencies and names.

Turns raw values (datetimes, numbers, currency amounts, country/language/
locale/timezone/currency codes) into localized strings for a target locale.
Formatter configuration is resolved from call options and optional
prototypes, materialized over Babel/CLDR data, and cached per facade.

Public API:
    IntlExtension - Formatting facade and template filter/function tables
    IntlConfig - Default locale, default timezone and cache bound
    DateFormatter - Immutable date/time formatter capability
    NumberFormatter - Mutable ICU-like number formatter capability
    get_default_pretty_format - Reference relative-date strategy

Exceptions:
    IntlError - Base exception class
    IntlConfigurationError - Caller configuration mistakes
    UnknownOptionError - Unknown option name (style, format, attribute...)
    NoPrettyStrategyConfiguredError - Pretty formatting without a strategy
    FormatFailureError - Formatter rejected the value or configuration

Submodules:
    intlformat.introspection - Localized display names and country timezones
    intlformat.runtime - Formatter capabilities, resolvers and caches
    intlformat.diagnostics - Error types, codes and message templates
    intlformat.integrations.jinja - Jinja2 filter/global registration
"""

# Essential Public API
from .config import IntlConfig
from .diagnostics import (
    FormatFailureError,
    IntlConfigurationError,
    IntlError,
    NoPrettyStrategyConfiguredError,
    UnknownOptionError,
)
from .enums import Calendar, DateStyle, NumberAttribute, NumberStyle, NumericType
from .extension import IntlExtension
from .runtime import DateFormatter, NumberFormatter, get_default_pretty_format

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intlformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Calendar",
    "DateFormatter",
    "DateStyle",
    "FormatFailureError",
    "IntlConfig",
    "IntlConfigurationError",
    "IntlError",
    "IntlExtension",
    "NoPrettyStrategyConfiguredError",
    "NumberAttribute",
    "NumberFormatter",
    "NumberStyle",
    "NumericType",
    "UnknownOptionError",
    "__version__",
    "get_default_pretty_format",
]
