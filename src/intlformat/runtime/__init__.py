"""Runtime formatting: formatter capabilities, resolvers, caches, pretty dates.

Python 3.13+.
"""

from .cache import FormatterCache
from .date_conversion import DateConverter, resolve_timezone, system_clock, timezone_name
from .date_formatter import DateFormatter
from .date_resolver import DateFormatterResolver, date_cache_key
from .number_formatter import NumberFormatter
from .number_resolver import NumberFormatterResolver, number_cache_key
from .pretty import DefaultPrettyFormat, PrettyFormatStrategy, get_default_pretty_format

__all__ = [
    "DateConverter",
    "DateFormatter",
    "DateFormatterResolver",
    "DefaultPrettyFormat",
    "FormatterCache",
    "NumberFormatter",
    "NumberFormatterResolver",
    "PrettyFormatStrategy",
    "date_cache_key",
    "get_default_pretty_format",
    "number_cache_key",
    "resolve_timezone",
    "system_clock",
    "timezone_name",
]
