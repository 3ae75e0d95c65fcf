"""Shared constants for intlformat.

Single source of truth for the option tables accepted by the formatting
entry points, plus defaults and small locale tables that Babel does not
ship.

Constants are grouped by domain:
- Option tables: symbolic name <-> ICU code maps, one per namespace
- Defaults: values used when neither caller nor prototype supplies one
- Locale supplements: relative day names and ordinal suffixes

Python 3.13+.
"""

from intlformat.core.options import OptionTable
from intlformat.enums import (
    Calendar,
    DateStyle,
    NumberAttribute,
    NumberStyle,
    NumberSymbol,
    NumericType,
    PaddingPosition,
    RoundingMode,
    TextAttribute,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Option tables
    "DATE_FORMATS",
    "CALENDARS",
    "NUMBER_TYPES",
    "NUMBER_STYLES",
    "NUMBER_ATTRIBUTES",
    "NUMBER_ROUNDING_ATTRIBUTES",
    "NUMBER_PADDING_ATTRIBUTES",
    "NUMBER_TEXT_ATTRIBUTES",
    "NUMBER_SYMBOLS",
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_TIMEZONE",
    "DEFAULT_CALENDAR",
    "NO_TIMEZONE_KEY",
    "DEFAULT_MAX_INTEGER_DIGITS",
    "DEFAULT_MIN_SIGNIFICANT_DIGITS",
    "DEFAULT_MAX_SIGNIFICANT_DIGITS",
    "UNSTYLED_DATETIME_PATTERN",
    "WEEKDAY_PATTERN",
    "UNKNOWN_CURRENCY",
    # Locale supplements
    "RELATIVE_DAY_NAMES",
    "ORDINAL_SUFFIXES",
]

# ============================================================================
# OPTION TABLES
# ============================================================================
#
# RELATIVE_* date styles only produce a relative rendering for the date part;
# used as a time style they behave as their plain counterpart.

DATE_FORMATS: OptionTable[DateStyle] = OptionTable(
    "date format",
    {
        "none": DateStyle.NONE,
        "short": DateStyle.SHORT,
        "medium": DateStyle.MEDIUM,
        "long": DateStyle.LONG,
        "full": DateStyle.FULL,
        "relative_short": DateStyle.RELATIVE_SHORT,
        "relative_medium": DateStyle.RELATIVE_MEDIUM,
        "relative_long": DateStyle.RELATIVE_LONG,
        "relative_full": DateStyle.RELATIVE_FULL,
    },
)

CALENDARS: OptionTable[Calendar] = OptionTable(
    "calendar",
    {
        "traditional": Calendar.TRADITIONAL,
        "gregorian": Calendar.GREGORIAN,
    },
)

NUMBER_TYPES: OptionTable[NumericType] = OptionTable(
    "type",
    {
        "default": NumericType.DEFAULT,
        "int32": NumericType.INT32,
        "int64": NumericType.INT64,
        "double": NumericType.DOUBLE,
        "currency": NumericType.CURRENCY,
    },
)

NUMBER_STYLES: OptionTable[NumberStyle] = OptionTable(
    "style",
    {
        "decimal": NumberStyle.DECIMAL,
        "currency": NumberStyle.CURRENCY,
        "percent": NumberStyle.PERCENT,
        "scientific": NumberStyle.SCIENTIFIC,
        "spellout": NumberStyle.SPELLOUT,
        "ordinal": NumberStyle.ORDINAL,
        "duration": NumberStyle.DURATION,
    },
)

NUMBER_ATTRIBUTES: OptionTable[NumberAttribute] = OptionTable(
    "attribute",
    {
        "grouping_used": NumberAttribute.GROUPING_USED,
        "decimal_always_shown": NumberAttribute.DECIMAL_ALWAYS_SHOWN,
        "max_integer_digit": NumberAttribute.MAX_INTEGER_DIGITS,
        "min_integer_digit": NumberAttribute.MIN_INTEGER_DIGITS,
        "integer_digit": NumberAttribute.INTEGER_DIGITS,
        "max_fraction_digit": NumberAttribute.MAX_FRACTION_DIGITS,
        "min_fraction_digit": NumberAttribute.MIN_FRACTION_DIGITS,
        "fraction_digit": NumberAttribute.FRACTION_DIGITS,
        "multiplier": NumberAttribute.MULTIPLIER,
        "grouping_size": NumberAttribute.GROUPING_SIZE,
        "rounding_mode": NumberAttribute.ROUNDING_MODE,
        "rounding_increment": NumberAttribute.ROUNDING_INCREMENT,
        "format_width": NumberAttribute.FORMAT_WIDTH,
        "padding_position": NumberAttribute.PADDING_POSITION,
        "secondary_grouping_size": NumberAttribute.SECONDARY_GROUPING_SIZE,
        "significant_digits_used": NumberAttribute.SIGNIFICANT_DIGITS_USED,
        "min_significant_digits_used": NumberAttribute.MIN_SIGNIFICANT_DIGITS,
        "max_significant_digits_used": NumberAttribute.MAX_SIGNIFICANT_DIGITS,
        "lenient_parse": NumberAttribute.LENIENT_PARSE,
    },
)

NUMBER_ROUNDING_ATTRIBUTES: OptionTable[RoundingMode] = OptionTable(
    "rounding mode",
    {
        "ceiling": RoundingMode.CEILING,
        "floor": RoundingMode.FLOOR,
        "down": RoundingMode.DOWN,
        "up": RoundingMode.UP,
        "halfeven": RoundingMode.HALF_EVEN,
        "halfdown": RoundingMode.HALF_DOWN,
        "halfup": RoundingMode.HALF_UP,
    },
)

NUMBER_PADDING_ATTRIBUTES: OptionTable[PaddingPosition] = OptionTable(
    "padding position",
    {
        "before_prefix": PaddingPosition.BEFORE_PREFIX,
        "after_prefix": PaddingPosition.AFTER_PREFIX,
        "before_suffix": PaddingPosition.BEFORE_SUFFIX,
        "after_suffix": PaddingPosition.AFTER_SUFFIX,
    },
)

NUMBER_TEXT_ATTRIBUTES: OptionTable[TextAttribute] = OptionTable(
    "text attribute",
    {
        "positive_prefix": TextAttribute.POSITIVE_PREFIX,
        "positive_suffix": TextAttribute.POSITIVE_SUFFIX,
        "negative_prefix": TextAttribute.NEGATIVE_PREFIX,
        "negative_suffix": TextAttribute.NEGATIVE_SUFFIX,
        "padding_character": TextAttribute.PADDING_CHARACTER,
        "currency_mode": TextAttribute.CURRENCY_CODE,
        "default_ruleset": TextAttribute.DEFAULT_RULESET,
        "public_rulesets": TextAttribute.PUBLIC_RULESETS,
    },
)

NUMBER_SYMBOLS: OptionTable[NumberSymbol] = OptionTable(
    "symbol",
    {
        "decimal_separator": NumberSymbol.DECIMAL_SEPARATOR,
        "grouping_separator": NumberSymbol.GROUPING_SEPARATOR,
        "pattern_separator": NumberSymbol.PATTERN_SEPARATOR,
        "percent": NumberSymbol.PERCENT,
        "zero_digit": NumberSymbol.ZERO_DIGIT,
        "digit": NumberSymbol.DIGIT,
        "minus_sign": NumberSymbol.MINUS_SIGN,
        "plus_sign": NumberSymbol.PLUS_SIGN,
        "currency": NumberSymbol.CURRENCY,
        "intl_currency": NumberSymbol.INTL_CURRENCY,
        "monetary_separator": NumberSymbol.MONETARY_SEPARATOR,
        "exponential": NumberSymbol.EXPONENTIAL,
        "permill": NumberSymbol.PERMILL,
        "pad_escape": NumberSymbol.PAD_ESCAPE,
        "infinity": NumberSymbol.INFINITY,
        "nan": NumberSymbol.NAN,
        "significant_digit": NumberSymbol.SIGNIFICANT_DIGIT,
        "monetary_grouping_separator": NumberSymbol.MONETARY_GROUPING_SEPARATOR,
    },
)

# ============================================================================
# DEFAULTS
# ============================================================================

# Used when no locale is configured and none can be detected from the OS.
DEFAULT_LOCALE: str = "en_US"

# Zone used by the date converter for naive values and "now".
DEFAULT_TIMEZONE: str = "UTC"

DEFAULT_CALENDAR: str = "gregorian"

# Cache-key marker for "no timezone resolved, formatter uses the default".
NO_TIMEZONE_KEY: str = "(none)"

# ICU DecimalFormat defaults.
DEFAULT_MAX_INTEGER_DIGITS: int = 2_000_000_000
DEFAULT_MIN_SIGNIFICANT_DIGITS: int = 1
DEFAULT_MAX_SIGNIFICANT_DIGITS: int = 6

# Pattern ICU falls back to when both date and time styles are NONE.
UNSTYLED_DATETIME_PATTERN: str = "yyyyMMdd hh:mm a"

WEEKDAY_PATTERN: str = "EEEE"

# ISO 4217 "no currency" code, used when a locale has no territory currency.
UNKNOWN_CURRENCY: str = "XXX"

# ============================================================================
# LOCALE SUPPLEMENTS
# ============================================================================
#
# Babel does not expose CLDR <field type="day"><relative> entries, so the
# relative date styles read them from here. Keyed by language, then by the
# signed day offset. Languages missing here render RELATIVE_* styles as
# their plain counterpart.

RELATIVE_DAY_NAMES: dict[str, dict[int, str]] = {
    "de": {-1: "gestern", 0: "heute", 1: "morgen"},
    "en": {-1: "yesterday", 0: "today", 1: "tomorrow"},
    "es": {-1: "ayer", 0: "hoy", 1: "mañana"},
    "fr": {-1: "hier", 0: "aujourd’hui", 1: "demain"},
    "it": {-1: "ieri", 0: "oggi", 1: "domani"},
    "lv": {-1: "vakar", 0: "šodien", 1: "rīt"},
    "nl": {-1: "gisteren", 0: "vandaag", 1: "morgen"},
    "pl": {-1: "wczoraj", 0: "dzisiaj", 1: "jutro"},
    "pt": {-1: "ontem", 0: "hoje", 1: "amanhã"},
    "ru": {-1: "вчера", 0: "сегодня", 1: "завтра"},
}

# Ordinal suffix per CLDR ordinal plural category ("one", "two", "few", "other").
ORDINAL_SUFFIXES: dict[str, dict[str, str]] = {
    "de": {"other": "."},
    "en": {"one": "st", "two": "nd", "few": "rd", "other": "th"},
    "es": {"other": "º"},
    "fr": {"one": "er", "other": "e"},
    "it": {"other": "º"},
    "lv": {"other": "."},
    "nl": {"other": "e"},
    "pl": {"other": "."},
    "pt": {"other": "º"},
    "ru": {"other": "-й"},
}
