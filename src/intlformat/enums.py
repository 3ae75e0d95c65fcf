"""Enumerations for intlformat type-safe constants.

Numeric enumerations carry the ICU constant values so that codes read back
from a formatter (``get_attribute``, ``get_date_type``...) are stable and can
be reverse-mapped to their symbolic names. StrEnum is used where the value is
only ever a name.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class DateStyle(IntEnum):
    """Date/time format style (ICU ``UDateFormatStyle``)."""

    NONE = -1
    FULL = 0
    LONG = 1
    MEDIUM = 2
    SHORT = 3
    RELATIVE_FULL = 128
    RELATIVE_LONG = 129
    RELATIVE_MEDIUM = 130
    RELATIVE_SHORT = 131

    @property
    def is_relative(self) -> bool:
        """True for the RELATIVE_* variants."""
        return self >= DateStyle.RELATIVE_FULL

    @property
    def absolute(self) -> "DateStyle":
        """Non-relative counterpart (identity for plain styles)."""
        if self.is_relative:
            return DateStyle(self - DateStyle.RELATIVE_FULL)
        return self


class Calendar(IntEnum):
    """Calendar kind. TRADITIONAL is falsy, as in ICU."""

    TRADITIONAL = 0
    GREGORIAN = 1


class NumberStyle(IntEnum):
    """Number format style (ICU ``UNumberFormatStyle``)."""

    DECIMAL = 1
    CURRENCY = 2
    PERCENT = 3
    SCIENTIFIC = 4
    SPELLOUT = 5
    ORDINAL = 6
    DURATION = 7


class NumericType(IntEnum):
    """How the value is coerced before formatting."""

    DEFAULT = 0
    INT32 = 1
    INT64 = 2
    DOUBLE = 3
    CURRENCY = 4


class NumberAttribute(IntEnum):
    """Numeric formatter attributes (ICU ``UNumberFormatAttribute``)."""

    GROUPING_USED = 1
    DECIMAL_ALWAYS_SHOWN = 2
    MAX_INTEGER_DIGITS = 3
    MIN_INTEGER_DIGITS = 4
    INTEGER_DIGITS = 5
    MAX_FRACTION_DIGITS = 6
    MIN_FRACTION_DIGITS = 7
    FRACTION_DIGITS = 8
    MULTIPLIER = 9
    GROUPING_SIZE = 10
    ROUNDING_MODE = 11
    ROUNDING_INCREMENT = 12
    FORMAT_WIDTH = 13
    PADDING_POSITION = 14
    SECONDARY_GROUPING_SIZE = 15
    SIGNIFICANT_DIGITS_USED = 16
    MIN_SIGNIFICANT_DIGITS = 17
    MAX_SIGNIFICANT_DIGITS = 18
    LENIENT_PARSE = 19


class RoundingMode(IntEnum):
    """Rounding modes (ICU ``UNumberFormatRoundingMode``)."""

    CEILING = 0
    FLOOR = 1
    DOWN = 2
    UP = 3
    HALF_EVEN = 4
    HALF_DOWN = 5
    HALF_UP = 6


class PaddingPosition(IntEnum):
    """Where padding is inserted when ``format_width`` is set."""

    BEFORE_PREFIX = 0
    AFTER_PREFIX = 1
    BEFORE_SUFFIX = 2
    AFTER_SUFFIX = 3


class TextAttribute(IntEnum):
    """Textual formatter attributes (ICU ``UNumberFormatTextAttribute``)."""

    POSITIVE_PREFIX = 0
    POSITIVE_SUFFIX = 1
    NEGATIVE_PREFIX = 2
    NEGATIVE_SUFFIX = 3
    PADDING_CHARACTER = 4
    CURRENCY_CODE = 5
    DEFAULT_RULESET = 6
    PUBLIC_RULESETS = 7


class NumberSymbol(IntEnum):
    """Number format symbols (ICU ``UNumberFormatSymbol``)."""

    DECIMAL_SEPARATOR = 0
    GROUPING_SEPARATOR = 1
    PATTERN_SEPARATOR = 2
    PERCENT = 3
    ZERO_DIGIT = 4
    DIGIT = 5
    MINUS_SIGN = 6
    PLUS_SIGN = 7
    CURRENCY = 8
    INTL_CURRENCY = 9
    MONETARY_SEPARATOR = 10
    EXPONENTIAL = 11
    PERMILL = 12
    PAD_ESCAPE = 13
    INFINITY = 14
    NAN = 15
    SIGNIFICANT_DIGIT = 16
    MONETARY_GROUPING_SEPARATOR = 17


class NameKind(StrEnum):
    """Kind of display-name lookup.

    StrEnum provides automatic string conversion: str(NameKind.COUNTRY) == "country"
    """

    COUNTRY = "country"
    CURRENCY = "currency"
    CURRENCY_SYMBOL = "currency_symbol"
    LANGUAGE = "language"
    LOCALE = "locale"
    TIMEZONE = "timezone"


__all__ = [
    "Calendar",
    "DateStyle",
    "NameKind",
    "NumberAttribute",
    "NumberStyle",
    "NumberSymbol",
    "NumericType",
    "PaddingPosition",
    "RoundingMode",
    "TextAttribute",
]
