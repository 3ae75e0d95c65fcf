"""Mutable, ICU-style number formatter backed by Babel CLDR data.

The resolvers configure formatters through numeric attributes, text
attributes and symbols, the way ICU's ``NumberFormatter`` is configured:
every setting has a getter that reports the effective value (explicit or
derived from the locale's CLDR pattern), so a prototype formatter can be
read back and merged into a new configuration.

Rendering:
    1. Coerce the value according to the numeric type
    2. Apply multiplier and rounding increment
    3. Render the digits with a Babel ``NumberPattern`` built from the
       attributes, inside a decimal context carrying the rounding mode
    4. Swap in overridden separators and the zero digit
    5. Wrap in prefix/suffix and pad to the format width

Babel supplies the CLDR data (patterns, symbols, currency symbols and
precisions, ordinal plural rules) and the digit rendering; no ICU binding
is required.

Thread Safety:
    NOT thread-safe. Instances are mutated on every resolution; callers
    share them only under ``NumberFormatterResolver.acquire()``.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import TYPE_CHECKING

from babel.numbers import (
    NumberPattern,
    get_currency_precision,
    get_currency_symbol,
    get_territory_currencies,
    parse_pattern,
)

from intlformat.constants import (
    DEFAULT_MAX_INTEGER_DIGITS,
    DEFAULT_MAX_SIGNIFICANT_DIGITS,
    DEFAULT_MIN_SIGNIFICANT_DIGITS,
    ORDINAL_SUFFIXES,
    UNKNOWN_CURRENCY,
)
from intlformat.diagnostics import ErrorTemplate, FormatFailureError
from intlformat.enums import (
    NumberAttribute,
    NumberStyle,
    NumberSymbol,
    NumericType,
    PaddingPosition,
    RoundingMode,
    TextAttribute,
)
from intlformat.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["NumberFormatter", "to_decimal"]

logger = logging.getLogger(__name__)

# Decimal rounding constants indexed by RoundingMode
_DECIMAL_ROUNDING: dict[RoundingMode, str] = {
    RoundingMode.CEILING: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.UP: ROUND_UP,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_UP: ROUND_HALF_UP,
}

# CLDR number_symbols keys for locale-provided symbols
_CLDR_SYMBOL_KEYS: dict[NumberSymbol, str] = {
    NumberSymbol.DECIMAL_SEPARATOR: "decimal",
    NumberSymbol.GROUPING_SEPARATOR: "group",
    NumberSymbol.PATTERN_SEPARATOR: "list",
    NumberSymbol.PERCENT: "percentSign",
    NumberSymbol.MINUS_SIGN: "minusSign",
    NumberSymbol.PLUS_SIGN: "plusSign",
    NumberSymbol.EXPONENTIAL: "exponential",
    NumberSymbol.PERMILL: "perMille",
    NumberSymbol.INFINITY: "infinity",
    NumberSymbol.NAN: "nan",
}

# Pattern characters, not locale data
_FIXED_SYMBOLS: dict[NumberSymbol, str] = {
    NumberSymbol.ZERO_DIGIT: "0",
    NumberSymbol.DIGIT: "#",
    NumberSymbol.PAD_ESCAPE: "*",
    NumberSymbol.SIGNIFICANT_DIGIT: "@",
}

# Minimum attribute -> its maximum counterpart, and the reverse
_UPPER_BOUND: dict[NumberAttribute, NumberAttribute] = {
    NumberAttribute.MIN_INTEGER_DIGITS: NumberAttribute.MAX_INTEGER_DIGITS,
    NumberAttribute.MIN_FRACTION_DIGITS: NumberAttribute.MAX_FRACTION_DIGITS,
    NumberAttribute.MIN_SIGNIFICANT_DIGITS: NumberAttribute.MAX_SIGNIFICANT_DIGITS,
}
_LOWER_BOUND: dict[NumberAttribute, NumberAttribute] = {
    upper: lower for lower, upper in _UPPER_BOUND.items()
}

_INT32_LIMIT = 2**31
_INT64_LIMIT = 2**63

# Babel reports "no grouping" as a group size of 1000
_NO_GROUPING = 1000

# Symbols Babel falls back to when the locale data lacks them
_BABEL_SYMBOL_DEFAULTS = {
    "decimal": ".",
    "group": ",",
    "exponential": "E",
    "minusSign": "-",
    "plusSign": "+",
}

# Special characters of a CLDR affix, or a quoted literal
_AFFIX_TOKEN = re.compile(r"'[^']*'|¤{1,3}|[%‰+\-]")


def to_decimal(value: object, numeric_type: NumericType = NumericType.DEFAULT) -> Decimal:
    """Coerce a template value to Decimal according to the numeric type.

    Args:
        value: int, float, Decimal or numeric string (bool counts as int)
        numeric_type: DEFAULT keeps the value exact, INT32/INT64 truncate
            toward zero within range, DOUBLE goes through binary float

    Returns:
        Decimal value (may be NaN or infinite for DEFAULT/DOUBLE)

    Raises:
        FormatFailureError: If value is not numeric or out of integer range
    """
    if isinstance(value, bool):
        value = int(value)

    match value:
        case Decimal():
            number = value
        case int():
            number = Decimal(value)
        case float():
            number = Decimal(repr(value))
        case str():
            try:
                number = Decimal(value.strip())
            except InvalidOperation as e:
                raise FormatFailureError(
                    ErrorTemplate.invalid_number(value), fallback_value=value
                ) from e
        case _:
            raise FormatFailureError(ErrorTemplate.invalid_number(value), fallback_value=str(value))

    if numeric_type in (NumericType.INT32, NumericType.INT64):
        if not number.is_finite():
            raise FormatFailureError(ErrorTemplate.invalid_number(value), fallback_value=str(value))
        number = number.to_integral_value(rounding=ROUND_DOWN)
        limit = _INT32_LIMIT if numeric_type is NumericType.INT32 else _INT64_LIMIT
        if not -limit <= number < limit:
            msg = f"Value {value!r} does not fit in {numeric_type.name.lower()}"
            raise FormatFailureError(msg, fallback_value=str(value))
    elif numeric_type is NumericType.DOUBLE:
        number = Decimal(repr(float(number)))

    return number


def _style_pattern(locale: Locale, style: NumberStyle) -> NumberPattern:
    match style:
        case NumberStyle.CURRENCY:
            source = locale.currency_formats["standard"]
        case NumberStyle.PERCENT:
            source = locale.percent_formats[None]
        case NumberStyle.SCIENTIFIC:
            source = locale.scientific_formats[None]
        case _:
            source = locale.decimal_formats[None]
    return parse_pattern(source)


def _locale_symbols(locale: Locale) -> dict[str, str]:
    symbols = locale.number_symbols
    # Babel 2.14+ keys symbols by numbering system
    if "latn" in symbols and not isinstance(symbols["latn"], str):
        return dict(symbols["latn"])
    return dict(symbols)


def _default_currency(locale: Locale) -> str:
    if locale.territory:
        codes = get_territory_currencies(locale.territory, tender=True)
        if codes:
            return str(codes[0])
    return UNKNOWN_CURRENCY


def _magnitude_rounding(mode: RoundingMode, negative: bool) -> str:
    """Rounding for the absolute value; directional modes flip for negatives."""
    if mode is RoundingMode.CEILING:
        return ROUND_DOWN if negative else ROUND_UP
    if mode is RoundingMode.FLOOR:
        return ROUND_UP if negative else ROUND_DOWN
    return _DECIMAL_ROUNDING[mode]


class NumberFormatter:
    """Locale number formatter with ICU-style attribute access.

    Example:
        >>> fmt = NumberFormatter("fr", NumberStyle.DECIMAL)
        >>> fmt.set_attribute(NumberAttribute.FRACTION_DIGITS, 1)
        >>> fmt.set_text_attribute(TextAttribute.POSITIVE_PREFIX, "++")
        >>> fmt.format("12.3456")
        '++12,3'
        >>> fmt.get_attribute(NumberAttribute.MAX_FRACTION_DIGITS)
        1
    """

    __slots__ = (
        "_attributes",
        "_currency",
        "_locale",
        "_locale_symbols",
        "_pattern",
        "_style",
        "_symbols",
        "_text_attributes",
    )

    def __init__(self, locale: str | Locale, style: NumberStyle | int = NumberStyle.DECIMAL) -> None:
        """Create a formatter for a locale and style.

        Args:
            locale: Locale code (BCP-47 or POSIX) or Babel Locale
            style: Number style (NumberStyle or its ICU code)

        Raises:
            babel.core.UnknownLocaleError: If locale is not recognized
            ValueError: If style is not a known code
        """
        self._locale: Locale = get_babel_locale(locale) if isinstance(locale, str) else locale
        self._style = NumberStyle(style)
        self._pattern = _style_pattern(self._locale, self._style)
        self._locale_symbols = _locale_symbols(self._locale)
        self._currency = _default_currency(self._locale)
        self._attributes: dict[NumberAttribute, int | Decimal] = {}
        self._text_attributes: dict[TextAttribute, str] = {}
        self._symbols: dict[NumberSymbol, str] = {}
        logger.debug(
            "Created number formatter locale=%s style=%s pattern=%r",
            self._locale,
            self._style.name,
            self._pattern.pattern,
        )

    def __repr__(self) -> str:
        return f"NumberFormatter(locale={str(self._locale)!r}, style={self._style.name})"

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_locale(self) -> str:
        """Locale identifier (POSIX form)."""
        return str(self._locale)

    @property
    def babel_locale(self) -> Locale:
        """Underlying Babel Locale."""
        return self._locale

    def get_style(self) -> NumberStyle:
        """Number style this formatter was created with."""
        return self._style

    def get_pattern(self) -> str:
        """CLDR pattern the style is based on."""
        return str(self._pattern.pattern)

    # ------------------------------------------------------------------
    # Numeric attributes
    # ------------------------------------------------------------------

    def get_attribute(self, attribute: NumberAttribute | int) -> int | Decimal:
        """Effective value of a numeric attribute.

        Returns the explicitly set value, or the value implied by the CLDR
        pattern and ICU defaults. ``integer_digit`` and ``fraction_digit``
        report the minimum digit counts.
        """
        attribute = NumberAttribute(attribute)
        if attribute is NumberAttribute.INTEGER_DIGITS:
            attribute = NumberAttribute.MIN_INTEGER_DIGITS
        elif attribute is NumberAttribute.FRACTION_DIGITS:
            attribute = NumberAttribute.MIN_FRACTION_DIGITS
        if attribute in self._attributes:
            return self._attributes[attribute]
        return self._default_attribute(attribute)

    def _default_attribute(self, attribute: NumberAttribute) -> int | Decimal:
        pattern = self._pattern
        significant = "@" in pattern.pattern
        primary, secondary = pattern.grouping
        match attribute:
            case NumberAttribute.GROUPING_USED:
                return int(primary < _NO_GROUPING)
            case NumberAttribute.GROUPING_SIZE:
                return primary if primary < _NO_GROUPING else 0
            case NumberAttribute.SECONDARY_GROUPING_SIZE:
                return secondary if secondary not in (primary, _NO_GROUPING) else 0
            case NumberAttribute.MIN_INTEGER_DIGITS:
                return 1 if significant else pattern.int_prec[0]
            case NumberAttribute.MAX_INTEGER_DIGITS:
                return DEFAULT_MAX_INTEGER_DIGITS
            case NumberAttribute.MIN_FRACTION_DIGITS:
                return pattern.frac_prec[0]
            case NumberAttribute.MAX_FRACTION_DIGITS:
                return pattern.frac_prec[1]
            case NumberAttribute.MULTIPLIER:
                return 10**pattern.scale
            case NumberAttribute.ROUNDING_MODE:
                return int(RoundingMode.HALF_EVEN)
            case NumberAttribute.ROUNDING_INCREMENT:
                return Decimal(0)
            case NumberAttribute.PADDING_POSITION:
                return int(PaddingPosition.BEFORE_PREFIX)
            case NumberAttribute.SIGNIFICANT_DIGITS_USED:
                return int(significant)
            case NumberAttribute.MIN_SIGNIFICANT_DIGITS:
                return pattern.int_prec[0] if significant else DEFAULT_MIN_SIGNIFICANT_DIGITS
            case NumberAttribute.MAX_SIGNIFICANT_DIGITS:
                return pattern.int_prec[1] if significant else DEFAULT_MAX_SIGNIFICANT_DIGITS
            case _:
                # DECIMAL_ALWAYS_SHOWN, FORMAT_WIDTH, LENIENT_PARSE
                return 0

    def set_attribute(self, attribute: NumberAttribute | int, value: object) -> None:
        """Set a numeric attribute.

        Min/max pairs stay consistent the way ICU keeps them: raising a
        minimum above the maximum raises the maximum, lowering a maximum
        below the minimum lowers the minimum. ``integer_digit`` and
        ``fraction_digit`` set both bounds.

        Raises:
            ValueError: If attribute is not a known code or value is not numeric
        """
        attribute = NumberAttribute(attribute)
        if attribute is NumberAttribute.ROUNDING_INCREMENT:
            self._attributes[attribute] = abs(to_decimal(value))
            return

        try:
            number = int(value)  # type: ignore[call-overload]
        except TypeError as e:
            msg = f"Attribute {attribute.name.lower()} expects a number, got {value!r}"
            raise ValueError(msg) from e
        match attribute:
            case NumberAttribute.INTEGER_DIGITS:
                self._set_bounds(
                    NumberAttribute.MIN_INTEGER_DIGITS, NumberAttribute.MAX_INTEGER_DIGITS, number, number
                )
            case NumberAttribute.FRACTION_DIGITS:
                self._set_bounds(
                    NumberAttribute.MIN_FRACTION_DIGITS, NumberAttribute.MAX_FRACTION_DIGITS, number, number
                )
            case _ if attribute in _UPPER_BOUND:
                upper = _UPPER_BOUND[attribute]
                maximum = max(number, self._int_attribute(upper))
                self._set_bounds(attribute, upper, number, maximum)
            case _ if attribute in _LOWER_BOUND:
                lower = _LOWER_BOUND[attribute]
                minimum = min(number, self._int_attribute(lower))
                self._set_bounds(lower, attribute, minimum, number)
            case _:
                self._attributes[attribute] = number

    def _set_bounds(
        self, lower: NumberAttribute, upper: NumberAttribute, minimum: int, maximum: int
    ) -> None:
        self._attributes[lower] = max(0, minimum)
        self._attributes[upper] = max(0, maximum)

    def _int_attribute(self, attribute: NumberAttribute) -> int:
        return int(self.get_attribute(attribute))

    # ------------------------------------------------------------------
    # Text attributes and symbols
    # ------------------------------------------------------------------

    def get_text_attribute(self, attribute: TextAttribute | int) -> str:
        """Effective value of a text attribute (affixes expanded)."""
        attribute = TextAttribute(attribute)
        if attribute in self._text_attributes:
            return self._text_attributes[attribute]
        match attribute:
            case TextAttribute.POSITIVE_PREFIX:
                return self._expand_affix(self._pattern.prefix[0], self._currency)
            case TextAttribute.POSITIVE_SUFFIX:
                return self._expand_affix(self._pattern.suffix[0], self._currency)
            case TextAttribute.NEGATIVE_PREFIX:
                return self._expand_affix(self._pattern.prefix[1], self._currency)
            case TextAttribute.NEGATIVE_SUFFIX:
                return self._expand_affix(self._pattern.suffix[1], self._currency)
            case TextAttribute.PADDING_CHARACTER:
                return " "
            case TextAttribute.CURRENCY_CODE:
                return self._currency
            case _:
                # Rule-based formatting (rulesets) is not provided
                return ""

    def set_text_attribute(self, attribute: TextAttribute | int, value: object) -> None:
        """Set a text attribute. Setting CURRENCY_CODE changes the formatter currency."""
        attribute = TextAttribute(attribute)
        text = str(value)
        if attribute is TextAttribute.CURRENCY_CODE:
            self._currency = text.upper() if text else UNKNOWN_CURRENCY
            return
        self._text_attributes[attribute] = text

    def get_symbol(self, symbol: NumberSymbol | int) -> str:
        """Effective value of a number symbol."""
        symbol = NumberSymbol(symbol)
        if symbol in self._symbols:
            return self._symbols[symbol]
        if symbol in _FIXED_SYMBOLS:
            return _FIXED_SYMBOLS[symbol]
        match symbol:
            case NumberSymbol.CURRENCY:
                return str(get_currency_symbol(self._currency, locale=self._locale))
            case NumberSymbol.INTL_CURRENCY:
                return self._currency
            case NumberSymbol.MONETARY_SEPARATOR:
                return self._locale_symbols.get(
                    "currencyDecimal", self.get_symbol(NumberSymbol.DECIMAL_SEPARATOR)
                )
            case NumberSymbol.MONETARY_GROUPING_SEPARATOR:
                return self._locale_symbols.get(
                    "currencyGroup", self.get_symbol(NumberSymbol.GROUPING_SEPARATOR)
                )
            case _:
                return self._locale_symbols.get(_CLDR_SYMBOL_KEYS[symbol], "")

    def set_symbol(self, symbol: NumberSymbol | int, value: object) -> None:
        """Override a number symbol."""
        self._symbols[NumberSymbol(symbol)] = str(value)

    def _expand_affix(self, affix: str, currency: str) -> str:
        def replace(match: re.Match[str]) -> str:
            token = match.group(0)
            if token.startswith("'"):
                return token[1:-1] or "'"
            if token.startswith("¤"):
                if len(token) == 1:
                    if currency == self._currency:
                        return self.get_symbol(NumberSymbol.CURRENCY)
                    return str(get_currency_symbol(currency, locale=self._locale))
                return currency
            return self.get_symbol(
                {
                    "%": NumberSymbol.PERCENT,
                    "‰": NumberSymbol.PERMILL,
                    "+": NumberSymbol.PLUS_SIGN,
                    "-": NumberSymbol.MINUS_SIGN,
                }[token]
            )

        return _AFFIX_TOKEN.sub(replace, affix)

    def _affixes(self, negative: bool, currency: str) -> tuple[str, str]:
        if negative:
            prefix_attr, suffix_attr, index = (
                TextAttribute.NEGATIVE_PREFIX,
                TextAttribute.NEGATIVE_SUFFIX,
                1,
            )
        else:
            prefix_attr, suffix_attr, index = (
                TextAttribute.POSITIVE_PREFIX,
                TextAttribute.POSITIVE_SUFFIX,
                0,
            )
        prefix = self._text_attributes.get(prefix_attr)
        if prefix is None:
            prefix = self._expand_affix(self._pattern.prefix[index], currency)
        suffix = self._text_attributes.get(suffix_attr)
        if suffix is None:
            suffix = self._expand_affix(self._pattern.suffix[index], currency)
        return prefix, suffix

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, value: object, numeric_type: NumericType | int = NumericType.DEFAULT) -> str:
        """Format a number.

        Args:
            value: int, float, Decimal or numeric string
            numeric_type: Coercion applied before formatting

        Returns:
            Localized number text

        Raises:
            FormatFailureError: If the value is not numeric, the numeric type
                is CURRENCY (use format_currency), or the style has no
                rendering for this locale
        """
        numeric_type = NumericType(numeric_type)
        if numeric_type is NumericType.CURRENCY:
            raise FormatFailureError(
                ErrorTemplate.currency_type_unsupported(), fallback_value=str(value)
            )
        number = to_decimal(value, numeric_type)

        match self._style:
            case NumberStyle.SPELLOUT:
                raise FormatFailureError(
                    ErrorTemplate.unsupported_style("spellout", self.get_locale()),
                    fallback_value=str(value),
                )
            case NumberStyle.ORDINAL:
                return self._format_ordinal(number, value)
            case NumberStyle.DURATION:
                return self._format_duration(number)
            case _:
                return self._render(number, self._currency)

    def format_currency(self, value: object, currency: str) -> str:
        """Format a monetary amount in the given ISO 4217 currency.

        Fraction digits follow the currency's precision (JPY 0, BHD 3...)
        unless fraction attributes were set explicitly.

        Raises:
            FormatFailureError: If the amount is not numeric or the currency
                code is not a three-letter code
        """
        if not (isinstance(currency, str) and len(currency) == 3 and currency.isalpha()):
            msg = f"Invalid currency code {currency!r}"
            raise FormatFailureError(msg, fallback_value=str(value))
        code = currency.upper()
        number = to_decimal(value)

        fraction_digits = None
        if not (
            NumberAttribute.MIN_FRACTION_DIGITS in self._attributes
            or NumberAttribute.MAX_FRACTION_DIGITS in self._attributes
        ):
            precision = get_currency_precision(code)
            fraction_digits = (precision, precision)
        return self._render(number, code, fraction_digits)

    def _render(
        self, number: Decimal, currency: str, fraction_digits: tuple[int, int] | None = None
    ) -> str:
        if number.is_nan():
            # NaN carries no sign and no affixes
            return self.get_symbol(NumberSymbol.NAN)

        number *= self.get_attribute(NumberAttribute.MULTIPLIER)
        negative = number.is_signed()
        magnitude = abs(number)
        if magnitude.is_infinite():
            return self._wrap(self.get_symbol(NumberSymbol.INFINITY), negative, currency)

        mode = RoundingMode(self._int_attribute(NumberAttribute.ROUNDING_MODE))
        pattern = self._digits_pattern(fraction_digits)
        significant = "@" in pattern.pattern
        precision = pattern.frac_prec[1] + (pattern.int_prec[1] if significant else 0)

        # Babel quantizes with the context rounding; the sign is applied by the affixes
        with localcontext() as ctx:
            ctx.rounding = _magnitude_rounding(mode, negative)
            ctx.prec = max(ctx.prec, abs(magnitude.adjusted()) + precision + 2)

            increment = self.get_attribute(NumberAttribute.ROUNDING_INCREMENT)
            if increment:
                magnitude = (magnitude / increment).to_integral_value() * increment

            max_int = self._int_attribute(NumberAttribute.MAX_INTEGER_DIGITS)
            if not significant and pattern.exp_prec is None and magnitude.adjusted() >= max_int:
                # ICU keeps only the low-order integer digits
                magnitude = magnitude.quantize(Decimal(1).scaleb(-pattern.frac_prec[1]))
                magnitude %= Decimal(1).scaleb(max_int)

            body = pattern.apply(magnitude, self._locale)

        decimal_symbol = self._locale_symbols.get("decimal", ".")
        if self._int_attribute(NumberAttribute.DECIMAL_ALWAYS_SHOWN) and decimal_symbol not in body:
            body += decimal_symbol
        return self._wrap(self._localize_body(body), negative, currency)

    def _digits_pattern(self, fraction_digits: tuple[int, int] | None) -> NumberPattern:
        """Babel pattern for the digits only; affixes and padding go around it."""
        if fraction_digits is None:
            fraction_digits = (
                self._int_attribute(NumberAttribute.MIN_FRACTION_DIGITS),
                self._int_attribute(NumberAttribute.MAX_FRACTION_DIGITS),
            )
        primary = self._int_attribute(NumberAttribute.GROUPING_SIZE)
        if self._int_attribute(NumberAttribute.GROUPING_USED) and primary > 0:
            secondary = self._int_attribute(NumberAttribute.SECONDARY_GROUPING_SIZE) or primary
            grouping = (primary, secondary)
        else:
            grouping = (_NO_GROUPING, _NO_GROUPING)

        if self._int_attribute(NumberAttribute.SIGNIFICANT_DIGITS_USED):
            min_sig = max(1, self._int_attribute(NumberAttribute.MIN_SIGNIFICANT_DIGITS))
            max_sig = max(min_sig, self._int_attribute(NumberAttribute.MAX_SIGNIFICANT_DIGITS))
            return NumberPattern(
                "@" * min_sig + "#" * (max_sig - min_sig),
                ("", ""),
                ("", ""),
                grouping,
                (min_sig, max_sig),
                (0, 0),
                None,
                None,
            )

        return NumberPattern(
            self._pattern.pattern.replace("@", "#"),
            ("", ""),
            ("", ""),
            grouping,
            (
                self._int_attribute(NumberAttribute.MIN_INTEGER_DIGITS),
                self._int_attribute(NumberAttribute.MAX_INTEGER_DIGITS),
            ),
            fraction_digits,
            self._pattern.exp_prec,
            self._pattern.exp_plus,
        )

    def _localize_body(self, body: str) -> str:
        """Replace the locale symbols Babel rendered with the effective ones."""
        monetary = self._style is NumberStyle.CURRENCY
        effective = {
            "decimal": NumberSymbol.MONETARY_SEPARATOR if monetary else NumberSymbol.DECIMAL_SEPARATOR,
            "group": (
                NumberSymbol.MONETARY_GROUPING_SEPARATOR if monetary else NumberSymbol.GROUPING_SEPARATOR
            ),
            "exponential": NumberSymbol.EXPONENTIAL,
            "minusSign": NumberSymbol.MINUS_SIGN,
            "plusSign": NumberSymbol.PLUS_SIGN,
        }
        swaps: dict[str, str] = {}
        for key, symbol in effective.items():
            rendered = self._locale_symbols.get(key, _BABEL_SYMBOL_DEFAULTS[key])
            wanted = self.get_symbol(symbol)
            if not wanted and symbol not in self._symbols:
                # missing from the locale data; Babel used its default
                wanted = rendered
            if wanted != rendered:
                swaps[rendered] = wanted
        if swaps:
            alternatives = "|".join(re.escape(s) for s in sorted(swaps, key=len, reverse=True))
            body = re.sub(alternatives, lambda match: swaps[match.group(0)], body)
        return self._localize_digits(body)

    def _localize_digits(self, digits: str) -> str:
        zero = self.get_symbol(NumberSymbol.ZERO_DIGIT)
        if zero == "0" or len(zero) != 1:
            return digits
        offset = ord(zero) - ord("0")
        return "".join(chr(ord(c) + offset) if c.isdigit() else c for c in digits)

    def _wrap(self, body: str, negative: bool, currency: str) -> str:
        prefix, suffix = self._affixes(negative, currency)
        width = self._int_attribute(NumberAttribute.FORMAT_WIDTH)
        missing = width - len(prefix) - len(body) - len(suffix)
        if missing <= 0:
            return prefix + body + suffix

        pad = (self.get_text_attribute(TextAttribute.PADDING_CHARACTER) or " ")[0] * missing
        match PaddingPosition(self._int_attribute(NumberAttribute.PADDING_POSITION)):
            case PaddingPosition.BEFORE_PREFIX:
                return pad + prefix + body + suffix
            case PaddingPosition.AFTER_PREFIX:
                return prefix + pad + body + suffix
            case PaddingPosition.BEFORE_SUFFIX:
                return prefix + body + pad + suffix
            case PaddingPosition.AFTER_SUFFIX:
                return prefix + body + suffix + pad

    def _format_ordinal(self, number: Decimal, value: object) -> str:
        suffixes = ORDINAL_SUFFIXES.get(self._locale.language)
        if suffixes is None or not number.is_finite():
            raise FormatFailureError(
                ErrorTemplate.unsupported_style("ordinal", self.get_locale()),
                fallback_value=str(value),
            )
        integral = number.to_integral_value(rounding=ROUND_DOWN)
        category = self._locale.ordinal_form(abs(int(integral)))
        suffix = suffixes.get(category, suffixes["other"])
        return self._render(integral, self._currency, (0, 0)) + suffix

    def _format_duration(self, number: Decimal) -> str:
        # ICU "%in-numerals" rule set: h:mm:ss, m:ss, or seconds
        if not number.is_finite():
            return self._render(number, self._currency)
        seconds = int(abs(number).to_integral_value(rounding=ROUND_HALF_EVEN))
        minus = self.get_symbol(NumberSymbol.MINUS_SIGN) if number < 0 and seconds else ""
        hours, remainder = divmod(seconds, 3600)
        minutes, secs = divmod(remainder, 60)
        if hours:
            text = f"{hours}:{minutes:02d}:{secs:02d}"
        elif minutes:
            text = f"{minutes}:{secs:02d}"
        else:
            text = f"{secs} sec."
        return minus + self._localize_digits(text)
