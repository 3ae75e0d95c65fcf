"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _quoted(choices: Iterable[str]) -> str:
    return ", ".join(f'"{choice}"' for choice in choices)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Unknown-option messages name the offending value and enumerate every
    valid alternative in declaration order.
    """

    @staticmethod
    def unknown_style(style: object, choices: Iterable[str]) -> Diagnostic:
        """Number style not in the style table.

        Args:
            style: The rejected style name
            choices: All valid style names

        Returns:
            Diagnostic for UNKNOWN_STYLE
        """
        msg = f'The style "{style}" does not exist, known styles are: {_quoted(choices)}.'
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_STYLE,
            message=msg,
            hint="Use one of the listed number styles",
        )

    @staticmethod
    def unknown_date_format(date_format: object, choices: Iterable[str]) -> Diagnostic:
        """Date style not in the date format table.

        Args:
            date_format: The rejected date format name
            choices: All valid date format names

        Returns:
            Diagnostic for UNKNOWN_DATE_FORMAT
        """
        msg = (
            f'The date format "{date_format}" does not exist, '
            f"known formats are: {_quoted(choices)}."
        )
        return Diagnostic(code=DiagnosticCode.UNKNOWN_DATE_FORMAT, message=msg)

    @staticmethod
    def unknown_time_format(time_format: object, choices: Iterable[str]) -> Diagnostic:
        """Time style not in the date format table.

        Args:
            time_format: The rejected time format name
            choices: All valid format names

        Returns:
            Diagnostic for UNKNOWN_TIME_FORMAT
        """
        msg = (
            f'The time format "{time_format}" does not exist, '
            f"known formats are: {_quoted(choices)}."
        )
        return Diagnostic(code=DiagnosticCode.UNKNOWN_TIME_FORMAT, message=msg)

    @staticmethod
    def unknown_numeric_type(numeric_type: object, choices: Iterable[str]) -> Diagnostic:
        """Numeric type not in the type table."""
        msg = f'The type "{numeric_type}" does not exist, known types are: {_quoted(choices)}.'
        return Diagnostic(code=DiagnosticCode.UNKNOWN_NUMERIC_TYPE, message=msg)

    @staticmethod
    def unknown_attribute(name: object, choices: Iterable[str]) -> Diagnostic:
        """Numeric attribute not in the attribute table."""
        msg = (
            f'The number formatter attribute "{name}" does not exist, '
            f"known attributes are: {_quoted(choices)}."
        )
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ATTRIBUTE,
            message=msg,
            hint="Text attributes and symbols are configured on a prototype formatter",
        )

    @staticmethod
    def unknown_rounding_mode(value: object, choices: Iterable[str]) -> Diagnostic:
        """Value of the rounding_mode attribute not in the rounding table."""
        msg = (
            f'The number formatter rounding mode "{value}" does not exist, '
            f"known modes are: {_quoted(choices)}."
        )
        return Diagnostic(code=DiagnosticCode.UNKNOWN_ROUNDING_MODE, message=msg)

    @staticmethod
    def unknown_padding_position(value: object, choices: Iterable[str]) -> Diagnostic:
        """Value of the padding_position attribute not in the padding table."""
        msg = (
            f'The number formatter padding position "{value}" does not exist, '
            f"known positions are: {_quoted(choices)}."
        )
        return Diagnostic(code=DiagnosticCode.UNKNOWN_PADDING_POSITION, message=msg)

    @staticmethod
    def no_pretty_strategy() -> Diagnostic:
        """Pretty formatting requested but no strategy was configured.

        Returns:
            Diagnostic for NO_PRETTY_STRATEGY
        """
        return Diagnostic(
            code=DiagnosticCode.NO_PRETTY_STRATEGY,
            message="Attempted to use pretty date formatting without a pretty format strategy",
            hint="Pass pretty_format=get_default_pretty_format() to IntlExtension",
        )

    @staticmethod
    def formatting_failed(
        what: str, value: object, locale_code: str | None = None, reason: str | None = None
    ) -> Diagnostic:
        """The formatting capability rejected the value or configuration.

        Args:
            what: What was being formatted ("number", "date", "currency")
            value: The offending value
            locale_code: Locale in effect
            reason: Underlying failure description

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        if what == "currency":
            msg = "Unable to format the given number as a currency."
        else:
            msg = f"Unable to format the given {what}."
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            hint=reason,
            locale_code=locale_code,
            input_value=repr(value),
        )

    @staticmethod
    def invalid_number(value: object) -> Diagnostic:
        """Value cannot be interpreted as a number."""
        msg = f"Value {value!r} is not a number"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=msg,
            input_value=repr(value),
        )

    @staticmethod
    def invalid_date(value: object, reason: str | None = None) -> Diagnostic:
        """Value cannot be converted to a date/time."""
        msg = f"Value {value!r} cannot be converted to a date"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE,
            message=msg,
            hint=reason or "Pass a datetime, a date, an ISO-8601 string or a Unix timestamp",
            input_value=repr(value),
        )

    @staticmethod
    def unknown_timezone(zone: object) -> Diagnostic:
        """Timezone identifier not known to the tz database."""
        msg = f"Unknown timezone {zone!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TIMEZONE,
            message=msg,
            hint="Use an IANA identifier such as 'Europe/Paris'",
            input_value=repr(zone),
        )

    @staticmethod
    def unsupported_style(style: str, locale_code: str | None = None) -> Diagnostic:
        """Number style exists but has no data for the locale."""
        msg = f'The style "{style}" is not supported for locale {locale_code!r}'
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_STYLE,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def currency_type_unsupported() -> Diagnostic:
        """Currency numeric type passed to plain number formatting."""
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_TYPE_UNSUPPORTED,
            message="The currency type cannot be used to format a plain number",
            hint="Use format_currency() to format monetary amounts",
        )

    @staticmethod
    def resource_not_found(kind: str, code: object, locale_code: str | None = None) -> Diagnostic:
        """No display data for a code.

        Args:
            kind: Lookup kind ("country", "currency", ...)
            code: The code that was looked up
            locale_code: Display locale

        Returns:
            Diagnostic for RESOURCE_NOT_FOUND
        """
        msg = f"No {kind} named {code!r} in locale {locale_code!r}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_FOUND,
            message=msg,
            locale_code=locale_code,
            input_value=repr(code),
        )

    @staticmethod
    def unknown_locale(locale_code: object) -> Diagnostic:
        """Locale identifier has no CLDR data."""
        msg = f"Unknown locale {locale_code!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            input_value=repr(locale_code),
        )
