"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization.

    Categories:
        CONFIGURATION: Caller passed an option that does not exist
        FORMATTING: The formatting capability rejected value or configuration
        LOOKUP: Display-name lookup found no data
    """

    CONFIGURATION = "configuration"
    FORMATTING = "formatting"
    LOOKUP = "lookup"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (unknown option names, missing strategy)
        2000-2999: Formatting errors (capability failures)
        3000-3999: Lookup errors (display names, timezones)
    """

    # Configuration errors (1000-1999)
    UNKNOWN_STYLE = 1001
    UNKNOWN_DATE_FORMAT = 1002
    UNKNOWN_TIME_FORMAT = 1003
    UNKNOWN_NUMERIC_TYPE = 1004
    UNKNOWN_ATTRIBUTE = 1005
    UNKNOWN_ROUNDING_MODE = 1006
    UNKNOWN_PADDING_POSITION = 1007
    NO_PRETTY_STRATEGY = 1008

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2001
    INVALID_NUMBER = 2002
    INVALID_DATE = 2003
    UNKNOWN_TIMEZONE = 2004
    UNSUPPORTED_STYLE = 2005
    CURRENCY_TYPE_UNSUPPORTED = 2006

    # Lookup errors (3000-3999)
    RESOURCE_NOT_FOUND = 3001
    UNKNOWN_LOCALE = 3002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.CONFIGURATION
        if self.value < 3000:
            return ErrorCategory.FORMATTING
        return ErrorCategory.LOOKUP


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale in effect when the error occurred (if any)
        input_value: repr of the offending value (if any)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    input_value: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_STYLE]: The style "foo" does not exist, known styles are: "decimal", ...
              = help: Use one of the listed styles

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.locale_code:
            lines.append(f"  = locale: {self.locale_code}")
        if self.input_value is not None:
            lines.append(f"  = value: {self.input_value}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
