"""intlformat exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information; ``str(error)`` is always the plain message.

Hierarchy:
    IntlError
    ├── IntlConfigurationError        caller mistakes, never retried
    │   ├── UnknownOptionError        value not in an option table
    │   │   ├── UnknownStyleError
    │   │   ├── UnknownDateFormatError
    │   │   ├── UnknownTimeFormatError
    │   │   ├── UnknownNumericTypeError
    │   │   ├── UnknownAttributeError
    │   │   ├── UnknownRoundingModeError
    │   │   └── UnknownPaddingPositionError
    │   └── NoPrettyStrategyConfiguredError
    ├── FormatFailureError            capability rejected value/configuration
    └── ResourceNotFoundError         lookup miss (converted to a fallback)

Python 3.13+.
"""

from collections.abc import Sequence

from .codes import Diagnostic

__all__ = [
    "FormatFailureError",
    "IntlConfigurationError",
    "IntlError",
    "NoPrettyStrategyConfiguredError",
    "ResourceNotFoundError",
    "UnknownAttributeError",
    "UnknownDateFormatError",
    "UnknownNumericTypeError",
    "UnknownOptionError",
    "UnknownPaddingPositionError",
    "UnknownRoundingModeError",
    "UnknownStyleError",
    "UnknownTimeFormatError",
]


class IntlError(Exception):
    """Base exception for all intlformat errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class IntlConfigurationError(IntlError):
    """Invalid configuration supplied by the caller."""


class UnknownOptionError(IntlConfigurationError):
    """An option value is not in its table.

    Attributes:
        value: The rejected value
        choices: Every valid name, in table order
    """

    def __init__(
        self, message: str | Diagnostic, *, value: object = None, choices: Sequence[str] = ()
    ) -> None:
        """Initialize UnknownOptionError.

        Args:
            message: Error message string OR Diagnostic object
            value: The rejected value
            choices: Every valid name
        """
        super().__init__(message)
        self.value = value
        self.choices = tuple(choices)


class UnknownStyleError(UnknownOptionError):
    """Number style name does not exist."""


class UnknownDateFormatError(UnknownOptionError):
    """Date style name does not exist."""


class UnknownTimeFormatError(UnknownOptionError):
    """Time style name does not exist."""


class UnknownNumericTypeError(UnknownOptionError):
    """Numeric type name does not exist."""


class UnknownAttributeError(UnknownOptionError):
    """Numeric attribute name does not exist."""


class UnknownRoundingModeError(UnknownOptionError):
    """Value given for ``rounding_mode`` does not exist."""


class UnknownPaddingPositionError(UnknownOptionError):
    """Value given for ``padding_position`` does not exist."""


class NoPrettyStrategyConfiguredError(IntlConfigurationError):
    """Pretty date formatting requested without a strategy.

    Fallback: none; configure ``pretty_format`` on the extension.
    """


class FormatFailureError(IntlError):
    """The formatting capability rejected the value or configuration.

    Always chained (``raise ... from``) to the underlying exception.

    Attributes:
        fallback_value: Text a caller may render instead (``str(value)``)
    """

    def __init__(self, message: str | Diagnostic, *, fallback_value: str = "") -> None:
        """Initialize FormatFailureError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Readable stand-in for the failed output
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class ResourceNotFoundError(IntlError):
    """No display data for a code.

    Raised by the raw lookups; the lookup adapter converts it to the
    code itself, so it never reaches template callers.
    """
