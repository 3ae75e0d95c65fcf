"""Diagnostic system for intlformat errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    FormatFailureError,
    IntlConfigurationError,
    IntlError,
    NoPrettyStrategyConfiguredError,
    ResourceNotFoundError,
    UnknownAttributeError,
    UnknownDateFormatError,
    UnknownNumericTypeError,
    UnknownOptionError,
    UnknownPaddingPositionError,
    UnknownRoundingModeError,
    UnknownStyleError,
    UnknownTimeFormatError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
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
