"""Tests for the intlformat exception hierarchy.

Python 3.13+.
"""

import pytest

from intlformat.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
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


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            UnknownStyleError,
            UnknownDateFormatError,
            UnknownTimeFormatError,
            UnknownNumericTypeError,
            UnknownAttributeError,
            UnknownRoundingModeError,
            UnknownPaddingPositionError,
        ],
    )
    def test_unknown_option_errors_are_configuration_errors(self, error_type: type) -> None:
        assert issubclass(error_type, UnknownOptionError)
        assert issubclass(error_type, IntlConfigurationError)
        assert issubclass(error_type, IntlError)

    def test_no_pretty_strategy_is_configuration_error(self) -> None:
        assert issubclass(NoPrettyStrategyConfiguredError, IntlConfigurationError)
        assert not issubclass(NoPrettyStrategyConfiguredError, UnknownOptionError)

    def test_failure_and_lookup_are_not_configuration_errors(self) -> None:
        assert not issubclass(FormatFailureError, IntlConfigurationError)
        assert not issubclass(ResourceNotFoundError, IntlConfigurationError)


class TestIntlError:
    def test_plain_message(self) -> None:
        error = IntlError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.UNKNOWN_LOCALE, message="Unknown locale 'xx'")
        error = IntlError(diagnostic)
        assert str(error) == "Unknown locale 'xx'"
        assert error.diagnostic is diagnostic


class TestUnknownOptionError:
    def test_value_and_choices(self) -> None:
        error = UnknownStyleError(
            ErrorTemplate.unknown_style("foo", ["decimal", "currency"]),
            value="foo",
            choices=["decimal", "currency"],
        )
        assert error.value == "foo"
        assert error.choices == ("decimal", "currency")
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.UNKNOWN_STYLE

    def test_defaults(self) -> None:
        error = UnknownOptionError("x")
        assert error.value is None
        assert error.choices == ()


class TestFormatFailureError:
    def test_fallback_value(self) -> None:
        error = FormatFailureError("failed", fallback_value="abc")
        assert error.fallback_value == "abc"

    def test_default_fallback(self) -> None:
        assert FormatFailureError("failed").fallback_value == ""
