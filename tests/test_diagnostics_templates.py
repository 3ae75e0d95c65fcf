"""Tests for ErrorTemplate message wording.

Unknown-option messages must name the rejected value and list every valid
alternative in table order.

Python 3.13+.
"""

import pytest

from intlformat.constants import (
    DATE_FORMATS,
    NUMBER_ATTRIBUTES,
    NUMBER_PADDING_ATTRIBUTES,
    NUMBER_ROUNDING_ATTRIBUTES,
    NUMBER_STYLES,
    NUMBER_TYPES,
)
from intlformat.diagnostics import DiagnosticCode, ErrorTemplate


class TestUnknownOptionMessages:
    def test_unknown_style(self) -> None:
        diagnostic = ErrorTemplate.unknown_style("foo", NUMBER_STYLES.names)
        assert diagnostic.code is DiagnosticCode.UNKNOWN_STYLE
        assert diagnostic.message == (
            'The style "foo" does not exist, known styles are: "decimal", "currency", '
            '"percent", "scientific", "spellout", "ordinal", "duration".'
        )

    def test_unknown_date_format(self) -> None:
        message = ErrorTemplate.unknown_date_format("huge", DATE_FORMATS.names).message
        assert message.startswith('The date format "huge" does not exist, known formats are: ')
        assert '"none", "short", "medium", "long", "full", "relative_short"' in message

    def test_unknown_time_format(self) -> None:
        message = ErrorTemplate.unknown_time_format("tiny", DATE_FORMATS.names).message
        assert message.startswith('The time format "tiny" does not exist')

    def test_unknown_numeric_type(self) -> None:
        assert ErrorTemplate.unknown_numeric_type("int8", NUMBER_TYPES.names).message == (
            'The type "int8" does not exist, known types are: '
            '"default", "int32", "int64", "double", "currency".'
        )

    @pytest.mark.parametrize(
        ("factory", "table", "noun"),
        [
            (ErrorTemplate.unknown_attribute, NUMBER_ATTRIBUTES, "attributes"),
            (ErrorTemplate.unknown_rounding_mode, NUMBER_ROUNDING_ATTRIBUTES, "modes"),
            (ErrorTemplate.unknown_padding_position, NUMBER_PADDING_ATTRIBUTES, "positions"),
        ],
    )
    def test_lists_every_choice(self, factory, table, noun) -> None:  # type: ignore[no-untyped-def]
        message = factory("nope", table.names).message
        assert '"nope"' in message
        assert f"known {noun} are: {table.quoted_names()}." in message


class TestFailureMessages:
    def test_currency_failure_wording(self) -> None:
        diagnostic = ErrorTemplate.formatting_failed("currency", "abc", "fr", "not a number")
        assert diagnostic.message == "Unable to format the given number as a currency."
        assert diagnostic.hint == "not a number"
        assert diagnostic.locale_code == "fr"
        assert diagnostic.input_value == "'abc'"

    @pytest.mark.parametrize("what", ["number", "date"])
    def test_generic_failure_wording(self, what: str) -> None:
        assert ErrorTemplate.formatting_failed(what, 1).message == f"Unable to format the given {what}."

    def test_no_pretty_strategy_hint(self) -> None:
        diagnostic = ErrorTemplate.no_pretty_strategy()
        assert diagnostic.code is DiagnosticCode.NO_PRETTY_STRATEGY
        assert "get_default_pretty_format" in (diagnostic.hint or "")

    def test_resource_not_found(self) -> None:
        diagnostic = ErrorTemplate.resource_not_found("country", "XX", "fr")
        assert diagnostic.message == "No country named 'XX' in locale 'fr'"
        assert diagnostic.code.category.value == "lookup"
