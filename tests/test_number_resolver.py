"""Tests for NumberFormatterResolver: validation, caching, prototype merge.

Python 3.13+.
"""

import threading

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from intlformat.constants import NUMBER_ATTRIBUTES, NUMBER_STYLES
from intlformat.diagnostics import (
    UnknownAttributeError,
    UnknownPaddingPositionError,
    UnknownRoundingModeError,
    UnknownStyleError,
)
from intlformat.enums import (
    NumberAttribute,
    NumberStyle,
    NumberSymbol,
    PaddingPosition,
    RoundingMode,
    TextAttribute,
)
from intlformat.runtime import NumberFormatter, NumberFormatterResolver, number_cache_key


def _resolver(prototype: NumberFormatter | None = None) -> NumberFormatterResolver:
    return NumberFormatterResolver(prototype, default_locale="en_US")


class TestCacheKey:
    def test_format(self) -> None:
        assert number_cache_key("fr", "decimal", {"b": 1, "a": 2}, {}, {}) == (
            'fr|decimal|{"a":2,"b":1}|{}|{}'
        )

    def test_non_ascii_kept(self) -> None:
        key = number_cache_key("fr", "decimal", {}, {"positive_prefix": "€"}, {})
        assert '"€"' in key

    @given(
        st.dictionaries(
            st.sampled_from(NUMBER_ATTRIBUTES.names), st.integers(min_value=0, max_value=9), max_size=6
        )
    )
    def test_attribute_order_independent(self, attributes: dict[str, int]) -> None:
        event(f"attributes={len(attributes)}")
        reordered = dict(reversed(list(attributes.items())))
        assert number_cache_key("en", "decimal", attributes, {}, {}) == number_cache_key(
            "en", "decimal", reordered, {}, {}
        )


class TestValidation:
    def test_unknown_style_lists_choices(self) -> None:
        with pytest.raises(UnknownStyleError) as exc_info:
            _resolver().resolve(None, "foo")
        assert str(exc_info.value) == (
            'The style "foo" does not exist, known styles are: "decimal", "currency", '
            '"percent", "scientific", "spellout", "ordinal", "duration".'
        )
        assert exc_info.value.choices == NUMBER_STYLES.names

    def test_unknown_attribute(self) -> None:
        with pytest.raises(UnknownAttributeError) as exc_info:
            _resolver().resolve(None, "decimal", {"bogus": 1})
        assert exc_info.value.value == "bogus"
        assert '"grouping_used"' in str(exc_info.value)
        assert '"lenient_parse"' in str(exc_info.value)

    def test_non_string_attribute_name(self) -> None:
        with pytest.raises(UnknownAttributeError) as exc_info:
            _resolver().resolve(None, "decimal", {7: 1})  # type: ignore[dict-item]
        assert exc_info.value.value == 7

    def test_unknown_rounding_mode(self) -> None:
        with pytest.raises(UnknownRoundingModeError, match='"sideways" does not exist'):
            _resolver().resolve(None, "decimal", {"rounding_mode": "sideways"})

    def test_unknown_padding_position(self) -> None:
        with pytest.raises(UnknownPaddingPositionError, match='"middle" does not exist'):
            _resolver().resolve(None, "decimal", {"padding_position": "middle"})

    def test_symbolic_values_translated(self) -> None:
        fmt = _resolver().resolve(
            None, "decimal", {"rounding_mode": "ceiling", "padding_position": "after_suffix"}
        )
        assert fmt.get_attribute(NumberAttribute.ROUNDING_MODE) == RoundingMode.CEILING
        assert fmt.get_attribute(NumberAttribute.PADDING_POSITION) == PaddingPosition.AFTER_SUFFIX


class TestCaching:
    def test_default_locale(self) -> None:
        assert _resolver().resolve().get_locale() == "en_US"

    def test_same_configuration_shares_formatter(self) -> None:
        resolver = _resolver()
        first = resolver.resolve("fr", "decimal", {"fraction_digit": 2, "grouping_used": 0})
        second = resolver.resolve("fr", "decimal", {"grouping_used": 0, "fraction_digit": 2})
        assert first is second
        assert resolver.cache.constructions == 1

    def test_locale_spellings_share_formatter(self) -> None:
        resolver = _resolver()
        assert resolver.resolve("pt-BR") is resolver.resolve("pt_BR")

    def test_distinct_configurations(self) -> None:
        resolver = _resolver()
        resolver.resolve("fr", "decimal")
        resolver.resolve("fr", "percent")
        resolver.resolve("de", "decimal")
        resolver.resolve("fr", "decimal", {"fraction_digit": 1})
        assert resolver.cache.constructions == 4

    def test_none_attribute_means_absent(self) -> None:
        resolver = _resolver()
        assert resolver.resolve("en", "decimal", {"fraction_digit": None}) is resolver.resolve("en")

    def test_bounded_cache(self) -> None:
        resolver = NumberFormatterResolver(default_locale="en", cache_size=1)
        resolver.resolve("en")
        resolver.resolve("de")
        assert len(resolver.cache) == 1

    def test_attributes_reapplied_on_hit(self) -> None:
        resolver = _resolver()
        fmt = resolver.resolve("en", "decimal", {"fraction_digit": 2})
        fmt.set_attribute(NumberAttribute.FRACTION_DIGITS, 5)
        again = resolver.resolve("en", "decimal", {"fraction_digit": 2})
        assert again is fmt
        assert again.format(1) == "1.00"


class TestPrototypeMerge:
    def test_prototype_text_attribute_and_digits(self) -> None:
        prototype = NumberFormatter("fr", NumberStyle.DECIMAL)
        prototype.set_text_attribute(TextAttribute.POSITIVE_PREFIX, "++")
        prototype.set_attribute(NumberAttribute.FRACTION_DIGITS, 1)
        fmt = _resolver(prototype).resolve("fr")
        assert fmt.format("12.3456") == "++12,3"

    def test_caller_attribute_wins(self) -> None:
        prototype = NumberFormatter("en", NumberStyle.DECIMAL)
        prototype.set_attribute(NumberAttribute.GROUPING_USED, 0)
        fmt = _resolver(prototype).resolve("en", "decimal", {"grouping_used": 1})
        assert fmt.format(1234) == "1,234"

    def test_prototype_attribute_used_when_absent(self) -> None:
        prototype = NumberFormatter("en", NumberStyle.DECIMAL)
        prototype.set_attribute(NumberAttribute.GROUPING_USED, 0)
        fmt = _resolver(prototype).resolve("en")
        assert fmt.format(1234) == "1234"

    def test_prototype_modes_reverse_mapped(self) -> None:
        prototype = NumberFormatter("en", NumberStyle.DECIMAL)
        prototype.set_attribute(NumberAttribute.ROUNDING_MODE, RoundingMode.FLOOR)
        prototype.set_attribute(NumberAttribute.MAX_FRACTION_DIGITS, 0)
        fmt = _resolver(prototype).resolve("en")
        assert fmt.get_attribute(NumberAttribute.ROUNDING_MODE) == RoundingMode.FLOOR
        assert fmt.format("2.9") == "2"

    def test_prototype_symbols_copied(self) -> None:
        prototype = NumberFormatter("en", NumberStyle.DECIMAL)
        prototype.set_symbol(NumberSymbol.GROUPING_SEPARATOR, "'")
        fmt = _resolver(prototype).resolve("en")
        assert fmt.format(1234567) == "1'234'567"

    def test_prototype_never_mutated(self) -> None:
        prototype = NumberFormatter("en", NumberStyle.DECIMAL)
        _resolver(prototype).resolve("en", "decimal", {"fraction_digit": 4})
        assert prototype.get_attribute(NumberAttribute.MAX_FRACTION_DIGITS) == 3

    def test_prototype_exposed(self) -> None:
        prototype = NumberFormatter("en")
        assert _resolver(prototype).prototype is prototype


class TestAcquire:
    def test_yields_configured_formatter(self) -> None:
        with _resolver().acquire("de", "decimal", {"fraction_digit": 2}) as fmt:
            assert fmt.format(1234.5) == "1.234,50"

    def test_holds_cache_lock(self) -> None:
        resolver = _resolver()
        acquired = threading.Event()
        released = threading.Event()
        observed: list[bool] = []

        def contender() -> None:
            acquired.wait()
            # Non-blocking acquire fails while the owner holds the lock
            got = resolver.cache.lock.acquire(blocking=False)
            observed.append(got)
            if got:
                resolver.cache.lock.release()
            released.set()

        thread = threading.Thread(target=contender)
        thread.start()
        with resolver.acquire("en"):
            acquired.set()
            released.wait()
        thread.join()
        assert observed == [False]

    def test_concurrent_formatting_is_consistent(self) -> None:
        resolver = _resolver()
        results: dict[int, list[str]] = {1: [], 3: []}

        def worker(digits: int) -> None:
            for _ in range(50):
                with resolver.acquire("en", "decimal", {"fraction_digit": digits}) as fmt:
                    results[digits].append(fmt.format("1.23456"))

        threads = [threading.Thread(target=worker, args=(d,)) for d in (1, 3, 1, 3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert set(results[1]) == {"1.2"}
        assert set(results[3]) == {"1.235"}
