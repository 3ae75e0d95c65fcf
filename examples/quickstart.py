"""Quickstart example for intlformat.

This example demonstrates display names, number and currency formatting,
date formatting and the relative ("pretty") date styles.

Note: Output in some locales contains non-breaking spaces (U+00A0, U+202F);
they print like ordinary spaces.
"""

from datetime import UTC, datetime, timedelta

from intlformat import (
    DateFormatter,
    DateStyle,
    FormatFailureError,
    IntlConfig,
    IntlExtension,
    NumberAttribute,
    NumberFormatter,
    NumberStyle,
    get_default_pretty_format,
)

ext = IntlExtension(
    pretty_format=get_default_pretty_format(),
    config=IntlConfig(default_locale="en_US", default_timezone="Europe/Amsterdam"),
)

# Example 1: Display names
print("=" * 50)
print("Example 1: Display Names")
print("=" * 50)

print(ext.get_country_name("FR", "de"))
# Output: Frankreich
print(ext.get_currency_name("EUR", "fr"))
# Output: euro
print(ext.get_locale_name("fr_CA"))
# Output: French (Canada)
print(repr(ext.get_country_name("XX")))
# Output: 'XX'  (unknown codes render as themselves)
print(ext.get_country_timezones("FR"))
# Output: ['Europe/Paris']

# Example 2: Numbers
print("\n" + "=" * 50)
print("Example 2: Numbers")
print("=" * 50)

print(ext.format_number(1234.5))
# Output: 1,234.5
print(ext.format_number(1234.5, {"fraction_digit": 2}, locale="de"))
# Output: 1.234,50
print(ext.format_number(0.256, style="percent"))
# Output: 26%
print(ext.format_number_style("ordinal", 3))
# Output: 3rd
print(ext.format_number_style("duration", 3661))
# Output: 1:01:01

# Example 3: Currencies
print("\n" + "=" * 50)
print("Example 3: Currencies")
print("=" * 50)

print(ext.format_currency(1000, "EUR", locale="de"))
# Output: 1.000,00 €
print(ext.format_currency(1000, "JPY", locale="ja"))
# Output: ￥1,000

# Example 4: Dates
print("\n" + "=" * 50)
print("Example 4: Dates")
print("=" * 50)

value = "2020-02-22 13:37:30"
print(ext.format_datetime(value, "short", "none"))
# Output: 2/22/20
print(ext.format_date(value, "long", locale="fr"))
# Output: 22 février 2020
print(ext.format_time(value, "short", timezone="Asia/Tokyo", locale="de"))
# Output: 21:37
print(ext.format_date(value, pattern="EEEE d MMMM", locale="fr"))
# Output: samedi 22 février

# Example 5: Relative dates
print("\n" + "=" * 50)
print("Example 5: Relative Dates")
print("=" * 50)

now = datetime.now(UTC)
print(ext.format_date_pretty(now))
# Output: today
print(ext.format_datetime_pretty(now - timedelta(days=1), "full", "short"))
# Output: yesterday <time>
print(ext.format_date_pretty(now - timedelta(days=3), "full"))
# Output: <weekday name>

# Example 6: Prototypes
print("\n" + "=" * 50)
print("Example 6: Formatter Prototypes")
print("=" * 50)

number_prototype = NumberFormatter("fr", NumberStyle.DECIMAL)
number_prototype.set_attribute(NumberAttribute.FRACTION_DIGITS, 1)
date_prototype = DateFormatter("es", DateStyle.FULL, DateStyle.NONE, "America/Puerto_Rico")
house = IntlExtension(date_prototype, number_prototype, config=IntlConfig(default_locale="fr"))

print(house.format_number("12.3456"))
# Output: 12,3
print(house.format_date("2020-02-22 13:37:30"))
# Output: sábado, 22 de febrero de 2020

# Example 7: Error handling
print("\n" + "=" * 50)
print("Example 7: Error Handling")
print("=" * 50)

try:
    ext.format_number("not a number")
except FormatFailureError as e:
    print(f"{e} -> rendering {e.fallback_value!r} instead")
# Output: Unable to format the given number. -> rendering 'not a number' instead

print(ext.get_cache_stats()["number"])
