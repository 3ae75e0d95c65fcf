"""Relative ("pretty") date formatting.

A pretty format strategy receives the converted datetime and the base
formatter resolved for the call, and returns display text. Strategies
derive any ancillary formatter they need from the base one, so locale,
timezone and calendar carry over.

The default strategy:

    Same day, known time      "1:37 PM"
    Same day, unknown time    "today"
    Yesterday, known time     "yesterday 1:37 PM"
    Yesterday, unknown time   "yesterday"
    2-6 days ago              "Monday", "Tuesday", ...
    Older, or in the future   base date style, no time

Python 3.13+.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from intlformat.constants import WEEKDAY_PATTERN
from intlformat.enums import DateStyle
from intlformat.runtime.date_formatter import DateFormatter

__all__ = ["DefaultPrettyFormat", "PrettyFormatStrategy", "get_default_pretty_format"]


@runtime_checkable
class PrettyFormatStrategy(Protocol):
    """Callable turning a datetime and a base formatter into display text."""

    def __call__(self, date_time: datetime, formatter: DateFormatter) -> str: ...


class DefaultPrettyFormat:
    """Reference pretty format strategy.

    Day distance is counted in calendar days, with "now" and the value both
    taken in the base formatter's timezone.
    """

    __slots__ = ()

    def __call__(self, date_time: datetime, formatter: DateFormatter) -> str:
        now = formatter.now()
        days_ago = (now.date() - formatter.localize(date_time).date()).days

        if 1 < days_ago < 7:
            weekday = formatter.derive(DateStyle.NONE, DateStyle.NONE, WEEKDAY_PATTERN)
            return weekday.format(date_time)

        if days_ago in (0, 1):
            day_type = formatter.derive(DateStyle.RELATIVE_LONG, DateStyle.NONE).format(date_time)
            if formatter.get_time_type() is DateStyle.NONE:
                return day_type

            day_time = formatter.derive(DateStyle.NONE, DateStyle.SHORT).format(date_time)
            # Compare in the value's own zone
            own_zone = date_time.tzinfo or formatter.get_timezone()
            if days_ago == 1 or now.astimezone(own_zone).date() != date_time.date():
                return f"{day_type} {day_time}"
            return day_time

        fallback = formatter.derive(formatter.get_date_type(), DateStyle.NONE, formatter.get_pattern())
        return fallback.format(date_time)

    def __repr__(self) -> str:
        return "DefaultPrettyFormat()"


def get_default_pretty_format() -> PrettyFormatStrategy:
    """The reference strategy, for ``IntlExtension(pretty_format=...)``."""
    return DefaultPrettyFormat()
