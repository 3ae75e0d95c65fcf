"""Bidirectional option tables.

Every option namespace accepted by the formatting entry points (date styles,
number styles, numeric attributes, rounding modes...) is a fixed mapping
from a symbolic name to an enum code. Resolution needs both directions:
validating a caller-supplied name, and turning a code read back from a
prototype formatter into the name the merge dictionary is keyed by.

Tables are built once at import time and never mutated.

Python 3.13+.
"""

from collections.abc import Iterator, Mapping
from enum import IntEnum
from types import MappingProxyType

__all__ = ["OptionTable"]


class OptionTable[C: IntEnum](Mapping[str, C]):
    """Immutable name <-> code mapping for one option namespace.

    Behaves as a read-only ``Mapping[str, C]`` in declaration order, with a
    reverse lookup for codes.

    Example:
        >>> from intlformat.enums import RoundingMode
        >>> table = OptionTable("rounding mode", {"up": RoundingMode.UP})
        >>> table["up"]
        <RoundingMode.UP: 3>
        >>> table.name_of(3)
        'up'
        >>> table.quoted_names()
        '"up"'
    """

    __slots__ = ("_by_code", "_by_name", "_label")

    def __init__(self, label: str, entries: Mapping[str, C]) -> None:
        """Build the table.

        Args:
            label: Human-readable namespace label used in diagnostics
            entries: Ordered name -> code entries

        Raises:
            ValueError: If two names share a code (reverse lookup would be ambiguous)
        """
        by_code: dict[int, str] = {}
        for name, code in entries.items():
            if int(code) in by_code:
                msg = f"Duplicate code {int(code)} in {label} table: {by_code[int(code)]!r}, {name!r}"
                raise ValueError(msg)
            by_code[int(code)] = name

        self._label = label
        self._by_name: Mapping[str, C] = MappingProxyType(dict(entries))
        self._by_code: Mapping[int, str] = MappingProxyType(by_code)

    @property
    def label(self) -> str:
        """Namespace label (e.g. "date format")."""
        return self._label

    @property
    def names(self) -> tuple[str, ...]:
        """All symbolic names in declaration order."""
        return tuple(self._by_name)

    def __getitem__(self, name: str) -> C:
        return self._by_name[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        # Unhashable values (lists from templates) are simply unknown
        try:
            return name in self._by_name
        except TypeError:
            return False

    def name_of(self, code: int) -> str:
        """Reverse lookup: code -> symbolic name.

        Raises:
            KeyError: If no name maps to ``code``
        """
        return self._by_code[int(code)]

    def quoted_names(self) -> str:
        """Names joined as ``"a", "b", "c"`` for error messages."""
        return ", ".join(f'"{name}"' for name in self._by_name)

    def __repr__(self) -> str:
        return f"OptionTable({self._label!r}, names={self.names!r})"
