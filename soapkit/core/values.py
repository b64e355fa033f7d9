# ============================================================================
# SCOPE: CORE LAYER
# Description: Generic Value tagged union produced by materialization.
# ============================================================================
"""Generic Value.

A materialized document is one of three immutable variants:

- ``Scalar``: text of a leaf (or empty) element
- ``Mapping``: ordered local-name -> value entries of a structured element
- ``ListValue``: same-named siblings coalesced in document order

Consumers match on the variant instead of probing raw ``str``/``dict``/``list``
objects.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Scalar:
    """Leaf text."""

    text: str

    def to_python(self) -> str:
        return self.text


@dataclass(frozen=True)
class Mapping:
    """Ordered mapping from element local name to value."""

    entries: dict[str, GenericValue] = field(default_factory=dict)

    def get(self, key: str) -> GenericValue | None:
        return self.entries.get(key)

    def items(self) -> Iterator[tuple[str, GenericValue]]:
        return iter(self.entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.entries.items()}


@dataclass(frozen=True)
class ListValue:
    """Repeated sibling values in document order."""

    items: tuple[GenericValue, ...] = ()

    def __getitem__(self, index: int) -> GenericValue:
        return self.items[index]

    def __iter__(self) -> Iterator[GenericValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def appended(self, value: GenericValue) -> ListValue:
        """Return a new list with ``value`` at the end."""
        return ListValue(self.items + (value,))

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


GenericValue = Union[Scalar, Mapping, ListValue]


def coalesce(entries: dict[str, GenericValue], key: str, value: GenericValue) -> None:
    """Insert ``key -> value`` into ``entries``, promoting repeats to a list.

    The first value for a key is stored as is. A second same-named value turns
    the entry into ``ListValue([first, second])``; further values are
    appended.
    """
    existing = entries.get(key)
    if existing is None:
        entries[key] = value
    elif isinstance(existing, ListValue):
        entries[key] = existing.appended(value)
    else:
        entries[key] = ListValue((existing, value))
