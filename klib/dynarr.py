"""A growable array that doubles its capacity when it runs out of room."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

INITIAL_CAPACITY = 8
SCALE_FACTOR = 2


class DynArray:
    """Sequence of values with an explicit, geometrically growing capacity."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        self._capacity = INITIAL_CAPACITY
        if items is not None:
            self.extend(items)

    def push_back(self, value: Any) -> None:
        """Append one value, doubling the capacity first if it is full."""
        if len(self._items) + 1 > self._capacity:
            self._capacity *= SCALE_FACTOR
        self._items.append(value)

    def extend(self, other: Iterable[Any]) -> None:
        """Append every value of another array or iterable, in order."""
        for value in list(other):
            self.push_back(value)

    @property
    def capacity(self) -> int:
        """Number of slots reserved before the next growth."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynArray):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"DynArray({self._items!r})"