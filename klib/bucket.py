"""Hash-map bucket: a small list of key/value pairs with custom key equality."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

NODES_INITIAL_CAPACITY = 8
NODES_GROWTH_FACTOR = 2

CompareFunc = Callable[[Any, Any], int]


def hash_int(key: int, capacity: int) -> int:
    """Map an integer key onto a slot index below ``capacity``."""
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return key % capacity


def compare_int(a: int, b: int) -> int:
    """Three-way comparison of two integers: zero when they are equal."""
    return a - b


class Bucket:
    """Ordered key/value pairs whose keys are matched with a compare function.

    Two keys are the same key when ``compare_func`` returns 0 for them.
    """

    def __init__(self, compare_func: CompareFunc) -> None:
        if compare_func is None:
            raise ValueError("a compare function is required")
        self.compare_func = compare_func
        self._nodes: list[list[Any]] = []
        self._capacity = NODES_INITIAL_CAPACITY

    def _find(self, key: Any) -> list[Any] | None:
        return next(
            (node for node in self._nodes if self.compare_func(node[0], key) == 0),
            None,
        )

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing the value of an equal key."""
        node = self._find(key)
        if node is not None:
            node[1] = value
            return
        if len(self._nodes) + 1 >= self._capacity:
            self._capacity *= NODES_GROWTH_FACTOR
        self._nodes.append([key, value])

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if there is none."""
        node = self._find(key)
        return None if node is None else node[1]

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    @property
    def capacity(self) -> int:
        """Number of node slots reserved before the next growth."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        return ((key, value) for key, value in self._nodes)

    def __repr__(self) -> str:
        return f"Bucket({list(self)!r})"