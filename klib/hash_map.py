"""Separate-chaining hash map with pluggable hash and compare functions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from klib.bucket import Bucket, CompareFunc, compare_int, hash_int

BUCKETS_INITIAL_CAPACITY = 8
BUCKETS_GROW_FACTOR = 2
MAX_LOAD_FACTOR = 0.75

HashFunc = Callable[[Any, int], int]


class HashMap:
    """Maps keys to values through a table of lazily created buckets.

    ``hash_func(key, capacity)`` must return a slot index below ``capacity``;
    two keys are the same key when ``compare_func`` returns 0 for them.
    """

    def __init__(
        self,
        hash_func: HashFunc = hash_int,
        compare_func: CompareFunc = compare_int,
    ) -> None:
        if hash_func is None:
            raise ValueError("a hash function is required")
        if compare_func is None:
            raise ValueError("a compare function is required")
        self.hash_func = hash_func
        self.compare_func = compare_func
        self._buckets: list[Bucket | None] = [None] * BUCKETS_INITIAL_CAPACITY
        self._count = 0

    def _slot(self, key: Any, capacity: int) -> int:
        index = self.hash_func(key, capacity)
        if not 0 <= index < capacity:
            raise ValueError(
                f"hash function returned {index} for a table of {capacity} buckets"
            )
        return index

    def _insert(self, buckets: list[Bucket | None], key: Any, value: Any) -> None:
        index = self._slot(key, len(buckets))
        bucket = buckets[index]
        if bucket is None:
            bucket = buckets[index] = Bucket(self.compare_func)
        bucket.set(key, value)

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, growing the table when it is too full.

        Every call counts towards the load, including ones that replace
        the value of a key already present.
        """
        if self._count / len(self._buckets) >= MAX_LOAD_FACTOR:
            self.grow(len(self._buckets) * BUCKETS_GROW_FACTOR)
        self._insert(self._buckets, key, value)
        self._count += 1

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if there is none."""
        bucket = self._buckets[self._slot(key, len(self._buckets))]
        return None if bucket is None else bucket.get(key)

    def grow(self, new_capacity: int) -> None:
        """Rehash every entry into a larger table of ``new_capacity`` buckets."""
        if new_capacity <= len(self._buckets):
            raise ValueError("new capacity must exceed the current capacity")
        new_buckets: list[Bucket | None] = [None] * new_capacity
        for bucket in self._buckets:
            if bucket is None:
                continue
            for key, value in bucket:
                self._insert(new_buckets, key, value)
        self._buckets = new_buckets

    def bucket(self, index: int) -> Bucket | None:
        """Return the bucket in slot ``index``, or None if it was never used."""
        return self._buckets[index]

    @property
    def capacity(self) -> int:
        """Number of bucket slots in the table."""
        return len(self._buckets)

    def __len__(self) -> int:
        """Number of ``set`` calls made so far."""
        return self._count

    def __contains__(self, key: Any) -> bool:
        bucket = self._buckets[self._slot(key, len(self._buckets))]
        return bucket is not None and key in bucket

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, bucket by bucket."""
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"