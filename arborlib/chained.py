"""A separately chained hashtable and an append-only element stream."""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterator, TypeVar

__all__ = ["ChainedHashtable", "Stream"]

T = TypeVar("T")


def _default_hash(element: Hashable) -> int:
    return hash(element)


class ChainedHashtable(Generic[T]):
    """A fixed number of buckets, each holding elements in insertion order.

    An element lands in bucket ``hash_function(element) % size``.  Nothing is
    ever rehashed or deduplicated: equal elements inserted twice are both kept.
    """

    def __init__(
        self, size: int, hash_function: Callable[[T], int] | None = None
    ) -> None:
        if size <= 0:
            raise ValueError("a hashtable needs at least one bucket")
        self.size = size
        self.hash_function: Callable[[T], int] = (
            hash_function if hash_function is not None else _default_hash
        )
        self._buckets: list[list[T]] = [[] for _ in range(size)]

    def insert(self, element: T) -> T:
        """Append ``element`` to the end of its bucket's chain and return it."""
        index = self.hash_function(element) % self.size
        self._buckets[index].append(element)
        return element

    def bucket(self, hash_value: int) -> list[T]:
        """The chain for ``hash_value``, in insertion order (a copy)."""
        return list(self._buckets[hash_value % self.size])

    def first_at_bucket(self, hash_value: int) -> T:
        """The first element chained at ``hash_value``; KeyError if empty."""
        chain = self._buckets[hash_value % self.size]
        if not chain:
            raise KeyError(f"no element in bucket for hash {hash_value}")
        return chain[0]

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __iter__(self) -> Iterator[T]:
        for chain in self._buckets:
            yield from list(chain)


class Stream(Generic[T]):
    """An append-only sequence that can be compacted into a list."""

    def __init__(self) -> None:
        self._elements: list[T] = []

    def push(self, element: T) -> T:
        """Append ``element`` and return it."""
        self._elements.append(element)
        return element

    def compact(self) -> list[T]:
        """Return every element in push order and empty the stream."""
        result = self._elements
        self._elements = []
        return result

    def clear(self) -> None:
        """Drop every element."""
        self._elements = []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._elements))