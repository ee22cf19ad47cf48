"""Fixed-capacity stacks and cursors, plus a linear index lookup."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Sequence, TypeVar

__all__ = ["FixedStack", "Cursor", "index_of"]

T = TypeVar("T")


class _Bounded(Generic[T]):
    """Shared storage for containers that hold at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self.capacity})"

    def push(self, element: T) -> T:
        """Append ``element``; raises IndexError when full."""
        if len(self._items) >= self.capacity:
            raise IndexError(f"{type(self).__name__} is full ({self.capacity})")
        self._items.append(element)
        return element

    def pop(self) -> T:
        """Remove and return the last element; raises IndexError when empty."""
        if not self._items:
            raise IndexError(f"pop from empty {type(self).__name__}")
        return self._items.pop()

    def get(self, index: int) -> T:
        """The element at ``index``, which must be below the current count."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} elements")
        return self._items[index]

    def set(self, index: int, element: T) -> None:
        """Replace the element at ``index``; ``index == len`` appends."""
        count = len(self._items)
        if not 0 <= index <= count:
            raise IndexError(f"index {index} out of range for {count} elements")
        if index == count:
            self.push(element)
        else:
            self._items[index] = element

    def _swap_remove(self, query: Any) -> bool:
        # Each match is replaced by the popped last element; the slot is not
        # checked again, so a moved-in match survives this pass.
        removed = False
        index = 0
        while index < len(self._items):
            if self._items[index] == query:
                is_last = index == len(self._items) - 1
                last = self.pop()
                if not is_last:
                    self.set(index, last)
                removed = True
            index += 1
        return removed


class FixedStack(_Bounded[T]):
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def push(self, element: T) -> T:
        return super().push(element)

    def pop(self) -> T:
        return super().pop()

    def get(self, index: int) -> T:
        return super().get(index)

    def set(self, index: int, element: T) -> None:
        super().set(index, element)

    def remove_unordered(self, query: T) -> bool:
        """Remove matches of ``query`` by swapping in the last element."""
        return self._swap_remove(query)

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()


class Cursor(_Bounded[T]):
    """A fill-forward buffer with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def push(self, element: T) -> T:
        return super().push(element)

    def pop(self) -> T:
        return super().pop()

    def get(self, index: int) -> T:
        return super().get(index)

    def set(self, index: int, element: T) -> None:
        super().set(index, element)

    def remove(self, query: T) -> bool:
        """Remove matches of ``query`` by swapping in the last element."""
        return self._swap_remove(query)

    def copy_into(self, dest: "Cursor[T]") -> None:
        """Overwrite ``dest`` with this cursor's elements."""
        if len(self) > dest.capacity:
            raise ValueError(
                f"destination capacity {dest.capacity} is below {len(self)} elements"
            )
        dest._items = list(self._items)

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()


def index_of(sequence: Sequence[T], element: T) -> int:
    """Index of the first element equal to ``element``, or ``len(sequence)``."""
    for index, item in enumerate(sequence):
        if item == element:
            return index
    return len(sequence)