"""A first-fit block allocator over a fixed-size address range."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterator

__all__ = [
    "HEADER_SIZE",
    "AllocationType",
    "HeapBlock",
    "HeapError",
    "HeapAllocator",
]

HEADER_SIZE = 24


class AllocationType(enum.Enum):
    FREE = 0
    RESERVED = 1


@dataclass
class HeapBlock:
    """A block header: its offset, size (header included) and state."""

    offset: int
    size: int
    type: AllocationType
    prev_allocation_size: int = 0


class HeapError(Exception):
    """Raised when the heap is exhausted or given an invalid allocation."""


class HeapAllocator:
    """Hands out offsets into a heap of ``size`` bytes.

    Every block carries a header of HEADER_SIZE bytes.  The heap ends with a
    reserved block of size zero.  A free block is used only when it is
    strictly larger than the request plus its header.
    """

    def __init__(self, size: int) -> None:
        if size < 2 * HEADER_SIZE:
            raise ValueError(f"heap of {size} bytes cannot hold two block headers")
        self.size = size
        first_size = size - HEADER_SIZE
        self._blocks: dict[int, HeapBlock] = {
            0: HeapBlock(0, first_size, AllocationType.FREE, 0),
            first_size: HeapBlock(first_size, 0, AllocationType.RESERVED, first_size),
        }

    def _next(self, block: HeapBlock) -> HeapBlock | None:
        if not block.size:
            return None
        return self._blocks[block.offset + block.size]

    def _prev(self, block: HeapBlock) -> HeapBlock | None:
        if not block.prev_allocation_size:
            return None
        return self._blocks[block.offset - block.prev_allocation_size]

    def allocate(self, requested_size: int) -> int:
        """Reserve ``requested_size`` bytes and return the offset of the data."""
        if requested_size < 0:
            raise ValueError("requested size must not be negative")
        allocation_size = requested_size + HEADER_SIZE
        prev_size = 0
        block: HeapBlock | None = self._blocks[0]
        while block is not None and block.size:
            if block.type is AllocationType.FREE and block.size > allocation_size:
                remainder = block.size - allocation_size
                block.size = allocation_size
                block.type = AllocationType.RESERVED
                block.prev_allocation_size = prev_size

                rest = HeapBlock(
                    block.offset + allocation_size,
                    remainder,
                    AllocationType.FREE,
                    allocation_size,
                )
                self._blocks[rest.offset] = rest
                following = self._next(rest)
                if following is not None:
                    following.prev_allocation_size = remainder
                return block.offset + HEADER_SIZE
            prev_size = block.size
            block = self._next(block)
        raise HeapError("Ran out of heap memory")

    def _condense(self, first: HeapBlock, second: HeapBlock) -> None:
        if first.type is not AllocationType.FREE and second.type is not AllocationType.FREE:
            raise HeapError("cannot merge two reserved blocks")
        if second.offset < first.offset:
            first, second = second, first
        first.type = AllocationType.FREE
        second.type = AllocationType.FREE
        first.size += second.size
        del self._blocks[second.offset]
        following = self._next(first)
        if following is not None:
            following.prev_allocation_size = first.size

    def deallocate(self, offset: int) -> None:
        """Release the allocation whose data starts at ``offset``.

        The block is merged with the following block if that is free,
        otherwise with the preceding one if that is free.
        """
        block = self._blocks.get(offset - HEADER_SIZE)
        if block is None or block.size == 0:
            raise HeapError(f"no allocation at offset {offset}")
        if block.type is AllocationType.FREE:
            raise HeapError(f"allocation at offset {offset} is already free")

        following = self._next(block)
        if following is not None and following.type is AllocationType.FREE:
            self._condense(block, following)
            return

        preceding = self._prev(block)
        if preceding is not None and preceding.type is AllocationType.FREE:
            self._condense(block, preceding)
            return

        block.type = AllocationType.FREE

    def blocks(self) -> Iterator[HeapBlock]:
        """Copies of every block in address order, ending with the end marker."""
        block: HeapBlock | None = self._blocks[0]
        while block is not None:
            yield replace(block)
            block = self._next(block)