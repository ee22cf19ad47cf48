"""Bit-flag helpers and nested 3D index iterators."""

from __future__ import annotations

import itertools
from typing import Iterator, Sequence

__all__ = [
    "set_bitfield",
    "unset_bitfield",
    "toggle_bitfield",
    "dim_iterator",
    "min_dim_iterator",
    "min_max_iterator",
]

_U32_MASK = (1 << 32) - 1


def set_bitfield(dest: int, value: int) -> int:
    """Return ``dest`` with the bits of ``value`` set; they must be clear."""
    if dest & value:
        raise ValueError(f"bits {value:#x} already set in {dest:#x}")
    return dest | value


def unset_bitfield(dest: int, value: int) -> int:
    """Return ``dest`` with the bits of ``value`` cleared; some must be set."""
    if not dest & value:
        raise ValueError(f"bits {value:#x} not set in {dest:#x}")
    return dest & ~value


def toggle_bitfield(dest: int, value: int) -> int:
    """Clear ``value`` if any of its bits are set in ``dest``, else set it."""
    if dest & value:
        return (dest & ~value) & _U32_MASK
    return (dest | value) & _U32_MASK


def min_max_iterator(
    minimum: Sequence[int], maximum: Sequence[int]
) -> Iterator[tuple[int, int, int]]:
    """Yield ``(x, y, z)`` over the half-open box, x varying fastest."""
    for z, y, x in itertools.product(
        range(minimum[2], maximum[2]),
        range(minimum[1], maximum[1]),
        range(minimum[0], maximum[0]),
    ):
        yield x, y, z


def min_dim_iterator(
    minimum: Sequence[int], dim: Sequence[int]
) -> Iterator[tuple[int, int, int]]:
    """Yield ``(x, y, z)`` over the box starting at ``minimum`` of size ``dim``."""
    maximum = tuple(lo + size for lo, size in zip(minimum[:3], dim[:3]))
    return min_max_iterator(minimum, maximum)


def dim_iterator(dim: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """Yield ``(x, y, z)`` over a box of size ``dim`` at the origin."""
    return min_max_iterator((0, 0, 0), dim)