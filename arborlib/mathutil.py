"""Small numeric helpers: saturating arithmetic, clamping and signs."""

from __future__ import annotations

import enum
import math

__all__ = [
    "U64_MAX",
    "Sign",
    "safe_decrement",
    "saturating_add",
    "desaturate",
    "saturating_sub",
    "safe_divide0",
    "clamp_between",
    "clamp_bilateral",
    "clamp01",
    "clamp_minus1_to_infinity",
    "clamp0",
    "floori",
    "floorf",
    "ceilf",
    "ceili",
    "square",
    "pow2",
    "bilateral",
    "get_sign",
]

U64_MAX = (1 << 64) - 1


class Sign(enum.IntEnum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


def safe_decrement(n: int) -> int:
    """Return ``n - 1``, or ``n`` if it is already zero."""
    return n - 1 if n > 0 else n


def saturating_add(n: int) -> int:
    """Increment an unsigned 64-bit value, stopping at its maximum."""
    return n + 1 if n < U64_MAX else n


def desaturate(target: int, sub_value: int) -> int:
    """Subtract ``sub_value`` from ``target``, stopping at zero."""
    return target - sub_value if target >= sub_value else 0


def saturating_sub(n: int) -> int:
    """Decrement, stopping at zero."""
    return n - 1 if n else n


def safe_divide0(dividend: float, divisor: float) -> float:
    """Divide, returning 0.0 when the divisor is zero."""
    if divisor == 0:
        return 0.0
    return dividend / divisor


def clamp_between(minimum: float, value: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    if value > maximum:
        value = maximum
    if value < minimum:
        value = minimum
    return value


def clamp_bilateral(value: float) -> float:
    """Clamp into ``[-1, 1]``."""
    return clamp_between(-1.0, value, 1.0)


def clamp01(value: float) -> float:
    """Clamp into ``[0, 1]``."""
    return clamp_between(0.0, value, 1.0)


def clamp_minus1_to_infinity(value: float) -> float:
    """Raise anything below -1 to -1."""
    return -1.0 if value < -1 else value


def clamp0(value: int) -> int:
    """Raise negative values to zero."""
    return 0 if value < 0 else value


def floori(value: float) -> int:
    """Truncate toward zero."""
    return int(value)


def floorf(value: float) -> float:
    """Truncate toward zero, as a float."""
    return float(int(value))


def ceilf(value: float) -> float:
    """Ceiling as a float."""
    return float(math.ceil(value))


def ceili(value: float) -> int:
    """Ceiling as an integer."""
    return int(ceilf(value))


def square(value: float) -> float:
    return value * value


def pow2(p: int) -> int:
    """Two raised to ``p``."""
    return 1 << p


def bilateral(value: float) -> Sign:
    """Negative for values below zero, otherwise positive."""
    return Sign.NEGATIVE if value < 0 else Sign.POSITIVE


def get_sign(value: float) -> Sign:
    """The sign of ``value``, with zero for zero."""
    if value > 0:
        return Sign.POSITIVE
    if value < 0:
        return Sign.NEGATIVE
    return Sign.ZERO