"""String helpers: a small printf-style formatter and case conversions."""

from __future__ import annotations

import re
from typing import Any, Callable

__all__ = [
    "FormatError",
    "format_string",
    "to_capital_case",
    "to_lower_case",
    "strip_prefix",
    "concat",
    "memory_size",
    "format_thousands",
    "number_to_string",
    "vector_to_string",
    "to_float",
]

DEFAULT_FORMAT_PRECISION = 2

_KILOBYTE = 1024
_MEGABYTE = 1024 * _KILOBYTE
_GIGABYTE = 1024 * _MEGABYTE

_U32_MASK = (1 << 32) - 1
_U64_MASK = (1 << 64) - 1

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class FormatError(ValueError):
    """Raised when a format string is malformed or lacks arguments."""


class _Scanner:
    """Walks a format string one character at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def done(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> str:
        return "" if self.done else self._text[self._pos]

    def advance(self) -> str:
        if self.done:
            raise FormatError("format string ends inside a conversion specifier")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def number(self) -> int:
        match = re.compile(r"[0-9]+").match(self._text, self._pos)
        if match is None:
            raise FormatError("expected a number in format string")
        self._pos = match.end()
        return int(match.group())


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def _pad(text: str, pad_count: int) -> str:
    return " " * max(pad_count, 0) + text


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _right_align(text: str, width: int) -> str:
    return _pad(text, width - len(text))


def _convert(
    char: str,
    width: int,
    precision: int,
    take: Callable[[], Any],
    scan: _Scanner,
) -> str:
    if char == "d":
        return _right_align(str(_wrap_signed(int(take()), 32)), width)
    if char == "l":
        kind = scan.advance()
        if kind == "u":
            return _right_align(str(int(take()) & _U64_MASK), width)
        if kind == "d":
            return _right_align(str(_wrap_signed(int(take()), 64)), width)
        return ""
    if char == "p":
        return "0x" + _right_align(format(int(take()) & _U64_MASK, "X"), width)
    if char == "x":
        return _right_align(format(int(take()) & _U64_MASK, "X"), width)
    if char == "u":
        return _right_align(str(int(take()) & _U32_MASK), width)
    if char == "c":
        value = take()
        text = chr(value) if isinstance(value, int) else str(value)[:1]
        return _pad(text, width - 1) if width else text
    if char == "s":
        value = str(take())
        shown = value[:precision] if precision else value
        value_len = precision if precision else len(value)
        return _pad(shown, width - value_len) if width else shown
    if char == "f":
        value = float(take())
        digits = precision if precision else DEFAULT_FORMAT_PRECISION
        return _right_align(f"{value:.{digits}f}", width)
    if char == "b":
        return "T" if take() else "F"
    if char == "S":
        value = str(take())
        return _pad(value, width - len(value)) if width else value
    raise FormatError(f"invalid conversion {char!r} in format string")


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` according to the printf-like ``fmt``.

    Supports %d, %ld, %lu, %u, %x, %p, %c, %s, %S, %f and %b, with a width
    given as digits or ``*`` and a precision given as ``.digits`` or ``.*``.
    """
    values = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise FormatError("not enough arguments for format string") from None

    scan = _Scanner(fmt)
    pieces: list[str] = []
    while not scan.done:
        char = scan.advance()
        if char != "%":
            pieces.append(char)
            continue

        width = 0
        peek = scan.peek()
        if peek == "*":
            scan.advance()
            char = scan.advance()
            width = int(take())
        elif _is_digit(peek):
            width = scan.number()
            char = scan.advance()
        else:
            char = scan.advance()

        precision = 0
        if char == ".":
            peek = scan.peek()
            if peek == "*":
                scan.advance()
                char = scan.advance()
                precision = int(take())
            elif _is_digit(peek):
                precision = scan.number()
                char = scan.advance()
            else:
                raise FormatError("invalid dot specifier in format string")

        pieces.append(_convert(char, width, precision, take, scan))
    return "".join(pieces)


def to_capital_case(source: str) -> str:
    """Turn ``snake_case`` into ``CapitalCase``, dropping the underscores."""
    return "".join(part[:1].upper() + part[1:] for part in source.split("_"))


def to_lower_case(source: str) -> str:
    """Return ``source`` in lower case."""
    return source.lower()


def strip_prefix(source: str, count: int) -> str:
    """Drop everything up to and including the ``count + 1``-th underscore.

    If there are fewer underscores, everything up to the last one is dropped.
    Raises ValueError if nothing would remain.
    """
    cut = 0
    for hits, (index, char) in enumerate(
        (i, c) for i, c in enumerate(source) if c == "_"
    ):
        cut = index + 1
        if hits == count:
            break
    if len(source) <= cut:
        raise ValueError(f"nothing left after stripping prefix from {source!r}")
    return source[cut:]


def concat(first: str, second: str) -> str:
    """Join two strings."""
    return first + second


def memory_size(number: float) -> str:
    """Render a byte count with one decimal and a K, M or G suffix."""
    number = float(number)
    display = number
    units = " "
    if _KILOBYTE <= number < _MEGABYTE:
        display, units = number / _KILOBYTE, "K"
    elif _MEGABYTE <= number < _GIGABYTE:
        display, units = number / _MEGABYTE, "M"
    elif number >= _GIGABYTE:
        display, units = number / _GIGABYTE, "G"
    return format_string("%.1f%c", display, units)


def format_thousands(number: int) -> str:
    """Render a count with one decimal, using a K suffix from 1000 up."""
    display = float(number)
    units = " "
    if number >= 1000:
        display, units = number / 1000.0, "K"
    return format_string("%.1f%c", display, units)


def number_to_string(number: int | float) -> str:
    """Integers render in full, floats with two decimals."""
    if isinstance(number, int):
        return format_string("%ld", number)
    return format_string("%.2f", float(number))


def vector_to_string(x: float, y: float) -> str:
    """Render a 2D vector as ``(x,y)`` with two decimals each."""
    return format_string("(%.2f,%.2f)", float(x), float(y))


def to_float(text: str) -> float:
    """Parse the leading number in ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group().strip())