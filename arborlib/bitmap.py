"""Reading and writing 32-bit BMP images with bitfield masks."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

__all__ = [
    "BitmapError",
    "Bitmap",
    "HEADER_SIZE",
    "IMAGE_HEADER_SIZE",
    "read_bitmap",
    "write_bitmap",
    "unpack_rgba",
    "pack_rgba",
    "uv_for_char_code",
]

_FILE_HEADER = struct.Struct("<HIII")
_IMAGE_HEADER = struct.Struct("<IiiHH" + "I" * 10)
_HEADER = struct.Struct("<HIII" + "IiiHH" + "I" * 10)

IMAGE_HEADER_SIZE = _IMAGE_HEADER.size
HEADER_SIZE = _HEADER.size

_BMP_TYPE = 0x4D42
_BITFIELDS_COMPRESSION = 3
_PIXELS_PER_METER = 2835
_RED_MASK = 0x000000FF
_GREEN_MASK = 0x0000FF00
_BLUE_MASK = 0x00FF0000
_U32_MASK = 0xFFFFFFFF
_PIXEL_SIZE = 4

PathType = Union[str, "PathLike[str]"]


class BitmapError(Exception):
    """Raised when a bitmap cannot be read or written."""


@dataclass
class Bitmap:
    """A width by height image of packed 32-bit RGBA pixels, row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid bitmap size {self.width}x{self.height}")
        count = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * count
        elif len(self.pixels) != count:
            raise ValueError(
                f"bitmap of {self.width}x{self.height} needs {count} pixels, "
                f"got {len(self.pixels)}"
            )

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        value = color & _U32_MASK
        self.pixels[:] = [value] * len(self.pixels)

    def pixel_count(self) -> int:
        """Number of pixels the dimensions describe."""
        return self.width * self.height


def read_bitmap(path: PathType) -> Bitmap:
    """Load a bitmap written with bitfield compression.

    The pixel data is taken to follow the header directly.  Raises
    BitmapError if the file cannot be opened, is not bitfield-compressed,
    or its size disagrees with the header.
    """
    try:
        with open(path, "rb") as handle:
            header_bytes = handle.read(HEADER_SIZE)
            if len(header_bytes) < HEADER_SIZE:
                raise BitmapError(f"{path}: file is shorter than a bitmap header")
            header = _HEADER.unpack(header_bytes)
            (
                _type,
                file_size,
                _ignored,
                _offset,
                _image_header_size,
                width,
                height,
                _planes,
                _bpp,
                compression,
                size_in_bytes,
                *_rest,
            ) = header
            pixel_bytes = handle.read(size_in_bytes)
    except OSError as exc:
        raise BitmapError(f"Opening {path} for reading") from exc

    if compression != _BITFIELDS_COMPRESSION:
        raise BitmapError(f"{path}: unsupported compression type {compression}")
    if HEADER_SIZE + len(pixel_bytes) != file_size:
        raise BitmapError(
            f"{path}: read {HEADER_SIZE + len(pixel_bytes)} bytes, "
            f"header says {file_size}"
        )
    if width < 0 or height < 0:
        raise BitmapError(f"{path}: unsupported dimensions {width}x{height}")

    count = width * height
    if len(pixel_bytes) > count * _PIXEL_SIZE:
        raise BitmapError(f"{path}: more pixel data than {width}x{height} pixels")
    padded = pixel_bytes.ljust(count * _PIXEL_SIZE, b"\x00")
    pixels = list(struct.unpack(f"<{count}I", padded))
    return Bitmap(width, height, pixels)


def write_bitmap(bitmap: Bitmap, path: PathType) -> int:
    """Write ``bitmap`` to ``path`` and return the number of bytes written."""
    pixel_data = struct.pack(
        f"<{len(bitmap.pixels)}I", *(pixel & _U32_MASK for pixel in bitmap.pixels)
    )
    header = _HEADER.pack(
        _BMP_TYPE,
        HEADER_SIZE + len(pixel_data),
        0,
        HEADER_SIZE,
        IMAGE_HEADER_SIZE,
        bitmap.width,
        bitmap.height,
        1,
        32,
        _BITFIELDS_COMPRESSION,
        len(pixel_data),
        _PIXELS_PER_METER,
        _PIXELS_PER_METER,
        0,
        0,
        _RED_MASK,
        _GREEN_MASK,
        _BLUE_MASK,
        0,
    )
    try:
        with open(Path(path), "wb") as handle:
            written = handle.write(header) + handle.write(pixel_data)
    except OSError as exc:
        raise BitmapError(f"Opening {path} for writing") from exc
    if written != len(header) + len(pixel_data):
        raise BitmapError(f"short write to {path}")
    return written


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def unpack_rgba(color: int) -> tuple[float, float, float, float]:
    """Split a packed ``0xAABBGGRR`` colour into linear components in [0, 1]."""
    return tuple(  # type: ignore[return-value]
        _f32(((color >> shift) & 0xFF) / 255.0) for shift in (0, 8, 16, 24)
    )


def pack_rgba(color: Sequence[float]) -> int:
    """Pack linear RGBA components into ``0xAABBGGRR``, truncating each."""
    red, green, blue, alpha = (
        int(_f32(_f32(component) * 255)) & 0xFF for component in color
    )
    return (alpha << 24 | blue << 16 | green << 8 | red) & _U32_MASK


def uv_for_char_code(char: int) -> tuple[float, float]:
    """Texture coordinates of a character in a 16 by 16 glyph atlas."""
    code = char & 0xFF
    return (code % 16) / 16.0, (code // 16) / 16.0