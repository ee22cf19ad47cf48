"""File and directory helpers: existence checks, safe renames, temp files."""

from __future__ import annotations

import os
import random
import struct
from os import PathLike
from typing import BinaryIO, Union

__all__ = [
    "TMP_DIR_ROOT",
    "create_directory",
    "try_create_directory",
    "delete_directory",
    "try_delete_directory",
    "file_exists",
    "remove",
    "rename",
    "random_string",
    "tmp_filename",
    "open_temp_file",
    "write_u32",
    "write_u64",
    "read_exact",
]

TMP_DIR_ROOT = "tmp/"

PathType = Union[str, "PathLike[str]"]

_TEMP_FILE_ENTROPY = random.Random(3215432)


def create_directory(path: PathType) -> bool:
    """Create a directory; True on success."""
    try:
        os.mkdir(path)
    except OSError:
        return False
    return True


def try_create_directory(path: PathType) -> bool:
    """Create a directory unless something already exists at ``path``."""
    if file_exists(path):
        return True
    return create_directory(path)


def delete_directory(path: PathType) -> bool:
    """Remove an empty directory; True on success."""
    try:
        os.rmdir(path)
    except OSError:
        return False
    return True


def try_delete_directory(path: PathType) -> bool:
    """Remove a directory if something exists at ``path``."""
    if file_exists(path):
        return delete_directory(path)
    return True


def file_exists(path: PathType) -> bool:
    """Whether anything exists at ``path``."""
    return os.path.exists(path)


def remove(path: PathType) -> bool:
    """Delete a file; True on success."""
    try:
        os.remove(path)
    except OSError:
        return False
    return True


def rename(
    current: PathType, new: PathType, rng: random.Random | None = None
) -> bool:
    """Move ``current`` to ``new``, replacing what is there.

    An existing ``new`` is first moved aside to a temporary name under
    TMP_DIR_ROOT; it is deleted on success and restored on failure.
    """
    rng = rng if rng is not None else _TEMP_FILE_ENTROPY
    moved_aside: str | None = None
    if file_exists(new):
        candidate = tmp_filename(rng)
        try:
            os.rename(new, candidate)
            moved_aside = candidate
        except OSError:
            moved_aside = None

    try:
        os.rename(current, new)
    except OSError:
        if moved_aside is not None:
            try:
                os.rename(moved_aside, new)
            except OSError:
                pass
        return False

    if moved_aside is not None:
        remove(moved_aside)
    return True


def _is_ascii_alphanumeric(char: str) -> bool:
    return char.isascii() and char.isalnum()


def random_string(length: int, rng: random.Random) -> str:
    """A string of ``length`` ASCII letters and digits drawn from ``rng``."""
    chars = []
    for _ in range(length):
        char = chr(rng.randint(48, 122))
        while not _is_ascii_alphanumeric(char):
            char = chr(rng.randint(48, 122))
        chars.append(char)
    return "".join(chars)


def tmp_filename(rng: random.Random) -> str:
    """A random 32-character file name under TMP_DIR_ROOT."""
    return TMP_DIR_ROOT + random_string(32, rng)


def open_temp_file(rng: random.Random) -> BinaryIO:
    """Open a new temporary file for reading and writing in binary mode."""
    return open(tmp_filename(rng), "w+b")


def _write_all(file: BinaryIO, data: bytes) -> None:
    written = file.write(data)
    if written is not None and written != len(data):
        name = getattr(file, "name", "<file>")
        raise OSError(f"Error writing to file {name}")


def write_u32(file: BinaryIO, value: int) -> None:
    """Write ``value`` as a little-endian unsigned 32-bit integer."""
    _write_all(file, struct.pack("<I", value))


def write_u64(file: BinaryIO, value: int) -> None:
    """Write ``value`` as a little-endian unsigned 64-bit integer."""
    _write_all(file, struct.pack("<Q", value))


def read_exact(file: BinaryIO, count: int) -> bytes:
    """Read exactly ``count`` bytes, raising EOFError if fewer are available."""
    if count <= 0:
        raise ValueError("count must be positive")
    data = file.read(count)
    if len(data) != count:
        raise EOFError(f"wanted {count} bytes, got {len(data)}")
    return data