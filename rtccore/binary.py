"""Helpers for working with raw byte buffers."""

from __future__ import annotations

import secrets
from typing import Union

__all__ = [
    "to_string",
    "set_with_const",
    "copy_into",
    "random_fill",
    "set_random",
]

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def to_string(buffer: BytesLike) -> str:
    """Return the buffer as a string holding one character per byte."""
    return bytes(buffer).decode("latin-1")


def set_with_const(destination: WritableBuffer, value: int) -> None:
    """Fill every byte of ``destination`` with ``value``."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    destination[:] = bytes((value,)) * len(destination)


def copy_into(destination: WritableBuffer, source: BytesLike) -> None:
    """Copy ``source`` to the start of ``destination``.

    Raises ValueError when the destination is smaller than the source.
    """
    if len(destination) < len(source):
        raise ValueError("Destination size is less than source size")
    destination[: len(source)] = bytes(source)


def random_fill(destination: WritableBuffer) -> None:
    """Overwrite ``destination`` with cryptographically secure random bytes."""
    destination[:] = secrets.token_bytes(len(destination))


def set_random(destination: WritableBuffer) -> None:
    """Fill ``destination`` with random bytes unless it is empty."""
    if len(destination):
        random_fill(destination)