"""Arbitrary-precision unsigned integers with a sticky failure flag."""

from __future__ import annotations

from typing import Union

__all__ = ["BigNum"]

BytesLike = Union[bytes, bytearray, memoryview]


class BigNum:
    """A big integer whose operations record failure instead of raising.

    Once an operation fails, ``failed`` is True and the number reports zero
    size and empty bytes until it is set again.
    """

    def __init__(self) -> None:
        self._value = 0
        self._failed = False

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "BigNum":
        """Create a number from big-endian bytes."""
        number = cls()
        number.set_bytes(data)
        return number

    @classmethod
    def from_word(cls, word: int) -> "BigNum":
        """Create a number from an unsigned 32-bit word."""
        number = cls()
        number.set_word(word)
        return number

    @property
    def failed(self) -> bool:
        """True if the last operation on this number failed."""
        return self._failed

    @property
    def value(self) -> int:
        """The integer value held."""
        return self._value

    def _clear(self) -> None:
        self._value = 0

    def set_bytes(self, data: BytesLike) -> None:
        """Set the value from big-endian bytes; empty bytes give zero."""
        self._value = int.from_bytes(bytes(data), "big") if len(data) else 0
        self._failed = False

    def set_word(self, word: int) -> None:
        """Set the value from an unsigned 32-bit word."""
        if not 0 <= word <= 0xFFFFFFFF:
            raise ValueError(f"word out of range: {word}")
        self._value = word
        self._failed = False

    def set_mod_exp(self, base: "BigNum", power: "BigNum", modulus: "BigNum") -> None:
        """Set the value to ``base ** power % modulus``."""
        operands = (base, power, modulus)
        if any(n.failed for n in operands) or any(n.is_negative() for n in operands):
            self._failed = True
        elif modulus.value == 0:
            self._failed = True
        else:
            self._value = pow(base.value, power.value, modulus.value)
            self._failed = self._value < 0

    def set_sub(self, a: "BigNum", b: "BigNum") -> None:
        """Set the value to ``a - b``; the result may be negative."""
        if a.failed or b.failed:
            self._failed = True
        else:
            self._value = a.value - b.value
            self._failed = False

    def assign(self, other: "BigNum") -> "BigNum":
        """Copy the value and state of ``other`` into this number."""
        if other.failed:
            self._failed = True
        else:
            self._value = other.value
            self._failed = False
        return self

    def is_negative(self) -> bool:
        return not self._failed and self._value < 0

    def is_zero(self) -> bool:
        return not self._failed and self._value == 0

    def bits_size(self) -> int:
        """Number of significant bits of the magnitude, or 0 after failure."""
        return 0 if self._failed else abs(self._value).bit_length()

    def bytes_size(self) -> int:
        """Number of bytes of the magnitude, or 0 after failure."""
        return (self.bits_size() + 7) // 8

    def get_bytes(self) -> bytes:
        """Big-endian bytes of the magnitude; empty after failure or for zero."""
        if self._failed:
            return b""
        return abs(self._value).to_bytes(self.bytes_size(), "big")

    def __repr__(self) -> str:
        state = "failed" if self._failed else str(self._value)
        return f"BigNum({state})"