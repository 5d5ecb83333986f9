"""Hashing and AES-CTR primitives used for call key derivation."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = [
    "KeyIv",
    "sha256_digest",
    "sha256_concat",
    "sha1_digest",
    "prepare_key_iv",
    "aes_ctr_process",
]

BytesLike = Union[bytes, bytearray, memoryview]

SHA256_SIZE = 32


@dataclass(frozen=True)
class KeyIv:
    """A 32-byte AES key and a 16-byte initial counter block."""

    key: bytes
    iv: bytes

    def __post_init__(self) -> None:
        if len(self.key) != 32:
            raise ValueError("AES key must be 32 bytes")
        if len(self.iv) != 16:
            raise ValueError("AES IV must be 16 bytes")


def sha256_digest(data: BytesLike) -> bytes:
    """SHA-256 digest of ``data``."""
    return hashlib.sha256(bytes(data)).digest()


def sha256_concat(first: BytesLike, second: BytesLike) -> bytes:
    """SHA-256 digest of ``first`` followed by ``second``."""
    hasher = hashlib.sha256(bytes(first))
    hasher.update(bytes(second))
    return hasher.digest()


def sha1_digest(data: BytesLike) -> bytes:
    """SHA-1 digest of ``data``."""
    return hashlib.sha1(bytes(data)).digest()


def prepare_key_iv(key: BytesLike, msg_key: BytesLike, x: int) -> KeyIv:
    """Derive the AES key and IV from a shared key and a 16-byte message key.

    ``x`` selects the direction; bytes ``x .. x+76`` of ``key`` are used.
    """
    key = bytes(key)
    msg_key = bytes(msg_key)
    if x < 0 or len(key) < x + 76:
        raise ValueError("shared key is too short for the given offset")
    if len(msg_key) < 16:
        raise ValueError("message key must be at least 16 bytes")
    msg_key = msg_key[:16]
    sha_a = sha256_concat(msg_key, key[x : x + 36])
    sha_b = sha256_concat(key[40 + x : 76 + x], msg_key)
    aes_key = sha_a[:8] + sha_b[8:24] + sha_a[24:32]
    aes_iv = sha_b[:4] + sha_a[8:16] + sha_b[24:28]
    return KeyIv(aes_key, aes_iv)


def aes_ctr_process(data: BytesLike, key_iv: KeyIv) -> bytes:
    """Encrypt or decrypt ``data`` with AES-256 in counter mode."""
    cipher = Cipher(algorithms.AES(key_iv.key), modes.CTR(key_iv.iv))
    processor = cipher.encryptor()
    return processor.update(bytes(data)) + processor.finalize()