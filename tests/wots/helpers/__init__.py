"""Test helpers for WOTS unit tests."""

from __future__ import annotations

from .csprng import FixedCsprng, SeededCsprng
from .forgery import bytewise_max, bytewise_min, chains_reach_public_key, forge_from_reused_key


def flip_bit(data: bytes, bit_index: int) -> bytes:
    """Return `data` with a single bit inverted."""
    buf = bytearray(data)
    buf[bit_index // 8] ^= 1 << (bit_index % 8)
    return bytes(buf)


__all__ = [
    "FixedCsprng",
    "SeededCsprng",
    "bytewise_max",
    "bytewise_min",
    "chains_reach_public_key",
    "flip_bit",
    "forge_from_reused_key",
]
