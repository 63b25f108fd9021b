"""Randomness sources for key generation."""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from typing_extensions import Final


@runtime_checkable
class Csprng(Protocol):
    """
    A cryptographically secure source of random bytes.

    This is a caller contract: nothing checks that an implementation is
    actually secure. Keys generated from a predictable source are forgeable.
    """

    def fill_bytes(self, length: int) -> bytes:
        """Return `length` fresh random bytes."""
        ...


class OsCsprng:
    """The operating system's secure random number generator."""

    def fill_bytes(self, length: int) -> bytes:
        """Return `length` bytes from `secrets.token_bytes`."""
        return secrets.token_bytes(length)

    def __repr__(self) -> str:
        return "OsCsprng()"


OS_CSPRNG: Final = OsCsprng()
"""The default randomness source."""
