"""
Defines the functional interface of the one-time signature scheme.

These functions (`generate`, `sign`, `verify`, `to_bytes`, `from_bytes`) are
thin wrappers over the container methods and constitute the public API.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from .containers import PublicKey, SecretKey, Signature
from .hash import DEFAULT_HASHER, Hasher
from .keypair import Keypair
from .rand import OS_CSPRNG, Csprng
from .types import Bytes32

E = TypeVar("E", SecretKey, PublicKey, Signature)


def generate(csprng: Csprng = OS_CSPRNG, hasher: Hasher = DEFAULT_HASHER) -> Keypair:
    """Produces a fresh key pair from `csprng`."""
    return Keypair.generate(csprng, hasher)


def sign(secret_key: SecretKey, message: bytes, hasher: Hasher = DEFAULT_HASHER) -> Signature:
    """
    Signs `message` with `secret_key`.

    The caller must not sign a second, different message with the same key.
    """
    return secret_key.sign(message, hasher)


def verify(
    public_key: PublicKey,
    message: bytes,
    signature: Signature,
    hasher: Hasher = DEFAULT_HASHER,
) -> bool:
    """Returns `True` iff `signature` is a valid signature on `message` under `public_key`."""
    return public_key.verify(message, signature, hasher)


def to_bytes(entity: SecretKey | PublicKey | Signature) -> tuple[Bytes32, ...]:
    """Returns the raw 32 x 32-byte array of any key or signature, in chain order."""
    return entity.to_bytes()


def from_bytes(entity_type: type[E], blocks: Sequence[bytes]) -> E:
    """
    Rebuilds a key or signature of type `entity_type` from a raw 32 x 32-byte array.

    Only the shape is checked.
    """
    return entity_type.from_bytes(blocks)
