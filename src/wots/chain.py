"""
Hash chain traversal.

A hash chain is the sequence `v_0, v_1, ..., v_256` with `v_(j+1) = H(v_j)`.
The secret key holds `v_0` for every chain and the public key holds `v_256`.

A signature reveals, for chain `i`, the value `v_(256 - d_i)` where `d_i` is
byte `i` of the message digest. The verifier walks the remaining `d_i` steps
and must land on the public chain end.
"""

from __future__ import annotations

from .constants import CHAIN_LENGTH
from .hash import Hasher
from .types import Bytes32


def hash_chain(hasher: Hasher, start: Bytes32, num_steps: int) -> Bytes32:
    """
    Walks `num_steps` steps along a hash chain.

    Each step hashes the previous 32-byte output. There is no shortcut: the
    work is proportional to `num_steps`.

    Args:
        hasher: The hash function defining the chain.
        start: The value to begin hashing from.
        num_steps: How many times to apply the hash. Any non-negative count is
            allowed; signing and verification stay within `[0, CHAIN_LENGTH]`.

    Returns:
        The value `num_steps` positions further down the chain. For zero steps,
        `start` is returned unchanged.
    """
    if num_steps < 0:
        raise ValueError(f"num_steps must be non-negative, got {num_steps}")

    current = start
    for _ in range(num_steps):
        current = hasher.digest(current)
    return current


def signing_steps(digest: Bytes32) -> list[int]:
    """
    Steps the signer walks from each secret seed.

    Chain `i` is walked `CHAIN_LENGTH - digest[i]` steps, which lies in `[1, 256]`.
    """
    return [CHAIN_LENGTH - byte for byte in digest]


def verification_steps(digest: Bytes32) -> list[int]:
    """
    Steps the verifier walks from each signature value.

    Chain `i` is walked `digest[i]` steps, which lies in `[0, 255]`. Together
    with `signing_steps` this adds up to exactly `CHAIN_LENGTH` for every chain.
    """
    return list(digest)
