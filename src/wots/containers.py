"""
Data containers for the one-time signature scheme: SecretKey, PublicKey and Signature.

All three are `NUM_CHAINS` values of `VALUE_LENGTH` bytes, block `i` belonging to
hash chain `i`. They differ only in how far along each chain their values sit:

- SecretKey: position 0 (the random seeds).
- Signature: position `256 - digest[i]`.
- PublicKey: position 256 (the chain ends).

Encoded, each is `NUM_CHAINS` consecutive blocks in ascending chain order.
"""

from __future__ import annotations

import hmac
import logging

from typing_extensions import Self

from .chain import hash_chain, signing_steps, verification_steps
from .constants import NUM_CHAINS, PROD_CONFIG
from .hash import DEFAULT_HASHER, Hasher
from .rand import Csprng
from .types import Bytes32, FixedVector

logger = logging.getLogger(__name__)


class SecretKey(FixedVector[Bytes32]):
    """
    The private half of a key pair. **MUST BE KEPT CONFIDENTIAL.**

    A secret key must sign **at most one** message. Signing a second, different
    message reveals chain values that let anyone forge signatures on further
    messages. This is not detected: the second signature is produced normally.
    """

    ELEMENT_TYPE = Bytes32
    LENGTH = NUM_CHAINS

    @classmethod
    def generate(cls, csprng: Csprng) -> Self:
        """
        Draws a fresh secret key.

        The source is asked for `NUM_CHAINS * VALUE_LENGTH` bytes once, which
        are split into consecutive seeds.

        Args:
            csprng: A cryptographically secure randomness source. This is not checked.

        Returns:
            A new secret key.
        """
        return cls.decode_bytes(csprng.fill_bytes(PROD_CONFIG.KEY_BYTES))

    def sign(self, message: bytes, hasher: Hasher = DEFAULT_HASHER) -> Signature:
        """
        Signs `message`.

        ### Signing Algorithm

        1.  Digest the message: `d = H(message)`.
        2.  For each chain `i`, walk `256 - d[i]` steps from seed `i`.

        Signing is deterministic: the same key and message always give the
        same signature.

        Args:
            message: The message bytes.
            hasher: The hash function. Must match the one used to derive the public key.

        Returns:
            The signature on `message`.
        """
        digest = hasher.digest(message)
        logger.debug("Signing message with digest %s using %s", digest.hex(), hasher.name)
        return Signature(
            data=[
                hash_chain(hasher, seed, steps)
                for seed, steps in zip(self.data, signing_steps(digest), strict=True)
            ]
        )

    def public_key(self, hasher: Hasher = DEFAULT_HASHER) -> PublicKey:
        """Derives the matching public key."""
        return PublicKey.from_secret_key(self, hasher)

    def __repr__(self) -> str:
        """Never expose seed material."""
        return f"{self.__class__.__name__}(<redacted>)"

    def __str__(self) -> str:
        return repr(self)


class PublicKey(FixedVector[Bytes32]):
    """
    The public half of a key pair.

    Each value is the end of a full-length hash chain. Recovering the seed would
    require inverting the hash, so the key is safe to distribute.
    """

    ELEMENT_TYPE = Bytes32
    LENGTH = NUM_CHAINS

    @classmethod
    def from_secret_key(cls, secret_key: SecretKey, hasher: Hasher = DEFAULT_HASHER) -> Self:
        """
        Derives a public key by walking every chain to its end.

        Args:
            secret_key: The secret seeds.
            hasher: The hash function defining the chains.

        Returns:
            The chain ends, `H^256(seed_i)` for each chain.
        """
        return cls(
            data=[hash_chain(hasher, seed, PROD_CONFIG.CHAIN_LENGTH) for seed in secret_key]
        )

    def verify(
        self, message: bytes, signature: Signature, hasher: Hasher = DEFAULT_HASHER
    ) -> bool:
        """
        Checks that `signature` is valid for `message` under this key.

        ### Verification Algorithm

        1.  Digest the message: `d = H(message)`.
        2.  For each chain `i`, walk `d[i]` steps from signature value `i`.
        3.  Accept iff every resulting value equals the stored chain end.

        The final comparison covers all blocks and does not stop at the first
        mismatch.

        Args:
            message: The message that was supposedly signed.
            signature: The signature to check.
            hasher: The hash function. Must match the one used at signing.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        digest = hasher.digest(message)
        candidate = b"".join(
            hash_chain(hasher, value, steps)
            for value, steps in zip(signature, verification_steps(digest), strict=True)
        )
        is_valid = hmac.compare_digest(candidate, self.encode_bytes())
        if not is_valid:
            logger.debug("Rejected signature for message digest %s", digest.hex())
        return is_valid


class Signature(FixedVector[Bytes32]):
    """
    A one-time signature.

    It carries no metadata. The binding to a message exists only because the
    verifier re-hashes the message.
    """

    ELEMENT_TYPE = Bytes32
    LENGTH = NUM_CHAINS

    def verify(
        self, public_key: PublicKey, message: bytes, hasher: Hasher = DEFAULT_HASHER
    ) -> bool:
        """
        Verify the signature against a public key.

        This is a convenience method that delegates to `PublicKey.verify`.
        """
        return public_key.verify(message, self, hasher)
