"""WOTS key pairs."""

from __future__ import annotations

import logging

from pydantic import model_validator
from typing_extensions import Self

from ._validation import enforce_strict_types
from .constants import NUM_CHAINS
from .containers import PublicKey, SecretKey, Signature
from .hash import DEFAULT_HASHER, Hasher
from .rand import OS_CSPRNG, Csprng
from .types import StrictBaseModel

logger = logging.getLogger(__name__)


class Keypair(StrictBaseModel):
    """
    A secret key together with the public key derived from it.

    Both halves are produced by `generate` and are never swapped independently.
    The hash function is stored alongside them so that signing and verification
    always use the one the public key was derived with.
    """

    secret: SecretKey
    """The secret half of this key pair."""

    public: PublicKey
    """The public half of this key pair."""

    hasher: Hasher = DEFAULT_HASHER
    """The hash function defining the chains."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> Self:
        """Reject subclasses to prevent type confusion attacks."""
        enforce_strict_types(self, secret=SecretKey, public=PublicKey, hasher=Hasher)
        return self

    @classmethod
    def generate(cls, csprng: Csprng = OS_CSPRNG, hasher: Hasher = DEFAULT_HASHER) -> Self:
        """
        Generates a fresh key pair.

        Args:
            csprng: A cryptographically secure randomness source.
            hasher: The hash function defining the chains.

        Returns:
            A new key pair. Its secret key must sign at most one message.
        """
        secret = SecretKey.generate(csprng)
        public = PublicKey.from_secret_key(secret, hasher)
        logger.debug("Generated WOTS keypair (%d chains, hash=%s)", NUM_CHAINS, hasher.name)
        return cls(secret=secret, public=public, hasher=hasher)

    def sign(self, message: bytes) -> Signature:
        """Signs `message` with the secret half."""
        return self.secret.sign(message, self.hasher)

    def verify(self, message: bytes, signature: Signature) -> bool:
        """Returns `True` if `signature` is valid for `message` under the public half."""
        return self.public.verify(message, signature, self.hasher)
