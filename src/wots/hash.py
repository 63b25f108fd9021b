"""
Defines the one-way hash function used by the scheme.

The same hash is used for two purposes:
1.  Digesting the message, whose bytes select how far each chain is walked.
2.  Stepping along the hash chains.

The message digest is a single pass of the hash over the raw message, with no
domain separation or length prefix. This matches the existing wire format and
must be preserved for interoperability.
"""

from __future__ import annotations

import hashlib

from pydantic import field_validator
from typing_extensions import Final

from .config import SUPPORTED_HASHES, WOTS_HASH
from .constants import VALUE_LENGTH
from .types import Bytes32, StrictBaseModel


class Hasher(StrictBaseModel):
    """A named `hashlib` algorithm producing one chain value per call."""

    name: str
    """The `hashlib` name of the algorithm (e.g. 'sha256')."""

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        """Only algorithms with a digest of exactly one chain value are allowed."""
        if v not in SUPPORTED_HASHES:
            raise ValueError(f"Unsupported hash '{v}'. Supported values: {SUPPORTED_HASHES}")
        digest_size = hashlib.new(v).digest_size
        if digest_size != VALUE_LENGTH:
            raise ValueError(f"Hash '{v}' has a {digest_size}-byte digest, need {VALUE_LENGTH}")
        return v

    def digest(self, data: bytes) -> Bytes32:
        """
        Hashes `data` in a single pass.

        Args:
            data: Any byte string (a message, or a chain value).

        Returns:
            The 32-byte digest.
        """
        return Bytes32(hashlib.new(self.name, data).digest())


SHA256_HASHER: Final = Hasher(name="sha256")
"""The SHA-256 instance."""

DEFAULT_HASHER: Final = Hasher(name=WOTS_HASH)
"""The instance selected by the `WOTS_HASH` environment variable."""
