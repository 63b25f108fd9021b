"""
Defines the protocol constants of the one-time signature scheme.

The parameter set is fixed: one hash chain per byte of a 32-byte message digest,
each chain 256 steps long (Winternitz parameter w = 256), no checksum chains.

These values are part of the wire format. Changing any of them produces keys
and signatures that do not interoperate with other implementations.
"""

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import Final, Self


class WotsConfig(BaseModel):
    """A model holding the configuration constants of the scheme."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    NUM_CHAINS: int
    """The number of hash chains, one per digest byte."""

    CHAIN_LENGTH: int
    """The number of hash steps from a secret seed to its public chain end."""

    VALUE_LENGTH: int
    """The length in bytes of every chain value, equal to the hash output length."""

    @property
    def KEY_BYTES(self) -> int:  # noqa: N802
        """The encoded length of a secret key, public key or signature."""
        return self.NUM_CHAINS * self.VALUE_LENGTH

    @model_validator(mode="after")
    def _check_digest_mapping(self) -> Self:
        """Each chain consumes exactly one unsigned byte of the message digest."""
        if self.CHAIN_LENGTH != 256:
            raise ValueError(f"CHAIN_LENGTH must be 256 (one digest byte), got {self.CHAIN_LENGTH}")
        if self.NUM_CHAINS != self.VALUE_LENGTH:
            raise ValueError(
                f"NUM_CHAINS ({self.NUM_CHAINS}) must equal the digest length "
                f"({self.VALUE_LENGTH})"
            )
        return self


PROD_CONFIG: Final = WotsConfig(
    NUM_CHAINS=32,
    CHAIN_LENGTH=256,
    VALUE_LENGTH=32,
)

NUM_CHAINS: Final = PROD_CONFIG.NUM_CHAINS
"""The number of hash chains in every key and signature."""

CHAIN_LENGTH: Final = PROD_CONFIG.CHAIN_LENGTH
"""The number of hash steps from a secret seed to its public chain end."""

VALUE_LENGTH: Final = PROD_CONFIG.VALUE_LENGTH
"""The length in bytes of each chain value."""
