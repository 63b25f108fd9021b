"""
This package provides a Python implementation of the Winternitz One-Time
Signature scheme with w = 256 and 32 chains of 32 bytes.

It exposes the key and signature containers and the main interface functions.
"""

from .constants import CHAIN_LENGTH, NUM_CHAINS, PROD_CONFIG, VALUE_LENGTH, WotsConfig
from .containers import PublicKey, SecretKey, Signature
from .hash import DEFAULT_HASHER, SHA256_HASHER, Hasher
from .interface import from_bytes, generate, sign, to_bytes, verify
from .keypair import Keypair
from .rand import OS_CSPRNG, Csprng, OsCsprng

__all__ = [
    "Keypair",
    "PublicKey",
    "SecretKey",
    "Signature",
    "Hasher",
    "Csprng",
    "OsCsprng",
    "OS_CSPRNG",
    "DEFAULT_HASHER",
    "SHA256_HASHER",
    "WotsConfig",
    "PROD_CONFIG",
    "NUM_CHAINS",
    "CHAIN_LENGTH",
    "VALUE_LENGTH",
    "generate",
    "sign",
    "verify",
    "to_bytes",
    "from_bytes",
]
