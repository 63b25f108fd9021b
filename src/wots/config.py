"""
Global configuration for the WOTS package.

This module contains environment-specific settings that apply across all modules.
"""

import os

SUPPORTED_HASHES: list[str] = ["sha256", "sha3_256", "blake2s"]
"""Hash algorithms (by `hashlib` name) whose digests are exactly one chain value wide."""

WOTS_HASH = os.environ.get("WOTS_HASH", "sha256").lower()
"""The hash algorithm used when none is passed explicitly. Defaults to 'sha256'."""

if WOTS_HASH not in SUPPORTED_HASHES:
    raise ValueError(
        f"Invalid WOTS_HASH environment variable: '{WOTS_HASH}'. "
        f"Supported values: {SUPPORTED_HASHES}"
    )
