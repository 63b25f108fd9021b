"""
Shared pytest fixtures for all wots tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

import pytest

from tests.wots.helpers import SeededCsprng
from wots import SHA256_HASHER, Hasher, Keypair


@pytest.fixture
def csprng() -> SeededCsprng:
    """Deterministic randomness source."""
    return SeededCsprng(b"wots-test-seed")


@pytest.fixture
def hasher() -> Hasher:
    """The SHA-256 hasher, independent of `WOTS_HASH`."""
    return SHA256_HASHER


@pytest.fixture
def keypair(csprng: SeededCsprng, hasher: Hasher) -> Keypair:
    """A reproducible key pair."""
    return Keypair.generate(csprng, hasher)
