"""Reusable type definitions for the WOTS signature scheme."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32
from .codec import FixedSizeType
from .collections import FixedVector
from .exceptions import (
    WotsDecodeError,
    WotsError,
    WotsLengthError,
    WotsSerializationError,
    WotsStreamError,
    WotsTypeDefinitionError,
    WotsTypeError,
    WotsValueError,
)

__all__ = [
    # Core types
    "BaseBytes",
    "Bytes32",
    "StrictBaseModel",
    "FixedSizeType",
    "FixedVector",
    # Exceptions
    "WotsError",
    "WotsTypeError",
    "WotsTypeDefinitionError",
    "WotsValueError",
    "WotsLengthError",
    "WotsSerializationError",
    "WotsDecodeError",
    "WotsStreamError",
]
