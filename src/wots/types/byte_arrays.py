"""
Fixed-width byte values.

A secret seed, a point part-way along a chain, a chain end and a message digest
are all exactly one hash output wide, so `Bytes32` is the only width the scheme
needs.
"""

from __future__ import annotations

from typing import IO, Any, ClassVar

from typing_extensions import Self

from .codec import FixedSizeType
from .exceptions import WotsDecodeError, WotsLengthError, WotsStreamError, WotsTypeDefinitionError


class BaseBytes(bytes, FixedSizeType):
    """
    An immutable `bytes` value of exactly `LENGTH` bytes.

    Built from `bytes`, `bytearray` or a hex string (`0x` prefix optional).
    Anything else, integers and iterables of integers included, is rejected
    instead of being coerced.
    """

    LENGTH: ClassVar[int]

    def __new__(cls, value: bytes | bytearray | str) -> Self:
        if not hasattr(cls, "LENGTH"):
            raise WotsTypeDefinitionError(cls.__name__, missing_attr="LENGTH")

        if isinstance(value, str):
            try:
                raw = bytes.fromhex(value.removeprefix("0x"))
            except ValueError as exc:
                raise WotsDecodeError(cls.__name__, f"invalid hex string {value!r}") from exc
        elif isinstance(value, (bytes, bytearray)):
            raw = bytes(value)
        else:
            raise WotsDecodeError(
                cls.__name__, f"expected bytes or a hex string, got {type(value).__name__}"
            )

        if len(raw) != cls.LENGTH:
            raise WotsLengthError(cls.__name__, expected=cls.LENGTH, actual=len(raw), unit="bytes")
        return super().__new__(cls, raw)

    @classmethod
    def get_byte_length(cls) -> int:
        return cls.LENGTH

    def serialize(self, stream: IO[bytes]) -> int:
        return stream.write(self)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Reads one value from `stream`.

        Raises:
            WotsDecodeError: If `scope` is not `LENGTH`.
            WotsStreamError: If the stream holds fewer than `LENGTH` bytes.
        """
        if scope != cls.LENGTH:
            raise WotsDecodeError(cls.__name__, f"expected {cls.LENGTH} bytes, got {scope}")
        raw = stream.read(scope)
        if len(raw) < scope:
            raise WotsStreamError(cls.__name__, expected_bytes=scope, actual_bytes=len(raw))
        return cls(raw)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"


class Bytes32(BaseBytes):
    """One hash output: 32 bytes."""

    LENGTH = 32
