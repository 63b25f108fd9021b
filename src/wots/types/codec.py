"""Binary encoding shared by every value type."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import IO

from typing_extensions import Self


class FixedSizeType(ABC):
    """
    A value whose encoded width is known from its type alone.

    No length prefixes or offsets are written: a composite value is the
    encodings of its parts laid end to end.
    """

    @classmethod
    @abstractmethod
    def get_byte_length(cls) -> int:
        """Width of the encoding, in bytes."""

    @abstractmethod
    def serialize(self, stream: IO[bytes]) -> int:
        """Writes the encoding to `stream` and returns the number of bytes written."""

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """Reads a value that must occupy exactly `scope` bytes of `stream`."""

    def encode_bytes(self) -> bytes:
        stream = io.BytesIO()
        self.serialize(stream)
        return stream.getvalue()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        return cls.deserialize(io.BytesIO(data), len(data))
