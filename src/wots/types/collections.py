"""Fixed-length vector of byte values."""

from __future__ import annotations

from typing import IO, Any, ClassVar, Generic, Iterator, Sequence, TypeVar

from pydantic import field_serializer, field_validator
from typing_extensions import Self

from .base import StrictBaseModel
from .byte_arrays import BaseBytes
from .codec import FixedSizeType
from .exceptions import WotsDecodeError, WotsLengthError, WotsTypeDefinitionError

T = TypeVar("T", bound=BaseBytes)


class FixedVector(StrictBaseModel, FixedSizeType, Generic[T]):
    """
    Exactly `LENGTH` values of type `ELEMENT_TYPE`, in index order.

    Subclasses set both class variables, e.g.:

        class Digests4(FixedVector[Bytes32]):
            ELEMENT_TYPE = Bytes32
            LENGTH = 4

    The encoding is the elements' encodings back to back.
    """

    ELEMENT_TYPE: ClassVar[type[BaseBytes]]
    LENGTH: ClassVar[int]

    data: tuple[T, ...]

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_blocks(cls, value: Any) -> tuple[BaseBytes, ...]:
        if not hasattr(cls, "ELEMENT_TYPE") or not hasattr(cls, "LENGTH"):
            raise WotsTypeDefinitionError(cls.__name__, missing_attr="ELEMENT_TYPE and LENGTH")

        # A flat byte string would otherwise iterate as integers.
        if isinstance(value, (bytes, bytearray, str)):
            raise WotsDecodeError(cls.__name__, "expected a sequence of blocks, got a flat value")

        element_type = cls.ELEMENT_TYPE
        blocks = tuple(
            item if isinstance(item, element_type) else element_type(item) for item in value
        )
        if len(blocks) != cls.LENGTH:
            raise WotsLengthError(cls.__name__, expected=cls.LENGTH, actual=len(blocks))
        return blocks

    @field_serializer("data", when_used="json")
    def _hex_blocks(self, value: tuple[T, ...]) -> list[str]:
        return ["0x" + block.hex() for block in value]

    @classmethod
    def get_byte_length(cls) -> int:
        return cls.ELEMENT_TYPE.get_byte_length() * cls.LENGTH

    def serialize(self, stream: IO[bytes]) -> int:
        return sum(block.serialize(stream) for block in self.data)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        if scope != cls.get_byte_length():
            raise WotsDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got {scope}"
            )
        width = cls.ELEMENT_TYPE.get_byte_length()
        return cls(data=[cls.ELEMENT_TYPE.deserialize(stream, width) for _ in range(cls.LENGTH)])

    def to_bytes(self) -> tuple[T, ...]:
        """The raw blocks in index order. `from_bytes(x.to_bytes()) == x`."""
        return self.data

    @classmethod
    def from_bytes(cls, blocks: Sequence[bytes]) -> Self:
        """
        Builds a value from raw blocks.

        Only the shape is checked: `LENGTH` blocks, each a `bytes` value of the
        element width. Block contents are taken as they are.
        """
        return cls(data=blocks)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={list(self.data)!r})"
