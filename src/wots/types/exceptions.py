"""
Errors raised while building or decoding keys and signatures.

None of them derive from `ValueError`, so they pass through pydantic
validators as themselves rather than being folded into a `ValidationError`.
"""

from __future__ import annotations


class WotsError(Exception):
    """Root of every error raised by the value types."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class WotsTypeError(WotsError):
    """A value type is declared incorrectly."""


class WotsTypeDefinitionError(WotsTypeError):
    """A fixed-size class is missing a class variable it needs, such as `LENGTH`."""

    def __init__(
        self, type_name: str, *, missing_attr: str | None = None, detail: str | None = None
    ) -> None:
        self.type_name = type_name
        self.missing_attr = missing_attr
        self.detail = detail
        if missing_attr:
            super().__init__(f"{type_name} must define {missing_attr}")
        elif detail:
            super().__init__(f"{type_name}: {detail}")
        else:
            super().__init__(f"{type_name} has an invalid type definition")


class WotsValueError(WotsError):
    """A well-typed input has the wrong shape."""


class WotsLengthError(WotsValueError):
    """
    Wrong number of blocks in a key or signature, or wrong width of a block.

    `unit` is "elements" for block counts and "bytes" for block widths.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int, unit: str = "elements") -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        self.unit = unit
        super().__init__(f"{type_name} requires exactly {expected} {unit}, got {actual}")


class WotsSerializationError(WotsError):
    """Encoded input could not be turned into a value."""


class WotsDecodeError(WotsSerializationError):
    """Input has the wrong size or kind for the type being decoded."""

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Failed to decode {type_name}: {detail}")


class WotsStreamError(WotsSerializationError):
    """A stream ran out before a whole value was read."""

    def __init__(self, type_name: str, *, expected_bytes: int, actual_bytes: int) -> None:
        self.type_name = type_name
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes
        super().__init__(
            f"Truncated {type_name}: expected {expected_bytes} bytes, got {actual_bytes}"
        )
