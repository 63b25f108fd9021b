"""Tests for the exception hierarchy."""

import pytest

from wots.types import (
    WotsDecodeError,
    WotsError,
    WotsLengthError,
    WotsSerializationError,
    WotsStreamError,
    WotsTypeDefinitionError,
    WotsTypeError,
    WotsValueError,
)


@pytest.mark.parametrize(
    "exc, parent",
    [
        (WotsTypeDefinitionError("T", missing_attr="LENGTH"), WotsTypeError),
        (WotsLengthError("T", expected=32, actual=1), WotsValueError),
        (WotsDecodeError("T", "bad"), WotsSerializationError),
        (WotsStreamError("T", expected_bytes=2, actual_bytes=1), WotsSerializationError),
    ],
)
def test_hierarchy(exc: WotsError, parent: type) -> None:
    assert isinstance(exc, parent)
    assert isinstance(exc, WotsError)


def test_messages() -> None:
    assert str(WotsTypeDefinitionError("T", missing_attr="LENGTH")) == "T must define LENGTH"
    assert str(WotsTypeDefinitionError("T", detail="oops")) == "T: oops"
    assert str(WotsLengthError("T", expected=32, actual=1, unit="bytes")) == (
        "T requires exactly 32 bytes, got 1"
    )
    assert str(WotsDecodeError("T", "bad")) == "Failed to decode T: bad"
    assert "expected 2 bytes, got 1" in str(WotsStreamError("T", expected_bytes=2, actual_bytes=1))


def test_repr() -> None:
    assert repr(WotsError("boom")) == "WotsError('boom')"
