import hashlib
import io
from typing import Any

import pytest

from wots.types import (
    BaseBytes,
    Bytes32,
    WotsDecodeError,
    WotsLengthError,
    WotsStreamError,
    WotsTypeDefinitionError,
)


def test_bytes_inheritance_ok() -> None:
    assert issubclass(Bytes32, BaseBytes)
    assert Bytes32.LENGTH == 32
    v = Bytes32(b"\x00" * 32)
    assert isinstance(v, Bytes32)
    assert isinstance(v, bytes)  # Should also be a bytes object
    assert len(v) == 32


@pytest.mark.parametrize(
    "value",
    [
        b"\x01" * 32,
        bytearray(b"\x01" * 32),
        "01" * 32,
        "0x" + "01" * 32,
    ],
)
def test_bytes32_accepted_inputs(value: Any) -> None:
    assert bytes(Bytes32(value)) == b"\x01" * 32


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(32, id="int"),
        pytest.param(0, id="zero_int"),
        pytest.param([1] * 32, id="list_of_ints"),
        pytest.param((1 for _ in range(32)), id="generator_of_ints"),
        pytest.param(None, id="none"),
    ],
)
def test_non_bytes_input_rejected(value: Any) -> None:
    """`bytes(32)` would be 32 zero bytes; integers must not get that far."""
    with pytest.raises(WotsDecodeError, match="expected bytes or a hex string"):
        Bytes32(value)


def test_invalid_hex_rejected() -> None:
    with pytest.raises(WotsDecodeError, match="invalid hex string"):
        Bytes32("zz" * 32)


@pytest.mark.parametrize("value", [b"", b"\x00" * 31, b"\x00" * 33, "00" * 31])
def test_wrong_length_raises(value: Any) -> None:
    with pytest.raises(WotsLengthError) as excinfo:
        Bytes32(value)
    assert excinfo.value.expected == 32
    assert excinfo.value.unit == "bytes"


def test_missing_length_raises() -> None:
    class NoLength(BaseBytes):
        pass

    with pytest.raises(WotsTypeDefinitionError, match="must define LENGTH"):
        NoLength(b"")


def test_repr_and_equality() -> None:
    v = Bytes32(bytes(range(32)))
    assert repr(v) == f"Bytes32({bytes(range(32)).hex()})"
    assert v == bytes(range(32))
    assert {v, Bytes32(bytes(range(32)))} == {v}


def test_hashlib_accepts_bytes32() -> None:
    v = Bytes32(b"\x01" * 32)
    assert hashlib.sha256(v).digest() == hashlib.sha256(b"\x01" * 32).digest()


def test_encode_decode_roundtrip() -> None:
    payload = bytes(range(32))
    v = Bytes32(payload)
    assert v.encode_bytes() == payload
    assert Bytes32.decode_bytes(payload) == v

    buf = io.BytesIO()
    assert v.serialize(buf) == 32
    buf.seek(0)
    assert Bytes32.deserialize(buf, 32) == v


def test_decode_wrong_length_raises() -> None:
    with pytest.raises(WotsDecodeError, match="expected 32 bytes, got 31"):
        Bytes32.decode_bytes(b"\x00" * 31)


def test_deserialize_short_stream_raises() -> None:
    buf = io.BytesIO(b"\x00" * 10)
    with pytest.raises(WotsStreamError) as excinfo:
        Bytes32.deserialize(buf, 32)
    assert excinfo.value.expected_bytes == 32
    assert excinfo.value.actual_bytes == 10
