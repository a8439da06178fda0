"""Tests for parsing wire-encoded attribute regions."""
import pytest

from radattrs import (
    AttributeParseError,
    AttributeStore,
    InvalidLengthError,
    ShortBufferError,
    parse_attributes,
)


def test_parse_empty():
    store, error = parse_attributes(b"")
    assert error is None
    assert store.count() == 0
    assert store.order == []


def test_parse_two_records():
    data = bytes([0x01, 0x05, 0x41, 0x42, 0x43, 0x02, 0x03, 0x58])
    store, error = parse_attributes(data)
    assert error is None
    assert store.as_dict() == {1: [b"ABC"], 2: [b"X"]}
    assert store.order == [1, 2]


def test_parse_empty_value():
    store, error = parse_attributes(bytes([0x1F, 0x02]))
    assert error is None
    assert store.lookup(0x1F) == (b"", True)


def test_parse_repeated_interleaved_types():
    data = bytes([0x1A, 0x03, 0x01, 0x01, 0x03, 0x61, 0x1A, 0x03, 0x02])
    store, error = parse_attributes(data)
    assert error is None
    assert store.order == [0x1A, 0x01, 0x1A]
    assert store.get_all(0x1A) == [b"\x01", b"\x02"]


def test_parse_max_length_record():
    value = bytes(range(253))
    store, error = parse_attributes(bytes([0x4F, 0xFF]) + value)
    assert error is None
    assert store.get(0x4F) == value


def test_parse_length_beyond_buffer_keeps_prefix():
    data = bytes([0x01, 0x05, 0x41, 0x42, 0x43, 0x02, 0xFF])
    store, error = parse_attributes(data)
    assert isinstance(error, InvalidLengthError)
    assert error.offset == 5
    assert error.length == 0xFF
    assert store.as_dict() == {1: [b"ABC"]}
    assert store.order == [1]


@pytest.mark.parametrize("length", [0x00, 0x01])
def test_parse_length_below_header(length):
    store, error = parse_attributes(bytes([0x01, length, 0x00]))
    assert isinstance(error, InvalidLengthError)
    assert error.offset == 0
    assert store.count() == 0


def test_parse_short_buffer():
    data = bytes([0x01, 0x03, 0x41, 0x02])
    store, error = parse_attributes(data)
    assert isinstance(error, ShortBufferError)
    assert error.offset == 3
    assert store.as_dict() == {1: [b"A"]}


def test_parse_errors_are_value_errors():
    _, error = parse_attributes(bytes([0x01]))
    assert isinstance(error, AttributeParseError)
    assert isinstance(error, ValueError)
    assert "short buffer" in str(error)


def test_parse_copies_from_input():
    data = bytearray([0x01, 0x03, 0x41])
    store, _ = parse_attributes(data)
    data[2] = 0x42
    assert store.get(1) == b"A"


def test_from_bytes_strict_raises():
    with pytest.raises(InvalidLengthError):
        AttributeStore.from_bytes(bytes([0x01, 0x09, 0x41]), strict=True)


def test_from_bytes_lenient_returns_prefix():
    store = AttributeStore.from_bytes(bytes([0x01, 0x03, 0x41, 0x02]), strict=False)
    assert store.get(1) == b"A"


def test_from_bytes_valid():
    store = AttributeStore.from_bytes(bytes([0x01, 0x03, 0x41]), strict=True)
    assert store.get(1) == b"A"
