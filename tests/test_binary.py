"""Tests for wire-format helpers."""
import pytest

from radattrs.core.binary import (
    MAX_VALUE_SIZE,
    TYPE_INVALID,
    as_type,
    as_value,
    hex_to_bytes,
    is_representable,
    is_wire_type,
    record_size,
)


def test_max_value_size():
    assert MAX_VALUE_SIZE == 253


@pytest.mark.parametrize("typ,expected", [(1, True), (255, True), (0, False), (256, False), (TYPE_INVALID, False)])
def test_is_wire_type(typ, expected):
    assert is_wire_type(typ) is expected


def test_is_representable_boundary():
    assert is_representable(b"\x00" * 253)
    assert not is_representable(b"\x00" * 254)


def test_record_size():
    assert record_size(b"") == 2
    assert record_size(b"abc") == 5


def test_hex_to_bytes_accepts_spacing_and_prefix():
    assert hex_to_bytes("0x01 05\n414243") == bytes([0x01, 0x05, 0x41, 0x42, 0x43])


def test_hex_to_bytes_invalid():
    with pytest.raises(ValueError):
        hex_to_bytes("0g")


def test_as_value():
    assert as_value(memoryview(b"ab")) == b"ab"
    with pytest.raises(TypeError):
        as_value([1, 2])


def test_as_type():
    assert as_type(26) == 26
    with pytest.raises(TypeError):
        as_type("26")
    with pytest.raises(TypeError):
        as_type(False)
