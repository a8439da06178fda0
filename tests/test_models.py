"""Tests for the JSON attribute list models."""
import pytest
from pydantic import ValidationError

from radattrs import AttributeStore
from radattrs.models import AttributeList, AttributeRecord


def test_record_normalizes_hex():
    record = AttributeRecord(type=1, value="41 42 4A")
    assert record.value == "41424a"
    assert record.raw() == b"ABJ"


def test_record_default_empty_value():
    assert AttributeRecord(type=1).raw() == b""


@pytest.mark.parametrize("typ", [0, -1, 256])
def test_record_rejects_invalid_type(typ):
    with pytest.raises(ValidationError):
        AttributeRecord(type=typ, value="00")


def test_record_rejects_bad_hex():
    with pytest.raises(ValidationError):
        AttributeRecord(type=1, value="zz")


def test_record_rejects_oversized_value():
    with pytest.raises(ValidationError):
        AttributeRecord(type=1, value="00" * 254)
    assert len(AttributeRecord(type=1, value="00" * 253).raw()) == 253


def test_list_roundtrip_preserves_order():
    store = AttributeStore()
    store.add(3, b"c")
    store.add(1, b"a")
    store.add(3, b"d")
    document = AttributeList.from_store(store).model_dump_json()
    rebuilt = AttributeList.model_validate_json(document).to_store()
    assert rebuilt == store


def test_list_from_json():
    document = '{"records": [{"type": 26, "value": "0000"}, {"type": 1, "value": "61"}]}'
    store = AttributeList.model_validate_json(document).to_store()
    assert store.order == [26, 1]
    assert store.get(26) == b"\x00\x00"


def test_record_accepts_prefixed_hex():
    record = AttributeRecord(type=1, value="0x41 42")
    assert record.value == "4142"
    assert record.raw() == b"AB"
