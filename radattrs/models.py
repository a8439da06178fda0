from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from radattrs.core.binary import MAX_TYPE, MAX_VALUE_SIZE, MIN_TYPE, hex_to_bytes
from radattrs.parsing.attributes.store import AttributeStore


class AttributeRecord(BaseModel):
    type: int = Field(ge=MIN_TYPE, le=MAX_TYPE)
    value: str = Field("", description="Attribute value as a hex string")

    @field_validator("value")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        raw = hex_to_bytes(value)
        if len(raw) > MAX_VALUE_SIZE:
            raise ValueError(f"value is {len(raw)} bytes, at most {MAX_VALUE_SIZE} fit in a record")
        return raw.hex()

    def raw(self) -> bytes:
        return bytes.fromhex(self.value)


class AttributeList(BaseModel):
    records: List[AttributeRecord] = Field(default_factory=list)

    @classmethod
    def from_store(cls, store: AttributeStore) -> "AttributeList":
        return cls(records=[AttributeRecord(type=typ, value=value.hex()) for typ, value in store.items()])

    def to_store(self) -> AttributeStore:
        store = AttributeStore()
        for record in self.records:
            store.add(record.type, record.raw())
        return store
