from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Optional

from radattrs.core.binary import is_representable, is_wire_type
from radattrs.logging import redact
from radattrs.parsing.attributes.decode import AttributeParseError, parse_attributes
from radattrs.parsing.attributes.encode import wire_size
from radattrs.parsing.attributes.store import AttributeStore


@dataclass
class AttributeSnapshot:
    raw: bytes
    received_at: dt.datetime
    store: AttributeStore
    parsed: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    source: str = "wire"
    error_offset: Optional[int] = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict:
        return {
            "source": self.source,
            "received_at": self.received_at.isoformat(),
            "raw": self.raw.hex(),
            "parsed": self.parsed,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
            "error_offset": self.error_offset,
        }


def build_store_snapshot(
    store: AttributeStore,
    source: str = "local",
    raw: bytes = b"",
    error: Optional[AttributeParseError] = None,
) -> AttributeSnapshot:
    warnings: list[str] = []
    errors: list[str] = []
    if error is not None:
        errors.append(f"parse_failed: {error}")

    records = []
    for typ, value in store.items():
        if not is_wire_type(typ):
            warnings.append(f"type {typ} outside 1-255, not encoded")
        elif not is_representable(value):
            warnings.append(f"type {typ} value of {len(value)} bytes is not wire-representable")
        records.append(redact({"type": typ, "value": value.hex()}))

    return AttributeSnapshot(
        raw=bytes(raw),
        received_at=dt.datetime.now(dt.UTC),
        store=store,
        parsed={
            "record_count": len(store),
            "type_count": store.count(),
            "wire_size": wire_size(store),
            "records": records,
        },
        warnings=warnings,
        errors=errors,
        source=source,
        error_offset=error.offset if error is not None else None,
    )


def build_attribute_snapshot(data: bytes, source: str = "wire") -> AttributeSnapshot:
    store, error = parse_attributes(data)
    return build_store_snapshot(store, source=source, raw=data, error=error)
