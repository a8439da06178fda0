from __future__ import annotations

from typing import Union


TYPE_INVALID = -1

HEADER_SIZE = 2
MAX_RECORD_SIZE = 255
MAX_VALUE_SIZE = MAX_RECORD_SIZE - HEADER_SIZE

MIN_TYPE = 1
MAX_TYPE = 255


def is_wire_type(typ: int) -> bool:
    return MIN_TYPE <= typ <= MAX_TYPE


def is_representable(value: bytes) -> bool:
    return len(value) <= MAX_VALUE_SIZE


def record_size(value: bytes) -> int:
    # type field + length field + value field
    return HEADER_SIZE + len(value)


def hex_to_bytes(hex_data: str) -> bytes:
    cleaned = "".join(hex_data.split())
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid hex attribute buffer: {exc}") from exc


def as_value(value: Union[bytes, bytearray, memoryview]) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"attribute value must be bytes-like, got {type(value).__name__}")
    return bytes(value)


def as_type(typ: int) -> int:
    if isinstance(typ, bool) or not isinstance(typ, int):
        raise TypeError(f"attribute type must be an int, got {type(typ).__name__}")
    return int(typ)
