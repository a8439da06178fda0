"""
Parser for wire-encoded attribute regions.

Each record is a type byte, a length byte counting the whole record, and
``length - 2`` value bytes. Records are concatenated with no padding.
"""
from __future__ import annotations

from typing import Optional, Tuple

from radattrs.core.binary import HEADER_SIZE, MAX_RECORD_SIZE
from radattrs.logging import get_logger
from radattrs.parsing.attributes.store import AttributeStore


class AttributeParseError(ValueError):
    """
    Base class for malformed attribute buffers.

    Attributes:
        offset: Byte offset of the record that could not be read.
    """

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")


class ShortBufferError(AttributeParseError):
    def __init__(self, offset: int):
        super().__init__("short buffer", offset)


class InvalidLengthError(AttributeParseError):
    def __init__(self, offset: int, length: int):
        self.length = length
        super().__init__(f"invalid attribute length {length}", offset)


def parse_attributes(data: bytes) -> Tuple[AttributeStore, Optional[AttributeParseError]]:
    """
    Decode a wire-encoded attribute region.

    Errors are returned, not raised. On a malformed record the store holds
    every complete record that preceded it.

    Args:
        data: Raw bytes containing concatenated attribute records.

    Returns:
        A ``(store, error)`` tuple; ``error`` is ``None`` when the whole
        buffer was consumed.
    """
    store = AttributeStore()
    view = memoryview(bytes(data))
    offset = 0
    error: Optional[AttributeParseError] = None

    while offset < len(view):
        remaining = len(view) - offset
        if remaining < HEADER_SIZE:
            error = ShortBufferError(offset)
            break
        length = view[offset + 1]
        if length < HEADER_SIZE or length > MAX_RECORD_SIZE or length > remaining:
            error = InvalidLengthError(offset, length)
            break
        store.add(view[offset], view[offset + HEADER_SIZE: offset + length])
        offset += length

    if error is not None:
        get_logger().warning(
            "attributes_parse_failed",
            extra={"details": {"error": str(error), "offset": error.offset, "recovered": len(store)}},
        )
    return store, error
