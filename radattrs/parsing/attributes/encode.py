"""
Encoders for the attribute store.

Two orderings are provided: ``encode_sorted`` groups records by ascending
type, ``encode_original_order`` reproduces the encounter order of the store.
Types outside 1-255 are never written. Values longer than 253 bytes cannot
be described by the one-byte length field; they are skipped by both encoders,
so callers should check ``wire_size`` first, which reports them as
``UNREPRESENTABLE``.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Union

from radattrs.core.binary import HEADER_SIZE, is_representable, is_wire_type, record_size
from radattrs.logging import get_logger, redact
from radattrs.parsing.attributes.store import AttributeStore

UNREPRESENTABLE = -1

Buffer = Union[bytearray, memoryview]


def _sorted_records(store: AttributeStore) -> Iterator[tuple[int, bytes]]:
    grouped = store.as_dict()
    for typ in sorted(t for t in grouped if is_wire_type(t)):
        for value in grouped[typ]:
            yield typ, value


def _ordered_records(store: AttributeStore) -> Iterator[tuple[int, bytes]]:
    for typ, value in store.items():
        if is_wire_type(typ):
            yield typ, value


def _writable(records: Iterable[tuple[int, bytes]]) -> list[tuple[int, bytes]]:
    kept = []
    for typ, value in records:
        if not is_representable(value):
            get_logger().warning(
                "attribute_dropped_oversize",
                extra={"details": redact({"type": typ, "length": len(value), "value": value.hex()})},
            )
            continue
        kept.append((typ, value))
    return kept


def _write(records: list[tuple[int, bytes]], buf: Buffer) -> int:
    needed = sum(record_size(value) for _, value in records)
    out = memoryview(buf)
    if len(out) < needed:
        raise ValueError(f"Output buffer too small: {len(out)} bytes, {needed} required")
    pos = 0
    for typ, value in records:
        size = record_size(value)
        out[pos] = typ
        out[pos + 1] = size
        out[pos + HEADER_SIZE: pos + size] = value
        pos += size
    return pos


def wire_size(store: AttributeStore) -> int:
    """
    Number of bytes the encoders will write for ``store``.

    Returns:
        The encoded size, or ``UNREPRESENTABLE`` if any attribute of a wire
        type is too long to be encoded.
    """
    size = 0
    for typ, value in store.items():
        if not is_wire_type(typ):
            continue
        if not is_representable(value):
            return UNREPRESENTABLE
        size += record_size(value)
    return size


def encode_sorted_into(store: AttributeStore, buf: Buffer) -> int:
    """
    Write the records of ``store`` into ``buf`` grouped by ascending type.

    Args:
        store: The attributes to encode.
        buf: A writable buffer sized from ``wire_size``.

    Returns:
        The number of bytes written.

    Raises:
        ValueError: If ``buf`` cannot hold the records.
    """
    return _write(_writable(_sorted_records(store)), buf)


def encode_original_order_into(store: AttributeStore, buf: Buffer) -> int:
    """Write the records of ``store`` into ``buf`` in encounter order."""
    return _write(_writable(_ordered_records(store)), buf)


def encode_sorted(store: AttributeStore) -> bytes:
    """
    Encode ``store`` with records grouped by ascending type.

    Within a type, values keep their insertion order. Types outside 1-255
    and values longer than 253 bytes are left out.

    Args:
        store: The attributes to encode.

    Returns:
        The encoded attribute region, ``wire_size(store)`` bytes long when
        nothing was left out.
    """
    records = _writable(_sorted_records(store))
    buf = bytearray(sum(record_size(value) for _, value in records))
    _write(records, buf)
    return bytes(buf)


def encode_original_order(store: AttributeStore) -> bytes:
    """
    Encode ``store`` in the order its attributes were added or parsed.

    Re-encoding a parsed store gives back the parsed bytes. The same
    records as in ``encode_sorted`` are left out.

    Args:
        store: The attributes to encode.

    Returns:
        The encoded attribute region.
    """
    records = _writable(_ordered_records(store))
    buf = bytearray(sum(record_size(value) for _, value in records))
    _write(records, buf)
    return bytes(buf)
