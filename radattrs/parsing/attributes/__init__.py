"""
Ordered TLV attribute store with wire-format parsing and encoding.

Records are laid out as ``[type] [length] [value...]`` where ``length``
counts the whole record. The store keeps every value per type as well as
the order in which attributes were encountered across all types.
"""
from radattrs.parsing.attributes.decode import (
    AttributeParseError,
    InvalidLengthError,
    ShortBufferError,
    parse_attributes,
)
from radattrs.parsing.attributes.encode import (
    encode_original_order,
    encode_original_order_into,
    encode_sorted,
    encode_sorted_into,
    wire_size,
    UNREPRESENTABLE,
)
from radattrs.parsing.attributes.snapshot import (
    AttributeSnapshot,
    build_attribute_snapshot,
    build_store_snapshot,
)
from radattrs.parsing.attributes.store import AttributeStore

__all__ = [
    "AttributeParseError",
    "AttributeSnapshot",
    "AttributeStore",
    "InvalidLengthError",
    "ShortBufferError",
    "build_attribute_snapshot",
    "build_store_snapshot",
    "encode_original_order",
    "encode_original_order_into",
    "encode_sorted",
    "encode_sorted_into",
    "parse_attributes",
    "wire_size",
    "UNREPRESENTABLE",
]
