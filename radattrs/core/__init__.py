from radattrs.core.binary import (
    HEADER_SIZE,
    MAX_RECORD_SIZE,
    MAX_TYPE,
    MAX_VALUE_SIZE,
    MIN_TYPE,
    TYPE_INVALID,
    hex_to_bytes,
    is_representable,
    is_wire_type,
    record_size,
)

__all__ = [
    "HEADER_SIZE",
    "MAX_RECORD_SIZE",
    "MAX_TYPE",
    "MAX_VALUE_SIZE",
    "MIN_TYPE",
    "TYPE_INVALID",
    "hex_to_bytes",
    "is_representable",
    "is_wire_type",
    "record_size",
]
