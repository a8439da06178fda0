from radattrs.config import Settings, get_settings
from radattrs.core.binary import TYPE_INVALID
from radattrs.parsing.attributes import (
    AttributeParseError,
    AttributeStore,
    InvalidLengthError,
    ShortBufferError,
    encode_original_order,
    encode_sorted,
    parse_attributes,
    wire_size,
    UNREPRESENTABLE,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "AttributeParseError",
    "AttributeStore",
    "InvalidLengthError",
    "Settings",
    "ShortBufferError",
    "TYPE_INVALID",
    "UNREPRESENTABLE",
    "encode_original_order",
    "encode_sorted",
    "get_settings",
    "parse_attributes",
    "wire_size",
]

try:
    __version__ = version("radattrs")
except PackageNotFoundError:
    __version__ = "0.0.0"
