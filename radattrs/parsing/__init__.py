"""
This package contains the wire-format side of radattrs.

Sub-packages handle specific data formats:

- ``attributes``: TLV attribute region parsing, storage and encoding.
"""
