"""
The attribute store: an ordered multimap of attribute type to raw values.

All values live in a single list of ``(type, value)`` pairs kept in encounter
order. The per-type grouping used by the readers and the sorted encoder is
derived from that list, so the two views can never disagree.
"""
from __future__ import annotations

from typing import Iterator, Optional, Union

from radattrs.core.binary import as_type, as_value

Value = Union[bytes, bytearray, memoryview]


class AttributeStore:
    """
    Ordered, multi-valued container of TLV attributes.

    Values for a type are kept in the order they were added, and the
    chronological order of every insertion across all types is kept too,
    so the store can be re-encoded byte-for-byte as it was parsed.

    The store is not synchronized; callers that mutate it from several
    threads must lock around it.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[int, bytes]] = []
        self._index: Optional[dict[int, list[bytes]]] = None

    @classmethod
    def from_bytes(cls, data: bytes, strict: Optional[bool] = None) -> "AttributeStore":
        """
        Parse a wire-encoded attribute region.

        Args:
            data: The raw attribute bytes.
            strict: Raise the parse error instead of returning the valid
                prefix. ``None`` uses ``Settings.strict_parse``.

        Raises:
            AttributeParseError: On malformed input in strict mode.
        """
        from radattrs.config import get_settings
        from radattrs.parsing.attributes.decode import parse_attributes

        if strict is None:
            strict = get_settings().strict_parse
        store, error = parse_attributes(data)
        if error is not None and strict:
            raise error
        return store

    def to_bytes(self, preserve_order: Optional[bool] = None) -> bytes:
        from radattrs.config import get_settings
        from radattrs.parsing.attributes.encode import encode_original_order, encode_sorted

        if preserve_order is None:
            preserve_order = get_settings().preserve_order
        if preserve_order:
            return encode_original_order(self)
        return encode_sorted(self)

    def _grouped(self) -> dict[int, list[bytes]]:
        if self._index is None:
            index: dict[int, list[bytes]] = {}
            for typ, value in self._entries:
                index.setdefault(typ, []).append(value)
            self._index = index
        return self._index

    def _invalidate(self) -> None:
        self._index = None

    # Mutators

    def add(self, typ: int, value: Value) -> None:
        """Append ``value`` to the values of ``typ``."""
        self._entries.append((as_type(typ), as_value(value)))
        self._invalidate()

    def delete(self, typ: int) -> None:
        """Remove every value of ``typ``."""
        typ = as_type(typ)
        self._entries = [entry for entry in self._entries if entry[0] != typ]
        self._invalidate()

    def replace(self, typ: int, value: Value) -> None:
        """
        Set ``typ`` to the single ``value``.

        The replacement takes the position of the first previous value of
        ``typ``, or goes to the end when ``typ`` was not present.
        """
        typ = as_type(typ)
        entry = (typ, as_value(value))
        position = next((i for i, (t, _) in enumerate(self._entries) if t == typ), None)
        self._entries = [e for e in self._entries if e[0] != typ]
        if position is None:
            self._entries.append(entry)
        else:
            self._entries.insert(position, entry)
        self._invalidate()

    # Readers

    def get(self, typ: int) -> Optional[bytes]:
        value, _ = self.lookup(typ)
        return value

    def get_all(self, typ: int) -> list[bytes]:
        return list(self._grouped().get(as_type(typ), []))

    def lookup(self, typ: int) -> tuple[Optional[bytes], bool]:
        values = self._grouped().get(as_type(typ))
        if not values:
            return None, False
        return values[0], True

    def count(self) -> int:
        """Number of distinct types present."""
        return len(self._grouped())

    def as_dict(self) -> dict[int, list[bytes]]:
        return {typ: list(values) for typ, values in self._grouped().items()}

    @property
    def order(self) -> list[int]:
        return [typ for typ, _ in self._entries]

    def items(self) -> Iterator[tuple[int, bytes]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, typ: object) -> bool:
        return typ in self._grouped()

    def __iter__(self) -> Iterator[tuple[int, bytes]]:
        return self.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeStore):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        pairs = ", ".join(f"{typ}={value.hex()}" for typ, value in self._entries)
        return f"AttributeStore({pairs})"
