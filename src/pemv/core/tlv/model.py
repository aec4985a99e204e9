from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from pemv.core.tlv.masking import Byte, is_masked, to_hex


class Dialect(enum.Enum):
    """The TLV encodings pemv can parse."""

    BER_TLV = "BER-TLV"
    INGENICO = "Ingenico"

    def __str__(self) -> str:
        return self.value


class TagClass(enum.IntEnum):
    """Tag class from the top two bits of the first tag byte."""

    UNIVERSAL = 0b00
    APPLICATION = 0b01
    CONTEXT_SPECIFIC = 0b10
    PRIVATE = 0b11

    def __str__(self) -> str:
        return self.name.replace("_", "-").title()


@dataclass(frozen=True)
class TlvNode:
    """A single data object.

    ``value`` always holds the raw payload. ``children`` is None for a
    primitive object and a tuple (possibly empty) when the payload was
    accepted as nested TLV.
    """

    tag: bytes
    length: int
    value: tuple[Byte, ...] = ()
    children: tuple[TlvNode, ...] | None = None

    @property
    def tag_id(self) -> int:
        return int.from_bytes(self.tag, "big")

    @property
    def tag_class(self) -> TagClass:
        return TagClass(self.tag[0] >> 6)

    @property
    def constructed_flag(self) -> bool:
        """Whether the tag itself claims to be constructed."""
        return bool(self.tag[0] & 0x20)

    @property
    def constructed(self) -> bool:
        """Whether the payload was actually parsed as nested TLV."""
        return self.children is not None

    @property
    def masked(self) -> bool:
        return is_masked(self.value)

    @property
    def tag_hex(self) -> str:
        return self.tag.hex().upper()

    def find(self, tag_id: int) -> TlvNode | None:
        """Find the first child with the given tag (non-recursive)."""
        for child in self.children or ():
            if child.tag_id == tag_id:
                return child
        return None

    def find_recursive(self, tag_id: int) -> TlvNode | None:
        """Find the first descendant with the given tag (depth-first)."""
        for child in self.children or ():
            if child.tag_id == tag_id:
                return child
            result = child.find_recursive(tag_id)
            if result is not None:
                return result
        return None

    def walk(self) -> Iterator[TlvNode]:
        """Yield this node and every descendant, depth-first."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def encode(self) -> tuple[Byte, ...]:
        """Re-encode as BER-TLV, children included."""
        if self.children is None:
            payload = self.value
        else:
            payload = tuple(b for child in self.children for b in child.encode())
        return (
            tuple(Byte.of(b) for b in self.tag)
            + tuple(Byte.of(b) for b in encode_length(len(payload)))
            + payload
        )

    def __repr__(self) -> str:
        if self.children is not None:
            kids = ", ".join(repr(c) for c in self.children)
            return f"TlvNode({self.tag_hex}, [{kids}])"
        return f"TlvNode({self.tag_hex}, {to_hex(self.value)})"


def encode_length(length: int) -> bytes:
    """BER definite length: short form below 0x80, long form otherwise."""
    if length < 0x80:
        return bytes([length])
    body = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([0x80 | len(body)]) + body
