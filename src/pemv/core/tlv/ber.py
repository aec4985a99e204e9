"""BER-TLV parsing (EMV Book 3, Annex B).

Some tags set the constructed bit without holding nested TLV data (the
Verifone ``E3`` tag, for one). A constructed tag is only given children
when its whole payload parses cleanly; anything else stays primitive.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pemv.core.errors import MalformedLength, MaskedHeader, ParseError, TrailingData, TruncatedTag
from pemv.core.logging import TRACE
from pemv.core.tlv.masking import Byte, as_byte_tuple, to_hex
from pemv.core.tlv.model import TlvNode

lg = logging.getLogger(__name__)

MAX_LENGTH_BYTES = 4


def parse(data: bytes | Iterable[Byte]) -> list[TlvNode]:
    """Parse a byte sequence into a list of BER-TLV nodes."""
    return _parse_block(as_byte_tuple(data), 0)


def parse_one(data: bytes | Iterable[Byte]) -> TlvNode:
    """Parse exactly one data object; anything after it is an error."""
    buf = as_byte_tuple(data)
    node, offset = _read_node(buf, 0, 0)
    if offset != len(buf):
        raise TrailingData(f"{len(buf) - offset} bytes after tag {node.tag_hex}", offset)
    return node


def _parse_block(buf: tuple[Byte, ...], base: int) -> list[TlvNode]:
    nodes: list[TlvNode] = []
    offset = 0
    while offset < len(buf):
        # A tag and a length need at least two bytes
        if nodes and len(buf) - offset < 2:
            raise TrailingData(
                f"{len(buf) - offset} dangling byte after tag {nodes[-1].tag_hex}", base + offset
            )
        node, offset = _read_node(buf, offset, base)
        nodes.append(node)
    return nodes


def _read_node(buf: tuple[Byte, ...], offset: int, base: int) -> tuple[TlvNode, int]:
    tag, offset = _read_tag(buf, offset, base)
    length, offset = _read_length(buf, offset, base)
    if offset + length > len(buf):
        raise MalformedLength(
            f"tag {tag.hex().upper()} declares {length} bytes but only "
            f"{len(buf) - offset} remain",
            base + offset,
        )
    value = buf[offset : offset + length]

    children = None
    if tag[0] & 0x20:
        children = _try_nested(tag, value, base + offset)
    return TlvNode(tag=tag, length=length, value=value, children=children), offset + length


def _try_nested(tag: bytes, value: tuple[Byte, ...], base: int) -> tuple[TlvNode, ...] | None:
    try:
        children = tuple(_parse_block(value, base))
    except ParseError as exc:
        lg.log(TRACE, "tag %s is not nested TLV, keeping it primitive: %s", tag.hex().upper(), exc)
        return None
    # non-minimal child lengths would not re-encode to the declared length
    encoded = sum(len(child.encode()) for child in children)
    if encoded != len(value):
        lg.log(
            TRACE,
            "tag %s children re-encode to %d bytes, not %d, keeping it primitive",
            tag.hex().upper(),
            encoded,
            len(value),
        )
        return None
    return children


def _known(buf: Sequence[Byte], index: int, base: int, what: str) -> int:
    value = buf[index].value
    if value is None:
        raise MaskedHeader(f"masked {what} byte {buf[index].hex()}", base + index)
    return value


def _read_tag(buf: tuple[Byte, ...], offset: int, base: int) -> tuple[bytes, int]:
    """Read a BER-TLV tag and return (tag bytes, new_offset)."""
    start = offset
    first = _known(buf, offset, base, "tag")
    tag = bytearray([first])
    offset += 1
    if (first & 0x1F) == 0x1F:
        while True:
            if offset >= len(buf):
                raise TruncatedTag(f"tag {tag.hex().upper()} is incomplete", base + start)
            b = _known(buf, offset, base, "tag")
            tag.append(b)
            offset += 1
            if not (b & 0x80):
                break
    return bytes(tag), offset


def _read_length(buf: tuple[Byte, ...], offset: int, base: int) -> tuple[int, int]:
    """Read a BER-TLV definite length and return (length, new_offset)."""
    if offset >= len(buf):
        raise MalformedLength("length is missing", base + offset)
    b = _known(buf, offset, base, "length")
    offset += 1
    if b < 0x80:
        return b, offset
    num_bytes = b & 0x7F
    if num_bytes == 0:
        raise MalformedLength("indefinite length is not allowed", base + offset - 1)
    if num_bytes > MAX_LENGTH_BYTES:
        raise MalformedLength(f"{num_bytes}-byte length is not supported", base + offset - 1)
    if offset + num_bytes > len(buf):
        raise MalformedLength(
            f"length needs {num_bytes} bytes, {to_hex(buf[offset:])!r} remain", base + offset
        )
    length = 0
    for index in range(offset, offset + num_bytes):
        length = (length << 8) | _known(buf, index, base, "length")
    return length, offset + num_bytes
