"""Ingenico-proprietary TLV parsing.

Tags are always two bytes and every value is primitive, whatever the tag's
constructed bit says. Lengths are one byte up to 0x7F; with the high bit
set, the low seven bits and the following byte form a 15-bit length. Some
encoders pad the length with leading zero bytes, which are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pemv.core.errors import MalformedLength, MaskedHeader, TruncatedTag
from pemv.core.logging import TRACE
from pemv.core.tlv.masking import Byte, as_byte_tuple
from pemv.core.tlv.model import TlvNode

lg = logging.getLogger(__name__)

TAG_BYTES = 2


def parse(data: bytes | Iterable[Byte]) -> list[TlvNode]:
    """Parse a byte sequence into a list of primitive nodes."""
    buf = as_byte_tuple(data)
    nodes: list[TlvNode] = []
    offset = 0
    while offset < len(buf):
        if offset + TAG_BYTES > len(buf):
            raise TruncatedTag(f"{len(buf) - offset} byte left for a {TAG_BYTES}-byte tag", offset)
        tag = bytes(_known(buf, i, "tag") for i in range(offset, offset + TAG_BYTES))
        offset += TAG_BYTES

        length, offset = _read_length(buf, offset)
        if offset + length > len(buf):
            raise MalformedLength(
                f"tag {tag.hex().upper()} declares {length} bytes but only "
                f"{len(buf) - offset} remain",
                offset,
            )
        nodes.append(TlvNode(tag=tag, length=length, value=buf[offset : offset + length]))
        offset += length
    return nodes


def _known(buf: tuple[Byte, ...], index: int, what: str) -> int:
    value = buf[index].value
    if value is None:
        raise MaskedHeader(f"masked {what} byte {buf[index].hex()}", index)
    return value


def _long_length(buf: tuple[Byte, ...], offset: int) -> int:
    return ((_known(buf, offset, "length") & 0x7F) << 8) | _known(buf, offset + 1, "length")


def _read_length(buf: tuple[Byte, ...], offset: int) -> tuple[int, int]:
    """Read a length field and return (length, new_offset)."""
    if offset >= len(buf):
        raise MalformedLength("length is missing", offset)

    # Zero padding only counts as padding when a long-form length follows it
    # and that length fits in what's left.
    probe = offset
    while probe < len(buf) and buf[probe].value == 0x00:
        probe += 1
    if probe > offset and probe + 1 < len(buf):
        marker = buf[probe].value
        if marker is not None and marker & 0x80:
            length = _long_length(buf, probe)
            if probe + 2 + length <= len(buf):
                lg.log(TRACE, "skipped %d length padding bytes at offset %d", probe - offset, offset)
                return length, probe + 2

    first = _known(buf, offset, "length")
    if first & 0x80:
        if offset + 1 >= len(buf):
            raise MalformedLength("two-byte length is cut short", offset)
        return _long_length(buf, offset), offset + 2
    return first, offset + 1
