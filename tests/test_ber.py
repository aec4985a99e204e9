"""Tests for the BER-TLV parser."""

from __future__ import annotations

import pytest

from pemv.core.errors import (
    MalformedLength,
    MaskedHeader,
    ParseError,
    TrailingData,
    TruncatedTag,
)
from pemv.core.tlv import ber
from pemv.core.tlv.masking import from_hex, to_bytes
from pemv.core.tlv.model import TagClass

FCI = bytes.fromhex("6F07" "8402A000" "A50150")


def test_primitive_tags() -> None:
    nodes = ber.parse(bytes.fromhex("9F0206000000001000" "5A0412345678"))
    assert [n.tag_id for n in nodes] == [0x9F02, 0x5A]
    assert nodes[0].length == 6
    assert to_bytes(nodes[0].value) == bytes.fromhex("000000001000")
    assert nodes[1].tag_class is TagClass.APPLICATION
    assert not nodes[1].constructed


def test_multi_byte_tag() -> None:
    (node,) = ber.parse(bytes.fromhex("BF0C03" "500141"))
    assert node.tag == b"\xbf\x0c"
    assert node.constructed_flag
    assert node.find(0x50) is not None


def test_nested_template() -> None:
    (fci,) = ber.parse(FCI)
    assert fci.constructed
    assert [c.tag_id for c in fci.children] == [0x84, 0xA5]
    # A5 claims to be constructed, but "50" is not a complete data object
    a5 = fci.find(0xA5)
    assert a5.constructed_flag
    assert not a5.constructed
    assert to_bytes(a5.value) == b"\x50"


def test_constructed_fallback_keeps_raw_payload() -> None:
    (node,) = ber.parse(bytes.fromhex("E303010203"))
    assert node.children is None
    assert to_bytes(node.value) == bytes.fromhex("010203")


def test_empty_constructed_tag() -> None:
    (node,) = ber.parse(bytes.fromhex("7000"))
    assert node.children == ()
    assert node.constructed


def test_zero_length_primitive() -> None:
    (node,) = ber.parse(bytes.fromhex("9F0300"))
    assert node.length == 0
    assert node.value == ()


def test_long_form_length() -> None:
    payload = bytes(range(128))
    (node,) = ber.parse(bytes.fromhex("5A8180") + payload)
    assert node.length == 128
    assert to_bytes(node.value) == payload


def test_encode_round_trip() -> None:
    (fci,) = ber.parse(FCI)
    assert to_bytes(fci.encode()) == FCI
    assert sum(len(c.encode()) for c in fci.children) == fci.length


def test_masked_payload_is_kept() -> None:
    (node,) = ber.parse(from_hex("5A04 1234****"))
    assert node.masked
    assert node.length == 4


def test_masked_constructed_payload_falls_back() -> None:
    (node,) = ber.parse(from_hex("7002 **12"))
    assert node.children is None
    assert node.masked


def test_non_minimal_child_length_falls_back() -> None:
    (node,) = ber.parse(bytes.fromhex("70045A8101AA"))
    assert node.children is None
    assert to_bytes(node.value) == bytes.fromhex("5A8101AA")
    assert to_bytes(node.encode()) == bytes.fromhex("70045A8101AA")


def test_walk_and_find_recursive() -> None:
    (fci,) = ber.parse(FCI)
    assert [n.tag_id for n in fci.walk()] == [0x6F, 0x84, 0xA5]
    assert fci.find_recursive(0xA5) is not None
    assert fci.find_recursive(0x50) is None


@pytest.mark.parametrize(
    "text, error",
    [
        ("9F", TruncatedTag),
        ("5A", MalformedLength),
        ("5A80", MalformedLength),
        ("5A0512", MalformedLength),
        ("5A8501000000000000", MalformedLength),
        ("5A8201", MalformedLength),
        ("5A0112FF", TrailingData),
        ("*A0112", MaskedHeader),
        ("5A*1", MaskedHeader),
    ],
)
def test_errors(text: str, error: type[ParseError]) -> None:
    with pytest.raises(error):
        ber.parse(from_hex(text))


def test_parse_one_rejects_trailing_data() -> None:
    assert ber.parse_one(bytes.fromhex("5A0112")).tag_id == 0x5A
    with pytest.raises(TrailingData):
        ber.parse_one(bytes.fromhex("5A01125A0112"))


def test_truncated_input_never_raises_index_error() -> None:
    data = bytes.fromhex("70129F0206000000001000" "BF0C05" "9F4D020B0A")
    for cut in range(len(data)):
        try:
            ber.parse(data[:cut])
        except ParseError:
            pass


def test_empty_input() -> None:
    assert ber.parse(b"") == []
