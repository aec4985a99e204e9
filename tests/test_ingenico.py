"""Tests for the Ingenico TLV parser."""

from __future__ import annotations

import pytest

from pemv.core.errors import MalformedLength, MaskedHeader, TruncatedTag
from pemv.core.tlv import ingenico
from pemv.core.tlv.masking import from_hex, to_bytes

IAD = bytes.fromhex("0FA501" "03A0000000" + "00" * 8 + "0F" + "00" * 15)


def test_two_byte_tags() -> None:
    nodes = ingenico.parse(bytes.fromhex("9F3303E0F8C8" "9F350122"))
    assert [n.tag_id for n in nodes] == [0x9F33, 0x9F35]
    assert to_bytes(nodes[0].value) == bytes.fromhex("E0F8C8")


def test_single_byte_tag_numbers_still_take_two_bytes() -> None:
    (node,) = ingenico.parse(bytes.fromhex("5A00" "04" "12345678"))
    assert node.tag == b"\x5a\x00"
    assert node.length == 4


def test_long_length() -> None:
    (node,) = ingenico.parse(bytes.fromhex("9F108020") + IAD)
    assert node.length == 32
    assert to_bytes(node.value) == IAD


def test_zero_padded_length() -> None:
    (node,) = ingenico.parse(bytes.fromhex("9F10008020") + IAD)
    assert node.length == 32


def test_zero_is_literal_when_padding_does_not_fit() -> None:
    nodes = ingenico.parse(bytes.fromhex("9F0300" "9F3303E0F8C8"))
    assert [n.tag_id for n in nodes] == [0x9F03, 0x9F33]
    assert nodes[0].length == 0


def test_constructed_bit_is_ignored() -> None:
    (node,) = ingenico.parse(bytes.fromhex("E101025A01"))
    assert node.children is None
    assert to_bytes(node.value) == bytes.fromhex("5A01")


def test_masked_value() -> None:
    (node,) = ingenico.parse(from_hex("5A00 02 12**"))
    assert node.masked


@pytest.mark.parametrize(
    "text, error",
    [
        ("9F", TruncatedTag),
        ("9F3303E0F8C85A", TruncatedTag),
        ("9F33", MalformedLength),
        ("9F1081", MalformedLength),
        ("9F3305E0F8", MalformedLength),
        ("9F33*3E0F8C8", MaskedHeader),
    ],
)
def test_errors(text: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        ingenico.parse(from_hex(text))
