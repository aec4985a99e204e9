"""Tests for masked-nibble bytes and hex text decoding."""

from __future__ import annotations

import pytest

from pemv.core.tlv.masking import (
    MASKED,
    Byte,
    from_bytes,
    from_hex,
    is_masked,
    read_uint,
    to_bytes,
    to_hex,
)


def test_from_hex_ignores_whitespace_and_case() -> None:
    assert from_hex("9f 02\n0a") == from_bytes(bytes.fromhex("9F020A"))


def test_masked_nibbles() -> None:
    (b,) = from_hex("0*")
    assert b == Byte(0, MASKED)
    assert b.masked
    assert b.value is None
    assert b.bits(0xF0) == 0
    assert b.bits(0x0F) is None
    assert b.test(0x80) is False
    assert b.test(0x01) is None


def test_masked_never_equals_known_byte() -> None:
    assert Byte(MASKED, 0) != Byte.of(0x00)
    assert Byte(MASKED, 0) != Byte.of(0xF0)


def test_bits_shifts_down() -> None:
    b = Byte.of(0b1011_0100)
    assert b.bits(0xF0) == 0b1011
    assert b.bits(0x0C) == 0b01
    assert b.test(0x04) is True
    assert b.test(0x02) is False


def test_custom_masking_characters() -> None:
    data = from_hex("X?12", masking_characters="X?")
    assert data[0] == Byte(MASKED, MASKED)
    assert data[1] == Byte.of(0x12)
    assert to_hex(data, "#") == "##12"


@pytest.mark.parametrize("text", ["123", "0G", "12-3"])
def test_from_hex_rejects_bad_text(text: str) -> None:
    with pytest.raises(ValueError):
        from_hex(text)


def test_to_bytes_rejects_masked() -> None:
    assert to_bytes(from_hex("1234")) == b"\x12\x34"
    with pytest.raises(ValueError):
        to_bytes(from_hex("12*4"))


def test_read_uint() -> None:
    assert read_uint(from_hex("00650200")) == 6_619_648
    assert read_uint(from_hex("0*")) is None
    assert read_uint(()) == 0
    assert is_masked(from_hex("00*0"))
    assert not is_masked(from_hex("0000"))
