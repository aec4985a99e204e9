"""Tests for the TVR, the Issuer Action Codes and the other flag tables."""

from __future__ import annotations

import pytest

from pemv.core.emv import tags
from pemv.core.emv.bitfield import decode_bits
from pemv.core.emv.breakdown import UNKNOWN_MASKED, Severity
from pemv.core.emv.capabilities import ADDITIONAL_TERMINAL_CAPABILITIES_TABLE, TERMINAL_CAPABILITIES_TABLE
from pemv.core.emv.tsi import TSI_TABLE
from pemv.core.emv.tvr import IAC_LABELS, MATCHES_TVR, TVR_TABLE, decode_iac
from pemv.core.errors import WrongLength
from pemv.core.tlv.masking import from_hex

SDA_FAILED = "SDA (Static Data Authentication) failed"
ODA_NOT_PERFORMED = "Offline data authentication was not performed"
EVERY_TVR_BIT = "FCF8FCF8F0"


def test_tvr_flags_and_severities() -> None:
    breakdown = decode_bits(TVR_TABLE, from_hex("C000000000"))
    assert breakdown.names == [ODA_NOT_PERFORMED, SDA_FAILED]
    assert breakdown.find(ODA_NOT_PERFORMED).severity is Severity.NONE
    assert breakdown.find(SDA_FAILED).severity is Severity.ERROR
    assert str(breakdown.find(SDA_FAILED).bit_range) == "B1b7"


def test_tvr_all_clear() -> None:
    assert decode_bits(TVR_TABLE, from_hex("0000000000")).entries == ()


def test_tvr_wrong_length() -> None:
    with pytest.raises(WrongLength):
        decode_bits(TVR_TABLE, from_hex("00000000"))


def test_tvr_masked_nibble() -> None:
    breakdown = decode_bits(TVR_TABLE, from_hex("*800000000"))
    # The four flags in the masked nibble are unknown; B1b4 is set
    assert [e.meaning for e in breakdown.entries[:4]] == [UNKNOWN_MASKED] * 4
    assert breakdown.entries[4].name == "DDA (Dynamic Data Authentication) failed"
    assert all(e.severity is Severity.NONE for e in breakdown.entries[:4])


def test_iac_matches_tvr_flags_without_severity() -> None:
    data = from_hex(EVERY_TVR_BIT)
    tvr = decode_bits(TVR_TABLE, data)
    iac = decode_iac(tags.IAC_DENIAL, data)
    assert iac.names == tvr.names
    assert {e.severity for e in iac.entries} == {Severity.NONE}
    assert any(e.severity is Severity.ERROR for e in tvr.entries)
    assert iac.label == IAC_LABELS[tags.IAC_DENIAL]


def test_iac_notes_flags_set_in_tvr() -> None:
    context = {tags.TVR: from_hex("4000000000")}
    iac = decode_iac(tags.IAC_ONLINE, from_hex("C000000000"), context)
    assert iac.find(ODA_NOT_PERFORMED).children is None
    note = iac.find(SDA_FAILED).children
    assert note is not None
    assert note.find(MATCHES_TVR) is not None
    assert note.raw_hex == "4000000000"


def test_iac_notes_carry_no_severity() -> None:
    context = {tags.TVR: from_hex("4000000000")}
    iac = decode_iac(tags.IAC_ONLINE, from_hex("4000000000"), context)
    assert iac.find(SDA_FAILED).children is not None
    assert iac.worst is Severity.NONE


def test_iac_ignores_wrong_sized_tvr() -> None:
    iac = decode_iac(tags.IAC_DEFAULT, from_hex("C000000000"), {tags.TVR: from_hex("40")})
    assert all(e.children is None for e in iac.entries)


def test_tsi() -> None:
    breakdown = decode_bits(TSI_TABLE, from_hex("E800"))
    assert breakdown.names == [
        "Offline data authentication was performed",
        "Cardholder verification was performed",
        "Card risk management was performed",
        "Terminal risk management was performed",
    ]


def test_terminal_capabilities() -> None:
    breakdown = decode_bits(TERMINAL_CAPABILITIES_TABLE, from_hex("E0F8C8"))
    assert breakdown.names == [
        "Manual key entry",
        "Magnetic stripe",
        "IC with contacts",
        "Plaintext PIN for ICC verification",
        "Enciphered PIN for online verification",
        "Signature (paper)",
        "Enciphered PIN for offline verification",
        "No CVM Required",
        "SDA (Static Data Authentication)",
        "DDA (Dynamic Data Authentication)",
        "CDA (Combined Data Authentication)",
    ]


def test_additional_terminal_capabilities() -> None:
    breakdown = decode_bits(ADDITIONAL_TERMINAL_CAPABILITIES_TABLE, from_hex("6000F0A001"))
    assert "Goods" in breakdown.names
    assert "Services" in breakdown.names
    assert "Display, attendant" in breakdown.names
    assert "ISO/IEC 8859 Code Table 1" in breakdown.names
    assert "ISO/IEC 8859 Code Table 8" not in breakdown.names
