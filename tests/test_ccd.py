"""Tests for CCD Issuer Application Data, CCI and CVR."""

from __future__ import annotations

import pytest

from pemv.core.emv.bitfield import decode_bits
from pemv.core.emv.breakdown import RFU, Severity
from pemv.core.emv.ccd import CCI_TABLE, CVR_TABLE, decode_iad
from pemv.core.errors import NotCcdCompliant
from pemv.core.tlv.masking import from_hex

IAD = "0FA501" "03A0000000" + "00" * 8 + "0F" + "00" * 15


def test_iad() -> None:
    breakdown = decode_iad(from_hex(IAD))
    assert breakdown.label == "Issuer Application Data (CCD-Compliant)"
    assert breakdown.find("Derivation Key Index").meaning == "0x01"

    cci = breakdown.find("Common Core Identifier").children
    assert cci.find("IAD Format Code").meaning == "Format A"
    assert cci.find("Cryptogram Version").meaning == "Triple DES (3DES)"

    cvr = breakdown.find("Card Verification Results").children
    assert cvr.raw_hex == "03A0000000"
    assert cvr.find("PIN try count").meaning == "10"
    assert cvr.find("Issuer authentication failed").severity is Severity.ERROR
    assert cvr.find("Issuer authentication not performed").severity is Severity.WARNING
    assert breakdown.worst is Severity.ERROR


@pytest.mark.parametrize(
    "text",
    [
        "0E" + IAD[2:],
        IAD[:32] + "0E" + IAD[34:],
        "0F85" + IAD[4:],
    ],
)
def test_not_ccd_compliant(text: str) -> None:
    with pytest.raises(NotCcdCompliant):
        decode_iad(from_hex(text))


def test_masked_markers_are_accepted() -> None:
    breakdown = decode_iad(from_hex("**" + IAD[2:]))
    assert breakdown.find("Card Verification Results") is not None


def test_iad_of_another_length_is_not_ccd() -> None:
    with pytest.raises(NotCcdCompliant, match="31 bytes"):
        decode_iad(from_hex(IAD[:-2]))


def test_cci_unknown_version() -> None:
    breakdown = decode_bits(CCI_TABLE, from_hex("A7"))
    assert breakdown.find("Cryptogram Version").meaning == RFU


def test_cvr_cryptogram_types() -> None:
    breakdown = decode_bits(CVR_TABLE, from_hex("A000000000"))
    assert breakdown.find("Application cryptogram type returned in 2nd GENERATE AC").meaning == (
        "Second GENERATE AC not requested"
    )
    assert breakdown.find("Application cryptogram type returned in 1st GENERATE AC").meaning == (
        "ARQC (Authorization Request Cryptogram)"
    )
    assert breakdown.find("PIN try count").meaning == "0"
