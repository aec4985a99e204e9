"""Common Core Definitions (EMV Book 3, Annex C7): CCI, CVR and the Issuer Application Data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pemv.core.emv.bitfield import BitTable, Field, decode_bits, flags
from pemv.core.emv.breakdown import UNKNOWN_MASKED, Breakdown, Entry, Severity
from pemv.core.errors import NotCcdCompliant
from pemv.core.tlv.masking import Byte, to_hex

IAD_BYTES = 32
IAD_LENGTH_MARKER = 0x0F
FORMAT_A = 0xA

CCI_TABLE = BitTable(
    "Common Core Identifier",
    1,
    (
        Field("IAD Format Code", 0, 0xF0, {FORMAT_A: "Format A"}),
        Field("Cryptogram Version", 0, 0x0F, {0x5: "Triple DES (3DES)", 0x6: "AES"}),
    ),
)

_AAC = "AAC (Application Authentication Cryptogram)"
_TC = "TC (Transaction Certificate)"

CVR_TABLE = BitTable(
    "Card Verification Results",
    5,
    (
        Field(
            "Application cryptogram type returned in 2nd GENERATE AC",
            0,
            0xC0,
            {0b00: _AAC, 0b01: _TC, 0b10: "Second GENERATE AC not requested"},
        ),
        Field(
            "Application cryptogram type returned in 1st GENERATE AC",
            0,
            0x30,
            {0b00: _AAC, 0b01: _TC, 0b10: "ARQC (Authorization Request Cryptogram)"},
        ),
        *flags(
            0,
            (0x08, "CDA performed"),
            (0x04, "Offline DDA performed"),
            (0x02, "Issuer authentication not performed", Severity.WARNING),
            (0x01, "Issuer authentication failed", Severity.ERROR),
        ),
        Field("PIN try count", 1, 0xF0),
        *flags(
            1,
            (0x08, "Offline PIN verification performed"),
            (0x04, "Offline PIN verification performed and PIN not successfully verified", Severity.ERROR),
            (0x02, "PIN try limit exceeded", Severity.ERROR),
            (0x01, "Last online transaction not completed", Severity.WARNING),
        ),
        *flags(
            2,
            (0x80, "Lower offline transaction count limit exceeded"),
            (0x40, "Upper offline transaction count limit exceeded"),
            (0x20, "Lower cumulative offline amount limit exceeded"),
            (0x10, "Upper cumulative offline amount limit exceeded"),
            (0x08, "Issuer-discretionary bit 1"),
            (0x04, "Issuer-discretionary bit 2"),
            (0x02, "Issuer-discretionary bit 3"),
            (0x01, "Issuer-discretionary bit 4"),
        ),
        Field(
            "Number of successfully processed issuer script commands containing secure messaging",
            3,
            0xF0,
        ),
        *flags(
            3,
            (0x08, "Issuer script processing failed", Severity.ERROR),
            (0x04, "Offline data authentication failed on previous transaction", Severity.WARNING),
            (0x02, "Go online on next transaction"),
            (0x01, "Unable to go online", Severity.WARNING),
        ),
        # byte 5 is unused
    ),
)


def decode_iad(data: Sequence[Byte], context: Mapping[int, Sequence[Byte]] | None = None) -> Breakdown:
    """Decode CCD-compliant Issuer Application Data.

    The value must be 32 bytes, both length markers (bytes 1 and 17) must
    read 0x0F and the CCI must name a known format; a masked marker or format
    code is given the benefit of the doubt. Anything else raises
    NotCcdCompliant, since issuers are free to use other layouts.
    """
    if len(data) != IAD_BYTES:
        raise NotCcdCompliant(f"{len(data)} bytes, CCD data is {IAD_BYTES}")
    for index in (0, 16):
        if data[index].value not in (IAD_LENGTH_MARKER, None):
            raise NotCcdCompliant(f"byte {index + 1} is {data[index].hex()}, not 0F")
    format_code = data[1].bits(0xF0)
    if format_code not in (FORMAT_A, None):
        raise NotCcdCompliant(f"unknown IAD format code {format_code:X}")

    dki = data[2].value
    entries = (
        Entry("Common Core Identifier", None, to_hex(data[1:2]), children=decode_bits(CCI_TABLE, data[1:2])),
        Entry("Derivation Key Index", None, UNKNOWN_MASKED if dki is None else f"0x{dki:02X}"),
        Entry("Card Verification Results", None, to_hex(data[3:8]), children=decode_bits(CVR_TABLE, data[3:8])),
        Entry("Counters (payment system-specific)", None, to_hex(data[8:16], sep=" ")),
        Entry("Issuer-discretionary data", None, to_hex(data[17:32], sep=" ")),
    )
    return Breakdown("Issuer Application Data (CCD-Compliant)", to_hex(data), entries)
