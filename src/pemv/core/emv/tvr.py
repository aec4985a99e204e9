"""Terminal Verification Results (EMV Book 3, C5) and the Issuer Action Codes.

An Issuer Action Code has the same layout as the TVR: each set bit names a
TVR condition the issuer wants acted upon. The bits carry no severity of
their own.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pemv.core.emv import tags
from pemv.core.emv.bitfield import BitTable, decode_entries, flags
from pemv.core.emv.breakdown import Breakdown, Entry, Severity
from pemv.core.tlv.masking import Byte, to_hex

ERROR = Severity.ERROR
WARNING = Severity.WARNING

TVR_TABLE = BitTable(
    "Terminal Verification Results",
    5,
    tuple(
        flags(
            0,
            (0x80, "Offline data authentication was not performed"),
            (0x40, "SDA (Static Data Authentication) failed", ERROR),
            (0x20, "ICC data missing", ERROR),
            (0x10, "Card appears on terminal exception file", ERROR),
            (0x08, "DDA (Dynamic Data Authentication) failed", ERROR),
            (0x04, "CDA (Combined Data Authentication) failed", ERROR),
        )
        + flags(
            1,
            (0x80, "ICC and terminal have different application versions", WARNING),
            (0x40, "Expired application", ERROR),
            (0x20, "Application not yet effective", ERROR),
            (0x10, "Requested service not allowed for card product", ERROR),
            (0x08, "New card", WARNING),
        )
        + flags(
            2,
            (0x80, "Cardholder verification was not successful", WARNING),
            (0x40, "Unrecognised CVM (Cardholder Verification Method)", WARNING),
            (0x20, "PIN try limit exceeded", ERROR),
            (0x10, "PIN entry required and PIN pad not present or not working", ERROR),
            (0x08, "PIN entry required, PIN pad present, but PIN was not entered (PIN bypass)", WARNING),
            (0x04, "Online PIN entered"),
        )
        + flags(
            3,
            (0x80, "Transaction exceeds floor limit"),
            (0x40, "Lower consecutive offline limit exceeded"),
            (0x20, "Upper consecutive offline limit exceeded"),
            (0x10, "Transaction selected randomly for online processing"),
            (0x08, "Merchant forced transaction online"),
        )
        + flags(
            4,
            (0x80, "Default TDOL (Transaction Certificate Data Object List) used"),
            (0x40, "Issuer authentication failed", ERROR),
            (0x20, "Script processing failed before final GENERATE AC", ERROR),
            (0x10, "Script processing failed after final GENERATE AC", ERROR),
        )
    ),
)

IAC_LABELS: dict[int, str] = {
    tags.IAC_DEFAULT: (
        "If not an online transaction and any of the following match the TVR, "
        "reject the transaction"
    ),
    tags.IAC_DENIAL: (
        "If any of the following match the TVR, deny the transaction without even going online"
    ),
    tags.IAC_ONLINE: "If any of the following match the TVR, complete the transaction online",
}

MATCHES_TVR = "Also set in the TVR"


def decode_iac(
    tag_id: int,
    data: Sequence[Byte],
    context: Mapping[int, Sequence[Byte]] | None = None,
) -> Breakdown:
    """Decode an Issuer Action Code against the TVR table, severities suppressed.

    When *context* holds a TVR of the right size, every IAC flag that is also
    set there gets a child entry saying so.
    """
    entries = decode_entries(TVR_TABLE, data, suppress_severity=True)
    tvr = (context or {}).get(tags.TVR)
    if tvr is not None and len(tvr) == TVR_TABLE.num_bytes:
        by_name = {field.name: field for field in TVR_TABLE.fields}
        matched = []
        for entry in entries:
            field = by_name[entry.name]
            if entry.is_flag and tvr[field.byte].test(field.mask):
                note = Breakdown(
                    "TVR", to_hex(tvr), (Entry(MATCHES_TVR, field.bit_range, MATCHES_TVR),)
                )
                entry = Entry(entry.name, entry.bit_range, entry.meaning, entry.severity, note)
            matched.append(entry)
        entries = matched
    return Breakdown(IAC_LABELS[tag_id], to_hex(data), tuple(entries))
