"""Magnetic stripe Service Code (ISO/IEC 7813), as carried in tag 5F30.

The three digits are BCD in two bytes, left-padded with a zero nibble, so
each digit is one nibble field.
"""

from __future__ import annotations

from pemv.core.emv.bitfield import BitTable, Field
from pemv.core.emv.breakdown import RFU

_ICC = "Integrated circuit card (ICC)"
_NO_RESTRICTIONS = "No restrictions"
_GOODS_AND_SERVICES = "Goods and services only"

SERVICE_CODE_TABLE = BitTable(
    "Service Code",
    2,
    (
        Field(
            "Interchange",
            0,
            0x0F,
            {1: "International", 2: "International", 5: "National", 6: "National", 7: "Private", 9: "Test"},
        ),
        Field("Technology", 0, 0x0F, {2: _ICC, 6: _ICC}, default="Magnetic stripe only (MSR)"),
        Field(
            "Authorisation Processing",
            1,
            0xF0,
            {
                0: "Normal",
                2: "By issuer only (no offline authorisation)",
                4: (
                    "By issuer only unless an explicit bilateral agreement applies "
                    "(no offline authorisation)"
                ),
            },
        ),
        Field(
            "Allowed Services",
            1,
            0x0F,
            {
                0: _NO_RESTRICTIONS,
                1: _NO_RESTRICTIONS,
                6: _NO_RESTRICTIONS,
                2: _GOODS_AND_SERVICES,
                5: _GOODS_AND_SERVICES,
                7: _GOODS_AND_SERVICES,
                3: "ATM only",
                4: "Cash only",
            },
            default=RFU,
        ),
        Field(
            "PIN Requirements",
            1,
            0x0F,
            {0: "None", 3: "None", 5: "None", 6: "PIN required", 7: "PIN required"},
            default="Prompt for PIN if PIN pad is present",
        ),
    ),
)
