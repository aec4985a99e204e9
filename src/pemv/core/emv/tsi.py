"""Transaction Status Information (EMV Book 3, C6)."""

from __future__ import annotations

from pemv.core.emv.bitfield import BitTable, flags

# Byte 2 is entirely RFU.
TSI_TABLE = BitTable(
    "Transaction Status Information",
    2,
    tuple(
        flags(
            0,
            (0x80, "Offline data authentication was performed"),
            (0x40, "Cardholder verification was performed"),
            (0x20, "Card risk management was performed"),
            (0x10, "Issuer authentication was performed"),
            (0x08, "Terminal risk management was performed"),
            (0x04, "Script processing was performed"),
        )
    ),
)
