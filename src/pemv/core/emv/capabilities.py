"""Terminal Capabilities and Additional Terminal Capabilities (EMV Book 4, A2 and A3)."""

from __future__ import annotations

from pemv.core.emv.bitfield import BitTable, flags

TERMINAL_CAPABILITIES_TABLE = BitTable(
    "Terminal Capabilities",
    3,
    tuple(
        # Card data input
        flags(
            0,
            (0x80, "Manual key entry"),
            (0x40, "Magnetic stripe"),
            (0x20, "IC with contacts"),
        )
        # CVM
        + flags(
            1,
            (0x80, "Plaintext PIN for ICC verification"),
            (0x40, "Enciphered PIN for online verification"),
            (0x20, "Signature (paper)"),
            (0x10, "Enciphered PIN for offline verification"),
            (0x08, "No CVM Required"),
        )
        # Security
        + flags(
            2,
            (0x80, "SDA (Static Data Authentication)"),
            (0x40, "DDA (Dynamic Data Authentication)"),
            (0x20, "Card capture (ATM retaining the card)"),
            (0x08, "CDA (Combined Data Authentication)"),
        )
    ),
)

ADDITIONAL_TERMINAL_CAPABILITIES_TABLE = BitTable(
    "Additional Terminal Capabilities",
    5,
    tuple(
        # Transaction type
        flags(
            0,
            (0x80, "Cash"),
            (0x40, "Goods"),
            (0x20, "Services"),
            (0x10, "Cashback"),
            (0x08, "Inquiry (request for information about one of the cardholder's accounts)"),
            (0x04, "Transfer (between cardholder accounts at the same financial institution)"),
            (0x02, "Payment (from a cardholder account to another party)"),
            (0x01, "Administrative"),
        )
        + flags(
            1,
            (0x80, "Cash Deposit (into a bank account related to an application on the card used)"),
        )
        # Terminal data input
        + flags(
            2,
            (0x80, "Numeric keys"),
            (0x40, "Alphabetic and special characters keys"),
            (0x20, "Command keys"),
            (0x10, "Function keys"),
        )
        # Terminal data output
        + flags(
            3,
            (0x80, "Print, attendant"),
            (0x40, "Print, cardholder"),
            (0x20, "Display, attendant"),
            (0x10, "Display, cardholder"),
            (0x02, "ISO/IEC 8859 Code Table 10"),
            (0x01, "ISO/IEC 8859 Code Table 9"),
        )
        + flags(
            4,
            *((1 << (n - 1), f"ISO/IEC 8859 Code Table {n}") for n in range(8, 0, -1)),
        )
    ),
)
