"""Single-value code lists: terminal type, transaction type, POS entry mode and ARC."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pemv.core.emv.bitfield import decode_enum
from pemv.core.emv.breakdown import RFU, UNKNOWN_MASKED, Breakdown, Entry
from pemv.core.errors import WrongLength
from pemv.core.tlv.masking import Byte, is_masked, to_bytes, to_hex

_FI = "Controlled by a Financial Institution"
_ATM = "(ATM if it supports Cash Disbursement)"
_CARDHOLDER = "Controlled by the Cardholder (self-attended, home PC, etc.)"

# EMV Book 4, Annex A1
TERMINAL_TYPES: dict[int, str] = {
    0x11: f"Attended, Online-Only, {_FI}",
    0x12: f"Attended, Offline With Online Capabilities, {_FI}",
    0x13: f"Attended, Offline-Only, {_FI}",
    0x14: f"Unattended, Online-Only, {_FI} {_ATM}",
    0x15: f"Unattended, Offline With Online Capabilities, {_FI} {_ATM}",
    0x16: f"Unattended, Offline-Only, {_FI} {_ATM}",
    0x21: "Attended, Online-Only, Controlled by a Merchant",
    0x22: "Attended, Offline With Online Capabilities, Controlled by a Merchant",
    0x23: "Attended, Offline-Only, Controlled by a Merchant",
    0x24: "Unattended, Online-Only, Controlled by a Merchant",
    0x25: "Unattended, Offline With Online Capabilities, Controlled by a Merchant",
    0x26: "Unattended, Offline-Only, Controlled by a Merchant",
    0x34: f"Unattended, Online-Only, {_CARDHOLDER}",
    0x35: f"Unattended, Offline With Online Capabilities, {_CARDHOLDER}",
    0x36: f"Unattended, Offline-Only, {_CARDHOLDER}",
}

# ISO 8583 processing code, first two digits
TRANSACTION_TYPES: dict[int, str] = {
    0x00: "Purchase",
    0x01: "Cash Advance",
    0x02: "Void",
    0x09: "Purchase With Cashback",
    0x20: "Refund",
    0x31: "Balance Inquiry",
    0x38: "Mini Statement",
    0x40: "Fund Transfer",
}

_CONTACTLESS = "Contactless Chip (contactless/tap transaction)"
_CONTACTLESS_MAPPED = f"{_CONTACTLESS} - Contactless Mapping Service Applied"

POS_ENTRY_MODES: dict[int, str] = {
    0x00: "Unknown",
    0x01: "Manual (keyed entry)",
    0x02: "Magnetic Stripe Reader (MSR)",
    0x03: "Barcode",
    0x04: "Optical Character Recognition (OCR)",
    0x05: "Integrated Circuit Chip (ICC) - Data Reliable (contact/insert transaction) (CVV can be checked)",
    0x06: "Magnetic Stripe Track 1",
    0x07: _CONTACTLESS,
    0x08: _CONTACTLESS_MAPPED,
    0x09: "E-Commerce - Including Remote Chip",
    0x10: "Merchant Has Cardholder Credentials On File (token, recurring payment, etc.)",
    0x80: "ICC Could Not Process - Fallback to MSR",
    0x81: "E-Commerce - Including Chip",
    0x82: "Via a Server (issuer, acquirer, third-party vendor)",
    0x83: _CONTACTLESS,
    0x90: "Magnetic Stripe Reader (MSR) - Full Track Data - Data Reliable (CVV can be checked)",
    0x91: "Contactless Magnetic Stripe Data (MSD)",
    0x92: _CONTACTLESS_MAPPED,
    0x95: "Integrated Circuit Chip (ICC) - Data Unreliable (contact/insert transaction) (CVV cannot be checked)",
}

_ARC_PAIRS = (
    (("33", "54"), "Expired Card"),
    (("34", "59"), "Suspected Fraud"),
    (("35", "60"), "Card Acceptor, Contact Acquirer"),
    (("36", "62"), "Restricted Card"),
    (("37", "66"), "Card Acceptor, Call Acquirer Security"),
    (("38", "75"), "Allowable PIN Retries Exceeded"),
)

AUTHORISATION_RESPONSE_CODES: dict[str, str] = {
    "00": "Approval",
    "01": "Call",
    "02": "Call - Special Conditions",
    "03": "Terminal ID Error",
    "04": "Hold Card - Call",
    "05": "Decline - Do Not Honour",
    "06": "Error",
    "07": "Hold Card - Call - Special Conditions",
    "08": "Honour With Identification",
    "09": "No Original Transaction",
    "10": "Partial Approval",
    "11": "Approved (VIP)",
    "12": "Invalid Transaction",
    "13": "Invalid Amount",
    "14": "Invalid Card Number",
    "15": "No Such Issuer",
    "16": "Approved - Update Track 3",
    "17": "Customer Cancellation",
    "18": "Customer Dispute",
    "19": "Retry Transaction",
    "20": "Invalid Response",
    "21": "No Action Taken",
    "22": "Suspected Malfunction",
    "23": "Invalid Minimum Amount",
    "24": "File Update Not Supported",
    "25": "Invalid ICC Data",
    "26": "Duplicate File Update Record",
    "27": "File Update Field Edit Error",
    "28": "File Update File Locked Out",
    "29": "File Update Not Successful",
    "30": "Format Error",
    "31": "Bank Not Supported By Switch",
    "32": "Completed Partially",
    **{code: meaning for codes, meaning in _ARC_PAIRS for code in codes},
    "39": "No Credit Account",
    "40": "Requested Function Not Supported",
    "41": "Lost Card",
    "42": "No Universal Account",
    "43": "Stolen Card",
    "44": "No Investment Account",
    "51": "Insufficient Funds",
    "52": "No Chequing Account",
    "53": "No Savings Account",
    "55": "Incorrect PIN",
    "56": "No Card Record",
    "57": "Transaction Not Allowed For Cardholder",
    "58": "Transaction Not Allowed For Terminal",
    "61": "Debit Cashback Withdrawal Limit Decline",
    "63": "Security Violation",
    "64": "Original Amount Incorrect",
    "65": "Decline - Insert Card (often due to too many contactless transactions)",
    "67": "ATM Hard Card Capture",
    "68": "Response Received Too Late",
    "91": "Issuer Timeout",
    "92": "Issuer Routing Problem",
    "93": "Transaction Not Completed - Law Violation",
    "94": "Duplicate Transmission",
    "95": "Reconciliation Error",
    "96": "System Malfunction",
}

ARC_BYTES = 2


def decode_terminal_type(data: Sequence[Byte], context: Mapping[int, Sequence[Byte]] | None = None) -> Breakdown:
    return decode_enum("Terminal Type", TERMINAL_TYPES, data)


def decode_transaction_type(
    data: Sequence[Byte], context: Mapping[int, Sequence[Byte]] | None = None
) -> Breakdown:
    return decode_enum("Transaction Type", TRANSACTION_TYPES, data)


def decode_pos_entry_mode(data: Sequence[Byte], context: Mapping[int, Sequence[Byte]] | None = None) -> Breakdown:
    return decode_enum("POS Entry Mode", POS_ENTRY_MODES, data)


def decode_authorisation_response_code(
    data: Sequence[Byte], context: Mapping[int, Sequence[Byte]] | None = None
) -> Breakdown:
    """Decode the two ASCII characters of an Authorisation Response Code."""
    if len(data) != ARC_BYTES:
        raise WrongLength(ARC_BYTES, len(data))
    if is_masked(data):
        meaning = UNKNOWN_MASKED
    else:
        code = to_bytes(data).decode("ascii", errors="replace")
        meaning = AUTHORISATION_RESPONSE_CODES.get(code, RFU)
    entry = Entry("Authorisation Response Code", None, meaning)
    return Breakdown("Authorisation Response Code", to_hex(data), (entry,))
