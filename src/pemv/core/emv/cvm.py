"""Cardholder verification: CV Rules, the CVM List and CVM Results (EMV Book 3, C3)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

from pemv.core.emv.bitfield import BitTable, Field, decode_bits
from pemv.core.emv.breakdown import UNKNOWN_MASKED, Breakdown, Entry, Severity
from pemv.core.errors import WrongLength
from pemv.core.tlv.masking import Byte, read_uint, to_hex

CV_RULE_BYTES = 2
CVM_LIST_HEADER_BYTES = 8

CONTINUE_IF_FAILED = "Apply succeeding CV Rule if this CVM is unsuccessful"
UNKNOWN_METHOD = "Unknown (likely issuer or payment system-specific)"
UNKNOWN_CONDITION = "Unknown (likely payment system-specific)"

CV_METHODS: dict[int, str] = {
    0x00: "Fail CVM processing",
    0x01: "Plaintext PIN verification performed by ICC",
    0x02: "Enciphered PIN verified online",
    0x03: "Plaintext PIN verification performed by ICC and signature (paper)",
    0x04: "Enciphered PIN verification performed by ICC",
    0x05: "Enciphered PIN verification performed by ICC and signature (paper)",
    0x1E: "Signature (paper)",
    0x1F: "No CVM required",
    0x3F: "No CVM performed",
}

CV_CONDITIONS: dict[int, str] = {
    0x00: "Always",
    0x01: "If unattended cash",
    0x02: "If not unattended cash and not manual cash and not purchase with cashback",
    0x03: "If terminal supports the CVM",
    0x04: "If manual cash",
    0x05: "If purchase with cashback",
    0x06: "If transaction is in the application currency and is under X value",
    0x07: "If transaction is in the application currency and is over X value",
    0x08: "If transaction is in the application currency and is under Y value",
    0x09: "If transaction is in the application currency and is over Y value",
}

X_CONDITIONS = frozenset({0x06, 0x07})
Y_CONDITIONS = frozenset({0x08, 0x09})

CVM_RESULTS: dict[int, str] = {
    0x00: "Unknown",
    0x01: "Failed",
    0x02: "Successful",
}

_RULE_FIELDS = (
    Field(CONTINUE_IF_FAILED, 0, 0x40),
    Field("Method", 0, 0x3F, CV_METHODS, default=UNKNOWN_METHOD),
    Field("Condition", 1, 0xFF, CV_CONDITIONS, default=UNKNOWN_CONDITION),
)

CV_RULE_TABLE = BitTable("CV Rule", CV_RULE_BYTES, _RULE_FIELDS)

CVM_RESULTS_TABLE = BitTable(
    "CVM Results",
    3,
    _RULE_FIELDS
    + (Field("Result", 2, 0xFF, CVM_RESULTS, severities={0x01: Severity.ERROR}),),
)


@dataclass(frozen=True)
class CvCondition:
    """When a CV Rule applies. A masked condition may reference either amount."""

    code: Optional[int]
    meaning: Optional[str]
    references_x: bool
    references_y: bool

    @classmethod
    def from_byte(cls, b: Byte) -> CvCondition:
        code = b.value
        if code is None:
            return cls(None, None, True, True)
        return cls(
            code,
            CV_CONDITIONS.get(code, UNKNOWN_CONDITION),
            code in X_CONDITIONS,
            code in Y_CONDITIONS,
        )


@dataclass(frozen=True)
class CvRule:
    method: Optional[str]
    condition: CvCondition
    continue_if_failed: Optional[bool]


def parse_cv_rule(data: Sequence[Byte]) -> CvRule:
    if len(data) != CV_RULE_BYTES:
        raise WrongLength(CV_RULE_BYTES, len(data))
    method = data[0].bits(0x3F)
    return CvRule(
        method=None if method is None else CV_METHODS.get(method, UNKNOWN_METHOD),
        condition=CvCondition.from_byte(data[1]),
        continue_if_failed=data[0].test(0x40),
    )


# ---------------------------------------------------------------------------
# CVM List
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CvmList:
    x_value: Optional[int]
    y_value: Optional[int]
    rules: tuple[CvRule, ...]

    @property
    def references_x(self) -> bool:
        return any(rule.condition.references_x for rule in self.rules)

    @property
    def references_y(self) -> bool:
        return any(rule.condition.references_y for rule in self.rules)


def _rule_chunks(data: Sequence[Byte]) -> list[Sequence[Byte]]:
    if len(data) < CVM_LIST_HEADER_BYTES:
        raise WrongLength(CVM_LIST_HEADER_BYTES, len(data), at_least=True)
    body = data[CVM_LIST_HEADER_BYTES:]
    if len(body) % CV_RULE_BYTES:
        raise WrongLength(CV_RULE_BYTES, len(body), multiple=True)
    return [body[i : i + CV_RULE_BYTES] for i in range(0, len(body), CV_RULE_BYTES)]


def _cvm_list(data: Sequence[Byte], chunks: list[Sequence[Byte]]) -> CvmList:
    return CvmList(
        x_value=read_uint(data[0:4]),
        y_value=read_uint(data[4:8]),
        rules=tuple(parse_cv_rule(chunk) for chunk in chunks),
    )


def parse_cvm_list(data: Sequence[Byte]) -> CvmList:
    """Split a CVM List into its X and Y amounts and its CV Rules."""
    return _cvm_list(data, _rule_chunks(data))


def _amount(value: int | None) -> str:
    return UNKNOWN_MASKED if value is None else str(value)


def decode_cvm_list(data: Sequence[Byte], context: Mapping[int, Sequence[Byte]] | None = None) -> Breakdown:
    """Decode a CVM List.

    The X and Y amounts are listed together, and only when some rule's
    condition refers to either of them. Every rule is listed in order with
    its own breakdown as children.
    """
    chunks = _rule_chunks(data)
    cvm_list = _cvm_list(data, chunks)
    entries: list[Entry] = []
    if cvm_list.references_x or cvm_list.references_y:
        entries.append(Entry("X value", None, _amount(cvm_list.x_value)))
        entries.append(Entry("Y value", None, _amount(cvm_list.y_value)))
    for index, (rule, chunk) in enumerate(zip(cvm_list.rules, chunks), start=1):
        label = f"CV Rule {index}"
        entries.append(
            Entry(
                label,
                None,
                rule.method or UNKNOWN_MASKED,
                children=decode_bits(CV_RULE_TABLE, chunk, label=label),
            )
        )
    return Breakdown("CVM List", to_hex(data), tuple(entries))
