"""Declarative bit tables and the generic decoder that walks them.

A table is a list of ``Field`` records, one per bit or bit range. A
single-bit field with no meanings is a flag and only shows up when set. A
wider field with no meanings is a count. A field with meanings is an
enumeration; values missing from the mapping decode to ``RFU``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

from pemv.core.emv.breakdown import RFU, UNKNOWN_MASKED, BitRange, Breakdown, Entry, Severity
from pemv.core.errors import WrongLength
from pemv.core.tlv.masking import Byte, to_hex


@dataclass(frozen=True)
class Field:
    name: str
    byte: int
    mask: int
    meanings: Optional[Mapping[int, str]] = None
    severity: Severity = Severity.NONE
    severities: Optional[Mapping[int, Severity]] = None
    default: str = RFU

    @property
    def bit_range(self) -> BitRange:
        return BitRange.from_mask(self.byte, self.mask)

    @property
    def is_flag(self) -> bool:
        return self.meanings is None and self.mask & (self.mask - 1) == 0

    def severity_for(self, value: int) -> Severity:
        if self.severities is not None:
            return self.severities.get(value, Severity.NONE)
        return self.severity

    def meaning_for(self, value: int) -> str:
        if self.meanings is None:
            return str(value)
        return self.meanings.get(value, self.default)


@dataclass(frozen=True)
class BitTable:
    label: str
    num_bytes: int
    fields: tuple[Field, ...]


def flags(byte: int, *specs: tuple[int, str] | tuple[int, str, Severity]) -> list[Field]:
    """Shorthand for a run of single-bit flags in one byte."""
    result = []
    for spec in specs:
        mask, name, *rest = spec
        result.append(Field(name, byte, mask, severity=rest[0] if rest else Severity.NONE))
    return result


def decode_entries(
    table: BitTable,
    data: Sequence[Byte],
    *,
    suppress_severity: bool = False,
) -> list[Entry]:
    """Evaluate every field of *table* against *data*, in table order."""
    if len(data) != table.num_bytes:
        raise WrongLength(table.num_bytes, len(data))

    entries: list[Entry] = []
    for field in table.fields:
        bits = data[field.byte].bits(field.mask)
        if bits is None:
            entries.append(Entry(field.name, field.bit_range, UNKNOWN_MASKED))
            continue
        if field.is_flag:
            if not bits:
                continue
            meaning = field.name
        else:
            meaning = field.meaning_for(bits)
        severity = Severity.NONE if suppress_severity else field.severity_for(bits)
        entries.append(Entry(field.name, field.bit_range, meaning, severity))
    return entries


def decode_bits(
    table: BitTable,
    data: Sequence[Byte],
    *,
    suppress_severity: bool = False,
    label: str | None = None,
) -> Breakdown:
    """Decode *data* against *table* into a breakdown."""
    entries = decode_entries(table, data, suppress_severity=suppress_severity)
    return Breakdown(label or table.label, to_hex(data), tuple(entries))


def decode_value(table: BitTable, data: Sequence[Byte], context: Mapping[int, Sequence[Byte]]) -> Breakdown:
    """Registry-shaped wrapper: the sibling context is not needed here."""
    return decode_bits(table, data)


def decode_enum(
    label: str,
    meanings: Mapping[int, str],
    data: Sequence[Byte],
    name: str | None = None,
) -> Breakdown:
    """Decode a one-byte enumeration."""
    table = BitTable(label, 1, (Field(name or label, 0, 0xFF, meanings),))
    return decode_bits(table, data)
