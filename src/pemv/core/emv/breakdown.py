"""The decoded form of a value: labelled entries with meanings and severities."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

RFU = "Reserved For Future Use"
UNKNOWN_MASKED = "Unknown (masked)"


class Severity(enum.IntEnum):
    NONE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class BitRange:
    """Bits of a value in EMV notation: byte index, top bit number (8..1), width."""

    byte: int
    high_bit: int
    width: int = 1

    @classmethod
    def from_mask(cls, byte: int, mask: int) -> BitRange:
        high = mask.bit_length()
        low = (mask & -mask).bit_length()
        return cls(byte=byte, high_bit=high, width=high - low + 1)

    @property
    def low_bit(self) -> int:
        return self.high_bit - self.width + 1

    def __str__(self) -> str:
        if self.width == 1:
            return f"B{self.byte + 1}b{self.high_bit}"
        return f"B{self.byte + 1}b{self.high_bit}-{self.low_bit}"


@dataclass(frozen=True)
class Entry:
    name: str
    bit_range: Optional[BitRange]
    meaning: str
    severity: Severity = Severity.NONE
    children: Optional[Breakdown] = None

    @property
    def is_flag(self) -> bool:
        """A set single-bit flag, whose meaning is its own name."""
        return self.meaning == self.name


@dataclass(frozen=True)
class Breakdown:
    label: str
    raw_hex: str
    entries: tuple[Entry, ...] = ()

    def find(self, name: str) -> Entry | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    @property
    def worst(self) -> Severity:
        """Highest severity anywhere in the tree."""
        worst = Severity.NONE
        for entry in self.entries:
            worst = max(worst, entry.severity)
            if entry.children is not None:
                worst = max(worst, entry.children.worst)
        return worst
