"""Bytes whose nibbles may be masked (redacted) by the data source."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

HEX_DIGITS = "0123456789abcdefABCDEF"
DEFAULT_MASKING_CHARACTERS = "*"


class Masked(enum.Enum):
    """A nibble whose real value was redacted."""

    NIBBLE = "masked"

    def __repr__(self) -> str:
        return "MASKED"


MASKED = Masked.NIBBLE

Nibble = Union[int, Masked]


@dataclass(frozen=True)
class Byte:
    """One input byte as a pair of nibbles, each known or masked."""

    high: Nibble
    low: Nibble

    @classmethod
    def of(cls, value: int) -> Byte:
        return _KNOWN[value]

    @property
    def masked(self) -> bool:
        return self.high is MASKED or self.low is MASKED

    @property
    def value(self) -> int | None:
        """The byte value, or None when any nibble is masked."""
        if self.masked:
            return None
        return (self.high << 4) | self.low

    def bits(self, mask: int) -> int | None:
        """Return the bits selected by *mask*, shifted down to bit 0.

        None (Unknown) when any selected bit lies in a masked nibble.
        """
        if (mask & 0xF0 and self.high is MASKED) or (mask & 0x0F and self.low is MASKED):
            return None
        high = 0 if self.high is MASKED else self.high
        low = 0 if self.low is MASKED else self.low
        shift = (mask & -mask).bit_length() - 1
        return (((high << 4) | low) & mask) >> shift

    def test(self, mask: int) -> bool | None:
        """True if any bit of *mask* is set, None when that can't be known."""
        bits = self.bits(mask)
        if bits is None:
            return None
        return bits != 0

    def hex(self, masking_character: str = DEFAULT_MASKING_CHARACTERS) -> str:
        return "".join(
            masking_character if nibble is MASKED else f"{nibble:X}"
            for nibble in (self.high, self.low)
        )

    def __repr__(self) -> str:
        return f"Byte({self.hex()})"


_KNOWN: tuple[Byte, ...] = tuple(Byte(v >> 4, v & 0x0F) for v in range(256))


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def from_bytes(data: bytes) -> tuple[Byte, ...]:
    """Wrap plain bytes; nothing is masked."""
    return tuple(_KNOWN[b] for b in data)


def as_byte_tuple(data: bytes | Iterable[Byte]) -> tuple[Byte, ...]:
    """Accept either plain bytes or an iterable of Byte."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return from_bytes(bytes(data))
    return tuple(data)


def from_hex(text: str, masking_characters: str = DEFAULT_MASKING_CHARACTERS) -> tuple[Byte, ...]:
    """Decode hex text, treating any of *masking_characters* as a masked nibble.

    Whitespace is ignored. Raises ValueError on an odd digit count or on any
    other character.
    """
    digits = "".join(text.split())
    if len(digits) % 2:
        raise ValueError(f"odd number of hex digits ({len(digits)})")
    nibbles: list[Nibble] = []
    for index, char in enumerate(digits):
        if char in masking_characters:
            nibbles.append(MASKED)
        elif char in HEX_DIGITS:
            nibbles.append(int(char, 16))
        else:
            raise ValueError(f"invalid hex character {char!r} at position {index}")
    return tuple(Byte(nibbles[i], nibbles[i + 1]) for i in range(0, len(nibbles), 2))


def to_hex(
    data: Sequence[Byte],
    masking_character: str = DEFAULT_MASKING_CHARACTERS,
    sep: str = "",
) -> str:
    return sep.join(b.hex(masking_character) for b in data)


def to_bytes(data: Sequence[Byte]) -> bytes:
    """Unwrap to plain bytes. Raises ValueError if anything is masked."""
    if is_masked(data):
        raise ValueError("data contains masked nibbles")
    return bytes(b.value for b in data)


def is_masked(data: Sequence[Byte]) -> bool:
    return any(b.masked for b in data)


def read_uint(data: Sequence[Byte]) -> int | None:
    """Big-endian unsigned integer, or None when any nibble is masked."""
    value = 0
    for b in data:
        if b.masked:
            return None
        value = (value << 8) | b.value
    return value
