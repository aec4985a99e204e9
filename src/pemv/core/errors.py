"""Exception hierarchy for TLV parsing and value decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pemv.core.tlv.model import Dialect


class PemvError(Exception):
    """Base class for every error raised by pemv."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class ParseError(PemvError, ValueError):
    """The input is not well-formed TLV data for the dialect being parsed."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (offset {offset})"
        super().__init__(message)
        self.offset = offset


class TruncatedTag(ParseError):
    """The buffer ended before the tag number was complete."""


class MalformedLength(ParseError):
    """Missing, indefinite or oversized length, or a length past the end of the data."""


class TrailingData(ParseError):
    """Bytes were left over after the last complete data object."""


class MaskedHeader(ParseError):
    """A masked nibble sits inside a tag or length field, which makes it unreadable."""


class CouldNotDetermineFormat(ParseError):
    """No supported TLV dialect accepted the input."""

    def __init__(self, attempts: dict[Dialect, Exception]) -> None:
        self.attempts = dict(attempts)
        tried = ", ".join(f"{dialect}: {reason}" for dialect, reason in self.attempts.items())
        super().__init__(f"could not determine TLV format (tried {tried})")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

class DecodeError(PemvError, ValueError):
    """A tag's value could not be decoded into a breakdown."""


class WrongLength(DecodeError):
    """The value has the wrong number of bytes for its type."""

    def __init__(self, expected: int, found: int, at_least: bool = False, multiple: bool = False) -> None:
        if multiple:
            qualifier = "a multiple of "
        else:
            qualifier = "at least " if at_least else ""
        super().__init__(f"expected {qualifier}{expected} bytes, found {found}")
        self.expected = expected
        self.found = found
        self.at_least = at_least
        self.multiple = multiple


class NotCcdCompliant(DecodeError):
    """Issuer Application Data that does not follow the Common Core Definitions."""
