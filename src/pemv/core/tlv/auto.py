"""Automatic TLV dialect detection.

Dialects are tried in a fixed order and the first acceptable result wins,
so the outcome never depends on scoring. BER-TLV comes first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Container, Iterable

from pemv.core.errors import CouldNotDetermineFormat, ParseError
from pemv.core.logging import DETAIL, TRACE
from pemv.core.tlv import ber, ingenico
from pemv.core.tlv.masking import Byte, as_byte_tuple
from pemv.core.tlv.model import Dialect, TlvNode

lg = logging.getLogger(__name__)

PARSERS: tuple[tuple[Dialect, Callable[[tuple[Byte, ...]], list[TlvNode]]], ...] = (
    (Dialect.BER_TLV, ber.parse),
    (Dialect.INGENICO, ingenico.parse),
)


class TrivialResult(ParseError):
    """The dialect parsed the input but found nothing worth decoding."""


def detect_and_parse(
    data: bytes | Iterable[Byte],
    known_tags: Container[int] = frozenset(),
) -> tuple[Dialect, list[TlvNode]]:
    """Parse *data* with the first dialect that gives a meaningful result.

    *known_tags* is normally the tag registry; a result only counts if some
    top-level node has a non-empty value or a known tag.
    """
    buf = as_byte_tuple(data)
    attempts: dict[Dialect, Exception] = {}
    for dialect, parser in PARSERS:
        try:
            nodes = parser(buf)
        except ParseError as exc:
            lg.log(TRACE, "%s rejected: %s", dialect, exc)
            attempts[dialect] = exc
            continue
        if not _meaningful(nodes, known_tags):
            reason = TrivialResult("no data objects" if not nodes else "only empty, unknown tags")
            lg.log(TRACE, "%s rejected: %s", dialect, reason)
            attempts[dialect] = reason
            continue
        lg.log(DETAIL, "detected %s, %d top-level tags", dialect, len(nodes))
        return dialect, nodes
    raise CouldNotDetermineFormat(attempts)


def _meaningful(nodes: list[TlvNode], known_tags: Container[int]) -> bool:
    return any(node.value or node.tag_id in known_tags for node in nodes)
