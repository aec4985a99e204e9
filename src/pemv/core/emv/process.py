"""Annotate a parsed TLV tree with tag names and decoded breakdowns."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

from pemv.core.emv.breakdown import Breakdown
from pemv.core.emv.registry import REGISTRY, TagDecoder
from pemv.core.emv.tags import TAG_NAMES
from pemv.core.errors import DecodeError, NotCcdCompliant
from pemv.core.logging import TRACE
from pemv.core.tlv.masking import Byte
from pemv.core.tlv.model import TlvNode

lg = logging.getLogger(__name__)

NOT_CCD_COMPLIANT = "Not CCD-Compliant"


@dataclass(frozen=True)
class ProcessedNode:
    """A TLV node with its name and, where a decoder exists, its breakdown.

    ``error`` holds the decode failure for this tag; the rest of the tree
    is processed regardless.
    """

    node: TlvNode
    name: Optional[str] = None
    breakdown: Optional[Breakdown] = None
    error: Optional[DecodeError] = None
    children: tuple[ProcessedNode, ...] = ()


def build_context(nodes: Iterable[TlvNode]) -> dict[int, Sequence[Byte]]:
    """Map tag to value for every primitive node in the tree; first one wins."""
    context: dict[int, Sequence[Byte]] = {}
    for top in nodes:
        for node in top.walk():
            if node.children is None:
                context.setdefault(node.tag_id, node.value)
    return context


def process_nodes(
    nodes: Sequence[TlvNode],
    registry: Mapping[int, TagDecoder] = REGISTRY,
) -> list[ProcessedNode]:
    context = build_context(nodes)
    return [_process(node, registry, context) for node in nodes]


def _process(
    node: TlvNode,
    registry: Mapping[int, TagDecoder],
    context: Mapping[int, Sequence[Byte]],
) -> ProcessedNode:
    if node.children is not None:
        children = tuple(_process(child, registry, context) for child in node.children)
        return ProcessedNode(node, TAG_NAMES.get(node.tag_id), children=children)

    decoder = registry.get(node.tag_id)
    if decoder is None:
        return ProcessedNode(node, TAG_NAMES.get(node.tag_id))
    try:
        breakdown = decoder.decode(node.value, context)
    except NotCcdCompliant as exc:
        lg.log(TRACE, "tag %s: %s", node.tag_hex, exc)
        return ProcessedNode(node, f"{decoder.name} ({NOT_CCD_COMPLIANT})")
    except DecodeError as exc:
        lg.log(TRACE, "tag %s could not be decoded: %s", node.tag_hex, exc)
        return ProcessedNode(node, decoder.name, error=exc)
    return ProcessedNode(node, decoder.name, breakdown)
