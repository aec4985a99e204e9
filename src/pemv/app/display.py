"""Human-readable breakdown and TLV tree formatting."""

from __future__ import annotations

import click

from pemv.core.emv.breakdown import Breakdown, Entry, Severity
from pemv.core.emv.process import ProcessedNode
from pemv.core.tlv.masking import to_hex

INDENT = "  "
UNKNOWN_TAG = "<Unknown>"


# --- Lookup tables ---

_SEVERITY_COLOURS: dict[Severity, str] = {
    Severity.INFO: "cyan",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


# --- Helpers ---

def _style(text: str, severity: Severity) -> str:
    colour = _SEVERITY_COLOURS.get(severity)
    return click.style(text, fg=colour) if colour else text


def _entry_text(entry: Entry) -> str:
    if entry.is_flag:
        return entry.meaning
    return f"{entry.name}: {entry.meaning}"


def _bits(entry: Entry) -> str:
    return str(entry.bit_range) if entry.bit_range is not None else ""


# --- Formatters ---

def format_breakdown(breakdown: Breakdown, indent: int = 0) -> str:
    """Format a breakdown as a header line plus one line per entry, nested.

    The header takes the colour of the worst severity anywhere below it.
    """
    pad = INDENT * indent
    label = click.style(breakdown.label, fg=_SEVERITY_COLOURS.get(breakdown.worst), bold=True)
    lines = [f"{pad}{label}: {breakdown.raw_hex}"]
    w = max((len(_bits(entry)) for entry in breakdown.entries), default=0)
    for entry in breakdown.entries:
        bits = f"{_bits(entry):<{w}}  " if w else ""
        lines.append(f"{pad}{INDENT}{bits}{_style(_entry_text(entry), entry.severity)}")
        if entry.children is not None:
            lines.append(format_breakdown(entry.children, indent + 2))
    return "\n".join(lines)


def _format_node(processed: ProcessedNode, indent: int) -> str:
    pad = INDENT * indent
    node = processed.node
    header = f"{pad}{click.style(node.tag_hex, bold=True)} {processed.name or UNKNOWN_TAG}"
    if node.constructed:
        lines = [header]
        lines.extend(_format_node(child, indent + 1) for child in processed.children)
        return "\n".join(lines)

    lines = [header, f"{pad}{INDENT}{to_hex(node.value, sep=' ')}".rstrip()]
    if processed.breakdown is not None:
        lines.append(format_breakdown(processed.breakdown, indent + 1))
    elif processed.error is not None:
        lines.append(f"{pad}{INDENT}{_style(f'Could not decode: {processed.error}', Severity.ERROR)}")
    return "\n".join(lines)


def format_nodes(processed: list[ProcessedNode]) -> str:
    """Format a processed TLV tree, one block per top-level tag."""
    return "\n\n".join(_format_node(node, 0) for node in processed)
