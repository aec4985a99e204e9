"""Tests for the tag registry and tree processing."""

from __future__ import annotations

import pytest

from pemv.core.emv import tags
from pemv.core.emv.breakdown import UNKNOWN_MASKED
from pemv.core.emv.process import NOT_CCD_COMPLIANT, build_context, process_nodes
from pemv.core.emv.registry import REGISTRY, TagDecoder
from pemv.core.emv.tvr import MATCHES_TVR
from pemv.core.errors import WrongLength
from pemv.core.tlv import ber
from pemv.core.tlv.masking import from_hex, to_bytes


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        REGISTRY[0x50] = TagDecoder("Application Label", lambda value, context: None)


def test_registry_names_come_from_tag_names() -> None:
    for tag_id, decoder in REGISTRY.items():
        assert decoder.name == tags.TAG_NAMES[tag_id]


def test_process_annotates_and_decodes() -> None:
    nodes = ber.parse(bytes.fromhex("9F3303E0F8C8" "9F350122" "5A0412345678" "9F34024203" "C10100"))
    capabilities, terminal_type, pan, cvm_results, unknown = process_nodes(nodes)

    assert capabilities.name == "Terminal Capabilities"
    assert capabilities.breakdown.find("Manual key entry") is not None
    assert terminal_type.breakdown.label == "Terminal Type"

    assert pan.name == "Application Primary Account Number (PAN)"
    assert pan.breakdown is None and pan.error is None

    assert cvm_results.breakdown is None
    assert isinstance(cvm_results.error, WrongLength)

    assert unknown.name is None


def test_siblings_are_context() -> None:
    nodes = ber.parse(bytes.fromhex("700F" "95054000000000" "9F0E05C000000000"))
    (template,) = process_nodes(nodes)
    assert template.name == "READ RECORD Response Message Template"
    tvr, iac = template.children
    assert tvr.name == "Terminal Verification Results (TVR)"
    entry = iac.breakdown.find("SDA (Static Data Authentication) failed")
    assert entry.children.find(MATCHES_TVR) is not None


def test_build_context_skips_templates() -> None:
    nodes = ber.parse(bytes.fromhex("700F" "95054000000000" "9F0E05C000000000"))
    context = build_context(nodes)
    assert set(context) == {0x95, 0x9F0E}
    assert to_bytes(context[0x95]) == bytes.fromhex("4000000000")


def test_masked_values_are_decoded() -> None:
    (tvr,) = process_nodes(ber.parse(from_hex("9505 *000000000")))
    assert tvr.breakdown is not None
    assert {e.meaning for e in tvr.breakdown.entries} == {UNKNOWN_MASKED}


def test_non_ccd_iad_is_annotated() -> None:
    (iad,) = process_nodes(ber.parse(bytes.fromhex("9F1007" "06010A03A00000")))
    assert iad.name == f"Issuer Application Data ({NOT_CCD_COMPLIANT})"
    assert iad.breakdown is None
    assert iad.error is None
