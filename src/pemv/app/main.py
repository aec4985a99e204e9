# filename : main.py
# created  : 10/17/2026


import logging
from collections.abc import Callable, Sequence
from functools import partial

from pemv.app.display import format_breakdown, format_nodes
from pemv.core.emv.bitfield import decode_bits
from pemv.core.emv.breakdown import Breakdown
from pemv.core.emv.capabilities import TERMINAL_CAPABILITIES_TABLE
from pemv.core.emv.ccd import CVR_TABLE
from pemv.core.emv.cvm import CVM_RESULTS_TABLE, decode_cvm_list
from pemv.core.emv.process import process_nodes
from pemv.core.emv.registry import REGISTRY
from pemv.core.emv.service_code import SERVICE_CODE_TABLE
from pemv.core.emv.tsi import TSI_TABLE
from pemv.core.emv.tvr import TVR_TABLE
from pemv.core.logging import DETAIL
from pemv.core.tlv import ber, ingenico
from pemv.core.tlv.auto import detect_and_parse
from pemv.core.tlv.masking import DEFAULT_MASKING_CHARACTERS, Byte, from_hex
from pemv.core.tlv.model import Dialect, TlvNode

lg = logging.getLogger(__name__)

_PARSERS: dict[Dialect, Callable[[Sequence[Byte]], list[TlvNode]]] = {
    Dialect.BER_TLV: ber.parse,
    Dialect.INGENICO: ingenico.parse,
}

# Value types that can be decoded on their own, without a TLV wrapper.
VALUE_DECODERS: dict[str, Callable[[Sequence[Byte]], Breakdown]] = {
    "tvr": partial(decode_bits, TVR_TABLE),
    "tsi": partial(decode_bits, TSI_TABLE),
    "cvm_results": partial(decode_bits, CVM_RESULTS_TABLE),
    "cvm_list": decode_cvm_list,
    "cvr": partial(decode_bits, CVR_TABLE),
    "iac": partial(decode_bits, TVR_TABLE, suppress_severity=True, label="Issuer Action Code"),
    "terminal_capabilities": partial(decode_bits, TERMINAL_CAPABILITIES_TABLE),
    "service_code": partial(decode_bits, SERVICE_CODE_TABLE),
}


def decode_tlv(
    text: str,
    dialect: Dialect | None = None,
    masking_characters: str = DEFAULT_MASKING_CHARACTERS,
) -> str:
    """Parse a TLV block, detecting the dialect unless one is given."""
    data = from_hex(text, masking_characters)
    if dialect is None:
        dialect, nodes = detect_and_parse(data, REGISTRY)
    else:
        nodes = _PARSERS[dialect](data)
        lg.log(DETAIL, "parsed as %s, %d top-level tags", dialect, len(nodes))
    return format_nodes(process_nodes(nodes))


def decode_value(kind: str, text: str, masking_characters: str = DEFAULT_MASKING_CHARACTERS) -> str:
    """Decode one value of the given kind from hex text."""
    digits = "".join(text.split())
    # Service codes are usually written as their three digits
    if kind == "service_code" and len(digits) == 3:
        digits = "0" + digits
    data = from_hex(digits, masking_characters)
    return format_breakdown(VALUE_DECODERS[kind](data))


def main(
    kind: str,
    text: str,
    masking_characters: str = DEFAULT_MASKING_CHARACTERS,
) -> str:
    lg.debug("pemv v1")
    if kind == "tlv":
        return decode_tlv(text, masking_characters=masking_characters)
    if kind == "ber_tlv":
        return decode_tlv(text, Dialect.BER_TLV, masking_characters)
    if kind == "ingenico":
        return decode_tlv(text, Dialect.INGENICO, masking_characters)
    return decode_value(kind, text, masking_characters)
