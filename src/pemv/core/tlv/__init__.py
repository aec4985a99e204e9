from pemv.core.tlv.auto import detect_and_parse
from pemv.core.tlv.masking import MASKED, Byte, from_bytes, from_hex, to_hex
from pemv.core.tlv.model import Dialect, TagClass, TlvNode

__all__ = [
    "MASKED",
    "Byte",
    "Dialect",
    "TagClass",
    "TlvNode",
    "detect_and_parse",
    "from_bytes",
    "from_hex",
    "to_hex",
]
