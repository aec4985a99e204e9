from pemv.core.emv.breakdown import RFU, UNKNOWN_MASKED, BitRange, Breakdown, Entry, Severity
from pemv.core.emv.process import ProcessedNode, process_nodes
from pemv.core.emv.registry import REGISTRY, TagDecoder
from pemv.core.emv.tags import TAG_NAMES

__all__ = [
    "REGISTRY",
    "RFU",
    "TAG_NAMES",
    "UNKNOWN_MASKED",
    "BitRange",
    "Breakdown",
    "Entry",
    "ProcessedNode",
    "Severity",
    "TagDecoder",
    "process_nodes",
]
