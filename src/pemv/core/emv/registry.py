"""Tag registry: which decoder handles which tag."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType

from pemv.core.emv import tags
from pemv.core.emv.bitfield import decode_value
from pemv.core.emv.breakdown import Breakdown
from pemv.core.emv.capabilities import ADDITIONAL_TERMINAL_CAPABILITIES_TABLE, TERMINAL_CAPABILITIES_TABLE
from pemv.core.emv.ccd import decode_iad
from pemv.core.emv.codes import (
    decode_authorisation_response_code,
    decode_pos_entry_mode,
    decode_terminal_type,
    decode_transaction_type,
)
from pemv.core.emv.cvm import CVM_RESULTS_TABLE, decode_cvm_list
from pemv.core.emv.service_code import SERVICE_CODE_TABLE
from pemv.core.emv.tsi import TSI_TABLE
from pemv.core.emv.tvr import TVR_TABLE, decode_iac
from pemv.core.tlv.masking import Byte

Context = Mapping[int, Sequence[Byte]]
Decoder = Callable[[Sequence[Byte], Context], Breakdown]


@dataclass(frozen=True)
class TagDecoder:
    name: str
    decode: Decoder


def _entry(tag_id: int, decode: Decoder) -> tuple[int, TagDecoder]:
    return tag_id, TagDecoder(tags.TAG_NAMES[tag_id], decode)


REGISTRY: Mapping[int, TagDecoder] = MappingProxyType(
    dict(
        (
            _entry(tags.SERVICE_CODE, partial(decode_value, SERVICE_CODE_TABLE)),
            _entry(tags.AUTHORISATION_RESPONSE_CODE, decode_authorisation_response_code),
            _entry(tags.CVM_LIST, decode_cvm_list),
            _entry(tags.TVR, partial(decode_value, TVR_TABLE)),
            _entry(tags.TSI, partial(decode_value, TSI_TABLE)),
            _entry(tags.TRANSACTION_TYPE, decode_transaction_type),
            _entry(tags.IAC_DEFAULT, partial(decode_iac, tags.IAC_DEFAULT)),
            _entry(tags.IAC_DENIAL, partial(decode_iac, tags.IAC_DENIAL)),
            _entry(tags.IAC_ONLINE, partial(decode_iac, tags.IAC_ONLINE)),
            _entry(tags.ISSUER_APPLICATION_DATA, decode_iad),
            _entry(tags.TERMINAL_CAPABILITIES, partial(decode_value, TERMINAL_CAPABILITIES_TABLE)),
            _entry(tags.CVM_RESULTS, partial(decode_value, CVM_RESULTS_TABLE)),
            _entry(tags.TERMINAL_TYPE, decode_terminal_type),
            _entry(tags.POS_ENTRY_MODE, decode_pos_entry_mode),
            _entry(
                tags.ADDITIONAL_TERMINAL_CAPABILITIES,
                partial(decode_value, ADDITIONAL_TERMINAL_CAPABILITIES_TABLE),
            ),
        )
    )
)
