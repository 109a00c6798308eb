"""Decode raw call bytes into a structured view.

Undecodable bytes are a data-quality gap, not a fault: decoders return ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from signet_core.domain.model import DecodedCall

if TYPE_CHECKING:
    from signet_core.domain.model import CallSchema

log = getLogger(__name__)


class CallDecoder(Protocol):
    def __call__(self, call_data: bytes) -> DecodedCall | None: ...


def no_decoder(call_data: bytes) -> DecodedCall | None:  # noqa: ARG001
    return None


@dataclass(frozen=True, slots=True)
class SchemaCallDecoder:
    """Resolve the leading ``(pallet index, call index)`` bytes against a call schema."""

    schema: CallSchema | None

    def __call__(self, call_data: bytes) -> DecodedCall | None:
        if self.schema is None or len(call_data) < 2:
            return None
        pallet_index, call_index = call_data[0], call_data[1]
        name = self.schema.lookup(pallet_index, call_index)
        if name is None:
            log.debug("No call registered at %s/%s", pallet_index, call_index)
            return None
        return DecodedCall(
            pallet_index=pallet_index,
            call_index=call_index,
            name=name,
            args=bytes(call_data[2:]),
        )
