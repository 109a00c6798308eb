"""Public interface for the off-chain metadata adapter."""

from __future__ import annotations

from .schema import RawTxMetadata, RawTxMetadataInput, TxMetadataResponse
from .translator import parse_tx_metadata, parse_tx_metadata_response, parse_tx_metadata_rows

__all__ = [
    "RawTxMetadata",
    "RawTxMetadataInput",
    "TxMetadataResponse",
    "parse_tx_metadata",
    "parse_tx_metadata_response",
    "parse_tx_metadata_rows",
]
