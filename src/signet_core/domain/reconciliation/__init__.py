"""Timepoint-based reconciliation of pending multisig transactions.

Layered flow:
1) index on-chain calls and metadata records by timepoint
2) select the winning metadata record per on-chain timepoint
3) merge call bytes, description and annotations
4) decode call bytes against the chain's call schema
"""

from __future__ import annotations

from .decode import CallDecoder, SchemaCallDecoder, no_decoder
from .engine import TransactionReconciler, reconcile_pending_transactions
from .index import index_metadata, index_pending_calls
from .policy import SelectWinner, select_latest_metadata

__all__ = [
    "CallDecoder",
    "SchemaCallDecoder",
    "SelectWinner",
    "TransactionReconciler",
    "index_metadata",
    "index_pending_calls",
    "no_decoder",
    "reconcile_pending_transactions",
    "select_latest_metadata",
]
