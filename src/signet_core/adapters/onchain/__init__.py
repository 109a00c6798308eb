"""Public interface for the on-chain snapshot adapter."""

from __future__ import annotations

from .schema import BondedPoolPayload, PendingCallPayload, PendingSnapshotPayload, RuntimePayload
from .translator import (
    parse_bonded_pool,
    parse_bonded_pools,
    parse_pending_call,
    parse_pending_snapshot,
    parse_runtime,
)

__all__ = [
    "BondedPoolPayload",
    "PendingCallPayload",
    "PendingSnapshotPayload",
    "RuntimePayload",
    "parse_bonded_pool",
    "parse_bonded_pools",
    "parse_pending_call",
    "parse_pending_snapshot",
    "parse_runtime",
]
