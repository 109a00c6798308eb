"""Index on-chain calls and metadata records by timepoint.

Both indexes are rebuilt from scratch on every run; nothing is carried over
between reconciliations.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from signet_core.domain.model import OnChainPendingCall, Timepoint, TxMetadata

log = getLogger(__name__)

type CallsByTimepoint = dict[Timepoint, OnChainPendingCall]
type MetadataByTimepoint = dict[Timepoint, list[TxMetadata]]


def index_pending_calls(calls: Iterable[OnChainPendingCall], *, chain: str) -> CallsByTimepoint:
    """Map timepoints to on-chain calls of ``chain``.

    Chain consensus allows one pending call per timepoint; a duplicate in the
    snapshot is logged and the later observation kept.
    """

    indexed: CallsByTimepoint = {}
    for call in calls:
        if call.chain != chain:
            log.debug("Ignoring pending call %s from chain %s", call.timepoint, call.chain)
            continue
        if call.timepoint in indexed:
            log.warning("Duplicate on-chain pending call at %s on %s", call.timepoint, chain)
        indexed[call.timepoint] = call
    return indexed


def index_metadata(records: Iterable[TxMetadata], *, chain: str) -> MetadataByTimepoint:
    """Group metadata records of ``chain`` by timepoint, keeping input order per group."""

    grouped: MetadataByTimepoint = {}
    for record in records:
        if record.chain != chain:
            log.debug("Ignoring metadata %s from chain %s", record.timepoint, record.chain)
            continue
        grouped.setdefault(record.timepoint, []).append(record)
    return grouped
