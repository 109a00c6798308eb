"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from signet_core.adapters.metadata import parse_tx_metadata_response
from signet_core.adapters.onchain import parse_pending_snapshot
from signet_core.config import get_chain, get_reconcile_config, supported_chains
from signet_core.domain.model import Address
from signet_core.domain.reconciliation import SchemaCallDecoder, TransactionReconciler

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from signet_core.config import ReconcileConfig
    from signet_core.domain.model import Chain, ChainRuntime, ReconciledTransaction


log = getLogger(__name__)


@dataclass(slots=True)
class ReconcileSnapshotResult:
    """Outcome of reconciling one chain snapshot with its metadata."""

    chain: Chain
    transactions: list[ReconciledTransaction]
    runtime: ChainRuntime | None
    metadata_records: int


def reconcile_snapshot(
    pending_payload: Mapping[str, object],
    metadata_payload: Mapping[str, object] | None = None,
    *,
    team_id: str | None = None,
    config: ReconcileConfig | None = None,
) -> ReconcileSnapshotResult:
    """Reconcile an on-chain snapshot document with a ``tx_metadata`` response body."""

    effective_config = config or get_reconcile_config()
    chain_id, pending, runtime = parse_pending_snapshot(pending_payload)
    chain = get_chain(chain_id)

    metadata = parse_tx_metadata_response(metadata_payload) if metadata_payload else []
    if team_id is not None:
        metadata = [record for record in metadata if record.team_id == team_id]

    log.info(
        "Reconciling %s pending call(s) with %s metadata record(s) on %s",
        len(pending),
        len(metadata),
        chain.id,
    )

    reconciler = TransactionReconciler(
        chain=chain.id,
        decoder=SchemaCallDecoder(runtime.call_schema if runtime is not None else None),
        verify_call_hash=effective_config.verify_call_hash,
    )
    transactions = reconciler.reconcile(pending, metadata)

    log.info(
        "Finished reconciliation on %s: transactions=%s, with_metadata=%s",
        chain.id,
        len(transactions),
        sum(1 for transaction in transactions if transaction.metadata_saved),
    )
    return ReconcileSnapshotResult(
        chain=chain,
        transactions=transactions,
        runtime=runtime,
        metadata_records=len(metadata),
    )


def describe_address(
    text: str, chain_ids: Sequence[str] | None = None
) -> tuple[Address, list[Chain]]:
    """Parse ``text`` and resolve the chains it should be rendered for."""

    address = Address.parse(text)
    chains = (
        [get_chain(chain_id) for chain_id in chain_ids]
        if chain_ids
        else list(supported_chains(include_testnets=False))
    )
    return address, chains
