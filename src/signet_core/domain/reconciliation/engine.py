"""Merge on-chain pending calls with off-chain metadata into one view per timepoint.

The engine is a pure function of its inputs: it holds no state between runs,
never performs I/O and never raises for missing or inconsistent data. Callers
re-run it whenever either input set changes.

Merge rules:
1) every on-chain timepoint yields exactly one transaction, metadata or not
2) metadata without a matching on-chain call is dropped
3) the newest metadata record per timepoint wins (see ``policy``)
4) on-chain call bytes are authoritative; metadata bytes are used only when the
   chain did not supply any and, if a call hash is known, they hash to it
5) output is ordered by timepoint, most recent first
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from signet_core.domain.model import ReconciledTransaction, hash_call, key_of

from .decode import CallDecoder, no_decoder
from .index import index_metadata, index_pending_calls
from .policy import SelectWinner, select_latest_metadata

if TYPE_CHECKING:
    from collections.abc import Iterable

    from signet_core.domain.model import DecodedCall, OnChainPendingCall, TxMetadata

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransactionReconciler:
    """Reconcile pending calls and metadata records for one chain."""

    chain: str
    select_winner: SelectWinner = field(default=select_latest_metadata)
    decoder: CallDecoder = field(default=no_decoder)
    verify_call_hash: bool = True

    def reconcile(
        self,
        pending: Iterable[OnChainPendingCall],
        metadata: Iterable[TxMetadata],
    ) -> list[ReconciledTransaction]:
        calls = index_pending_calls(pending, chain=self.chain)
        grouped = index_metadata(metadata, chain=self.chain)

        orphaned = sum(1 for timepoint in grouped if timepoint not in calls)
        if orphaned:
            log.debug(
                "Dropping metadata for %s timepoint(s) without a pending call on %s",
                orphaned,
                self.chain,
            )

        transactions = [
            self._merge(call, self.select_winner(grouped.get(timepoint, [])))
            for timepoint, call in calls.items()
        ]
        transactions.sort(key=key_of, reverse=True)
        return transactions

    def _merge(self, call: OnChainPendingCall, winner: TxMetadata | None) -> ReconciledTransaction:
        call_data = call.call_data
        if winner is not None:
            if call_data is None:
                call_data = self._metadata_call_data(call, winner)
            elif winner.call_data is not None and winner.call_data != call_data:
                log.warning(
                    "Metadata call data for %s differs from the on-chain call",
                    call.transaction_id,
                )

        call_hash = call.call_hash
        if call_hash is None and call_data is not None:
            call_hash = hash_call(call_data)

        return ReconciledTransaction(
            chain=call.chain,
            timepoint=call.timepoint,
            threshold=call.threshold,
            approvals=call.approvals,
            call_data=call_data,
            call_hash=call_hash,
            description=winner.description if winner is not None else "",
            change_config_details=winner.change_config_details if winner is not None else None,
            contract_deployed=winner.contract_deployed if winner is not None else None,
            decoded=self._decode(call_data, call.transaction_id),
            metadata_saved=winner is not None,
        )

    def _metadata_call_data(self, call: OnChainPendingCall, winner: TxMetadata) -> bytes | None:
        if winner.call_data is None:
            return None
        if (
            self.verify_call_hash
            and call.call_hash is not None
            and hash_call(winner.call_data) != call.call_hash
        ):
            log.warning(
                "Metadata call data for %s does not match the on-chain call hash %s",
                call.transaction_id,
                "0x" + call.call_hash.hex(),
            )
            return None
        return winner.call_data

    def _decode(self, call_data: bytes | None, transaction_id: str) -> DecodedCall | None:
        if call_data is None:
            return None
        try:
            return self.decoder(call_data)
        except ValueError:
            log.warning("Failed to decode call data for %s", transaction_id, exc_info=True)
            return None


def reconcile_pending_transactions(
    pending: Iterable[OnChainPendingCall],
    metadata: Iterable[TxMetadata],
    *,
    chain: str,
    decoder: CallDecoder | None = None,
    verify_call_hash: bool = True,
) -> list[ReconciledTransaction]:
    """Functional entry point using the default winner policy."""

    reconciler = TransactionReconciler(
        chain=chain,
        decoder=decoder or no_decoder,
        verify_call_hash=verify_call_hash,
    )
    return reconciler.reconcile(pending, metadata)
