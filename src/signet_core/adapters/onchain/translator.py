"""Translate on-chain snapshot payloads into domain entities."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from signet_core.adapters.encoding import hex_to_bytes
from signet_core.domain.model import (
    Address,
    BondedPool,
    CallSchema,
    ChainRuntime,
    OnChainPendingCall,
    PoolRoles,
    PoolState,
    Timepoint,
)

from .schema import (
    BondedPoolPayload,
    PendingCallPayload,
    PendingSnapshotPayload,
    RuntimePayload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


log = getLogger(__name__)


def parse_pending_call(
    payload: PendingCallPayload | Mapping[str, object],
    *,
    chain: str,
) -> OnChainPendingCall:
    call = (
        payload
        if isinstance(payload, PendingCallPayload)
        else PendingCallPayload.model_validate(payload)
    )
    return OnChainPendingCall(
        chain=call.chain or chain,
        timepoint=Timepoint(height=call.timepoint.height, index=call.timepoint.index),
        threshold=call.threshold,
        approvals=tuple(Address.parse(approval) for approval in call.approvals),
        call_data=hex_to_bytes(call.call_data) if call.call_data is not None else None,
        call_hash=hex_to_bytes(call.call_hash) if call.call_hash is not None else None,
    )


def parse_runtime(payload: RuntimePayload | Mapping[str, object]) -> ChainRuntime:
    runtime = (
        payload if isinstance(payload, RuntimePayload) else RuntimePayload.model_validate(payload)
    )
    schema = CallSchema.from_names(
        {(entry.pallet_index, entry.call_index): entry.name for entry in runtime.calls}
    )
    return ChainRuntime(pallets=frozenset(runtime.pallets), call_schema=schema)


def parse_pending_snapshot(
    payload: Mapping[str, object],
) -> tuple[str, list[OnChainPendingCall], ChainRuntime | None]:
    """Return ``(chain id, pending calls, runtime)`` for a snapshot document.

    The snapshot is authoritative: a malformed pending call raises instead of
    being skipped, since dropping it would hide a live call.
    """

    snapshot = PendingSnapshotPayload.model_validate(payload)
    calls = [parse_pending_call(call, chain=snapshot.chain) for call in snapshot.pending]
    runtime = parse_runtime(snapshot.runtime) if snapshot.runtime is not None else None
    log.debug("Parsed %s pending call(s) for %s", len(calls), snapshot.chain)
    return snapshot.chain, calls, runtime


def parse_bonded_pool(payload: BondedPoolPayload | Mapping[str, object]) -> BondedPool:
    pool = (
        payload
        if isinstance(payload, BondedPoolPayload)
        else BondedPoolPayload.model_validate(payload)
    )
    return BondedPool(
        id=pool.id,
        roles=PoolRoles(
            depositor=Address.parse(pool.roles.depositor),
            root=Address.parse(pool.roles.root),
            nominator=Address.parse(pool.roles.nominator),
            bouncer=Address.parse(pool.roles.bouncer),
        ),
        state=PoolState(pool.state),
        member_counter=pool.member_counter,
        points=pool.points,
        stash=Address.parse(pool.stash) if pool.stash else None,
        reward=Address.parse(pool.reward) if pool.reward else None,
        metadata=pool.metadata,
    )


def parse_bonded_pools(
    rows: Iterable[BondedPoolPayload | Mapping[str, object]],
) -> list[BondedPool]:
    """Parse pools, dropping any whose role addresses cannot be decoded."""

    pools: list[BondedPool] = []
    for row in rows:
        try:
            pools.append(parse_bonded_pool(row))
        except ValueError as exc:
            log.warning("Skipping bonded pool %s: %s", row, exc)
    return pools
