"""Builders for pending calls and metadata records used across reconciliation tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from signet_core.domain.model import OnChainPendingCall, Timepoint, TxMetadata, hash_call

if TYPE_CHECKING:
    from signet_core.domain.model import Address

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def make_call(
    height: int,
    index: int = 0,
    *,
    chain: str = "polkadot",
    call_data: bytes | None = None,
    call_hash: bytes | None = None,
    threshold: int = 2,
    approvals: tuple[Address, ...] = (),
    with_hash: bool = True,
) -> OnChainPendingCall:
    """Create a pending call; the hash defaults to the hash of ``call_data``."""

    if call_hash is None and with_hash and call_data is not None:
        call_hash = hash_call(call_data)
    return OnChainPendingCall(
        chain=chain,
        timepoint=Timepoint(height=height, index=index),
        threshold=threshold,
        approvals=approvals,
        call_data=call_data,
        call_hash=call_hash,
    )


def make_metadata(
    height: int,
    index: int = 0,
    *,
    chain: str = "polkadot",
    description: str = "",
    created: datetime | None = None,
    minutes: int = 0,
    call_data: bytes | None = None,
    team_id: str = "team-1",
) -> TxMetadata:
    return TxMetadata(
        team_id=team_id,
        chain=chain,
        timepoint=Timepoint(height=height, index=index),
        created=created or BASE_TIME + timedelta(minutes=minutes),
        description=description,
        call_data=call_data,
    )
