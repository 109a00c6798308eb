"""Pending multisig calls, their off-chain metadata and the reconciled view."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .address import multisig_address

if TYPE_CHECKING:
    from datetime import datetime

    from .address import Address
    from .calls import DecodedCall
    from .timepoint import Timepoint


def hash_call(call_data: bytes) -> bytes:
    """blake2b-256 of the call bytes, the hash a chain stores for a pending multisig."""

    return hashlib.blake2b(call_data, digest_size=32).digest()


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangeConfigDetails:
    """Annotation describing the signer set a change-config call installs."""

    new_members: tuple[Address, ...]
    new_threshold: int

    def __post_init__(self) -> None:
        if not self.new_members:
            raise ValueError("Change config details require at least one member")
        if len(set(self.new_members)) != len(self.new_members):
            raise ValueError("Change config members must be unique")
        if len({member.is_ethereum for member in self.new_members}) > 1:
            raise ValueError("Change config members cannot mix ethereum and substrate accounts")
        if not 1 <= self.new_threshold <= len(self.new_members):
            raise ValueError(
                f"Threshold {self.new_threshold} is invalid for {len(self.new_members)} members"
            )

    def multisig_address(self) -> Address:
        return multisig_address(self.new_members, self.new_threshold)


@dataclass(frozen=True, slots=True, kw_only=True)
class ContractDeployment:
    name: str
    abi: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TxMetadata:
    """Off-chain metadata record keyed by ``(team, chain, timepoint)``."""

    team_id: str
    chain: str
    timepoint: Timepoint
    created: datetime
    description: str = ""
    call_data: bytes | None = None
    change_config_details: ChangeConfigDetails | None = None
    contract_deployed: ContractDeployment | None = None

    @property
    def transaction_id(self) -> str:
        return self.timepoint.transaction_id(self.chain)


@dataclass(frozen=True, slots=True, kw_only=True)
class OnChainPendingCall:
    """A pending multisig call as observed on-chain.

    Chains store only the call hash; ``call_data`` is present when the collaborator
    could recover the call bytes (for example from the submitting extrinsic).
    """

    chain: str
    timepoint: Timepoint
    threshold: int
    approvals: tuple[Address, ...] = ()
    call_data: bytes | None = None
    call_hash: bytes | None = None

    @property
    def transaction_id(self) -> str:
        return self.timepoint.transaction_id(self.chain)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciledTransaction:
    chain: str
    timepoint: Timepoint
    threshold: int
    approvals: tuple[Address, ...] = ()
    call_data: bytes | None = None
    call_hash: bytes | None = None
    description: str = ""
    change_config_details: ChangeConfigDetails | None = None
    contract_deployed: ContractDeployment | None = None
    decoded: DecodedCall | None = None
    metadata_saved: bool = False

    @property
    def id(self) -> str:
        return self.timepoint.transaction_id(self.chain)

    def approved_by(self, address: Address) -> bool:
        return address in self.approvals

    @property
    def is_executable(self) -> bool:
        return len(set(self.approvals)) >= self.threshold
