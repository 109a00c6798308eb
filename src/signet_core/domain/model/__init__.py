"""Public domain model surface."""

from __future__ import annotations

from signet_core.domain.model.address import (
    ETHEREUM_ACCOUNT_LENGTH,
    SUBSTRATE_ACCOUNT_LENGTH,
    Address,
    InvalidAddressFormat,
    multisig_address,
    shorten_address,
    ss58_decode,
    ss58_encode,
)
from signet_core.domain.model.calls import CallIndex, CallName, CallSchema, DecodedCall
from signet_core.domain.model.chain import (
    GENERIC_SS58_PREFIX,
    Chain,
    ChainRuntime,
    UnknownChainError,
)
from signet_core.domain.model.contracts import ContractHandle, SmartContract
from signet_core.domain.model.enums import Capability, PoolRole, PoolState
from signet_core.domain.model.pools import BondedPool, PoolRoles, RoleRecord
from signet_core.domain.model.timepoint import (
    HasTimepoint,
    Timepoint,
    compare,
    key_of,
    timepoint_predicates,
    timepoint_window,
)
from signet_core.domain.model.transactions import (
    ChangeConfigDetails,
    ContractDeployment,
    OnChainPendingCall,
    ReconciledTransaction,
    TxMetadata,
    hash_call,
)

__all__ = [  # noqa: RUF022
    # addresses
    "Address",
    "InvalidAddressFormat",
    "ETHEREUM_ACCOUNT_LENGTH",
    "SUBSTRATE_ACCOUNT_LENGTH",
    "multisig_address",
    "shorten_address",
    "ss58_decode",
    "ss58_encode",
    # chains
    "Chain",
    "ChainRuntime",
    "GENERIC_SS58_PREFIX",
    "UnknownChainError",
    # calls
    "CallIndex",
    "CallName",
    "CallSchema",
    "DecodedCall",
    # timepoints
    "HasTimepoint",
    "Timepoint",
    "compare",
    "key_of",
    "timepoint_predicates",
    "timepoint_window",
    # transactions
    "ChangeConfigDetails",
    "ContractDeployment",
    "OnChainPendingCall",
    "ReconciledTransaction",
    "TxMetadata",
    "hash_call",
    # pools
    "BondedPool",
    "PoolRoles",
    "RoleRecord",
    # contracts
    "ContractHandle",
    "SmartContract",
    # enums
    "Capability",
    "PoolRole",
    "PoolState",
]
