"""Chain descriptors.

A ``Chain`` is static configuration (network prefix, explorer links). A
``ChainRuntime`` is what a collaborator learns once it has fetched the chain's
runtime metadata; it is ``None`` until then.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .calls import CallSchema

GENERIC_SS58_PREFIX = 42


class UnknownChainError(KeyError):
    """Raised when a chain id is not part of the configured chain table."""

    def __init__(self, chain_id: str) -> None:
        super().__init__(chain_id)
        self.chain_id = chain_id

    def __str__(self) -> str:
        return f"Chain {self.chain_id} not found"


@dataclass(frozen=True, slots=True, kw_only=True)
class Chain:
    id: str
    name: str
    ss58_prefix: int = GENERIC_SS58_PREFIX
    genesis_hash: str | None = None
    subscan_url: str | None = None
    is_testnet: bool = False

    def account_url(self, address_text: str) -> str | None:
        if not self.subscan_url:
            return None
        return f"{self.subscan_url.rstrip('/')}/account/{address_text}"


@dataclass(frozen=True, slots=True, kw_only=True)
class ChainRuntime:
    """Runtime facts about a chain, available only after the runtime is fetched."""

    pallets: frozenset[str] = field(default_factory=frozenset[str])
    call_schema: CallSchema | None = None

    def has_pallet(self, name: str) -> bool:
        return name in self.pallets
