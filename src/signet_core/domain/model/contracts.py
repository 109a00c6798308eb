"""Smart contract descriptors known to a team."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .address import Address
    from .chain import Chain


@dataclass(frozen=True, slots=True, kw_only=True)
class SmartContract:
    id: str
    name: str
    team_id: str
    address: Address
    abi: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ContractHandle:
    """A contract bound to a chain that can actually execute it."""

    contract: SmartContract
    chain: Chain

    @property
    def address_text(self) -> str:
        return self.contract.address.to_ss58(self.chain)
