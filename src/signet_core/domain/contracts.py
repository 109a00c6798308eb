"""Contract lookup gated on the chain's contracts capability.

Capability checks are three-valued. ``Capability.UNKNOWN`` means the runtime
descriptor has not been fetched yet and must not be treated as unsupported,
otherwise contracts would disappear until the runtime loads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .model import Capability, ContractHandle

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .model import Address, Chain, ChainRuntime, SmartContract

log = getLogger(__name__)

CONTRACTS_PALLET: Final[str] = "Contracts"


class CapabilityError(RuntimeError):
    """Base class for failures caused by a chain capability check."""

    def __init__(self, message: str, *, capability: str = CONTRACTS_PALLET) -> None:
        super().__init__(message)
        self.capability = capability


class UnsupportedCapabilityError(CapabilityError):
    """Raised when a capability is used on a chain whose runtime lacks it."""


class CapabilityUnknownError(CapabilityError):
    """Raised when a capability is used before the chain runtime is known."""


def capability_of(runtime: ChainRuntime | None, *, pallet: str = CONTRACTS_PALLET) -> Capability:
    if runtime is None:
        return Capability.UNKNOWN
    if runtime.has_pallet(pallet):
        return Capability.SUPPORTED
    return Capability.UNSUPPORTED


def require_capability(runtime: ChainRuntime | None, *, pallet: str = CONTRACTS_PALLET) -> None:
    match capability_of(runtime, pallet=pallet):
        case Capability.UNKNOWN:
            raise CapabilityUnknownError(
                f"{pallet} capability requested before the chain runtime is ready",
                capability=pallet,
            )
        case Capability.UNSUPPORTED:
            raise UnsupportedCapabilityError(
                f"{pallet} pallet is not supported on this chain", capability=pallet
            )
        case Capability.SUPPORTED:
            return


@dataclass(slots=True)
class ContractDirectory:
    """Known contracts indexed by team and canonical address.

    A team operates a single multisig on a single chain, so the team id already
    scopes the chain and is the only key needed besides the address.
    """

    _by_team: dict[str, dict[Address, SmartContract]] = field(
        default_factory=dict[str, dict["Address", "SmartContract"]]
    )

    @classmethod
    def from_contracts(cls, contracts: Iterable[SmartContract]) -> ContractDirectory:
        directory = cls()
        for contract in contracts:
            directory.add(contract)
        return directory

    def add(self, contract: SmartContract) -> SmartContract:
        """Register ``contract``; an address already known for the team keeps the first entry."""

        team = self._by_team.setdefault(contract.team_id, {})
        existing = team.get(contract.address)
        if existing is not None:
            log.debug(
                "Contract %s already registered for team %s as %s",
                contract.id,
                contract.team_id,
                existing.id,
            )
            return existing
        team[contract.address] = contract
        return contract

    def lookup(self, team_id: str, address: Address) -> SmartContract | None:
        return self._by_team.get(team_id, {}).get(address)

    def contracts_of(self, team_id: str) -> tuple[SmartContract, ...]:
        return tuple(self._by_team.get(team_id, {}).values())

    def __len__(self) -> int:
        return sum(len(team) for team in self._by_team.values())


def resolve_contract(
    address: Address,
    chain: Chain,
    directory: ContractDirectory,
    *,
    team_id: str,
    runtime: ChainRuntime | None,
) -> ContractHandle | None:
    """Return an interactive handle for ``address`` or ``None`` when it is not a known contract.

    ``chain`` must be the team's chain. It only shapes the handle's text form and is
    never part of the lookup key.

    Raises ``CapabilityUnknownError`` before the runtime is known and
    ``UnsupportedCapabilityError`` on chains without contract support.
    """

    require_capability(runtime)
    contract = directory.lookup(team_id, address)
    if contract is None:
        return None
    return ContractHandle(contract=contract, chain=chain)


type ContractInfoLookup = Callable[[str], object | None]


@dataclass(frozen=True, slots=True)
class ContractPallet:
    """Access to on-chain contract info, failing distinctly per capability state."""

    capability: Capability
    lookup: ContractInfoLookup
    chain: Chain | None = None

    @classmethod
    def for_runtime(
        cls,
        runtime: ChainRuntime | None,
        *,
        lookup: ContractInfoLookup,
        chain: Chain | None = None,
    ) -> ContractPallet:
        return cls(capability=capability_of(runtime), lookup=lookup, chain=chain)

    @property
    def loading(self) -> bool:
        return self.capability is Capability.UNKNOWN

    @property
    def supported(self) -> bool | None:
        if self.capability is Capability.UNKNOWN:
            return None
        return self.capability is Capability.SUPPORTED

    def get_contract_info(self, address: Address) -> object | None:
        if self.capability is Capability.UNKNOWN:
            raise CapabilityUnknownError("get_contract_info called before the runtime is ready")
        if self.capability is Capability.UNSUPPORTED:
            raise UnsupportedCapabilityError("contracts pallet is not supported")
        return self.lookup(address.to_ss58(self.chain))
