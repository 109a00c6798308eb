"""Nomination pools and the role records attached to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .enums import PoolRole, PoolState

if TYPE_CHECKING:
    from .address import Address


@dataclass(frozen=True, slots=True, kw_only=True)
class PoolRoles:
    depositor: Address
    root: Address
    nominator: Address
    bouncer: Address

    def holders(self) -> dict[PoolRole, Address]:
        return {
            PoolRole.DEPOSITOR: self.depositor,
            PoolRole.ROOT: self.root,
            PoolRole.NOMINATOR: self.nominator,
            PoolRole.BOUNCER: self.bouncer,
        }

    def roles_held_by(self, address: Address) -> frozenset[PoolRole]:
        return frozenset(role for role, holder in self.holders().items() if holder == address)


class RoleRecord(Protocol):
    """Anything carrying a set of named roles held by addresses."""

    @property
    def roles(self) -> PoolRoles: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class BondedPool:
    id: int
    roles: PoolRoles
    state: PoolState = PoolState.OPEN
    member_counter: int = 0
    points: int = 0
    stash: Address | None = None
    reward: Address | None = None
    metadata: str | None = None
