"""Role membership lookups by canonical identity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .loadable import map_loadable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .loadable import Loadable
    from .model import Address, BondedPool
    from .model.pools import RoleRecord


def roles_of[R: RoleRecord](address: Address, records: Iterable[R]) -> list[R]:
    """Return every record in which ``address`` holds at least one role.

    Input order is preserved and a record matching through several roles is
    returned once. No match is a normal outcome and yields an empty list.
    """

    return [record for record in records if record.roles.roles_held_by(address)]


def nom_pools_of(
    address: Address,
    pools: Loadable[Sequence[BondedPool]],
) -> Loadable[list[BondedPool]]:
    """Pools ``address`` has a role in, keeping "still loading" distinct from "none"."""

    return map_loadable(pools, lambda ready: roles_of(address, ready))
