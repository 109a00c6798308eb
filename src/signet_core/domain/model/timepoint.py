"""Timepoints: the ``(block height, extrinsic index)`` key of a multisig call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True, order=True)
class Timepoint:
    """Order-preserving key joining on-chain calls with off-chain metadata.

    Ordering is lexicographic on ``(height, index)``.
    """

    height: int
    index: int

    def __post_init__(self) -> None:
        if self.height < 0 or self.index < 0:
            raise ValueError(f"Timepoint fields must be non-negative: {self.height}/{self.index}")

    def transaction_id(self, chain_id: str) -> str:
        return f"{chain_id}-{self.height}-{self.index}"

    @classmethod
    def parse_transaction_id(cls, transaction_id: str) -> tuple[str, Timepoint]:
        chain_id, sep, rest = transaction_id.rpartition("-")
        chain_id, sep2, height = chain_id.rpartition("-")
        if not sep or not sep2 or not chain_id:
            raise ValueError(f"Invalid transaction id: {transaction_id!r}")
        try:
            return chain_id, cls(height=int(height), index=int(rest))
        except ValueError as exc:
            raise ValueError(f"Invalid transaction id: {transaction_id!r}") from exc

    def __str__(self) -> str:
        return f"{self.height}-{self.index}"


class HasTimepoint(Protocol):
    @property
    def timepoint(self) -> Timepoint: ...


def key_of(record: HasTimepoint) -> Timepoint:
    return record.timepoint


def compare(a: Timepoint, b: Timepoint) -> int:
    """Return -1, 0 or 1 like a classic comparator."""

    return (a > b) - (a < b)


def timepoint_window(keys: Iterable[Timepoint]) -> tuple[Timepoint, Timepoint] | None:
    """Inclusive ``(min, max)`` range covering ``keys``, or ``None`` when empty."""

    ordered = sorted(set(keys))
    if not ordered:
        return None
    return ordered[0], ordered[-1]


def timepoint_predicates(keys: Iterable[Timepoint]) -> list[dict[str, list[dict[str, object]]]]:
    """Build the ``_and`` predicates the off-chain metadata query filters on."""

    return [
        {
            "_and": [
                {
                    "timepoint_height": {"_eq": key.height},
                    "timepoint_index": {"_eq": key.index},
                }
            ]
        }
        for key in sorted(set(keys))
    ]
