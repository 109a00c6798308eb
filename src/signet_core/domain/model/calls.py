"""Call schema primitives used to decode raw call bytes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

type CallIndex = tuple[int, int]


@dataclass(frozen=True, slots=True)
class CallName:
    section: str
    method: str

    def __str__(self) -> str:
        return f"{self.section}.{self.method}"


@dataclass(frozen=True, slots=True)
class CallSchema:
    """Maps ``(pallet index, call index)`` pairs to call names for one runtime."""

    calls: Mapping[CallIndex, CallName] = field(default_factory=dict[CallIndex, CallName])

    def lookup(self, pallet_index: int, call_index: int) -> CallName | None:
        return self.calls.get((pallet_index, call_index))

    @classmethod
    def from_names(cls, names: Mapping[CallIndex, str]) -> CallSchema:
        """Build a schema from ``{(pallet, call): "section.method"}`` entries."""

        calls: dict[CallIndex, CallName] = {}
        for index, dotted in names.items():
            section, _, method = dotted.partition(".")
            if not section or not method:
                raise ValueError(f"Call name must look like 'section.method': {dotted!r}")
            calls[index] = CallName(section=section, method=method)
        return cls(calls=calls)


@dataclass(frozen=True, slots=True)
class DecodedCall:
    """Structured view of call bytes decoded against a ``CallSchema``."""

    pallet_index: int
    call_index: int
    name: CallName
    args: bytes = b""

    @property
    def section(self) -> str:
        return self.name.section

    @property
    def method(self) -> str:
        return self.name.method
