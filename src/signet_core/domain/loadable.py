"""Explicit tri-state for values supplied by asynchronous collaborators.

``Loading`` is distinct from an empty ``Ready`` value: "no pools yet" and
"this account holds no pool roles" must never be confused by callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Ready[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Failed:
    error: BaseException


type Loadable[T] = Loading | Ready[T] | Failed


def map_loadable[T, U](loadable: Loadable[T], fn: Callable[[T], U]) -> Loadable[U]:
    """Apply ``fn`` to a ready value; ``Loading`` and ``Failed`` pass through."""

    match loadable:
        case Ready(value=value):
            return Ready(fn(value))
        case Loading() | Failed():
            return loadable


__all__ = ["Failed", "Loadable", "Loading", "Ready", "map_loadable"]
