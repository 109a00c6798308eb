"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PoolRole(StrEnum):
    DEPOSITOR = "depositor"
    ROOT = "root"
    NOMINATOR = "nominator"
    BOUNCER = "bouncer"


class PoolState(StrEnum):
    OPEN = "Open"
    DESTROYING = "Destroying"
    BLOCKED = "Blocked"


class Capability(StrEnum):
    """Three-valued outcome of a runtime capability check."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"
