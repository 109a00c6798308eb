"""Reconciliation defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag

VERIFY_CALL_HASH_ENV = "SIGNET_VERIFY_CALL_HASH"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    verify_call_hash: bool = True


def get_reconcile_config() -> ReconcileConfig:
    return ReconcileConfig(verify_call_hash=env_flag(VERIFY_CALL_HASH_ENV, default=True))
