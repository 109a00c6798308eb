"""Application configuration helpers."""

from __future__ import annotations

from .chains import SUPPORTED_CHAINS, get_chain, load_chains_file, supported_chains
from .env import env_flag, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging, get_log_level
from .reconcile import ReconcileConfig, get_reconcile_config

__all__ = [
    "SUPPORTED_CHAINS",
    "ConfigurationError",
    "ReconcileConfig",
    "configure_logging",
    "env_flag",
    "get_chain",
    "get_log_level",
    "get_reconcile_config",
    "load_chains_file",
    "optional_env_var",
    "supported_chains",
]
