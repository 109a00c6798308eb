"""Public interface for the smart contract directory adapter."""

from __future__ import annotations

from .schema import SmartContractPayload, SmartContractResponse
from .translator import (
    build_contract_directory,
    parse_smart_contract,
    parse_smart_contract_response,
)

__all__ = [
    "SmartContractPayload",
    "SmartContractResponse",
    "build_contract_directory",
    "parse_smart_contract",
    "parse_smart_contract_response",
]
