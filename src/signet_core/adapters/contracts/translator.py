"""Translate ``smart_contract`` rows into a contract directory."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from signet_core.domain.contracts import ContractDirectory
from signet_core.domain.model import Address, SmartContract

from .schema import SmartContractPayload, SmartContractResponse

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

log = getLogger(__name__)


def parse_smart_contract(payload: SmartContractPayload | Mapping[str, object]) -> SmartContract:
    row = (
        payload
        if isinstance(payload, SmartContractPayload)
        else SmartContractPayload.model_validate(payload)
    )
    try:
        json.loads(row.abi)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse contract bundle for {row.id}") from exc
    return SmartContract(
        id=row.id,
        name=row.name,
        team_id=row.team_id,
        address=Address.parse(row.address),
        abi=row.abi,
    )


def build_contract_directory(
    rows: Iterable[SmartContractPayload | Mapping[str, object]],
) -> ContractDirectory:
    """Build a directory from rows, skipping rows with bad addresses or bundles."""

    directory = ContractDirectory()
    for row in rows:
        try:
            directory.add(parse_smart_contract(row))
        except ValueError as exc:
            log.warning("Skipping smart contract row %s: %s", row, exc)
    return directory


def parse_smart_contract_response(payload: Mapping[str, object]) -> ContractDirectory:
    body = payload.get("data", payload)
    response = SmartContractResponse.model_validate(body)
    return build_contract_directory(response.smart_contract)
