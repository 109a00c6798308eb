"""Translate ``tx_metadata`` rows into domain metadata records.

Annotations that fail validation (change-config details, deployed contract
info) degrade to ``None``; the rest of the record is still usable.
"""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from signet_core.adapters.encoding import hex_to_bytes
from signet_core.config.chains import supported_chains
from signet_core.domain.model import (
    Address,
    ChangeConfigDetails,
    ContractDeployment,
    Timepoint,
    TxMetadata,
    UnknownChainError,
)

from .schema import (
    ChangeConfigPayload,
    ContractDeployedPayload,
    RawTxMetadata,
    RawTxMetadataInput,
    TxMetadataResponse,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping


log = getLogger(__name__)


def _ensure_raw_metadata(raw: RawTxMetadataInput) -> RawTxMetadata:
    if isinstance(raw, RawTxMetadata):
        return raw
    return RawTxMetadata.model_validate(raw)


def _known_chain_ids() -> frozenset[str]:
    return frozenset(chain.id for chain in supported_chains())


def parse_tx_metadata(
    raw: RawTxMetadataInput,
    *,
    known_chains: Collection[str] | None = None,
) -> TxMetadata:
    """Return a ``TxMetadata`` record, raising for rows that cannot be keyed."""

    payload = _ensure_raw_metadata(raw)
    chain_ids = known_chains if known_chains is not None else _known_chain_ids()
    if payload.chain not in chain_ids:
        raise UnknownChainError(payload.chain)

    return TxMetadata(
        team_id=payload.team_id,
        chain=payload.chain,
        timepoint=Timepoint(height=payload.timepoint_height, index=payload.timepoint_index),
        created=payload.created,
        description=payload.description,
        call_data=_parse_call_data(payload),
        change_config_details=_parse_change_config(payload),
        contract_deployed=_parse_contract_deployed(payload),
    )


def parse_tx_metadata_rows(
    rows: Iterable[RawTxMetadataInput],
    *,
    known_chains: Collection[str] | None = None,
) -> list[TxMetadata]:
    """Parse every row, skipping (and logging) rows that are invalid."""

    chain_ids = known_chains if known_chains is not None else _known_chain_ids()
    records: list[TxMetadata] = []
    for row in rows:
        try:
            records.append(parse_tx_metadata(row, known_chains=chain_ids))
        except (ValueError, UnknownChainError) as exc:
            log.warning("Found invalid tx_metadata row: %s (%s)", row, exc)
    return records


def parse_tx_metadata_response(
    payload: Mapping[str, object],
    *,
    known_chains: Collection[str] | None = None,
) -> list[TxMetadata]:
    """Parse a GraphQL response body, with or without the ``data`` envelope."""

    body = payload.get("data", payload)
    response = TxMetadataResponse.model_validate(body)
    return parse_tx_metadata_rows(response.tx_metadata, known_chains=known_chains)


def _parse_call_data(payload: RawTxMetadata) -> bytes | None:
    if payload.call_data is None:
        return None
    try:
        return hex_to_bytes(payload.call_data)
    except ValueError:
        log.warning(
            "Ignoring undecodable call data for %s-%s-%s",
            payload.chain,
            payload.timepoint_height,
            payload.timepoint_index,
        )
        return None


def _parse_change_config(payload: RawTxMetadata) -> ChangeConfigDetails | None:
    if not payload.change_config_details:
        return None
    try:
        details = ChangeConfigPayload.model_validate(payload.change_config_details)
        return ChangeConfigDetails(
            new_members=tuple(Address.parse(member) for member in details.new_members),
            new_threshold=details.new_threshold,
        )
    except ValueError:
        log.warning("Invalid change config details: %s", payload.change_config_details)
        return None


def _parse_contract_deployed(payload: RawTxMetadata) -> ContractDeployment | None:
    other = payload.other_metadata
    if not isinstance(other, dict) or not other.get("contractDeployed"):
        return None
    try:
        deployed = ContractDeployedPayload.model_validate(other["contractDeployed"])
        json.loads(deployed.abi_string)
    except (ValidationError, json.JSONDecodeError):
        log.warning(
            "Failed to parse deployed contract for %s-%s-%s",
            payload.chain,
            payload.timepoint_height,
            payload.timepoint_index,
        )
        return None
    if not deployed.name or not deployed.abi_string:
        return None
    return ContractDeployment(name=deployed.name, abi=deployed.abi_string)
