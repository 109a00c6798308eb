"""Pydantic models describing ``tx_metadata`` rows from the metadata service."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from signet_core.adapters.encoding import blank_to_none


class MetadataBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ChangeConfigPayload(MetadataBaseModel):
    new_members: list[str] = Field(alias="newMembers", min_length=1)
    new_threshold: int = Field(alias="newThreshold", ge=1, strict=True)


class ContractDeployedPayload(MetadataBaseModel):
    name: str
    abi_string: str = Field(alias="abiString")


class RawTxMetadata(MetadataBaseModel):
    team_id: str
    timepoint_height: int = Field(ge=0)
    timepoint_index: int = Field(ge=0)
    chain: str
    created: datetime
    call_data: str | None = None
    description: str = ""
    change_config_details: Any = None
    other_metadata: Any = None
    multisig_address: str | None = None
    proxy_address: str | None = None

    _normalize_call_data = field_validator("call_data", mode="before")(blank_to_none)

    @field_validator("description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("created")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class TxMetadataResponse(MetadataBaseModel):
    tx_metadata: list[Mapping[str, object]] = Field(default_factory=list)


RawTxMetadataInput = RawTxMetadata | Mapping[str, object]
