"""Pydantic models describing ``smart_contract`` rows from the metadata service."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class SmartContractPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str
    address: str
    team_id: str
    abi: str


class SmartContractResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    smart_contract: list[Mapping[str, object]] = Field(default_factory=list)
