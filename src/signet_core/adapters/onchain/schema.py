"""Pydantic models describing on-chain snapshots supplied by the RPC collaborator."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from signet_core.adapters.encoding import blank_to_none


def _strip_thousands(value: object) -> object:
    if isinstance(value, str):
        return value.replace(",", "")
    return value


class OnChainBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TimepointPayload(OnChainBaseModel):
    height: int = Field(ge=0)
    index: int = Field(ge=0)

    _parse_ints = field_validator("height", "index", mode="before")(_strip_thousands)


class PendingCallPayload(OnChainBaseModel):
    timepoint: TimepointPayload = Field(validation_alias=AliasChoices("timepoint", "when"))
    threshold: int = Field(ge=1)
    approvals: list[str] = Field(default_factory=list)
    call_data: str | None = Field(
        default=None, validation_alias=AliasChoices("call_data", "callData")
    )
    call_hash: str | None = Field(
        default=None, validation_alias=AliasChoices("call_hash", "callHash")
    )
    chain: str | None = None

    _normalize_hex = field_validator("call_data", "call_hash", mode="before")(blank_to_none)


class CallEntryPayload(OnChainBaseModel):
    pallet_index: int = Field(ge=0, le=255)
    call_index: int = Field(ge=0, le=255)
    name: str


class RuntimePayload(OnChainBaseModel):
    pallets: list[str] = Field(default_factory=list)
    calls: list[CallEntryPayload] = Field(default_factory=list)


class PendingSnapshotPayload(OnChainBaseModel):
    chain: str
    pending: list[PendingCallPayload] = Field(default_factory=list)
    runtime: RuntimePayload | None = None


class PoolRolesPayload(OnChainBaseModel):
    depositor: str
    root: str
    nominator: str
    bouncer: str


class BondedPoolPayload(OnChainBaseModel):
    id: int = Field(ge=0)
    member_counter: int = Field(
        default=0, validation_alias=AliasChoices("member_counter", "memberCounter")
    )
    points: int = 0
    roles: PoolRolesPayload
    state: Literal["Open", "Destroying", "Blocked"] = "Open"
    stash: str | None = None
    reward: str | None = None
    metadata: str | None = None

    _parse_ints = field_validator("id", "member_counter", "points", mode="before")(
        _strip_thousands
    )
    _normalize_metadata = field_validator("metadata", mode="before")(blank_to_none)
