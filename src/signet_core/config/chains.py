"""Supported chain table.

The built-in table can be extended through ``SIGNET_CHAINS_FILE``, a JSON list
of chain objects; entries with an existing id replace the built-in one.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from signet_core.domain.model import Chain, UnknownChainError

from .env import optional_env_var
from .errors import ConfigurationError

CHAINS_FILE_ENV: Final[str] = "SIGNET_CHAINS_FILE"

SUPPORTED_CHAINS: Final[tuple[Chain, ...]] = (
    Chain(
        id="polkadot",
        name="Polkadot",
        ss58_prefix=0,
        genesis_hash="0x91b171bb158e2d3848fa23a9f1c25182fb8e20313b2c1eb49219da7a70ce90c3",
        subscan_url="https://polkadot.subscan.io/",
    ),
    Chain(
        id="kusama",
        name="Kusama",
        ss58_prefix=2,
        genesis_hash="0xb0a8d493285c2df73290dfb7e61f870f17b41801197a149ca93654499ea3dafe",
        subscan_url="https://kusama.subscan.io/",
    ),
    Chain(
        id="polkadot-asset-hub",
        name="Polkadot Asset Hub",
        ss58_prefix=0,
        genesis_hash="0x68d56f15f85d3136970ec16946040bc1752654e906147f7e43e9d539d7c3de2f",
        subscan_url="https://assethub-polkadot.subscan.io/",
    ),
    Chain(
        id="kusama-asset-hub",
        name="Kusama Asset Hub",
        ss58_prefix=2,
        genesis_hash="0x48239ef607d7928874027a43a67689209727dfb3d3dc5e5b03a39bdc2eda771a",
        subscan_url="https://assethub-kusama.subscan.io/",
    ),
    Chain(
        id="rococo-testnet",
        name="Rococo",
        ss58_prefix=42,
        genesis_hash="0x6408de7737c59c238890533af25896a2c20608d8b380bb01029acb392781063e",
        subscan_url="https://rococo.subscan.io/",
        is_testnet=True,
    ),
    Chain(
        id="astar",
        name="Astar",
        ss58_prefix=5,
        genesis_hash="0x9eb76c5184c4ab8679d2d5d819fdf90b9c001403e9e17da2e14b6d8aec4029c6",
        subscan_url="https://astar.subscan.io/",
    ),
    Chain(
        id="shibuya-testnet",
        name="Shibuya",
        ss58_prefix=5,
        genesis_hash="0xddb89973361a170839f80f152d2e9e38a376a5a7eccefcade763f46a8e567019",
        subscan_url="https://shibuya.subscan.io/",
        is_testnet=True,
    ),
)


class ChainEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str = Field(alias="chainName")
    ss58_prefix: int = Field(alias="ss58Prefix", ge=0, le=16383)
    genesis_hash: str | None = Field(default=None, alias="genesisHash")
    subscan_url: str | None = Field(default=None, alias="subscanUrl")
    is_testnet: bool = Field(default=False, alias="isTestnet")

    def to_chain(self) -> Chain:
        return Chain(
            id=self.id,
            name=self.name,
            ss58_prefix=self.ss58_prefix,
            genesis_hash=self.genesis_hash,
            subscan_url=self.subscan_url,
            is_testnet=self.is_testnet,
        )


def load_chains_file(path: Path) -> tuple[Chain, ...]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"Cannot read chains file {path}: {exc}", source=str(path)
        ) from exc
    if not isinstance(payload, list):
        raise ConfigurationError(f"Chains file {path} must contain a JSON list", source=str(path))
    try:
        return tuple(ChainEntry.model_validate(entry).to_chain() for entry in payload)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid chain entry in {path}: {exc}", source=str(path)
        ) from exc


def supported_chains(*, include_testnets: bool = True) -> tuple[Chain, ...]:
    chains = {chain.id: chain for chain in SUPPORTED_CHAINS}
    extra_path = optional_env_var(CHAINS_FILE_ENV)
    if extra_path is not None:
        for chain in load_chains_file(Path(extra_path).expanduser()):
            chains[chain.id] = chain
    return tuple(
        chain for chain in chains.values() if include_testnets or not chain.is_testnet
    )


def get_chain(chain_id: str) -> Chain:
    for chain in supported_chains():
        if chain.id == chain_id:
            return chain
    raise UnknownChainError(chain_id)
