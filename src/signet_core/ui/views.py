"""JSON views of domain results for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from signet_core.adapters.encoding import bytes_to_hex

if TYPE_CHECKING:
    from signet_core.domain.model import (
        Address,
        Chain,
        ChangeConfigDetails,
        DecodedCall,
        ReconciledTransaction,
    )


class DecodedCallView(BaseModel):
    section: str
    method: str
    args: str

    @classmethod
    def from_domain(cls, decoded: DecodedCall) -> DecodedCallView:
        return cls(section=decoded.section, method=decoded.method, args=bytes_to_hex(decoded.args))


class ChangeConfigView(BaseModel):
    new_members: list[str]
    new_threshold: int
    multisig_address: str

    @classmethod
    def from_domain(cls, details: ChangeConfigDetails, chain: Chain) -> ChangeConfigView:
        return cls(
            new_members=[member.to_ss58(chain) for member in details.new_members],
            new_threshold=details.new_threshold,
            multisig_address=details.multisig_address().to_ss58(chain),
        )


class TransactionView(BaseModel):
    id: str
    chain: str
    height: int
    index: int
    threshold: int
    approvals: list[str]
    description: str
    metadata_saved: bool
    call_data: str | None = None
    call_hash: str | None = None
    decoded: DecodedCallView | None = None
    change_config: ChangeConfigView | None = None
    contract_deployed: str | None = None

    @classmethod
    def from_domain(cls, transaction: ReconciledTransaction, chain: Chain) -> TransactionView:
        return cls(
            id=transaction.id,
            chain=transaction.chain,
            height=transaction.timepoint.height,
            index=transaction.timepoint.index,
            threshold=transaction.threshold,
            approvals=[approval.to_ss58(chain) for approval in transaction.approvals],
            description=transaction.description,
            metadata_saved=transaction.metadata_saved,
            call_data=_hex_or_none(transaction.call_data),
            call_hash=_hex_or_none(transaction.call_hash),
            decoded=(
                DecodedCallView.from_domain(transaction.decoded)
                if transaction.decoded is not None
                else None
            ),
            change_config=(
                ChangeConfigView.from_domain(transaction.change_config_details, chain)
                if transaction.change_config_details is not None
                else None
            ),
            contract_deployed=(
                transaction.contract_deployed.name
                if transaction.contract_deployed is not None
                else None
            ),
        )


class AddressView(BaseModel):
    pubkey: str
    is_ethereum: bool
    encodings: dict[str, str]

    @classmethod
    def from_domain(cls, address: Address, chains: list[Chain]) -> AddressView:
        return cls(
            pubkey=address.to_pubkey(),
            is_ethereum=address.is_ethereum,
            encodings={chain.id: address.to_ss58(chain) for chain in chains},
        )


def _hex_or_none(value: bytes | None) -> str | None:
    return bytes_to_hex(value) if value is not None else None
