from __future__ import annotations

from signet_core.domain.model import (
    Address,
    CallName,
    Chain,
    ChangeConfigDetails,
    ContractDeployment,
    DecodedCall,
    ReconciledTransaction,
    Timepoint,
    multisig_address,
)
from signet_core.ui.views import AddressView, TransactionView
from tests.helpers.addresses import ETH_ALITH


def test_transaction_view_renders_annotations(
    alice: Address, bob: Address, kusama: Chain
) -> None:
    transaction = ReconciledTransaction(
        chain="kusama",
        timepoint=Timepoint(height=5, index=1),
        threshold=1,
        approvals=(bob,),
        call_data=b"\x00\x07",
        call_hash=b"\xaa" * 32,
        description="rotate",
        change_config_details=ChangeConfigDetails(new_members=(alice, bob), new_threshold=2),
        contract_deployed=ContractDeployment(name="flipper", abi="{}"),
        decoded=DecodedCall(
            pallet_index=0, call_index=7, name=CallName(section="system", method="remark")
        ),
        metadata_saved=True,
    )

    view = TransactionView.from_domain(transaction, kusama).model_dump(mode="json")

    assert view["id"] == "kusama-5-1"
    assert view["call_data"] == "0x0007"
    assert view["call_hash"] == "0x" + "aa" * 32
    assert view["decoded"] == {"section": "system", "method": "remark", "args": "0x"}
    assert view["contract_deployed"] == "flipper"
    assert view["change_config"]["new_members"] == [alice.to_ss58(kusama), bob.to_ss58(kusama)]
    assert view["change_config"]["multisig_address"] == multisig_address(
        [alice, bob], 2
    ).to_ss58(kusama)


def test_address_view_for_ethereum_account(polkadot: Chain) -> None:
    view = AddressView.from_domain(Address.parse(ETH_ALITH), [polkadot])

    assert view.is_ethereum is True
    assert view.encodings == {"polkadot": ETH_ALITH}
