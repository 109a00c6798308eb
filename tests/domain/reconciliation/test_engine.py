from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from signet_core.domain.model import (
    Address,
    CallSchema,
    ChangeConfigDetails,
    Timepoint,
    TxMetadata,
    hash_call,
)
from signet_core.domain.reconciliation import (
    SchemaCallDecoder,
    TransactionReconciler,
    reconcile_pending_transactions,
)
from tests.helpers.reconciliation import BASE_TIME, make_call, make_metadata

CALL_A = b"\x05\x03" + b"\x01" * 8
CALL_B = b"\x00\x07" + b"hello"


def test_latest_metadata_description_wins() -> None:
    pending = [make_call(100, 0, call_data=CALL_A)]
    metadata = [
        make_metadata(100, 0, description="swap", minutes=1),
        make_metadata(100, 0, description="swap v2", minutes=2),
    ]

    result = reconcile_pending_transactions(pending, metadata, chain="polkadot")

    assert len(result) == 1
    assert result[0].timepoint == Timepoint(height=100, index=0)
    assert result[0].description == "swap v2"
    assert result[0].metadata_saved is True


def test_call_without_metadata_still_appears() -> None:
    result = reconcile_pending_transactions(
        [make_call(200, 1, call_data=CALL_B)], [], chain="polkadot"
    )

    assert len(result) == 1
    assert result[0].description == ""
    assert result[0].metadata_saved is False
    assert result[0].call_data == CALL_B


def test_metadata_without_call_is_dropped() -> None:
    result = reconcile_pending_transactions(
        [], [make_metadata(50, 2, description="stale")], chain="polkadot"
    )

    assert result == []


def test_one_transaction_per_on_chain_timepoint() -> None:
    pending = [make_call(10, 0), make_call(10, 1), make_call(11, 0)]
    metadata = [make_metadata(10, 1, description="x"), make_metadata(99, 0, description="orphan")]

    result = reconcile_pending_transactions(pending, metadata, chain="polkadot")

    assert {tx.timepoint for tx in result} == {call.timepoint for call in pending}
    assert [tx.description for tx in result if tx.metadata_saved] == ["x"]


def test_output_is_most_recent_first() -> None:
    pending = [make_call(5, 1), make_call(7, 0), make_call(5, 3)]

    result = reconcile_pending_transactions(pending, [], chain="polkadot")

    assert [str(tx.timepoint) for tx in result] == ["7-0", "5-3", "5-1"]


def test_reconciliation_is_idempotent_and_order_insensitive() -> None:
    pending = [make_call(1, 0, call_data=CALL_A), make_call(2, 0)]
    metadata = [
        make_metadata(1, 0, description="a", minutes=1),
        make_metadata(1, 0, description="b", minutes=1),
        make_metadata(2, 0, description="c"),
    ]

    first = reconcile_pending_transactions(pending, metadata, chain="polkadot")
    second = reconcile_pending_transactions(
        list(reversed(pending)), list(reversed(metadata)), chain="polkadot"
    )

    assert first == second
    assert first[1].description == "b"


def test_records_from_other_chains_are_ignored() -> None:
    pending = [make_call(3, 0), make_call(3, 0, chain="kusama")]
    metadata = [make_metadata(3, 0, chain="kusama", description="wrong chain")]

    result = reconcile_pending_transactions(pending, metadata, chain="polkadot")

    assert len(result) == 1
    assert result[0].chain == "polkadot"
    assert result[0].metadata_saved is False


def test_metadata_call_data_fills_gap_when_hash_matches() -> None:
    pending = [make_call(8, 0, call_hash=hash_call(CALL_A))]
    metadata = [make_metadata(8, 0, call_data=CALL_A)]

    result = reconcile_pending_transactions(pending, metadata, chain="polkadot")

    assert result[0].call_data == CALL_A
    assert result[0].call_hash == hash_call(CALL_A)


def test_metadata_call_data_rejected_on_hash_mismatch(caplog: pytest.LogCaptureFixture) -> None:
    pending = [make_call(8, 0, call_hash=hash_call(CALL_A))]
    metadata = [make_metadata(8, 0, call_data=CALL_B, description="tampered")]

    with caplog.at_level(logging.WARNING):
        result = reconcile_pending_transactions(pending, metadata, chain="polkadot")

    assert result[0].call_data is None
    assert result[0].call_hash == hash_call(CALL_A)
    assert result[0].description == "tampered"
    assert "does not match the on-chain call hash" in caplog.text


def test_hash_check_can_be_disabled() -> None:
    pending = [make_call(8, 0, call_hash=hash_call(CALL_A))]
    metadata = [make_metadata(8, 0, call_data=CALL_B)]

    result = reconcile_pending_transactions(
        pending, metadata, chain="polkadot", verify_call_hash=False
    )

    assert result[0].call_data == CALL_B


def test_on_chain_call_data_is_authoritative(caplog: pytest.LogCaptureFixture) -> None:
    pending = [make_call(9, 0, call_data=CALL_A)]
    metadata = [make_metadata(9, 0, call_data=CALL_B)]

    with caplog.at_level(logging.WARNING):
        result = reconcile_pending_transactions(pending, metadata, chain="polkadot")

    assert result[0].call_data == CALL_A
    assert "differs from the on-chain call" in caplog.text


def test_call_hash_is_derived_when_missing() -> None:
    pending = [make_call(9, 0, call_data=CALL_A, with_hash=False)]

    result = reconcile_pending_transactions(pending, [], chain="polkadot")

    assert result[0].call_hash == hash_call(CALL_A)


def test_duplicate_pending_calls_keep_last(caplog: pytest.LogCaptureFixture) -> None:
    pending = [make_call(4, 0, threshold=2), make_call(4, 0, threshold=3)]

    with caplog.at_level(logging.WARNING):
        result = reconcile_pending_transactions(pending, [], chain="polkadot")

    assert len(result) == 1
    assert result[0].threshold == 3
    assert "Duplicate on-chain pending call" in caplog.text


def test_annotations_come_from_winning_record(alice: Address, bob: Address) -> None:
    details = ChangeConfigDetails(new_members=(alice, bob), new_threshold=1)
    winner = TxMetadata(
        team_id="team-1",
        chain="polkadot",
        timepoint=Timepoint(height=6, index=0),
        created=BASE_TIME + timedelta(hours=1),
        description="rotate signers",
        change_config_details=details,
    )
    older = make_metadata(6, 0, description="draft")

    result = reconcile_pending_transactions(
        [make_call(6, 0, approvals=(alice,))], [older, winner], chain="polkadot"
    )

    assert result[0].change_config_details == details
    assert result[0].description == "rotate signers"
    assert result[0].approved_by(alice)


def test_call_data_is_decoded_with_schema() -> None:
    schema = CallSchema.from_names({(5, 3): "balances.transferKeepAlive"})
    reconciler = TransactionReconciler(chain="polkadot", decoder=SchemaCallDecoder(schema))

    result = reconciler.reconcile([make_call(1, 0, call_data=CALL_A), make_call(2, 0)], [])

    undecoded, decoded = result
    assert undecoded.decoded is None
    assert decoded.decoded is not None
    assert decoded.decoded.section == "balances"
    assert decoded.decoded.method == "transferKeepAlive"
    assert decoded.decoded.args == b"\x01" * 8


def test_decoder_failure_degrades_to_none(caplog: pytest.LogCaptureFixture) -> None:
    def broken_decoder(call_data: bytes) -> None:
        raise ValueError(f"cannot decode {len(call_data)} bytes")

    reconciler = TransactionReconciler(chain="polkadot", decoder=broken_decoder)

    with caplog.at_level(logging.WARNING):
        result = reconciler.reconcile([make_call(1, 0, call_data=CALL_A)], [])

    assert result[0].decoded is None
    assert result[0].call_data == CALL_A
    assert "Failed to decode call data" in caplog.text


def test_custom_winner_policy() -> None:
    def earliest(candidates: list[TxMetadata]) -> TxMetadata | None:
        return min(candidates, key=lambda record: record.created) if candidates else None

    reconciler = TransactionReconciler(chain="polkadot", select_winner=earliest)
    metadata = [
        make_metadata(1, 0, description="second", minutes=5),
        make_metadata(1, 0, description="first", minutes=0),
    ]

    result = reconciler.reconcile([make_call(1, 0)], metadata)

    assert result[0].description == "first"
