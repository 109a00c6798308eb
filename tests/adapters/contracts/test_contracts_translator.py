from __future__ import annotations

import logging

import pytest

from signet_core.adapters.contracts import (
    build_contract_directory,
    parse_smart_contract,
    parse_smart_contract_response,
)
from signet_core.domain.model import Address
from tests.helpers.addresses import ALICE_KUSAMA, BOB_GENERIC


def _row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": "c-1",
        "name": "Flipper",
        "address": ALICE_KUSAMA,
        "team_id": "team-1",
        "abi": '{"spec": {}}',
    }
    row.update(overrides)
    return row


def test_parse_smart_contract(alice: Address) -> None:
    contract = parse_smart_contract(_row())

    assert contract.address == alice
    assert contract.name == "Flipper"


def test_parse_smart_contract_rejects_bad_bundle() -> None:
    with pytest.raises(ValueError, match="contract bundle"):
        parse_smart_contract(_row(abi="not json"))


def test_build_directory_skips_invalid_rows(
    alice: Address, bob: Address, caplog: pytest.LogCaptureFixture
) -> None:
    rows = [
        _row(),
        _row(id="c-2", address="nope"),
        _row(id="c-3", abi="{"),
        _row(id="c-4", address=BOB_GENERIC),
    ]

    with caplog.at_level(logging.WARNING):
        directory = build_contract_directory(rows)

    assert len(directory) == 2
    assert directory.lookup("team-1", alice) is not None
    assert directory.lookup("team-1", bob) is not None
    assert caplog.text.count("Skipping smart contract row") == 2


def test_parse_response_accepts_graphql_envelope(alice: Address) -> None:
    directory = parse_smart_contract_response({"data": {"smart_contract": [_row()]}})

    contract = directory.lookup("team-1", alice)
    assert contract is not None
    assert contract.id == "c-1"
