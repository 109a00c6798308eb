from __future__ import annotations

import pytest

from signet_core.adapters.encoding import bytes_to_hex
from signet_core.domain.model import hash_call
from tests.helpers.addresses import ALICE_GENERIC, ALICE_KUSAMA, BOB_GENERIC
from tests.helpers.snapshots import REMARK_CALL, TRANSFER_CALL


@pytest.fixture
def pending_payload() -> dict[str, object]:
    return {
        "chain": "kusama",
        "pending": [
            {
                "when": {"height": "1,000", "index": 1},
                "threshold": 2,
                "approvals": [ALICE_KUSAMA],
                "callHash": bytes_to_hex(hash_call(TRANSFER_CALL)),
            },
            {
                "when": {"height": 1100, "index": 0},
                "threshold": 2,
                "approvals": [ALICE_KUSAMA],
                "callData": bytes_to_hex(REMARK_CALL),
            },
        ],
        "runtime": {
            "pallets": ["System", "Balances"],
            "calls": [
                {"pallet_index": 5, "call_index": 3, "name": "balances.transferKeepAlive"},
                {"pallet_index": 0, "call_index": 7, "name": "system.remarkWithEvent"},
            ],
        },
    }


@pytest.fixture
def metadata_payload() -> dict[str, object]:
    row = {
        "team_id": "team-1",
        "timepoint_height": 1000,
        "timepoint_index": 1,
        "chain": "kusama",
        "created": "2024-05-01T12:00:00Z",
        "call_data": bytes_to_hex(TRANSFER_CALL),
        "description": "pay the auditors",
        "change_config_details": None,
    }
    return {
        "data": {
            "tx_metadata": [
                row,
                {**row, "description": "older draft", "created": "2024-04-30T12:00:00Z"},
                {
                    **row,
                    "team_id": "team-2",
                    "description": "other team",
                    "created": "2025-01-01T00:00:00Z",
                },
                {
                    **row,
                    "timepoint_height": 900,
                    "description": "executed long ago",
                    "change_config_details": {
                        "newMembers": [ALICE_GENERIC, BOB_GENERIC],
                        "newThreshold": 2,
                    },
                },
            ]
        }
    }
