from __future__ import annotations

import pytest

from tests.helpers.addresses import ALICE_GENERIC, BOB_GENERIC


@pytest.fixture
def metadata_row() -> dict[str, object]:
    return {
        "team_id": "team-1",
        "timepoint_height": 100,
        "timepoint_index": 0,
        "chain": "polkadot",
        "created": "2024-05-01T12:00:00+02:00",
        "call_data": "0x0503aabb",
        "description": "swap",
        "change_config_details": {"newMembers": [ALICE_GENERIC, BOB_GENERIC], "newThreshold": 2},
        "other_metadata": None,
    }
