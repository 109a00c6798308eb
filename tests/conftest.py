from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from signet_core.config import get_chain
from signet_core.config.chains import CHAINS_FILE_ENV
from signet_core.config.logging import LOG_LEVEL_ENV
from signet_core.config.reconcile import VERIFY_CALL_HASH_ENV
from signet_core.domain.model import Address
from tests.helpers.addresses import ALICE_PUBKEY, BOB_PUBKEY, CHARLIE_PUBKEY

if TYPE_CHECKING:
    from signet_core.domain.model import Chain


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (CHAINS_FILE_ENV, LOG_LEVEL_ENV, VERIFY_CALL_HASH_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def alice() -> Address:
    return Address.from_pubkey(ALICE_PUBKEY)


@pytest.fixture
def bob() -> Address:
    return Address.from_pubkey(BOB_PUBKEY)


@pytest.fixture
def charlie() -> Address:
    return Address.from_pubkey(CHARLIE_PUBKEY)


@pytest.fixture
def polkadot() -> Chain:
    return get_chain("polkadot")


@pytest.fixture
def kusama() -> Chain:
    return get_chain("kusama")
