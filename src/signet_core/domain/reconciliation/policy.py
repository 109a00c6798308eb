"""Winner selection among metadata records sharing one timepoint.

Several records may exist per timepoint (retried submissions with edited
descriptions). The newest ``created`` wins. Equal timestamps are broken by the
greatest ``(description, call_data)`` pair so the outcome never depends on the
order the metadata store returned rows in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from signet_core.domain.model import TxMetadata


class SelectWinner(Protocol):
    """Pick the metadata record attached to a pending call, if any."""

    def __call__(self, candidates: Sequence[TxMetadata]) -> TxMetadata | None: ...


def _winner_key(record: TxMetadata) -> tuple[datetime, str, bytes]:
    return (record.created, record.description, record.call_data or b"")


def select_latest_metadata(candidates: Sequence[TxMetadata]) -> TxMetadata | None:
    if not candidates:
        return None
    return max(candidates, key=_winner_key)
