"""Call bytes shared by snapshot and metadata payload fixtures."""

from __future__ import annotations

TRANSFER_CALL = bytes.fromhex("0503") + b"\x11" * 4
REMARK_CALL = bytes.fromhex("0007") + b"hi"
