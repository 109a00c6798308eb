"""Hex helpers shared by payload translators."""

from __future__ import annotations


def hex_to_bytes(value: str) -> bytes:
    """Decode ``0x``-prefixed (or bare) hex, raising ``ValueError`` on bad input."""

    stripped = value.strip()
    if stripped[:2].lower() == "0x":
        stripped = stripped[2:]
    try:
        return bytes.fromhex(stripped)
    except ValueError as exc:
        raise ValueError(f"Invalid hex string: {value!r}") from exc


def bytes_to_hex(value: bytes) -> str:
    return "0x" + value.hex()


def blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value
