"""Account identities and their SS58 text encodings.

Addresses are kept as raw bytes everywhere except when they are shown to a user.
That lets us do equality checks and mapping lookups without caring which chain's
network prefix produced the text we were given.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Literal

import base58

from .chain import GENERIC_SS58_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .chain import Chain

SUBSTRATE_ACCOUNT_LENGTH: Final[int] = 32
ETHEREUM_ACCOUNT_LENGTH: Final[int] = 20
MAX_SS58_PREFIX: Final[int] = 16383

_SS58_CHECKSUM_SALT: Final[bytes] = b"SS58PRE"
_MULTISIG_SALT: Final[bytes] = b"modlpy/utilisuba"
_RESERVED_PREFIXES: Final[frozenset[int]] = frozenset({46, 47})
_ENCODABLE_LENGTHS: Final[frozenset[int]] = frozenset({1, 2, 4, 8, 32, 33})
_ACCOUNT_LENGTHS: Final[frozenset[int]] = frozenset(
    {SUBSTRATE_ACCOUNT_LENGTH, ETHEREUM_ACCOUNT_LENGTH}
)


class InvalidAddressFormat(ValueError):
    """Raised when text cannot be decoded into an account identity."""

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text


def _ss58_hash(body: bytes) -> bytes:
    return hashlib.blake2b(_SS58_CHECKSUM_SALT + body, digest_size=64).digest()


def _checksum_length(raw_length: int) -> int:
    return 2 if raw_length in (32, 33) else 1


def _encode_prefix(prefix: int) -> bytes:
    if prefix < 0 or prefix > MAX_SS58_PREFIX:
        raise ValueError(f"SS58 prefix out of range: {prefix}")
    if prefix in _RESERVED_PREFIXES:
        raise ValueError(f"SS58 prefix {prefix} is reserved")
    if prefix < 64:
        return bytes([prefix])
    first = ((prefix & 0b1111_1100) >> 2) | 0b0100_0000
    second = (prefix >> 8) | ((prefix & 0b0000_0011) << 6)
    return bytes([first, second])


def _decode_prefix(data: bytes, text: str) -> tuple[int, int]:
    first = data[0]
    if first & 0b1000_0000:
        raise InvalidAddressFormat("Invalid SS58 prefix byte", text=text)
    if not first & 0b0100_0000:
        return first, 1
    if len(data) < 2:
        raise InvalidAddressFormat("Truncated SS58 prefix", text=text)
    second = data[1]
    prefix = ((first & 0b0011_1111) << 2) | (second >> 6) | ((second & 0b0011_1111) << 8)
    return prefix, 2


def ss58_encode(raw: bytes, prefix: int = GENERIC_SS58_PREFIX) -> str:
    """Encode ``raw`` bytes as SS58 text for the given network prefix."""

    if len(raw) not in _ENCODABLE_LENGTHS:
        raise ValueError(f"Cannot SS58-encode {len(raw)} bytes")
    body = _encode_prefix(prefix) + raw
    checksum = _ss58_hash(body)[: _checksum_length(len(raw))]
    return base58.b58encode(body + checksum).decode("ascii")


def ss58_decode(text: str, *, expected_length: int | None = None) -> tuple[bytes, int]:
    """Decode SS58 text into ``(raw bytes, network prefix)``.

    The prefix and checksum are validated and stripped; only the raw identity is
    returned alongside the prefix that was used to encode it.
    """

    try:
        data = base58.b58decode(text.strip())
    except ValueError as exc:
        raise InvalidAddressFormat(f"Invalid base58 in address: {exc}", text=text) from exc
    if not data:
        raise InvalidAddressFormat("Empty address", text=text)

    prefix, prefix_length = _decode_prefix(data, text)
    if prefix in _RESERVED_PREFIXES:
        raise InvalidAddressFormat(f"SS58 prefix {prefix} is reserved", text=text)

    remaining = len(data) - prefix_length
    if remaining in (34, 35):
        checksum_length = 2
    elif remaining in (2, 3, 5, 9):
        checksum_length = 1
    else:
        raise InvalidAddressFormat(f"Invalid decoded address length: {len(data)}", text=text)

    body, checksum = data[:-checksum_length], data[-checksum_length:]
    if _ss58_hash(body)[:checksum_length] != checksum:
        raise InvalidAddressFormat("Invalid SS58 checksum", text=text)

    raw = body[prefix_length:]
    if expected_length is not None and len(raw) != expected_length:
        raise InvalidAddressFormat(
            f"Expected {expected_length} address bytes, got {len(raw)}", text=text
        )
    return raw, prefix


def _parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text.removeprefix("0x").removeprefix("0X"))
    except ValueError as exc:
        raise InvalidAddressFormat("Invalid hex address", text=text) from exc


def shorten_address(text: str, size: Literal["long", "short"] = "short") -> str:
    length = 7 if size == "long" else 5
    if len(text) <= length * 2:
        return text
    return f"{text[:length]}...{text[-length:]}"


@dataclass(frozen=True, slots=True, order=True)
class Address:
    """Canonical, chain-agnostic account identity.

    Two addresses are equal iff their raw bytes are equal; hashing and ordering
    follow the raw bytes as well, so addresses can key mappings directly.
    """

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes):
            object.__setattr__(self, "raw", bytes(self.raw))
        if len(self.raw) not in _ACCOUNT_LENGTHS:
            raise InvalidAddressFormat(
                f"Address must be {SUBSTRATE_ACCOUNT_LENGTH}/{ETHEREUM_ACCOUNT_LENGTH} bytes, "
                f"got {len(self.raw)}"
            )

    @classmethod
    def decode(cls, text: str, expected_length: int = SUBSTRATE_ACCOUNT_LENGTH) -> Address:
        raw, _prefix = ss58_decode(text, expected_length=expected_length)
        return cls(raw)

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse SS58 text or ``0x`` hex (20 or 32 bytes) into an address."""

        candidate = text.strip()
        if candidate[:2].lower() == "0x":
            raw = _parse_hex(candidate)
            if len(raw) not in _ACCOUNT_LENGTHS:
                raise InvalidAddressFormat(f"Invalid hex address length: {len(raw)}", text=text)
            return cls(raw)
        return cls.decode(candidate)

    @classmethod
    def from_pubkey(cls, pubkey: str) -> Address:
        raw = _parse_hex(pubkey)
        if len(raw) != SUBSTRATE_ACCOUNT_LENGTH:
            raise InvalidAddressFormat(
                f"Public key must be {SUBSTRATE_ACCOUNT_LENGTH} bytes", text=pubkey
            )
        return cls(raw)

    @property
    def is_ethereum(self) -> bool:
        return len(self.raw) == ETHEREUM_ACCOUNT_LENGTH

    def encode(self, prefix: int = GENERIC_SS58_PREFIX) -> str:
        if self.is_ethereum:
            return self.to_pubkey()
        return ss58_encode(self.raw, prefix)

    def to_ss58(self, chain: Chain | None = None) -> str:
        """Text form for ``chain``, or the generic substrate form without one."""

        return self.encode(chain.ss58_prefix if chain is not None else GENERIC_SS58_PREFIX)

    def to_short_ss58(self, chain: Chain | None = None) -> str:
        return shorten_address(self.to_ss58(chain))

    def to_pubkey(self) -> str:
        return "0x" + self.raw.hex()

    def account_url(self, chain: Chain) -> str | None:
        return chain.account_url(self.to_ss58(chain))

    def __str__(self) -> str:
        return self.to_ss58()

    def __repr__(self) -> str:
        return f"Address({self.to_pubkey()})"


def _compact_length(value: int) -> bytes:
    if value < 1 << 6:
        return bytes([value << 2])
    if value < 1 << 14:
        return ((value << 2) | 0b01).to_bytes(2, "little")
    if value < 1 << 30:
        return ((value << 2) | 0b10).to_bytes(4, "little")
    raise ValueError(f"Too many signatories: {value}")


def multisig_address(signers: Iterable[Address], threshold: int) -> Address:
    """Derive the multisig account controlled by ``signers`` at ``threshold``.

    Signatory order does not matter; they are sorted by raw bytes first.
    Ethereum-style signers are padded to 32 bytes for the derivation and the
    result is truncated back to 20 bytes.
    """

    members = sorted(signers)
    if not members:
        raise ValueError("A multisig needs at least one signatory")
    if len(set(members)) != len(members):
        raise ValueError("Multisig signatories must be unique")
    if not 1 <= threshold <= len(members):
        raise ValueError(f"Threshold must be between 1 and {len(members)}, got {threshold}")

    ethereum = {member.is_ethereum for member in members}
    if len(ethereum) > 1:
        raise ValueError("Cannot mix ethereum and substrate signatories")
    is_ethereum = ethereum.pop()

    padding = b"\x00" * (SUBSTRATE_ACCOUNT_LENGTH - ETHEREUM_ACCOUNT_LENGTH) if is_ethereum else b""
    payload = (
        _MULTISIG_SALT
        + _compact_length(len(members))
        + b"".join(member.raw + padding for member in members)
        + threshold.to_bytes(2, "little")
    )
    digest = hashlib.blake2b(payload, digest_size=32).digest()
    return Address(digest[:ETHEREUM_ACCOUNT_LENGTH] if is_ethereum else digest)
