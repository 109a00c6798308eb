#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from signet_core.app import describe_address, reconcile_snapshot
from signet_core.config import ConfigurationError, configure_logging, get_log_level
from signet_core.domain.model import UnknownChainError
from signet_core.ui.views import AddressView, TransactionView

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Multisig address and transaction tooling")
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile", help="Merge pending on-chain calls with off-chain metadata"
    )
    reconcile.add_argument(
        "--pending",
        type=Path,
        required=True,
        help="JSON snapshot of pending multisig calls for one chain",
    )
    reconcile.add_argument(
        "--metadata",
        type=Path,
        help="JSON tx_metadata response from the metadata service",
    )
    reconcile.add_argument(
        "--chain",
        type=str,
        help="Expected chain id; must match the snapshot's chain",
    )
    reconcile.add_argument(
        "--team",
        type=str,
        help="Only attach metadata belonging to this team id",
    )

    address = subparsers.add_parser("address", help="Show an address in every chain format")
    address.add_argument("text", type=str, help="SS58 or 0x-hex address")
    address.add_argument(
        "--chain",
        dest="chains",
        action="append",
        help="Chain id to encode for (repeatable, defaults to all mainnets)",
    )
    return parser.parse_args(list(argv))


def _load_json(path: Path) -> dict[str, object]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return payload


def _run_reconcile(args: argparse.Namespace) -> None:
    pending_payload = _load_json(args.pending)
    metadata_payload = _load_json(args.metadata) if args.metadata else None
    result = reconcile_snapshot(pending_payload, metadata_payload, team_id=args.team)
    if args.chain and args.chain != result.chain.id:
        raise ValueError(f"Snapshot is for chain {result.chain.id}, expected {args.chain}")
    views = [TransactionView.from_domain(tx, result.chain) for tx in result.transactions]
    print(json.dumps([view.model_dump(mode="json") for view in views], indent=2))


def _run_address(args: argparse.Namespace) -> None:
    address, chains = describe_address(args.text, args.chains)
    print(AddressView.from_domain(address, chains).model_dump_json(indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
        configure_logging(level=get_log_level())
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        if parsed_args.command == "reconcile":
            _run_reconcile(parsed_args)
        else:
            _run_address(parsed_args)
    except (ConfigurationError, UnknownChainError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
