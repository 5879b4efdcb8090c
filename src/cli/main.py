"""jsonstore CLI entry points.

This module exposes put, get, exists, and resolve commands for operators.
It maps argparse commands onto the filesystem store.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
from pathlib import Path
import sys
from typing import Any, Sequence

from cli.put_command import add_put_command, run_put_command
from core.config import JsonStoreConfig
from core.errors import JsonStoreError
from core.logging_config import configure_logging
from store.json_store import PathKeyedJsonStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="jsonstore", description="Path-keyed JSON store CLI")
    parser.add_argument(
        "--permanent-dir",
        help="Override JSONSTORE_PERMANENT_DIR for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_put_command(subparsers)
    _add_get_command(subparsers)
    _add_exists_command(subparsers)
    _add_resolve_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the jsonstore CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code: 0 on success, 1 for a negative result,
        2 for a store or input error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        store = _build_store(args.permanent_dir)
        if args.command == "put":
            return run_put_command(store, args)
        if args.command == "get":
            return _run_get_command(store, args)
        if args.command == "exists":
            return _run_exists_command(store, args)
        if args.command == "resolve":
            return _run_resolve_command(store, args)
    except JsonStoreError as error:
        print(f"error={error}", file=sys.stderr)
        return 2
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_store(permanent_dir: str | None) -> PathKeyedJsonStore:
    """Build store with optional permanent-dir override.

    Args:
        permanent_dir: Optional override path.

    Returns:
        Configured store.
    """
    config = JsonStoreConfig.from_env()
    if permanent_dir:
        config = replace(config, permanent_dir=Path(permanent_dir).expanduser().resolve())
    configure_logging(config.log_level)
    return PathKeyedJsonStore(config)


def _run_get_command(store: PathKeyedJsonStore, args: argparse.Namespace) -> int:
    """Print the stored value, or exit 1 when nothing is stored."""
    value = store.get(args.identifier)
    if value is None and not store.exists(args.identifier):
        return 1
    print(json.dumps(value, indent=2, ensure_ascii=False))
    return 0


def _run_exists_command(store: PathKeyedJsonStore, args: argparse.Namespace) -> int:
    stored = store.exists(args.identifier)
    print(str(stored).lower())
    return 0 if stored else 1


def _run_resolve_command(store: PathKeyedJsonStore, args: argparse.Namespace) -> int:
    """Print the storage location for an identifier without touching disk."""
    location = store.location_for(args.identifier)
    if location is None:
        print("invalid")
        return 1
    print(location)
    return 0


def _add_get_command(subparsers: Any) -> None:
    """Register get subcommand."""
    parser = subparsers.add_parser("get", help="Print the value stored under an identifier")
    parser.add_argument("identifier", help="Slash-separated identifier")


def _add_exists_command(subparsers: Any) -> None:
    """Register exists subcommand."""
    parser = subparsers.add_parser("exists", help="Check whether a value is stored")
    parser.add_argument("identifier", help="Slash-separated identifier")


def _add_resolve_command(subparsers: Any) -> None:
    """Register resolve subcommand."""
    parser = subparsers.add_parser("resolve", help="Show the file an identifier maps to")
    parser.add_argument("identifier", help="Slash-separated identifier")
