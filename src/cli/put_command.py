"""Put command wiring for the jsonstore CLI."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import yaml

from core.constants import TEXT_ENCODING, YAML_FILE_EXTENSIONS
from core.errors import JsonStoreInputError
from store.json_store import JsonStore


def add_put_command(subparsers: Any) -> None:
    """Register put subcommand."""
    parser = subparsers.add_parser("put", help="Store a JSON value under an identifier")
    parser.add_argument("identifier", help="Slash-separated identifier, e.g. mydata/item")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--value", help="Inline JSON text to store")
    source.add_argument("--file", help="Path to a .json, .yaml, or .yml file to store")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite a value already stored under the identifier",
    )


def run_put_command(store: JsonStore, args: argparse.Namespace) -> int:
    """Store the requested value and report whether it was written."""
    value = load_input_value(args.value, args.file)
    written = store.put(value, args.identifier, args.force)
    print(f"written={str(written).lower()}")
    return 0 if written else 1


def load_input_value(inline_value: str | None, file_path: str | None) -> object:
    """Load the value to store from inline JSON or a JSON/YAML file.

    Args:
        inline_value: JSON text given on the command line.
        file_path: Path to a JSON or YAML document.

    Returns:
        Parsed value.

    Raises:
        JsonStoreInputError: If the input cannot be read or parsed.
    """
    if inline_value is not None:
        return _parse_json_text(inline_value, "--value")
    if file_path is None:
        raise JsonStoreInputError("Provide either --value or --file for put.")
    source_file = Path(file_path).expanduser().resolve()
    try:
        text = source_file.read_text(encoding=TEXT_ENCODING)
    except OSError as error:
        raise JsonStoreInputError(
            f"Failed to read input file at {source_file}: {error}. "
            "Check the path and file permissions."
        ) from error
    if source_file.suffix.lower() in YAML_FILE_EXTENSIONS:
        return _parse_yaml_text(text, source_file)
    return _parse_json_text(text, str(source_file))


def _parse_json_text(text: str, source: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise JsonStoreInputError(
            f"Failed to parse JSON from {source}: {error.msg}. Fix the JSON syntax and retry."
        ) from error


def _parse_yaml_text(text: str, source_file: Path) -> object:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise JsonStoreInputError(
            f"Failed to parse YAML input at {source_file}: {error}. Fix YAML syntax and retry."
        ) from error
