"""JSON encoding and decoding for stored values.

This module isolates serialization rules from the store's file handling.
Dates degrade to epoch milliseconds on write and are never restored on
read, so a round-trip of a date yields its numeric representation.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import Any

from core.constants import TEXT_ENCODING
from core.errors import JsonStoreDecodeError, JsonStoreSerializationError
from core.types import JsonValue, RawJson

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def encode_json(value: object, indent: int | None = None) -> str:
    """Serialize a value into JSON text.

    Args:
        value: JSON-compatible value, optionally containing dates,
            dataclasses, sets, or RawJson fragments.
        indent: Optional pretty-print indent.

    Returns:
        JSON document text.

    Raises:
        JsonStoreSerializationError: If the value graph cannot be encoded.
    """
    try:
        text = json.dumps(
            value,
            default=_encode_extended,
            allow_nan=False,
            ensure_ascii=False,
            indent=indent,
        )
        text.encode(TEXT_ENCODING)
    except (TypeError, ValueError, RecursionError) as error:
        raise JsonStoreSerializationError(
            f"Failed to serialize value of type {type(value).__name__} as JSON: {error}. "
            "Pass JSON-compatible data (mappings with string keys, sequences, scalars)."
        ) from error
    return text


def decode_json(payload: bytes, location: Path) -> JsonValue:
    """Parse stored bytes into a generic JSON value tree.

    Args:
        payload: Raw file content.
        location: Storage file the payload came from, for diagnostics.

    Returns:
        Decoded value.

    Raises:
        JsonStoreDecodeError: If the payload is not UTF-8 JSON.
    """
    try:
        text = payload.decode(TEXT_ENCODING)
    except UnicodeDecodeError as error:
        raise JsonStoreDecodeError(
            f"Stored value at {location} is not valid UTF-8: {error}. "
            "Overwrite the value or remove the file."
        ) from error
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise JsonStoreDecodeError(
            f"Failed to parse stored JSON at {location}: {error.msg} "
            f"(line {error.lineno}, column {error.colno}). "
            "Overwrite the value or remove the file."
        ) from error
    except ValueError as error:
        raise JsonStoreDecodeError(
            f"Failed to parse stored JSON at {location}: {error}. "
            "Overwrite the value or remove the file."
        ) from error
    except RecursionError as error:
        raise JsonStoreDecodeError(
            f"Stored JSON at {location} is nested too deeply to parse. "
            "Overwrite the value with a flatter document or remove the file."
        ) from error


def to_epoch_millis(value: date) -> int:
    """Convert a date or datetime into integer epoch milliseconds.

    Naive datetimes are taken as UTC; plain dates map to midnight UTC.
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime.combine(value, time(), tzinfo=timezone.utc)
    return (moment - _EPOCH) // _ONE_MILLISECOND


def _encode_extended(value: Any) -> Any:
    """json.dumps hook for types outside the plain JSON model."""
    if isinstance(value, RawJson):
        return _parse_raw_fragment(value)
    if isinstance(value, date):
        return to_epoch_millis(value)
    if is_dataclass(value) and not isinstance(value, type):
        return {item.name: getattr(value, item.name) for item in fields(value)}
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _parse_raw_fragment(fragment: RawJson) -> Any:
    try:
        return json.loads(fragment.text, parse_constant=_reject_constant)
    except ValueError as error:
        raise ValueError(f"RawJson fragment is not valid JSON: {error}") from error


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")
