"""Unit tests for JSON encoding and decoding rules."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from core.errors import JsonStoreDecodeError, JsonStoreSerializationError
from core.types import RawJson
from store.json_codec import decode_json, encode_json, to_epoch_millis


@dataclass(frozen=True)
class _Item:
    name: str
    tags: tuple[str, ...]


def test_encode_datetime_as_epoch_millis() -> None:
    """Aware datetimes should serialize as integer epoch milliseconds."""
    moment = datetime(2020, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)

    text = encode_json({"at": moment})

    assert json.loads(text) == {"at": 1577836801500}


def test_naive_datetime_is_taken_as_utc() -> None:
    """Naive datetimes should convert as if they were UTC."""
    assert to_epoch_millis(datetime(1970, 1, 2)) == 86_400_000


def test_date_maps_to_midnight_utc() -> None:
    """Plain dates should convert to midnight UTC."""
    assert to_epoch_millis(date(1970, 1, 3)) == 2 * 86_400_000


def test_encode_dataclass_and_set() -> None:
    """Dataclasses should become objects and sets become arrays."""
    text = encode_json({"item": _Item(name="n", tags=("a",)), "ids": {7}})

    assert json.loads(text) == {"item": {"name": "n", "tags": ["a"]}, "ids": [7]}


def test_encode_raw_json_fragment() -> None:
    """RawJson fragments should be embedded as parsed JSON."""
    text = encode_json({"raw": RawJson('{"k": [1, 2]}')})

    assert json.loads(text) == {"raw": {"k": [1, 2]}}


def test_encode_rejects_invalid_raw_json() -> None:
    """RawJson text that is not JSON should fail serialization."""
    with pytest.raises(JsonStoreSerializationError):
        encode_json(RawJson("{not json"))


@pytest.mark.parametrize("value", [object(), float("nan"), {("a", "b"): 1}])
def test_encode_rejects_unsupported_values(value: object) -> None:
    """Unsupported types, NaN, and tuple keys should raise serialization errors."""
    with pytest.raises(JsonStoreSerializationError):
        encode_json(value)


def test_encode_rejects_circular_reference() -> None:
    """Self-referencing structures should raise serialization errors."""
    payload: list[object] = []
    payload.append(payload)

    with pytest.raises(JsonStoreSerializationError):
        encode_json(payload)


def test_encode_keeps_unicode_readable() -> None:
    """Non-ASCII text should be written as UTF-8, not escaped."""
    assert encode_json("héllo") == '"héllo"'


def test_encode_honors_indent() -> None:
    """Indent should pretty-print nested structures."""
    assert encode_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'


def test_decode_preserves_object_order() -> None:
    """Decoded objects should keep document key order."""
    value = decode_json(b'{"b": 1, "a": 2}', Path("x.json"))

    assert isinstance(value, dict) and list(value) == ["b", "a"]


def test_decode_rejects_malformed_json() -> None:
    """Malformed content should raise a decode error naming the file."""
    with pytest.raises(JsonStoreDecodeError, match="broken.json"):
        decode_json(b"{", Path("broken.json"))


def test_decode_rejects_invalid_utf8() -> None:
    """Non-UTF-8 bytes should raise a decode error."""
    with pytest.raises(JsonStoreDecodeError):
        decode_json(b"\xff\xfe", Path("x.json"))


def test_decode_rejects_nan_constant() -> None:
    """Non-standard constants like NaN should raise a decode error."""
    with pytest.raises(JsonStoreDecodeError):
        decode_json(b"[NaN]", Path("x.json"))


def test_encode_rejects_lone_surrogate() -> None:
    """Strings that cannot be written as UTF-8 should fail serialization."""
    with pytest.raises(JsonStoreSerializationError):
        encode_json({"s": "\ud800"})


def test_encode_rejects_excessive_nesting() -> None:
    """Values nested beyond the recursion limit should fail serialization."""
    value: list[object] = []
    for _ in range(100_000):
        value = [value]

    with pytest.raises(JsonStoreSerializationError):
        encode_json(value)


def test_decode_rejects_excessive_nesting() -> None:
    """Stored documents nested beyond the recursion limit should raise a decode error."""
    payload = b"[" * 100_000 + b"]" * 100_000

    with pytest.raises(JsonStoreDecodeError, match="nested too deeply"):
        decode_json(payload, Path("deep.json"))
