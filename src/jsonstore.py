"""Public API surface for jsonstore.

This module provides a stable import path for embedding applications.
It re-exports the store, script service, config, and error types.
"""

from __future__ import annotations

from core.config import JsonStoreConfig
from core.errors import (
    JsonStoreConfigError,
    JsonStoreDecodeError,
    JsonStoreError,
    JsonStoreIOError,
    JsonStoreSerializationError,
)
from core.logging_config import configure_logging
from core.types import AccessPolicy, JsonValue, RawJson, StaticAccessPolicy
from script.json_store_service import JsonStoreScriptService, build_script_service
from store.json_store import JsonStore, PathKeyedJsonStore
from store.path_resolution import normalize_identifier, resolve_storage_location

__all__ = [
    "AccessPolicy",
    "JsonStore",
    "JsonStoreConfig",
    "JsonStoreConfigError",
    "JsonStoreDecodeError",
    "JsonStoreError",
    "JsonStoreIOError",
    "JsonStoreScriptService",
    "JsonStoreSerializationError",
    "JsonValue",
    "PathKeyedJsonStore",
    "RawJson",
    "StaticAccessPolicy",
    "build_script_service",
    "configure_logging",
    "normalize_identifier",
    "resolve_storage_location",
]
