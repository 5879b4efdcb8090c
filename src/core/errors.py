"""jsonstore exception hierarchy.

Expected negative outcomes (invalid identifier, nothing stored, refused
overwrite) are plain return values. These types cover the genuinely
exceptional conditions each layer reports.
"""

from __future__ import annotations


class JsonStoreError(Exception):
    """Base exception for all jsonstore failures."""


class JsonStoreConfigError(JsonStoreError):
    """Raised for invalid runtime configuration."""


class JsonStoreSerializationError(JsonStoreError):
    """Raised when a value cannot be converted to JSON."""


class JsonStoreDecodeError(JsonStoreError):
    """Raised when stored content is not valid JSON."""


class JsonStoreIOError(JsonStoreError):
    """Raised for underlying filesystem failures."""


class JsonStoreInputError(JsonStoreError):
    """Raised for invalid command line input values."""
