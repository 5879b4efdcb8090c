"""Path-keyed JSON store.

This module persists JSON documents as files under one store root,
one file per identifier. It owns the overwrite policy and atomic writes.
"""

from __future__ import annotations

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from core.config import JsonStoreConfig
from core.constants import TEMP_FILE_SUFFIX, TEXT_ENCODING
from core.errors import JsonStoreIOError
from core.logging_config import get_logger
from core.types import JsonValue
from store.json_codec import decode_json, encode_json
from store.path_resolution import resolve_storage_location

_LOGGER = get_logger(__name__)


class JsonStore(ABC):
    """Contract for stores keyed by slash-separated identifiers."""

    @abstractmethod
    def put(self, value: object, identifier: str, force_overwrite: bool = False) -> bool:
        """Persist a value as JSON under an identifier.

        Returns:
            True when the value was written; False for an invalid
            identifier, an existing value without force_overwrite, or a
            failure to create parent directories.
        """

    @abstractmethod
    def get(self, identifier: str) -> JsonValue | None:
        """Return the parsed value stored under an identifier, or None."""

    @abstractmethod
    def exists(self, identifier: str) -> bool:
        """Return whether anything is stored under an identifier."""


class PathKeyedJsonStore(JsonStore):
    """Filesystem JSON store rooted at the configured store directory.

    Identifier ``"mydata/category/item"`` maps to
    ``<store root>/mydata/category/item.json``. Writes go through a temp
    file and rename so readers never see partial content.

    ``put(..., force_overwrite=False)`` checks existence before writing
    without any lock, so two concurrent first writers may both succeed
    and the last rename wins.
    """

    def __init__(self, config: JsonStoreConfig) -> None:
        """Initialize store from config.

        Args:
            config: Runtime configuration.
        """
        self._config = config
        self._storage_root: Path | None = None

    @property
    def storage_root(self) -> Path:
        """Store root directory, resolved on first use."""
        if self._storage_root is None:
            self._storage_root = self._config.store_root
        return self._storage_root

    def location_for(self, identifier: str) -> Path | None:
        """Return the storage file for an identifier, or None if invalid."""
        return resolve_storage_location(identifier, self.storage_root)

    def put(self, value: object, identifier: str, force_overwrite: bool = False) -> bool:
        """Serialize a value as JSON and store it under an identifier.

        Args:
            value: Value to store; None is stored as JSON null.
            identifier: Slash-separated identifier.
            force_overwrite: Replace an existing value when True.

        Returns:
            Whether the write happened.

        Raises:
            JsonStoreSerializationError: If value cannot be encoded.
            JsonStoreIOError: If the filesystem rejects the write.
        """
        location = self.location_for(identifier)
        if location is None:
            _LOGGER.debug("json_store_put_invalid_identifier", identifier=identifier)
            return False
        if self._entry_exists(location) and not force_overwrite:
            _LOGGER.debug(
                "json_store_write_refused",
                identifier=identifier,
                location=str(location),
            )
            return False
        payload = encode_json(value, indent=self._config.indent)
        if not _ensure_parent_dir(location):
            _LOGGER.error(
                "json_store_parent_dir_failed",
                identifier=identifier,
                location=str(location),
            )
            return False
        _atomic_write_text(location, payload)
        _LOGGER.debug(
            "json_store_value_written",
            identifier=identifier,
            location=str(location),
            force_overwrite=force_overwrite,
        )
        return True

    def get(self, identifier: str) -> JsonValue | None:
        """Fetch and parse the value stored under an identifier.

        A stored JSON null also reads as None; use exists() to tell it
        apart from absence.

        Args:
            identifier: Slash-separated identifier.

        Returns:
            Parsed value, or None when the identifier is invalid or
            nothing is stored.

        Raises:
            JsonStoreDecodeError: If stored content is not valid JSON.
            JsonStoreIOError: If the stored file cannot be read.
        """
        location = self.location_for(identifier)
        if location is None:
            _LOGGER.debug("json_store_get_invalid_identifier", identifier=identifier)
            return None
        try:
            payload = location.read_bytes()
        except (FileNotFoundError, NotADirectoryError):
            _LOGGER.debug("json_store_value_missing", identifier=identifier)
            return None
        except OSError as error:
            raise JsonStoreIOError(
                f"Failed to read stored value at {location}: {error}. "
                "Check store directory permissions and retry."
            ) from error
        return decode_json(payload, location)

    def exists(self, identifier: str) -> bool:
        """Return whether a value is stored, without reading it.

        Corrupt or empty files still count as stored.

        Raises:
            JsonStoreIOError: If the location cannot be inspected.
        """
        location = self.location_for(identifier)
        if location is None:
            _LOGGER.debug("json_store_exists_invalid_identifier", identifier=identifier)
            return False
        return self._entry_exists(location)

    def _entry_exists(self, location: Path) -> bool:
        try:
            os.lstat(location)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as error:
            raise JsonStoreIOError(
                f"Failed to inspect storage location {location}: {error}. "
                "Check store directory permissions and retry."
            ) from error
        return True


def _ensure_parent_dir(location: Path) -> bool:
    """Create missing parent directories for a storage file.

    Args:
        location: Storage file path.

    Returns:
        Whether the parent directory exists afterwards.
    """
    try:
        location.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return location.parent.is_dir()


def _atomic_write_text(location: Path, payload: str) -> None:
    """Write text through a sibling temp file and an atomic rename.

    Args:
        location: Destination storage file.
        payload: Text content.

    Raises:
        JsonStoreIOError: If writing or renaming fails.
    """
    try:
        fd, temp_path = tempfile.mkstemp(
            dir=str(location.parent),
            prefix=f".{location.name}.",
            suffix=TEMP_FILE_SUFFIX,
        )
    except OSError as error:
        raise JsonStoreIOError(
            f"Failed to create temp file next to {location}: {error}. "
            "Check disk space and store directory permissions."
        ) from error
    try:
        with os.fdopen(fd, "w", encoding=TEXT_ENCODING) as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, location)
    except OSError as error:
        raise JsonStoreIOError(
            f"Failed to write stored value at {location}: {error}. "
            "Check disk space and store directory permissions."
        ) from error
    finally:
        # no-op after a successful replace
        if os.path.exists(temp_path):
            os.unlink(temp_path)
