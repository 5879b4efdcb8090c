"""Runtime configuration model for jsonstore.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    CURRENT_DIR_SEGMENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PERMANENT_DIR,
    DEFAULT_STORE_DIR_NAME,
    PARENT_DIR_SEGMENT,
    PATH_SEPARATOR,
    SUPPORTED_LOG_LEVELS,
    WINDOWS_PATH_SEPARATOR,
)
from core.errors import JsonStoreConfigError


@dataclass(frozen=True)
class JsonStoreConfig:
    """Validated runtime configuration.

    Attributes:
        permanent_dir: Host directory that survives restarts.
        store_dir_name: Folder under permanent_dir holding stored values.
        indent: Optional indent for written JSON; compact when None.
        log_level: Logging threshold name.
    """

    permanent_dir: Path
    store_dir_name: str = DEFAULT_STORE_DIR_NAME
    indent: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def store_root(self) -> Path:
        """Directory under which every stored value lives."""
        return self.permanent_dir / self.store_dir_name

    @classmethod
    def from_env(cls) -> "JsonStoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            JsonStoreConfigError: If environment values are invalid.
        """
        permanent_dir_value = os.getenv("JSONSTORE_PERMANENT_DIR", str(DEFAULT_PERMANENT_DIR))
        store_dir_name = _parse_store_dir_name(
            os.getenv("JSONSTORE_DIR_NAME", DEFAULT_STORE_DIR_NAME)
        )
        indent = _parse_indent(os.getenv("JSONSTORE_INDENT"))
        log_level = _parse_log_level(os.getenv("JSONSTORE_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            permanent_dir=Path(permanent_dir_value).expanduser().resolve(),
            store_dir_name=store_dir_name,
            indent=indent,
            log_level=log_level,
        )


def _parse_store_dir_name(raw_value: str) -> str:
    """Validate the store folder name.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Folder name usable as one path segment.

    Raises:
        JsonStoreConfigError: If value is empty or spans several segments.
    """
    value = raw_value.strip()
    if (
        not value
        or value in (CURRENT_DIR_SEGMENT, PARENT_DIR_SEGMENT)
        or PATH_SEPARATOR in value
        or WINDOWS_PATH_SEPARATOR in value
    ):
        raise JsonStoreConfigError(
            f"Invalid JSONSTORE_DIR_NAME value: '{raw_value}'. "
            "Set JSONSTORE_DIR_NAME to a single folder name without separators."
        )
    return value


def _parse_indent(raw_value: str | None) -> int | None:
    """Parse the optional JSON indent environment value.

    Args:
        raw_value: Raw string from environment, or None when unset.

    Returns:
        Parsed indent, or None for compact output.

    Raises:
        JsonStoreConfigError: If value is not a non-negative integer.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        indent = int(raw_value)
    except ValueError as error:
        raise JsonStoreConfigError(
            "Invalid JSONSTORE_INDENT value: "
            f"expected integer, got '{raw_value}'. "
            "Set JSONSTORE_INDENT to a non-negative number or unset it."
        ) from error
    if indent < 0:
        raise JsonStoreConfigError(
            f"Invalid JSONSTORE_INDENT value: {indent} is negative. "
            "Set JSONSTORE_INDENT to a non-negative number or unset it."
        )
    return indent


def _parse_log_level(raw_value: str) -> str:
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise JsonStoreConfigError(
            f"Invalid JSONSTORE_LOG_LEVEL value: '{raw_value}'. "
            f"Use one of {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level
