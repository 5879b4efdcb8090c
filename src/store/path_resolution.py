"""Identifier to storage location resolution.

This module turns caller identifiers into relative paths that can never
leave the store root. It is pure path arithmetic and never touches disk.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from core.constants import (
    CURRENT_DIR_SEGMENT,
    JSON_FILE_EXTENSION,
    PARENT_DIR_SEGMENT,
    PATH_SEPARATOR,
    WINDOWS_PATH_SEPARATOR,
)
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def normalize_identifier(identifier: object) -> PurePosixPath | None:
    """Normalize an identifier into a safe relative path.

    Backslashes count as separators, leading separators are dropped so the
    identifier is always relative, and "." and empty segments collapse.
    A ".." segment removes the previous segment.

    Args:
        identifier: Caller-supplied identifier, e.g. "mydata/category/item".

    Returns:
        Normalized relative path, or None when the identifier is not a
        string, is empty, traverses above the root, or contains NUL.
    """
    if not isinstance(identifier, str) or not identifier:
        return None
    if "\x00" in identifier:
        _LOGGER.warning("identifier_nul_rejected", identifier=identifier)
        return None
    segments: list[str] = []
    unified = identifier.replace(WINDOWS_PATH_SEPARATOR, PATH_SEPARATOR)
    for segment in unified.split(PATH_SEPARATOR):
        if not segment or segment == CURRENT_DIR_SEGMENT:
            continue
        if segment == PARENT_DIR_SEGMENT:
            if not segments:
                _LOGGER.warning("identifier_traversal_rejected", identifier=identifier)
                return None
            segments.pop()
            continue
        segments.append(segment)
    if not segments:
        _LOGGER.debug("identifier_empty_after_normalization", identifier=identifier)
        return None
    return PurePosixPath(*segments)


def resolve_storage_location(identifier: object, base_dir: Path) -> Path | None:
    """Resolve an identifier into its storage file under base_dir.

    Args:
        identifier: Caller-supplied identifier.
        base_dir: Store root directory.

    Returns:
        ``base_dir/<normalized identifier>.json``, or None when the
        identifier is invalid.
    """
    relative_path = normalize_identifier(identifier)
    if relative_path is None:
        return None
    file_name = relative_path.name + JSON_FILE_EXTENSION
    return base_dir.joinpath(*relative_path.parent.parts, file_name)
