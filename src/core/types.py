"""Shared typed models.

This module defines the value model read back from the store and the
small contracts shared by the store, script service, and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Protocol, Union

JsonValue = Union[None, bool, int, float, str, List["JsonValue"], Dict[str, "JsonValue"]]
"""Generic JSON value tree returned by reads.

Objects decode to insertion-ordered dicts and arrays to lists.
"""


@dataclass(frozen=True)
class RawJson:
    """Pre-serialized JSON text embedded verbatim when persisting.

    Attributes:
        text: JSON document text; must parse as valid JSON.
    """

    text: str


class AccessPolicy(Protocol):
    """Authorization contract consulted by the script service."""

    def has_programming_rights(self) -> bool: ...


@dataclass(frozen=True)
class StaticAccessPolicy:
    """Access policy returning a fixed decision.

    Attributes:
        allowed: Whether callers hold programming rights.
    """

    allowed: bool

    def has_programming_rights(self) -> bool:
        """Return the configured decision."""
        return self.allowed
