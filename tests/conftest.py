"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_store_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host JSONSTORE_* variables from leaking into tests."""
    for name in (
        "JSONSTORE_PERMANENT_DIR",
        "JSONSTORE_DIR_NAME",
        "JSONSTORE_INDENT",
        "JSONSTORE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _bind_logging_to_current_stderr() -> None:
    """Rebind structlog output to the stream pytest installed for this test."""
    from core.logging_config import configure_logging

    configure_logging()
