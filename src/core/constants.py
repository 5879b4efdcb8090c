"""Core constants used across jsonstore modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_PERMANENT_DIR = Path(".jsonstore")
DEFAULT_STORE_DIR_NAME = "jsonstore"
DEFAULT_LOG_LEVEL = "INFO"
PATH_SEPARATOR = "/"
WINDOWS_PATH_SEPARATOR = "\\"
CURRENT_DIR_SEGMENT = "."
PARENT_DIR_SEGMENT = ".."
JSON_FILE_EXTENSION = ".json"
TEMP_FILE_SUFFIX = ".tmp"
TEXT_ENCODING = "utf-8"
SCRIPT_SERVICE_HINT = "jsonstore.permdir"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
YAML_FILE_EXTENSIONS = (".yaml", ".yml")
