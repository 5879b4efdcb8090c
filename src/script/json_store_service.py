"""Permission-gated JSON store service for scripts.

Every operation requires programming rights and never raises: store
errors are logged and replaced with a default result.
"""

from __future__ import annotations

from core.config import JsonStoreConfig
from core.constants import SCRIPT_SERVICE_HINT
from core.errors import JsonStoreError
from core.logging_config import get_logger
from core.types import AccessPolicy, JsonValue
from store.json_store import JsonStore, PathKeyedJsonStore

_LOGGER = get_logger(__name__)


class JsonStoreScriptService:
    """Script API over a JsonStore.

    Args:
        store: Store implementation to delegate to.
        access_policy: Decides whether the current caller may use the store.
        hint: Name the service is registered under in the host.
    """

    def __init__(
        self,
        store: JsonStore,
        access_policy: AccessPolicy,
        hint: str = SCRIPT_SERVICE_HINT,
    ) -> None:
        self._store = store
        self._access_policy = access_policy
        self.hint = hint

    def persist_as_json(
        self,
        data: object,
        identifier: str,
        force_overwrite: bool = False,
    ) -> bool:
        """Store data as JSON under an identifier.

        Args:
            data: Value to store. None is never persisted.
            identifier: Slash-separated identifier.
            force_overwrite: Replace an existing value when True.

        Returns:
            Whether the write happened. False when rights are missing,
            data is None, the identifier is taken or invalid, or the
            store failed (the failure is logged).
        """
        if not self._allowed("persist_as_json", identifier):
            return False
        if data is None:
            _LOGGER.debug("json_store_service_null_data", identifier=identifier)
            return False
        try:
            return self._store.put(data, identifier, force_overwrite)
        except JsonStoreError as error:
            _LOGGER.warning(
                "json_store_service_write_failed",
                identifier=identifier,
                error=str(error),
                error_type=type(error).__name__,
            )
            return False

    def get_from_json_store(self, identifier: str) -> JsonValue | None:
        """Fetch the parsed value stored under an identifier.

        Returns:
            Parsed value, or None when nothing is stored, rights are
            missing, or reading/parsing failed (the failure is logged).
        """
        if not self._allowed("get_from_json_store", identifier):
            return None
        try:
            return self._store.get(identifier)
        except JsonStoreError as error:
            _LOGGER.warning(
                "json_store_service_read_failed",
                identifier=identifier,
                error=str(error),
                error_type=type(error).__name__,
            )
            return None

    def exists(self, identifier: str, default_if_exception: bool = False) -> bool:
        """Check whether a value is stored, without reading it.

        Args:
            identifier: Slash-separated identifier.
            default_if_exception: Result to return when the store fails.

        Returns:
            Whether a value is stored; False when rights are missing.
        """
        if not self._allowed("exists", identifier):
            return False
        try:
            return self._store.exists(identifier)
        except JsonStoreError as error:
            _LOGGER.warning(
                "json_store_service_exists_failed",
                identifier=identifier,
                error=str(error),
                error_type=type(error).__name__,
            )
            return default_if_exception

    def _allowed(self, operation: str, identifier: str) -> bool:
        if self._access_policy.has_programming_rights():
            return True
        _LOGGER.warning(
            "json_store_service_access_denied",
            operation=operation,
            identifier=identifier,
            service=self.hint,
        )
        return False


def build_script_service(
    config: JsonStoreConfig,
    access_policy: AccessPolicy,
) -> JsonStoreScriptService:
    """Wire a script service over a filesystem store built from config."""
    return JsonStoreScriptService(PathKeyedJsonStore(config), access_policy)
