"""Integration tests for concurrent forced writes to one identifier."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from core.config import JsonStoreConfig
from store.json_store import PathKeyedJsonStore


def test_concurrent_forced_writes_never_tear(tmp_path) -> None:
    """Concurrent forced writers all succeed and the result is one whole input."""
    store = PathKeyedJsonStore(JsonStoreConfig(permanent_dir=tmp_path))
    payloads = [{"writer": index, "blob": "x" * 50_000} for index in range(8)]

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda item: store.put(item, "shared/key", True), payloads))

    assert all(results) and store.get("shared/key") in payloads


def test_concurrent_readers_see_complete_values(tmp_path) -> None:
    """Readers racing a writer should only observe complete documents."""
    store = PathKeyedJsonStore(JsonStoreConfig(permanent_dir=tmp_path))
    first = {"version": 0, "blob": "a" * 50_000}
    second = {"version": 1, "blob": "b" * 50_000}
    store.put(first, "racy", True)

    def _write() -> bool:
        return store.put(second, "racy", True)

    with ThreadPoolExecutor(max_workers=4) as executor:
        write_future = executor.submit(_write)
        reads = [executor.submit(store.get, "racy") for _ in range(20)]
        observed = [future.result() for future in reads]

    assert write_future.result() and all(value in (first, second) for value in observed)
