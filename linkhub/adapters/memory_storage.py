"""In-memory key-value store adapter.

Implements KeyValueStorePort for tests and throwaway sessions.
"""

from linkhub.core.ports.storage import StorageWriteError


class InMemoryKeyValueStore:
    """In-memory storage; optional quota mimics a browser storage limit."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._values: dict[str, str] = {}
        self.quota_bytes = quota_bytes
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota_bytes is not None and len(value.encode("utf-8")) > self.quota_bytes:
            raise StorageWriteError(key, "quota exceeded")
        self._values[key] = value
        self.writes += 1

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def clear(self) -> None:
        """Clear all values - useful for testing."""
        self._values.clear()
