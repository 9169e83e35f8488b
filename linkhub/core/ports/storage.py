"""
Key-value storage port.

Synchronous string store with one value per key, mirroring a browser's
per-origin local storage. Implementations: flet client storage (app),
JSON file (CLI), in-memory (tests).
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStorePort(Protocol):
    """
    Synchronous key-value store interface.

    Values are opaque strings; callers own serialization.
    """

    def get(self, key: str) -> str | None:
        """Return the value under key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """
        Store value under key, replacing any previous value.

        Raises:
            StorageWriteError: If the store refuses the write (e.g. quota)
        """
        ...

    def remove(self, key: str) -> None:
        """Remove key if present."""
        ...


class StorageError(Exception):
    """Base class for storage errors."""


class StorageWriteError(StorageError):
    """Raised when a value could not be written."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Could not write '{key}': {reason}")
