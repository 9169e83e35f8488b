"""
Persistence component - One serialized document under a fixed key.

Shell Layer - handles storage I/O and JSON (de)serialization.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .ports import KeyValueStorePort

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "linktree-data"


class StoredDocumentError(ValueError):
    """The stored value is not a JSON object."""


class StatePersistence:
    """
    Reads and writes the application document.

    The stored value is compact JSON; the shape is the same as the
    export file so the two stay interchangeable.
    """

    def __init__(self, store: KeyValueStorePort, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self.key = key

    def load(self) -> dict[str, Any] | None:
        """
        Return the stored document, or None when nothing is stored.

        Raises:
            StoredDocumentError: If the stored value is not a JSON object
        """
        raw = self._store.get(self.key)
        if raw is None:
            return None
        try:
            doc = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoredDocumentError(f"Stored data under '{self.key}' is not JSON: {e}") from e
        if not isinstance(doc, dict):
            raise StoredDocumentError(f"Stored data under '{self.key}' is not an object")
        return doc

    def save(self, document: dict[str, Any]) -> None:
        """
        Write the document.

        Raises:
            StorageWriteError: If the store rejects the write
        """
        self._store.set(self.key, json.dumps(document, ensure_ascii=False))
        logger.debug(f"Saved state under '{self.key}'")

    def clear(self) -> None:
        self._store.remove(self.key)
        logger.info(f"Cleared stored state under '{self.key}'")
