"""
Persistence component - Stores the application document in a key-value store.
"""

from .component import DEFAULT_STORAGE_KEY, StatePersistence, StoredDocumentError
from .ports import KeyValueStorePort

__all__ = [
    "StatePersistence",
    "StoredDocumentError",
    "DEFAULT_STORAGE_KEY",
    "KeyValueStorePort",
]
