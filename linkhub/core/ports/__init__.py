# LinkHub - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from linkhub.core.ports.storage import (
    KeyValueStorePort,
    StorageError,
    StorageWriteError,
)
from linkhub.core.ports.time import TimePort

__all__ = [
    # Storage
    "KeyValueStorePort",
    "StorageError",
    "StorageWriteError",
    # Time
    "TimePort",
]
