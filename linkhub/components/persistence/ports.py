"""
Persistence component - Port interfaces.
"""

from linkhub.core.ports.storage import KeyValueStorePort

__all__ = ["KeyValueStorePort"]
