"""
Store component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from linkhub.core.ports.storage import StorageWriteError

from .models import StateChange


class StateListener(Protocol):
    """Receives change events (re-render hook)."""

    def __call__(self, change: StateChange) -> None: ...


class PersistFailureHandler(Protocol):
    """Told when a persistence write failed; state stays in memory."""

    def __call__(self, error: StorageWriteError) -> None: ...
