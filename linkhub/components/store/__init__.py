"""
Store component - Canonical application state, mutations and change events.
"""

from .component import StateStore, default_state
from .models import ChangeKind, LinkRef, StateChange
from .ports import PersistFailureHandler, StateListener

__all__ = [
    "StateStore",
    "default_state",
    "ChangeKind",
    "StateChange",
    "LinkRef",
    "StateListener",
    "PersistFailureHandler",
]
