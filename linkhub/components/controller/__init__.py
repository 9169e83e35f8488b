"""
Controller component - User actions, transient UI state and notifications.
"""

from .component import (
    MSG_CONFIRM_REMOVE,
    MSG_EXPORT_FAILED,
    MSG_EXPORTED,
    MSG_IMPORT_FAILED,
    MSG_IMPORT_INVALID,
    MSG_IMPORTED,
    MSG_LINK_ADDED,
    MSG_LINK_REMOVED,
    MSG_PROFILE_SAVED,
    MSG_SAVE_FAILED,
    LinkHubController,
)
from .models import TransientUIState
from .ports import ConfirmPort, UIStateListener

__all__ = [
    "LinkHubController",
    "TransientUIState",
    "ConfirmPort",
    "UIStateListener",
    # Messages
    "MSG_LINK_ADDED",
    "MSG_CONFIRM_REMOVE",
    "MSG_LINK_REMOVED",
    "MSG_PROFILE_SAVED",
    "MSG_EXPORTED",
    "MSG_EXPORT_FAILED",
    "MSG_IMPORTED",
    "MSG_IMPORT_INVALID",
    "MSG_IMPORT_FAILED",
    "MSG_SAVE_FAILED",
]
