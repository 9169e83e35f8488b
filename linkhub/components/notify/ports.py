"""
Notify component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from .models import Notification


class NotificationSink(Protocol):
    """Displays a notification (toast, console line, ...)."""

    def show(self, notification: Notification) -> None: ...


class NotifierPort(Protocol):
    """Fire-and-forget notification entry point used by the controller."""

    def notify(self, message: str, kind: str = "info") -> Notification: ...
