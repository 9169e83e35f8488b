"""
Notify component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from linkhub.domain.entities import NotificationKind


@dataclass(frozen=True)
class Notification:
    message: str
    kind: NotificationKind
    shown_at: datetime
    expires_at: datetime
