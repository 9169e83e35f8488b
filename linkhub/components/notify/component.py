"""
Notify component - One active notification at a time.

A new notification replaces the active one. Expiry is computed from the
injected clock, so no timer thread is needed to know what is visible.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import get_args

from linkhub.core.ports.time import TimePort
from linkhub.domain.entities import NotificationKind

from .models import Notification
from .ports import NotificationSink

logger = logging.getLogger(__name__)

NOTIFICATION_KINDS: tuple[str, ...] = get_args(NotificationKind)
DEFAULT_DURATION_SECONDS = 3.0


class NotificationCenter:
    def __init__(
        self,
        clock: TimePort,
        duration_seconds: float = DEFAULT_DURATION_SECONDS,
        sinks: list[NotificationSink] | None = None,
    ) -> None:
        self._clock = clock
        self.duration = timedelta(seconds=duration_seconds)
        self._sinks: list[NotificationSink] = list(sinks or [])
        self._current: Notification | None = None

    def add_sink(self, sink: NotificationSink) -> None:
        self._sinks.append(sink)

    def notify(self, message: str, kind: str = "info") -> Notification:
        if kind not in NOTIFICATION_KINDS:
            logger.warning(f"Unknown notification kind '{kind}', using 'info'")
            kind = "info"
        now = self._clock.now_utc()
        notification = Notification(
            message=message,
            kind=kind,  # type: ignore[arg-type]
            shown_at=now,
            expires_at=now + self.duration,
        )
        self._current = notification
        log = logger.error if kind == "error" else logger.info
        log(f"[{kind}] {message}")
        for sink in self._sinks:
            sink.show(notification)
        return notification

    def active(self) -> Notification | None:
        """The visible notification, or None once it has expired."""
        if self._current is None:
            return None
        if self._clock.now_utc() >= self._current.expires_at:
            self._current = None
        return self._current

    def dismiss(self) -> None:
        self._current = None
