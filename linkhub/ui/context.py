from __future__ import annotations

from dataclasses import dataclass

from linkhub.adapters.clock import SystemClock
from linkhub.components.controller import ConfirmPort, LinkHubController
from linkhub.components.notify import NotificationCenter, NotificationSink
from linkhub.components.persistence import StatePersistence
from linkhub.components.store import StateStore
from linkhub.core.ports.storage import KeyValueStorePort
from linkhub.core.ports.time import TimePort
from linkhub.rules.models import Rules


@dataclass
class LinkHubContext:
    """Everything one page session needs, wired once at startup."""

    rules: Rules
    persistence: StatePersistence
    store: StateStore
    notifications: NotificationCenter
    controller: LinkHubController
    clock: TimePort

    @classmethod
    def create(
        cls,
        kv_store: KeyValueStorePort,
        rules: Rules,
        confirmer: ConfirmPort,
        clock: TimePort | None = None,
        sinks: list[NotificationSink] | None = None,
    ) -> LinkHubContext:
        clock = clock or SystemClock()

        persistence = StatePersistence(kv_store, key=rules.storage.key)
        store = StateStore(persistence, defaults=rules.defaults)
        notifications = NotificationCenter(
            clock,
            duration_seconds=rules.notifications.duration_seconds,
            sinks=sinks,
        )
        controller = LinkHubController(store, notifications, confirmer, clock, rules)

        return cls(
            rules=rules,
            persistence=persistence,
            store=store,
            notifications=notifications,
            controller=controller,
            clock=clock,
        )
