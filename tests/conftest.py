from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from linkhub.adapters.clock import FixedClock
from linkhub.adapters.memory_storage import InMemoryKeyValueStore
from linkhub.components.notify import Notification
from linkhub.components.persistence import StatePersistence
from linkhub.components.store import StateStore
from linkhub.rules.models import Rules, ThemeRule
from linkhub.ui.context import LinkHubContext


class FakeConfirm:
    """Answers every confirmation with a preset reply and records the questions."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.questions: list[str] = []

    def ask(self, message: str, on_answer: Callable[[bool], None]) -> None:
        self.questions.append(message)
        on_answer(self.answer)


class RecordingSink:
    """Notification sink that keeps everything shown."""

    def __init__(self):
        self.shown: list[Notification] = []

    def show(self, notification: Notification) -> None:
        self.shown.append(notification)

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.shown]


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def rules():
    return Rules(
        themes=[
            ThemeRule(tag="default", label="Default"),
            ThemeRule(tag="dark", label="Dark", background="#0f172a", dark=True),
            ThemeRule(tag="ocean", label="Ocean", primary="#0284c7"),
        ]
    )


@pytest.fixture
def persistence(kv_store):
    return StatePersistence(kv_store)


@pytest.fixture
def store(persistence, rules):
    return StateStore(persistence, defaults=rules.defaults)


@pytest.fixture
def confirmer():
    return FakeConfirm(answer=True)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def ctx(kv_store, rules, confirmer, clock, sink):
    """Fully wired context on in-memory storage."""
    return LinkHubContext.create(kv_store, rules, confirmer=confirmer, clock=clock, sinks=[sink])


@pytest.fixture
def rules_file(tmp_path):
    """Small rules.yaml for command line runs."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "storage:\n"
        "  key: linktree-data\n"
        "  file_name: store.json\n"
        "themes:\n"
        "  - tag: default\n"
        "    label: Default\n"
        "  - tag: dark\n"
        "    label: Dark\n"
        "    dark: true\n"
        "demo:\n"
        "  seed_when_empty: true\n"
        "  links:\n"
        "    - title: Sample\n"
        "      url: https://example.com\n",
        encoding="utf-8",
    )
    return path
