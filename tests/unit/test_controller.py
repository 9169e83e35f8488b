"""
Unit tests for LinkHubController.

The controller is exercised through a fully wired context on in-memory
storage; notifications are captured by a recording sink.
"""

import json

import pytest

from linkhub.adapters.memory_storage import InMemoryKeyValueStore
from linkhub.components.controller import (
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
    TransientUIState,
)
from linkhub.components.persistence import DEFAULT_STORAGE_KEY
from linkhub.ui.context import LinkHubContext


@pytest.fixture
def controller(ctx):
    return ctx.controller


@pytest.fixture
def with_links(ctx):
    for title in ("A", "B", "C"):
        ctx.store.add_link(title, f"https://{title.lower()}.example")
    return ctx


def titles(ctx) -> list[str]:
    return [link.title for link in ctx.store.links]


class UIRecorder:
    def __init__(self):
        self.states: list[tuple[bool, str | None]] = []

    def __call__(self, ui: TransientUIState) -> None:
        self.states.append((ui.admin_open, ui.drag.source_id))


# --- Admin panel ---


def test_open_and_close_admin(controller):
    rec = UIRecorder()
    controller.subscribe_ui(rec)

    controller.open_admin()
    controller.close_admin()
    controller.close_admin()

    assert rec.states == [(True, None), (False, None)]


def test_escape_closes_admin(controller):
    controller.open_admin()

    assert controller.handle_key("Escape") is True
    assert controller.ui.admin_open is False
    assert controller.handle_key("Enter") is False


def test_closing_admin_cancels_drag(with_links):
    controller = with_links.controller
    controller.open_admin()
    controller.drag_start(0)

    controller.close_admin()

    assert controller.ui.drag.is_dragging is False


def test_save_profile_notifies_and_closes(ctx, sink):
    ctx.controller.open_admin()

    ctx.controller.save_profile(name="Ann", bio="Hi", image_url="")

    assert ctx.store.state.profile.name == "Ann"
    assert sink.messages == [MSG_PROFILE_SAVED]
    assert ctx.controller.ui.admin_open is False


# --- Links ---


def test_submit_link(ctx, sink):
    assert ctx.controller.submit_link("Blog", "https://blog.example") is True

    assert titles(ctx) == ["Blog"]
    assert sink.shown[-1].message == MSG_LINK_ADDED
    assert sink.shown[-1].kind == "success"


def test_submit_invalid_link_reports_error(ctx, sink):
    assert ctx.controller.submit_link("X", "not-a-url") is False

    assert titles(ctx) == []
    assert sink.shown[-1].message == "Please enter a valid URL"
    assert sink.shown[-1].kind == "error"


def test_submit_blank_link_reports_error(ctx, sink):
    assert ctx.controller.submit_link("", "") is False
    assert sink.messages == ["Please fill in both title and URL"]


def test_edit_link_field_then_finish(with_links, kv_store):
    controller = with_links.controller
    link_id = with_links.store.links[0].id

    assert controller.edit_link_field(link_id, "title", "Alpha") is True
    controller.finish_link_edit()

    stored = json.loads(kv_store.get(DEFAULT_STORAGE_KEY))
    assert stored["links"][0]["title"] == "Alpha"


def test_edit_stale_link_is_ignored_silently(with_links, sink):
    sink.shown.clear()

    assert with_links.controller.edit_link_field(7, "title", "X") is False
    assert with_links.controller.edit_link_field(0, "icon", "X") is False
    assert sink.shown == []


def test_remove_link_after_confirmation(with_links, confirmer, sink):
    with_links.controller.request_remove_link(1)

    assert confirmer.questions == [MSG_CONFIRM_REMOVE]
    assert titles(with_links) == ["A", "C"]
    assert sink.messages[-1] == MSG_LINK_REMOVED


def test_remove_link_declined(with_links, confirmer, sink):
    confirmer.answer = False
    sink.shown.clear()

    with_links.controller.request_remove_link(1)

    assert titles(with_links) == ["A", "B", "C"]
    assert sink.shown == []


def test_remove_stale_link_asks_nothing(with_links, confirmer):
    with_links.controller.request_remove_link(9)

    assert confirmer.questions == []
    assert titles(with_links) == ["A", "B", "C"]


def test_remove_targets_link_seen_when_asked(with_links):
    """A link removed while the dialog is open is not replaced by its neighbour."""
    store = with_links.store
    answers = []

    class DeferredConfirm:
        def ask(self, message, on_answer):
            answers.append(on_answer)

    with_links.controller.confirmer = DeferredConfirm()
    with_links.controller.request_remove_link(1)
    store.remove_link(1)
    answers[0](True)

    assert titles(with_links) == ["A", "C"]


# --- Drag and drop ---


def test_drag_and_drop_reorders(with_links):
    controller = with_links.controller
    rec = UIRecorder()
    controller.subscribe_ui(rec)
    source_id = with_links.store.links[0].id

    controller.drag_start(0)
    assert controller.drag_drop(2) is True

    assert titles(with_links) == ["B", "C", "A"]
    assert rec.states == [(False, source_id), (False, None)]


def test_drop_on_same_row(with_links, kv_store):
    controller = with_links.controller
    writes = kv_store.writes

    controller.drag_start(1)
    assert controller.drag_drop(1) is False

    assert kv_store.writes == writes


def test_drop_on_vanished_target(with_links):
    controller = with_links.controller
    controller.drag_start(0)
    with_links.store.remove_link(2)

    assert controller.drag_drop(2) is False
    assert titles(with_links) == ["A", "B"]


def test_drag_end_without_drop(with_links):
    controller = with_links.controller
    controller.drag_start(0)
    controller.drag_end()

    assert controller.drag_drop(2) is False
    assert titles(with_links) == ["A", "B", "C"]


def test_drag_stale_source_ignored(with_links):
    with_links.controller.drag_start(5)
    assert with_links.controller.ui.drag.is_dragging is False


# --- Theme ---


def test_pick_theme(ctx):
    ctx.controller.pick_theme("ocean")
    assert ctx.store.state.theme == "ocean"


# --- Export ---


def test_export_uses_dated_filename(with_links, sink):
    exported = with_links.controller.export()

    assert exported.filename == "linktree-backup-2024-05-01.json"
    assert json.loads(exported.content)["links"][0]["title"] == "A"
    assert sink.messages[-1] == MSG_EXPORTED


def test_export_to_directory(with_links, tmp_path, sink):
    path = with_links.controller.export_to(tmp_path)

    assert path == tmp_path / "linktree-backup-2024-05-01.json"
    assert json.loads(path.read_text(encoding="utf-8"))["theme"] == "default"
    assert sink.messages[-1] == MSG_EXPORTED


def test_export_to_file_path(ctx, tmp_path):
    target = tmp_path / "mine.json"
    assert ctx.controller.export_to(target) == target
    assert target.exists()


def test_export_to_unwritable_path(ctx, tmp_path, sink):
    target = tmp_path / "missing" / "backup.json"

    assert ctx.controller.export_to(target) is None
    assert sink.messages == [MSG_EXPORT_FAILED]


# --- Import ---


def test_import_replaces_state(with_links, kv_store, sink):
    data = json.dumps(
        {
            "profile": {"name": "Imported", "bio": "b", "image": "i"},
            "links": [{"title": "Z", "url": "https://z.example"}],
            "theme": "dark",
        }
    )

    assert with_links.controller.import_bytes(data.encode()) is True

    assert titles(with_links) == ["Z"]
    assert with_links.store.state.theme == "dark"
    assert json.loads(kv_store.get(DEFAULT_STORAGE_KEY))["profile"]["name"] == "Imported"
    assert sink.messages[-1] == MSG_IMPORTED


@pytest.mark.parametrize(
    "data,message",
    [
        (b"{oops", MSG_IMPORT_FAILED),
        (b'{"profile": {}}', MSG_IMPORT_INVALID),
        (b'{"profile": {}, "links": "x"}', MSG_IMPORT_INVALID),
    ],
)
def test_failed_import_changes_nothing(with_links, kv_store, sink, data, message):
    before = with_links.store.state.to_document()
    writes = kv_store.writes

    assert with_links.controller.import_bytes(data) is False

    assert with_links.store.state.to_document() == before
    assert kv_store.writes == writes
    assert sink.shown[-1].message == message
    assert sink.shown[-1].kind == "error"


def test_import_path(ctx, tmp_path):
    backup = tmp_path / "backup.json"
    backup.write_text('{"profile": {"name": "File"}, "links": []}', encoding="utf-8")

    assert ctx.controller.import_path(backup) is True
    assert ctx.store.state.profile.name == "File"


def test_import_missing_file(ctx, tmp_path, sink):
    assert ctx.controller.import_path(tmp_path / "nope.json") is False
    assert sink.messages == [MSG_IMPORT_FAILED]


# --- Persistence failures ---


@pytest.fixture
def full_kv():
    return InMemoryKeyValueStore(quota_bytes=10)


@pytest.fixture
def full_ctx(full_kv, rules, clock, confirmer, sink):
    """Context whose storage rejects every write."""
    return LinkHubContext.create(full_kv, rules, confirmer=confirmer, clock=clock, sinks=[sink])


def test_failed_save_after_add_stays_visible(full_ctx, sink):
    assert full_ctx.controller.submit_link("Blog", "https://blog.example") is True

    assert [link.title for link in full_ctx.store.links] == ["Blog"]
    assert sink.messages == [MSG_SAVE_FAILED]
    assert full_ctx.notifications.active().kind == "error"


def test_failed_save_after_profile_update_stays_visible(full_ctx, sink):
    full_ctx.controller.save_profile(name="Ann", bio="Hi", image_url="")

    assert full_ctx.store.state.profile.name == "Ann"
    assert sink.messages == [MSG_SAVE_FAILED]
    assert full_ctx.notifications.active().message == MSG_SAVE_FAILED


def test_failed_save_after_import_stays_visible(full_ctx, sink):
    data = b'{"profile": {"name": "Imported"}, "links": [{"title": "Z", "url": "https://z.x"}]}'

    full_ctx.controller.import_bytes(data)

    assert full_ctx.store.state.profile.name == "Imported"
    assert sink.messages == [MSG_SAVE_FAILED]
    assert full_ctx.notifications.active().kind == "error"


def test_failed_save_after_remove_stays_visible(full_ctx, sink):
    full_ctx.store.replace_state(
        {"links": [{"title": "A", "url": "https://a.x"}, {"title": "B", "url": "https://b.x"}]},
        persist=False,
    )

    full_ctx.controller.request_remove_link(0)

    assert [link.title for link in full_ctx.store.links] == ["B"]
    assert sink.messages == [MSG_SAVE_FAILED]


def test_success_toast_returns_once_storage_recovers(full_ctx, full_kv, sink):
    full_ctx.controller.submit_link("Blog", "https://blog.example")
    full_kv.quota_bytes = None

    full_ctx.controller.submit_link("Shop", "https://shop.example")

    assert sink.messages == [MSG_SAVE_FAILED, MSG_LINK_ADDED]
    assert full_ctx.notifications.active().kind == "success"
