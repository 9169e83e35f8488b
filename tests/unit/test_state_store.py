"""
Unit tests for StateStore.

Tests mutations, change events and persistence writes against an
in-memory key-value store.
"""

import json

import pytest

from linkhub.adapters.memory_storage import InMemoryKeyValueStore
from linkhub.components.persistence import DEFAULT_STORAGE_KEY, StatePersistence
from linkhub.components.store import ChangeKind, StateChange, StateStore
from linkhub.core.errors import LinkIndexError, ValidationError
from linkhub.domain.entities import Link
from linkhub.rules.models import DefaultsRules


class ChangeRecorder:
    def __init__(self):
        self.changes: list[StateChange] = []

    def __call__(self, change: StateChange) -> None:
        self.changes.append(change)

    @property
    def kinds(self) -> list[ChangeKind]:
        return [c.kind for c in self.changes]


@pytest.fixture
def recorder(store):
    rec = ChangeRecorder()
    store.subscribe(rec)
    return rec


def stored(kv_store) -> dict:
    return json.loads(kv_store.get(DEFAULT_STORAGE_KEY))


def titles(store) -> list[str]:
    return [link.title for link in store.links]


@pytest.fixture
def abc_store(store):
    for title in ("A", "B", "C"):
        store.add_link(title, f"https://{title.lower()}.example")
    return store


# --- Defaults ---


def test_initial_state_uses_defaults(store):
    state = store.state
    assert state.profile.name == "Your Name"
    assert state.profile.bio == "Your bio here"
    assert state.links == []
    assert state.theme == "default"


# --- add_link ---


def test_add_link_appends_and_persists(store, kv_store, recorder):
    link = store.add_link("Blog", "https://blog.example")

    assert store.links[-1] is link
    assert link.to_document() == {"title": "Blog", "url": "https://blog.example"}
    assert stored(kv_store)["links"] == [{"title": "Blog", "url": "https://blog.example"}]
    assert recorder.kinds == [ChangeKind.LINKS]


def test_add_link_strips_whitespace(store):
    link = store.add_link("  Blog  ", "  https://blog.example  ")
    assert (link.title, link.url) == ("Blog", "https://blog.example")


def test_add_link_assigns_distinct_ids(store):
    first = store.add_link("A", "https://a.example")
    second = store.add_link("A", "https://a.example")
    assert first.id != second.id


@pytest.mark.parametrize(
    "title,url,code",
    [
        ("", "https://a.example", "title_required"),
        ("   ", "https://a.example", "title_required"),
        ("A", "", "url_required"),
        ("A", "a.example", "url_invalid"),
    ],
)
def test_add_link_rejects_bad_input(store, kv_store, recorder, title, url, code):
    with pytest.raises(ValidationError) as exc:
        store.add_link(title, url)

    assert exc.value.code == code
    assert store.links == []
    assert kv_store.writes == 0
    assert recorder.changes == []


# --- update_link_field / commit_link_edits ---


def test_update_link_field_by_id_does_not_persist(abc_store, kv_store, recorder):
    writes = kv_store.writes
    link_id = abc_store.links[1].id

    abc_store.update_link_field(link_id, "title", "Bee")

    assert titles(abc_store) == ["A", "Bee", "C"]
    assert kv_store.writes == writes
    assert recorder.changes[-1] == StateChange(kind=ChangeKind.LINK_FIELD, link_id=link_id)


def test_commit_link_edits_persists(abc_store, kv_store):
    abc_store.update_link_field(0, "url", "https://alpha.example")

    assert abc_store.commit_link_edits() is True
    assert stored(kv_store)["links"][0]["url"] == "https://alpha.example"


def test_update_link_field_accepts_any_text(abc_store):
    # Edits are not validated; only new links are
    abc_store.update_link_field(0, "url", "not-a-url")
    assert abc_store.links[0].url == "not-a-url"


def test_update_link_field_rejects_unknown_field(abc_store):
    with pytest.raises(ValidationError) as exc:
        abc_store.update_link_field(0, "id", "x")
    assert exc.value.code == "field_invalid"


def test_update_link_field_stale_ref(abc_store):
    with pytest.raises(LinkIndexError):
        abc_store.update_link_field(3, "title", "D")
    with pytest.raises(LinkIndexError):
        abc_store.update_link_field("no-such-id", "title", "D")


# --- remove_link ---


def test_remove_link_by_index(abc_store, kv_store):
    removed = abc_store.remove_link(1)

    assert removed.title == "B"
    assert titles(abc_store) == ["A", "C"]
    assert [link["title"] for link in stored(kv_store)["links"]] == ["A", "C"]


def test_remove_link_by_id(abc_store):
    link_id = abc_store.links[2].id
    abc_store.remove_link(link_id)
    assert titles(abc_store) == ["A", "B"]


@pytest.mark.parametrize("ref", [3, -1, True, "missing"])
def test_remove_link_stale_ref(abc_store, kv_store, ref):
    writes = kv_store.writes

    with pytest.raises(LinkIndexError):
        abc_store.remove_link(ref)

    assert titles(abc_store) == ["A", "B", "C"]
    assert kv_store.writes == writes


def test_link_index_error_is_an_index_error(store):
    with pytest.raises(IndexError):
        store.get_link(0)


# --- reorder_link ---


def test_reorder_forward(abc_store):
    assert abc_store.reorder_link(0, 2) is True
    assert titles(abc_store) == ["B", "C", "A"]


def test_reorder_backward(abc_store):
    abc_store.reorder_link(2, 0)
    assert titles(abc_store) == ["C", "A", "B"]


def test_reorder_adjacent(abc_store):
    abc_store.reorder_link(0, 1)
    assert titles(abc_store) == ["B", "A", "C"]


def test_reorder_same_index_is_noop(abc_store, kv_store, recorder):
    writes = kv_store.writes
    recorder.changes.clear()

    assert abc_store.reorder_link(1, 1) is False

    assert titles(abc_store) == ["A", "B", "C"]
    assert kv_store.writes == writes
    assert recorder.changes == []


def test_reorder_out_of_range(abc_store):
    with pytest.raises(LinkIndexError):
        abc_store.reorder_link(0, 3)
    assert titles(abc_store) == ["A", "B", "C"]


def test_reorder_keeps_ids(abc_store):
    ids = {link.id for link in abc_store.links}
    abc_store.reorder_link(2, 0)
    assert {link.id for link in abc_store.links} == ids


# --- Profile and theme ---


def test_update_profile(store, kv_store, recorder):
    profile = store.update_profile(name="Ann", bio="Hi", image_url="https://img.example/a.png")

    assert profile.name == "Ann"
    assert stored(kv_store)["profile"] == {
        "name": "Ann",
        "bio": "Hi",
        "image": "https://img.example/a.png",
    }
    assert recorder.kinds == [ChangeKind.PROFILE]


def test_update_profile_blank_fields_take_defaults(store):
    profile = store.update_profile(name="  ", bio="", image_url="")

    defaults = DefaultsRules().profile
    assert profile.name == defaults.name
    assert profile.bio == defaults.bio
    assert profile.image_url == defaults.image


def test_set_theme(store, kv_store, recorder):
    store.set_theme("dark")

    assert store.state.theme == "dark"
    assert stored(kv_store)["theme"] == "dark"
    assert recorder.kinds == [ChangeKind.THEME]


# --- replace_state ---


def test_replace_state_replaces_top_level_keys(abc_store, kv_store):
    abc_store.replace_state(
        {"profile": {"name": "New"}, "links": [{"title": "Only", "url": "https://o.example"}]}
    )

    state = abc_store.state
    assert state.profile.name == "New"
    # Nested keys are not merged: absent profile fields take defaults
    assert state.profile.bio == "Your bio here"
    assert titles(abc_store) == ["Only"]
    assert stored(kv_store)["links"] == [{"title": "Only", "url": "https://o.example"}]


def test_replace_state_keeps_theme_when_absent(store):
    store.set_theme("ocean")
    store.replace_state({"profile": {}, "links": []})
    assert store.state.theme == "ocean"


def test_replace_state_null_theme_resets_to_default(store):
    store.set_theme("ocean")
    store.replace_state({"theme": None})
    assert store.state.theme == "default"


def test_replace_state_keeps_unknown_keys(store, kv_store):
    store.replace_state({"profile": {}, "links": [], "version": 2})

    assert store.state.extras == {"version": 2}
    assert stored(kv_store)["version"] == 2


def test_replace_state_tolerates_malformed_links(store):
    store.replace_state({"links": [None, {"title": 5}, {"url": "https://u.example"}, "x"]})

    docs = [link.to_document() for link in store.links]
    assert docs == [
        {"title": "", "url": ""},
        {"title": "5", "url": ""},
        {"title": "", "url": "https://u.example"},
        {"title": "", "url": ""},
    ]


def test_replace_state_non_list_links_become_empty(abc_store):
    abc_store.replace_state({"links": "x"}, persist=False)
    assert abc_store.links == []


def test_replace_state_without_persist(store, kv_store, recorder):
    store.replace_state({"profile": {"name": "Quiet"}}, persist=False)

    assert kv_store.writes == 0
    assert recorder.kinds == [ChangeKind.ALL]


# --- load / reset ---


def test_load_merges_stored_document_without_writing(store, kv_store):
    kv_store.set(
        DEFAULT_STORAGE_KEY,
        json.dumps({"profile": {"name": "Stored"}, "links": [{"title": "S", "url": "https://s.x"}]}),
    )
    writes = kv_store.writes

    assert store.load() is True

    assert store.state.profile.name == "Stored"
    assert titles(store) == ["S"]
    assert store.state.theme == "default"
    assert kv_store.writes == writes


def test_load_nothing_stored(store):
    assert store.load() is False
    assert store.links == []


def test_load_ignores_corrupt_data(store, kv_store):
    kv_store.set(DEFAULT_STORAGE_KEY, "{broken")

    assert store.load() is False
    assert store.state.profile.name == "Your Name"


def test_reset_clears_storage(abc_store, kv_store, recorder):
    abc_store.reset()

    assert abc_store.links == []
    assert kv_store.get(DEFAULT_STORAGE_KEY) is None
    assert recorder.kinds[-1] == ChangeKind.ALL


# --- Persistence failures ---


def test_write_failure_keeps_memory_state_and_calls_hook():
    failures = []
    store = StateStore(
        StatePersistence(InMemoryKeyValueStore(quota_bytes=10)),
        on_persist_failure=failures.append,
    )

    store.add_link("Blog", "https://blog.example")

    assert titles(store) == ["Blog"]
    assert len(failures) == 1
    assert failures[0].reason == "quota exceeded"


def test_write_failure_without_hook_is_logged(caplog):
    store = StateStore(StatePersistence(InMemoryKeyValueStore(quota_bytes=10)))

    store.set_theme("dark")

    assert store.state.theme == "dark"
    assert "Failed to save state" in caplog.text


# --- Seeding and listeners ---


def test_seed_links_only_when_empty(store, kv_store):
    sample = [Link(title="Sample", url="https://sample.example")]

    assert store.seed_links(sample) is True
    assert store.seed_links([Link(title="More", url="https://more.example")]) is False
    assert titles(store) == ["Sample"]
    assert kv_store.writes == 0


def test_unsubscribe(store):
    rec = ChangeRecorder()
    unsubscribe = store.subscribe(rec)

    store.set_theme("dark")
    unsubscribe()
    store.set_theme("ocean")

    assert rec.kinds == [ChangeKind.THEME]


def test_snapshot_is_independent(abc_store):
    snap = abc_store.snapshot()
    abc_store.remove_link(0)
    assert [link.title for link in snap.links] == ["A", "B", "C"]
