"""
Store component - Canonical application state and its mutations.

The store owns the only AppState instance. Every mutation runs to
completion, writes the document through the persistence component where
required, then publishes a StateChange to listeners.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from linkhub.components.persistence import StatePersistence, StoredDocumentError
from linkhub.components.validation import validate_link_data
from linkhub.core.errors import LinkIndexError, ValidationError
from linkhub.core.ports.storage import StorageWriteError
from linkhub.domain.entities import LINK_FIELDS, AppState, Link, Profile, coerce_text
from linkhub.rules.models import DefaultsRules

from .models import ChangeKind, LinkRef, StateChange
from .ports import PersistFailureHandler, StateListener

logger = logging.getLogger(__name__)


def default_state(defaults: DefaultsRules) -> AppState:
    """Fresh state built from configured defaults."""
    return AppState(
        profile=Profile.from_defaults(defaults.profile),
        links=[],
        theme=defaults.theme,
    )


class StateStore:
    """
    Application state store.

    Links may be addressed by id (stable while editing) or by index.
    """

    def __init__(
        self,
        persistence: StatePersistence,
        defaults: DefaultsRules | None = None,
        on_persist_failure: PersistFailureHandler | None = None,
    ) -> None:
        self._persistence = persistence
        self._defaults = defaults or DefaultsRules()
        self._state = default_state(self._defaults)
        self._listeners: list[StateListener] = []
        self.on_persist_failure = on_persist_failure

    # --- Read access ---

    @property
    def state(self) -> AppState:
        """Live state. Mutate only through store operations."""
        return self._state

    @property
    def links(self) -> list[Link]:
        return list(self._state.links)

    def snapshot(self) -> AppState:
        return self._state.model_copy(deep=True)

    def get_link(self, ref: LinkRef) -> Link:
        return self._state.links[self._resolve(ref)]

    # --- Listeners ---

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: ChangeKind, link_id: str | None = None) -> None:
        change = StateChange(kind=kind, link_id=link_id)
        for listener in list(self._listeners):
            listener(change)

    # --- Persistence ---

    def _persist(self) -> bool:
        try:
            self._persistence.save(self._state.to_document())
        except StorageWriteError as e:
            logger.error(f"Failed to save state: {e}")
            if self.on_persist_failure is not None:
                self.on_persist_failure(e)
            return False
        return True

    def load(self) -> bool:
        """
        Overlay persisted data onto the current state.

        Unreadable stored data is logged and ignored. Nothing is written
        back since nothing changed. Returns True if a document was merged.
        """
        try:
            doc = self._persistence.load()
        except StoredDocumentError as e:
            logger.error(f"Error loading stored data: {e}")
            return False
        if doc is None:
            logger.info("No stored data, starting from defaults")
            return False
        self.replace_state(doc, persist=False)
        logger.info(f"Loaded state with {len(self._state.links)} links")
        return True

    def commit_link_edits(self) -> bool:
        """Persist in-place field edits (called when an edit field loses focus)."""
        return self._persist()

    def reset(self) -> None:
        """Clear stored data and return to defaults."""
        self._persistence.clear()
        self._state = default_state(self._defaults)
        self._emit(ChangeKind.ALL)

    # --- Mutations ---

    def _resolve(self, ref: LinkRef) -> int:
        size = len(self._state.links)
        if isinstance(ref, str):
            index = self._state.index_of(ref)
            if index is None:
                raise LinkIndexError(ref, size)
            return index
        if isinstance(ref, bool) or not isinstance(ref, int) or not 0 <= ref < size:
            raise LinkIndexError(ref, size)
        return ref

    def update_profile(self, name: str = "", bio: str = "", image_url: str = "") -> Profile:
        """Overwrite the profile; blank fields take their defaults."""
        defaults = self._defaults.profile
        self._state.profile = Profile(
            name=name if name and name.strip() else defaults.name,
            bio=bio if bio and bio.strip() else defaults.bio,
            image_url=image_url if image_url and image_url.strip() else defaults.image,
        )
        self._persist()
        self._emit(ChangeKind.PROFILE)
        return self._state.profile

    def add_link(self, title: str, url: str) -> Link:
        """
        Append a new link.

        Raises:
            ValidationError: blank title or url, or url not well formed
        """
        title = (title or "").strip()
        url = (url or "").strip()
        issues = validate_link_data(title, url)
        if issues:
            issue = issues[0]
            raise ValidationError(issue.code, issue.message, issue.field)

        link = Link(title=title, url=url)
        self._state.links.append(link)
        self._persist()
        self._emit(ChangeKind.LINKS)
        return link

    def update_link_field(self, ref: LinkRef, field: str, value: Any) -> Link:
        """
        Set one field of a link in place (called on every keystroke).

        Not persisted here; see commit_link_edits.

        Raises:
            LinkIndexError: ref does not point at a link
            ValidationError: field is not an editable link field
        """
        if field not in LINK_FIELDS:
            raise ValidationError(
                "field_invalid", f"'{field}' is not an editable link field", field
            )
        link = self._state.links[self._resolve(ref)]
        setattr(link, field, coerce_text(value))
        self._emit(ChangeKind.LINK_FIELD, link_id=link.id)
        return link

    def remove_link(self, ref: LinkRef) -> Link:
        """
        Delete a link; later links shift down by one.

        Raises:
            LinkIndexError: ref does not point at a link
        """
        removed = self._state.links.pop(self._resolve(ref))
        self._persist()
        self._emit(ChangeKind.LINKS)
        return removed

    def reorder_link(self, from_index: int, to_index: int) -> bool:
        """
        Move a link: remove it at from_index, then insert it at to_index
        of the shortened list.

        Returns False (and writes nothing) when the indices are equal.

        Raises:
            LinkIndexError: either index is outside the current list
        """
        from_index = self._resolve(from_index)
        to_index = self._resolve(to_index)
        if from_index == to_index:
            return False

        item = self._state.links.pop(from_index)
        self._state.links.insert(to_index, item)
        self._persist()
        self._emit(ChangeKind.LINKS)
        return True

    def set_theme(self, tag: str) -> None:
        """Select a theme. Unknown tags are stored as given."""
        self._state.theme = coerce_text(tag)
        self._persist()
        self._emit(ChangeKind.THEME)

    def replace_state(self, partial: Mapping[str, Any], persist: bool = True) -> AppState:
        """
        Shallow-merge a document into the state.

        Each top-level key present in partial replaces the current value
        wholesale; absent keys are kept.
        """
        for key, value in partial.items():
            if key == "profile":
                self._state.profile = Profile.from_raw(value, self._defaults.profile)
            elif key == "links":
                if not isinstance(value, list):
                    logger.warning(f"Ignoring non-list links value of type {type(value).__name__}")
                    value = []
                self._state.links = [Link.from_raw(raw) for raw in value]
            elif key == "theme":
                self._state.theme = self._defaults.theme if value is None else coerce_text(value)
            else:
                self._state.extras[key] = value

        if persist:
            self._persist()
        self._emit(ChangeKind.ALL)
        return self._state

    def seed_links(self, links: list[Link]) -> bool:
        """
        Show sample links when the list is empty.

        The sample is not written; it is saved with the next mutation.
        """
        if self._state.links or not links:
            return False
        self._state.links.extend(links)
        self._emit(ChangeKind.LINKS)
        return True
