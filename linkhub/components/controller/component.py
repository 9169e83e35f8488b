"""
Controller component - Binds user actions to store operations.

Shell Layer - converts errors into notifications and log lines. Owns the
transient UI state (admin modal, drag gesture).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from linkhub.components.codec import ExportedFile, build_export, import_document
from linkhub.components.notify import NotifierPort
from linkhub.components.store import LinkRef, StateStore
from linkhub.core.errors import DocumentImportError, LinkIndexError, ValidationError
from linkhub.core.ports.storage import StorageWriteError
from linkhub.core.ports.time import TimePort
from linkhub.rules.models import Rules

from .models import TransientUIState
from .ports import ConfirmPort, UIStateListener

logger = logging.getLogger(__name__)

# --- User-facing messages ---

MSG_LINK_ADDED = "Link added successfully!"
MSG_CONFIRM_REMOVE = "Are you sure you want to remove this link?"
MSG_LINK_REMOVED = "Link removed successfully!"
MSG_PROFILE_SAVED = "Changes saved successfully!"
MSG_EXPORTED = "Data exported successfully!"
MSG_EXPORT_FAILED = "Error exporting data"
MSG_IMPORTED = "Data imported successfully!"
MSG_IMPORT_INVALID = "Invalid backup file"
MSG_IMPORT_FAILED = "Error importing data"
MSG_SAVE_FAILED = "Error saving data"


class LinkHubController:
    """
    Interaction controller.

    Every handler runs to completion before returning; stale link
    references are logged and ignored.
    """

    def __init__(
        self,
        store: StateStore,
        notifier: NotifierPort,
        confirmer: ConfirmPort,
        clock: TimePort,
        rules: Rules | None = None,
    ) -> None:
        self.store = store
        self.notifier = notifier
        self.confirmer = confirmer
        self.clock = clock
        self.rules = rules or Rules()
        self.ui = TransientUIState()
        self._ui_listeners: list[UIStateListener] = []
        self._save_failures = 0
        store.on_persist_failure = self._on_persist_failure

    def subscribe_ui(self, listener: UIStateListener) -> Callable[[], None]:
        self._ui_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._ui_listeners:
                self._ui_listeners.remove(listener)

        return unsubscribe

    def _emit_ui(self) -> None:
        for listener in list(self._ui_listeners):
            listener(self.ui)

    def _on_persist_failure(self, error: StorageWriteError) -> None:
        self._save_failures += 1
        self.notifier.notify(MSG_SAVE_FAILED, "error")

    def _notify_saved(self, message: str, failures_before: int) -> None:
        """Success toast unless a write failed after failures_before was taken."""
        if self._save_failures == failures_before:
            self.notifier.notify(message, "success")

    # --- Admin modal ---

    def open_admin(self) -> None:
        self.ui.admin_open = True
        self._emit_ui()

    def close_admin(self) -> None:
        if not self.ui.admin_open:
            return
        self.ui.admin_open = False
        self.ui.drag.end()
        self._emit_ui()

    def handle_key(self, key: str) -> bool:
        """Keyboard shortcut handler; Escape closes the admin panel."""
        if key == "Escape":
            self.close_admin()
            return True
        return False

    # --- Profile ---

    def save_profile(self, name: str, bio: str, image_url: str) -> None:
        failures = self._save_failures
        self.store.update_profile(name=name, bio=bio, image_url=image_url)
        self._notify_saved(MSG_PROFILE_SAVED, failures)
        self.close_admin()

    # --- Links ---

    def submit_link(self, title: str, url: str) -> bool:
        """
        Add a link from the admin form.

        Returns False on validation failure so the form keeps its input.
        """
        failures = self._save_failures
        try:
            self.store.add_link(title, url)
        except ValidationError as e:
            logger.info(f"Rejected link input ({e.code})")
            self.notifier.notify(e.message, "error")
            return False
        self._notify_saved(MSG_LINK_ADDED, failures)
        return True

    def edit_link_field(self, ref: LinkRef, field: str, value: str) -> bool:
        try:
            self.store.update_link_field(ref, field, value)
        except LinkIndexError as e:
            logger.warning(f"Ignoring edit of stale link: {e}")
            return False
        except ValidationError as e:
            logger.warning(f"Ignoring edit: {e.message}")
            return False
        return True

    def finish_link_edit(self) -> None:
        self.store.commit_link_edits()

    def request_remove_link(self, ref: LinkRef) -> None:
        """Ask for confirmation, then remove the link if still present."""
        try:
            link_id = self.store.get_link(ref).id
        except LinkIndexError as e:
            logger.warning(f"Ignoring removal of stale link: {e}")
            return

        def on_answer(confirmed: bool) -> None:
            if not confirmed:
                return
            failures = self._save_failures
            try:
                self.store.remove_link(link_id)
            except LinkIndexError as e:
                logger.warning(f"Link vanished before removal: {e}")
                return
            self._notify_saved(MSG_LINK_REMOVED, failures)

        self.confirmer.ask(MSG_CONFIRM_REMOVE, on_answer)

    # --- Drag and drop ---

    def drag_start(self, ref: LinkRef) -> None:
        try:
            link_id = self.store.get_link(ref).id
        except LinkIndexError as e:
            logger.warning(f"Ignoring drag of stale link: {e}")
            return
        self.ui.drag.start(link_id)
        self._emit_ui()

    def drag_drop(self, target_index: int) -> bool:
        """Drop the dragged link on the row at target_index. True if moved."""
        move = self.ui.drag.drop(target_index, self.store.state.links)
        self._emit_ui()
        if move is None:
            return False
        try:
            return self.store.reorder_link(move.from_index, move.to_index)
        except LinkIndexError as e:
            logger.warning(f"Ignoring drop on stale target: {e}")
            return False

    def drag_end(self) -> None:
        if self.ui.drag.is_dragging:
            self.ui.drag.end()
            self._emit_ui()

    # --- Theme ---

    def pick_theme(self, tag: str) -> None:
        self.store.set_theme(tag)

    # --- Export / Import ---

    def prepare_export(self) -> ExportedFile:
        return build_export(
            self.store.state,
            self.clock.now_utc().date(),
            self.rules.export.filename_prefix,
        )

    def export(self) -> ExportedFile:
        """Backup file for download (the caller hands it to the user)."""
        exported = self.prepare_export()
        self.notifier.notify(MSG_EXPORTED, "success")
        return exported

    def export_to(self, target: str | Path) -> Path | None:
        """
        Write a backup to target; a directory gets the dated file name.

        Returns the written path, or None if the write failed.
        """
        exported = self.prepare_export()
        path = Path(target)
        if path.is_dir():
            path = path / exported.filename
        try:
            path.write_bytes(exported.content)
        except OSError as e:
            logger.error(f"Could not write backup to {path}: {e}")
            self.notifier.notify(MSG_EXPORT_FAILED, "error")
            return None
        self.notifier.notify(MSG_EXPORTED, "success")
        return path

    def import_bytes(self, data: bytes | str) -> bool:
        """Import a backup; on any failure the state is left untouched."""
        try:
            doc = import_document(data)
        except DocumentImportError as e:
            logger.warning(f"Import rejected: {e}")
            message = MSG_IMPORT_INVALID if e.reason == "invalid_shape" else MSG_IMPORT_FAILED
            self.notifier.notify(message, "error")
            return False
        failures = self._save_failures
        self.store.replace_state(doc, persist=True)
        self._notify_saved(MSG_IMPORTED, failures)
        return True

    def import_path(self, path: str | Path) -> bool:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            self.notifier.notify(MSG_IMPORT_FAILED, "error")
            return False
        return self.import_bytes(data)
