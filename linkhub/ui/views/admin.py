import logging
from pathlib import Path

import flet as ft

from linkhub.components.codec import export_filename
from linkhub.components.controller import MSG_IMPORT_FAILED
from linkhub.components.render import EditableLinkView, PageView, ProfileView, ThemeMarker
from linkhub.ui.context import LinkHubContext

logger = logging.getLogger(__name__)

DRAG_GROUP = "links"
UPLOAD_URL_EXPIRY_SECONDS = 60


class AdminPanel:
    """
    Admin dialog: profile form, link editor, theme picker, backup.

    The dialog never mutates state itself; every action goes through the
    controller, and the panel is refreshed from store change events.
    """

    def __init__(self, page: ft.Page, ctx: LinkHubContext, upload_dir: Path | None = None):
        self.page = page
        self.ctx = ctx
        self.upload_dir = upload_dir
        controller = ctx.controller

        # Profile
        self.name_field = ft.TextField(label="Name")
        self.bio_field = ft.TextField(label="Bio", multiline=True, min_lines=2, max_lines=4)
        self.image_field = ft.TextField(label="Avatar image URL")

        # New link form
        self.title_field = ft.TextField(label="Title", expand=True, on_submit=self._add_link)
        self.url_field = ft.TextField(label="URL", expand=True, on_submit=self._add_link)

        self.links_column = ft.Column(spacing=8)
        self._rows: dict[str, ft.Container] = {}
        self.themes_row = ft.Row(wrap=True, spacing=8)

        # Backup
        self.export_picker = ft.FilePicker(on_result=self._on_export_path)
        self.import_picker = ft.FilePicker(
            on_result=self._on_import_file, on_upload=self._on_import_upload
        )
        page.overlay.extend([self.export_picker, self.import_picker])

        self.dialog = ft.AlertDialog(
            modal=False,
            title=ft.Text("Admin panel"),
            content=ft.Container(
                content=ft.Column(
                    [
                        ft.Text("Profile", weight=ft.FontWeight.BOLD, color="primary"),
                        self.name_field,
                        self.bio_field,
                        self.image_field,
                        ft.Divider(),
                        ft.Text("Links", weight=ft.FontWeight.BOLD, color="primary"),
                        ft.Row(
                            [
                                self.title_field,
                                self.url_field,
                                ft.IconButton(icon="add", tooltip="Add link", on_click=self._add_link),
                            ]
                        ),
                        self.links_column,
                        ft.Divider(),
                        ft.Text("Theme", weight=ft.FontWeight.BOLD, color="primary"),
                        self.themes_row,
                        ft.Divider(),
                        ft.Text("Backup", weight=ft.FontWeight.BOLD, color="primary"),
                        ft.Row(
                            [
                                ft.OutlinedButton("Export", icon="download", on_click=self._export),
                                ft.OutlinedButton(
                                    "Import",
                                    icon="upload",
                                    on_click=lambda _: self.import_picker.pick_files(
                                        allow_multiple=False
                                    ),
                                ),
                            ]
                        ),
                    ],
                    scroll=ft.ScrollMode.AUTO,
                    tight=True,
                ),
                width=560,
            ),
            actions=[
                ft.TextButton("Close", on_click=lambda _: controller.close_admin()),
                ft.ElevatedButton(
                    "Save changes",
                    on_click=self._save_profile,
                    bgcolor="primary",
                    color="onPrimary",
                ),
            ],
            on_dismiss=lambda _: controller.close_admin(),
        )

    # --- Refresh from state ---

    def show_view(self, view: PageView) -> None:
        self.show_profile(view.profile)
        self.show_links(view.editable_links)
        self.show_themes(view.themes)

    def show_profile(self, profile: ProfileView) -> None:
        self.name_field.value = profile.name
        self.bio_field.value = profile.bio
        self.image_field.value = profile.image_url

    def show_links(self, rows: list[EditableLinkView]) -> None:
        self._rows = {}
        controls: list[ft.Control] = []
        for row in rows:
            container = self._link_row(row)
            self._rows[row.id] = container
            controls.append(
                ft.DragTarget(
                    group=DRAG_GROUP,
                    content=ft.Draggable(
                        group=DRAG_GROUP,
                        content=container,
                        on_drag_start=lambda _, lid=row.id: self.ctx.controller.drag_start(lid),
                        on_drag_complete=lambda _: self.ctx.controller.drag_end(),
                    ),
                    on_accept=lambda _, idx=row.index: self.ctx.controller.drag_drop(idx),
                )
            )
        self.links_column.controls = controls

    def mark_dragging(self, source_id: str | None) -> None:
        for link_id, container in self._rows.items():
            container.opacity = 0.5 if link_id == source_id else 1.0

    def show_themes(self, markers: list[ThemeMarker]) -> None:
        self.themes_row.controls = [
            ft.FilledButton(
                marker.label,
                icon="check" if marker.active else None,
                on_click=lambda _, tag=marker.tag: self.ctx.controller.pick_theme(tag),
            )
            if marker.active
            else ft.OutlinedButton(
                marker.label,
                on_click=lambda _, tag=marker.tag: self.ctx.controller.pick_theme(tag),
            )
            for marker in markers
        ]

    def _link_row(self, row: EditableLinkView) -> ft.Container:
        controller = self.ctx.controller

        def on_title(e: ft.ControlEvent, lid: str = row.id) -> None:
            controller.edit_link_field(lid, "title", e.control.value)

        def on_url(e: ft.ControlEvent, lid: str = row.id) -> None:
            controller.edit_link_field(lid, "url", e.control.value)

        return ft.Container(
            content=ft.Row(
                [
                    ft.Icon(name="drag_indicator"),
                    ft.TextField(
                        value=row.title,
                        hint_text="Title",
                        expand=True,
                        on_change=on_title,
                        on_blur=lambda _: controller.finish_link_edit(),
                    ),
                    ft.TextField(
                        value=row.url,
                        hint_text="URL",
                        expand=True,
                        on_change=on_url,
                        on_blur=lambda _: controller.finish_link_edit(),
                    ),
                    ft.IconButton(
                        icon="delete",
                        icon_color="red",
                        tooltip="Remove link",
                        on_click=lambda _, lid=row.id: controller.request_remove_link(lid),
                    ),
                ]
            ),
            opacity=0.5 if row.is_dragging else 1.0,
        )

    # --- Actions ---

    def _save_profile(self, _: ft.ControlEvent) -> None:
        self.ctx.controller.save_profile(
            name=self.name_field.value or "",
            bio=self.bio_field.value or "",
            image_url=self.image_field.value or "",
        )

    def _add_link(self, _: ft.ControlEvent) -> None:
        added = self.ctx.controller.submit_link(
            self.title_field.value or "", self.url_field.value or ""
        )
        if added:
            self.title_field.value = ""
            self.url_field.value = ""
        self.page.update()

    def _export(self, _: ft.ControlEvent) -> None:
        filename = export_filename(
            self.ctx.clock.now_utc().date(), self.ctx.rules.export.filename_prefix
        )
        self.export_picker.save_file(file_name=filename, allowed_extensions=["json"])

    def _on_export_path(self, e: ft.FilePickerResultEvent) -> None:
        if not e.path:
            return
        self.ctx.controller.export_to(e.path)
        self.page.update()

    def _on_import_file(self, e: ft.FilePickerResultEvent) -> None:
        if not e.files:
            return
        picked = e.files[0]
        if picked.path:
            self.ctx.controller.import_path(picked.path)
        elif self.upload_dir is None:
            logger.warning(f"No local path for picked file {picked.name} and no upload dir")
            self.ctx.notifications.notify(MSG_IMPORT_FAILED, "error")
        else:
            # Web clients have no local path; the file is uploaded to upload_dir first
            try:
                url = self.page.get_upload_url(picked.name, UPLOAD_URL_EXPIRY_SECONDS)
                self.import_picker.upload([ft.FilePickerUploadFile(picked.name, upload_url=url)])
            except Exception as err:
                logger.error(f"Upload of {picked.name} could not start: {err}")
                self.ctx.notifications.notify(MSG_IMPORT_FAILED, "error")
        self.page.update()

    def _on_import_upload(self, e: ft.FilePickerUploadEvent) -> None:
        if e.error:
            logger.error(f"Upload of {e.file_name} failed: {e.error}")
            self.ctx.notifications.notify(MSG_IMPORT_FAILED, "error")
            self.page.update()
            return
        if e.progress is None or e.progress < 1 or self.upload_dir is None:
            return
        uploaded = self.upload_dir / Path(e.file_name).name
        try:
            self.ctx.controller.import_path(uploaded)
        finally:
            uploaded.unlink(missing_ok=True)
        self.page.update()
