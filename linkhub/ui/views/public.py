from collections.abc import Callable

import flet as ft

from linkhub.components.render import PageView, PublicLinkView
from linkhub.ui.theme import glyph_for


class PublicLinkPage(ft.Column):  # type: ignore
    """Visitor-facing profile header and link list."""

    def __init__(self, page: ft.Page, on_edit_profile: Callable[[ft.ControlEvent], None] | None = None):
        super().__init__(
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=16,
            width=560,
        )
        self.host_page = page
        self.avatar = ft.CircleAvatar(radius=60)
        self.name_text = ft.Text(size=26, weight=ft.FontWeight.BOLD, text_align=ft.TextAlign.CENTER)
        self.bio_text = ft.Text(size=15, color="onSurfaceVariant", text_align=ft.TextAlign.CENTER)
        self.links_column = ft.Column(spacing=12)
        self.empty_state = ft.Container(
            content=ft.Column(
                [
                    ft.Icon(name="link_off", size=40, color="onSurfaceVariant"),
                    ft.Text("No links yet.", italic=True),
                    ft.Text("Open the admin panel to add your first link.", size=12),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=30,
            visible=False,
        )
        self.controls = [
            self.avatar,
            ft.Row(
                [
                    self.name_text,
                    ft.IconButton(icon="edit", tooltip="Edit profile", on_click=on_edit_profile),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
            ),
            self.bio_text,
            self.links_column,
            self.empty_state,
        ]

    def _link_tile(self, link: PublicLinkView) -> ft.Control:
        def open_link(_: ft.ControlEvent, url: str = link.url) -> None:
            self.host_page.launch_url(url)

        return ft.Card(
            content=ft.ListTile(
                leading=ft.Icon(name=glyph_for(link.icon), color="primary"),
                title=ft.Text(link.title, weight=ft.FontWeight.W_600),
                subtitle=ft.Text(link.display_url, size=12),
                trailing=ft.Icon(name="arrow_forward"),
                on_click=open_link if link.is_external else None,
            ),
        )

    def show_view(self, view: PageView) -> None:
        self.avatar.foreground_image_src = view.profile.image_url
        self.name_text.value = view.profile.name
        self.bio_text.value = view.profile.bio
        self.links_column.controls = [self._link_tile(link) for link in view.links]
        self.empty_state.visible = view.show_empty_state
