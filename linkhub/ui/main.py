import logging

import flet as ft

from linkhub.adapters.flet_storage import FletClientStorage
from linkhub.app_shell.config import get_settings, load_configured_rules
from linkhub.components.controller import TransientUIState
from linkhub.components.render import build_page_view
from linkhub.components.store import ChangeKind, StateChange
from linkhub.services.bootstrap import bootstrap_state
from linkhub.ui.bridges import DialogConfirm, SnackBarNotificationSink
from linkhub.ui.context import LinkHubContext
from linkhub.ui.theme import AppTheme
from linkhub.ui.views.admin import AdminPanel
from linkhub.ui.views.public import PublicLinkPage

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    settings = get_settings()
    rules = load_configured_rules()
    logger.info(f"Rules path: {settings.rules_path}")
    logger.info(f"Storage key: {rules.storage.key}")

    page.title = "LinkHub"
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.scroll = ft.ScrollMode.AUTO

    # 1. Context
    ctx = LinkHubContext.create(
        FletClientStorage(page),
        rules,
        confirmer=DialogConfirm(page),
        sinks=[SnackBarNotificationSink(page, rules.notifications.duration_seconds)],
    )
    controller = ctx.controller

    # 2. Views
    public = PublicLinkPage(page, on_edit_profile=lambda _: controller.open_admin())
    admin = AdminPanel(page, ctx, upload_dir=settings.upload_dir)

    def render(change: StateChange) -> None:
        view = build_page_view(ctx.store.state, rules.themes, controller.ui.drag)
        public.show_view(view)
        # Field edits leave the editor rows alone so the input keeps focus
        if change.kind in (ChangeKind.LINKS, ChangeKind.ALL):
            admin.show_links(view.editable_links)
        if change.kind in (ChangeKind.PROFILE, ChangeKind.ALL):
            admin.show_profile(view.profile)
        if change.kind in (ChangeKind.THEME, ChangeKind.ALL):
            admin.show_themes(view.themes)
            AppTheme.apply(page, rules.themes, view.theme)
        page.update()

    admin_visible = False

    def on_ui_change(ui: TransientUIState) -> None:
        nonlocal admin_visible
        if ui.admin_open and not admin_visible:
            # Opening the panel always shows the current editor rows
            admin.show_view(build_page_view(ctx.store.state, rules.themes, ui.drag))
            page.open(admin.dialog)
        elif not ui.admin_open and admin_visible:
            page.close(admin.dialog)
        admin_visible = ui.admin_open
        admin.mark_dragging(ui.drag.source_id)
        page.update()

    ctx.store.subscribe(render)
    controller.subscribe_ui(on_ui_change)

    def on_keyboard(e: ft.KeyboardEvent) -> None:
        controller.handle_key(e.key)

    page.on_keyboard_event = on_keyboard

    # 3. Layout
    page.appbar = ft.AppBar(
        title=ft.Text("LinkHub"),
        actions=[
            ft.IconButton(
                icon="settings",
                tooltip="Admin panel",
                on_click=lambda _: controller.open_admin(),
            )
        ],
    )
    page.add(ft.Container(content=public, padding=20))

    # 4. Load state (publishes the first render)
    bootstrap_state(ctx)
    render(StateChange(kind=ChangeKind.ALL))


def run() -> None:
    upload_dir = get_settings().upload_dir
    upload_dir.mkdir(parents=True, exist_ok=True)
    ft.app(target=main, upload_dir=str(upload_dir))


if __name__ == "__main__":
    run()
