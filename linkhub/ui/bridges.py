"""
Flet implementations of the controller's UI collaborators.
"""

from collections.abc import Callable

import flet as ft

from linkhub.components.notify import Notification
from linkhub.ui.theme import NOTIFICATION_COLORS


class SnackBarNotificationSink:
    """Shows notifications as a snack bar; opening one replaces the previous."""

    def __init__(self, page: ft.Page, duration_seconds: float = 3) -> None:
        self.page = page
        self.duration_ms = int(duration_seconds * 1000)

    def show(self, notification: Notification) -> None:
        snack = ft.SnackBar(
            content=ft.Text(notification.message, color="#ffffff"),
            bgcolor=NOTIFICATION_COLORS.get(notification.kind, NOTIFICATION_COLORS["info"]),
            duration=self.duration_ms,
        )
        self.page.open(snack)


class DialogConfirm:
    """Yes/no confirmation dialog."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page

    def ask(self, message: str, on_answer: Callable[[bool], None]) -> None:
        def answer(value: bool) -> Callable[[ft.ControlEvent], None]:
            def handler(_: ft.ControlEvent) -> None:
                self.page.close(dialog)
                on_answer(value)

            return handler

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Please confirm"),
            content=ft.Text(message),
            actions=[
                ft.TextButton("Cancel", on_click=answer(False)),
                ft.TextButton("Remove", on_click=answer(True)),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        self.page.open(dialog)
