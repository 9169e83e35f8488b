"""Flet client storage adapter.

Wraps page.client_storage, which is the browser's localStorage when the app
runs on the web and a per-app preferences file on desktop.
"""

import logging

import flet as ft

from linkhub.core.ports.storage import StorageWriteError

logger = logging.getLogger(__name__)


class FletClientStorage:
    def __init__(self, page: ft.Page) -> None:
        self.page = page

    def get(self, key: str) -> str | None:
        value = self.page.client_storage.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning(f"Unexpected {type(value).__name__} stored under '{key}'")
            return None
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self.page.client_storage.set(key, value)
        except Exception as e:
            # client storage surfaces quota and transport failures as plain exceptions
            raise StorageWriteError(key, str(e)) from e

    def remove(self, key: str) -> None:
        if self.page.client_storage.contains_key(key):
            self.page.client_storage.remove(key)
