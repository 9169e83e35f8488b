"""
Controller component - Port interfaces for UI collaborators.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .models import TransientUIState


class ConfirmPort(Protocol):
    """Yes/no prompt. The answer may arrive later (dialog callback)."""

    def ask(self, message: str, on_answer: Callable[[bool], None]) -> None: ...


class UIStateListener(Protocol):
    """Told when modal or drag state changes."""

    def __call__(self, ui: TransientUIState) -> None: ...
