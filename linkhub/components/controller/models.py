"""
Controller component - Transient UI state (never persisted).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from linkhub.components.drag import DragState


@dataclass
class TransientUIState:
    admin_open: bool = False
    drag: DragState = field(default_factory=DragState)
