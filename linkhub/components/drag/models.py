"""
Drag component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DragPhase(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class Move:
    """A reorder request produced by a completed drop."""

    from_index: int
    to_index: int
