"""
Drag component - Drag-to-reorder gesture state.
"""

from .component import DragState
from .models import DragPhase, Move

__all__ = [
    "DragState",
    "DragPhase",
    "Move",
]
