"""
Drag component - Reorder gesture as an explicit state machine.

    idle --start(link_id)--> dragging(link_id)
    dragging --drop(target)--> idle   (yields a Move when source != target)
    dragging --end()--> idle

The source is held as a link id and resolved to its position only at drop
time, so edits or removals during the gesture cannot misdirect the move.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from linkhub.domain.entities import Link

from .models import DragPhase, Move

logger = logging.getLogger(__name__)


class DragState:
    def __init__(self) -> None:
        self.source_id: str | None = None

    @property
    def phase(self) -> DragPhase:
        return DragPhase.IDLE if self.source_id is None else DragPhase.DRAGGING

    @property
    def is_dragging(self) -> bool:
        return self.source_id is not None

    def start(self, link_id: str) -> None:
        self.source_id = link_id

    def end(self) -> None:
        self.source_id = None

    def drop(self, target_index: int, links: Sequence[Link]) -> Move | None:
        """
        Finish the gesture on the link at target_index.

        Returns the move to apply, or None when idle, when the dragged link
        no longer exists, or when it was dropped on itself.
        """
        source_id = self.source_id
        self.source_id = None
        if source_id is None:
            return None

        from_index = next((i for i, link in enumerate(links) if link.id == source_id), None)
        if from_index is None:
            logger.info(f"Dragged link {source_id} no longer exists, ignoring drop")
            return None
        if from_index == target_index:
            return None
        return Move(from_index=from_index, to_index=target_index)
