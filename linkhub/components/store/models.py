"""
Store component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# A link is addressed by its stable id, or by its current position
LinkRef = int | str


class ChangeKind(str, Enum):
    PROFILE = "profile"
    LINKS = "links"
    LINK_FIELD = "link_field"
    THEME = "theme"
    ALL = "all"


@dataclass(frozen=True)
class StateChange:
    """Published after every completed mutation."""

    kind: ChangeKind
    link_id: str | None = None
