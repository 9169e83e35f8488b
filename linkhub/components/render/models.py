"""
Render component - View models for the public page and the admin panel.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileView:
    """Profile fields as displayed."""

    name: str
    bio: str
    image_url: str


@dataclass(frozen=True)
class PublicLinkView:
    """A link prepared for the visitor-facing list."""

    id: str
    title: str
    url: str
    display_url: str
    icon: str
    position: int
    is_external: bool = True


@dataclass(frozen=True)
class EditableLinkView:
    """A row of the admin link editor."""

    id: str
    index: int
    title: str
    url: str
    is_dragging: bool = False


@dataclass(frozen=True)
class ThemeMarker:
    """A theme button and whether it reflects the active theme."""

    tag: str
    label: str
    active: bool


@dataclass(frozen=True)
class PageView:
    """Complete render data for the page."""

    profile: ProfileView
    links: list[PublicLinkView]
    editable_links: list[EditableLinkView]
    themes: list[ThemeMarker]
    theme: str
    show_empty_state: bool
    total_links: int = 0
