"""
Render component - Pure projections from state to view models.

Functional Core - no UI toolkit imports.
"""

from __future__ import annotations

from linkhub.components.drag import DragState
from linkhub.components.icons import icon_for
from linkhub.components.validation import format_url_for_display, is_well_formed_url
from linkhub.domain.entities import AppState
from linkhub.rules.models import ThemeRule

from .models import (
    EditableLinkView,
    PageView,
    ProfileView,
    PublicLinkView,
    ThemeMarker,
)


def profile_view(state: AppState) -> ProfileView:
    profile = state.profile
    return ProfileView(name=profile.name, bio=profile.bio, image_url=profile.image_url)


def public_link_views(state: AppState) -> list[PublicLinkView]:
    """
    Links for the public list, in display order.

    Links with a malformed URL still render, with their raw URL as the
    display text.
    """
    return [
        PublicLinkView(
            id=link.id,
            title=link.title,
            url=link.url,
            display_url=format_url_for_display(link.url),
            icon=icon_for(link.url),
            position=index,
            is_external=is_well_formed_url(link.url),
        )
        for index, link in enumerate(state.links)
    ]


def editable_link_views(state: AppState, drag: DragState | None = None) -> list[EditableLinkView]:
    """Rows of the admin editor; the row being dragged is marked."""
    dragging_id = drag.source_id if drag is not None else None
    return [
        EditableLinkView(
            id=link.id,
            index=index,
            title=link.title,
            url=link.url,
            is_dragging=link.id == dragging_id,
        )
        for index, link in enumerate(state.links)
    ]


def theme_markers(state: AppState, themes: list[ThemeRule]) -> list[ThemeMarker]:
    """One marker per configured theme; only the active tag is marked."""
    return [
        ThemeMarker(tag=theme.tag, label=theme.label, active=theme.tag == state.theme)
        for theme in themes
    ]


def build_page_view(
    state: AppState,
    themes: list[ThemeRule],
    drag: DragState | None = None,
) -> PageView:
    links = public_link_views(state)
    return PageView(
        profile=profile_view(state),
        links=links,
        editable_links=editable_link_views(state, drag),
        themes=theme_markers(state, themes),
        theme=state.theme,
        show_empty_state=not links,
        total_links=len(links),
    )
