"""
Render component - State to view-model projections for the public page
and the admin editor.
"""

from .component import (
    build_page_view,
    editable_link_views,
    profile_view,
    public_link_views,
    theme_markers,
)
from .models import (
    EditableLinkView,
    PageView,
    ProfileView,
    PublicLinkView,
    ThemeMarker,
)

__all__ = [
    # Functions
    "build_page_view",
    "profile_view",
    "public_link_views",
    "editable_link_views",
    "theme_markers",
    # View models
    "PageView",
    "ProfileView",
    "PublicLinkView",
    "EditableLinkView",
    "ThemeMarker",
]
