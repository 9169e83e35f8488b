"""
Icons component - Icon identifiers for well-known link domains.
"""

from .component import GENERIC_LINK_ICON, ICON_MAP, icon_for

__all__ = [
    "icon_for",
    "ICON_MAP",
    "GENERIC_LINK_ICON",
]
