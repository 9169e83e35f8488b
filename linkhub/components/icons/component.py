"""
Icons component - Fixed domain to icon lookup.

Functional Core - pure lookup, no I/O.
"""

from __future__ import annotations

from linkhub.components.validation import extract_domain

GENERIC_LINK_ICON = "link"

ICON_MAP: dict[str, str] = {
    "instagram.com": "instagram",
    "facebook.com": "facebook",
    "twitter.com": "twitter",
    "x.com": "x-twitter",
    "linkedin.com": "linkedin",
    "youtube.com": "youtube",
    "tiktok.com": "tiktok",
    "github.com": "github",
    "spotify.com": "spotify",
    "apple.com": "apple",
    "whatsapp.com": "whatsapp",
    "telegram.org": "telegram",
    "discord.com": "discord",
    "twitch.tv": "twitch",
    "pinterest.com": "pinterest",
    "snapchat.com": "snapchat",
    "reddit.com": "reddit",
    "medium.com": "medium",
    "behance.net": "behance",
    "dribbble.com": "dribbble",
}


def icon_for(url: str) -> str:
    """Icon identifier for a link URL; generic link icon when unknown."""
    return ICON_MAP.get(extract_domain(url), GENERIC_LINK_ICON)
