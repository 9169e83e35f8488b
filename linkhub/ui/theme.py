import flet as ft

from linkhub.rules.models import ThemeRule


class AppTheme:
    """
    Theme palettes for the link page.
    Each configured theme tag maps to one flet Theme; unknown tags fall back
    to the first configured palette.
    """

    font_family = "Inter"

    @classmethod
    def for_rule(cls, rule: ThemeRule) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=rule.primary,
                on_primary="#ffffff",
                surface=rule.surface,
                on_surface=rule.on_surface,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def resolve(cls, themes: list[ThemeRule], tag: str) -> ThemeRule | None:
        match = next((t for t in themes if t.tag == tag), None)
        if match is None and themes:
            return themes[0]
        return match

    @classmethod
    def apply(cls, page: ft.Page, themes: list[ThemeRule], tag: str) -> None:
        rule = cls.resolve(themes, tag)
        if rule is None:
            return
        page.theme = cls.for_rule(rule)
        page.theme_mode = ft.ThemeMode.DARK if rule.dark else ft.ThemeMode.LIGHT
        page.dark_theme = page.theme if rule.dark else None
        page.bgcolor = rule.background


# Material icon names standing in for brand icons
ICON_GLYPHS: dict[str, str] = {
    "instagram": "photo_camera",
    "facebook": "facebook",
    "twitter": "alternate_email",
    "x-twitter": "alternate_email",
    "linkedin": "work",
    "youtube": "smart_display",
    "tiktok": "tiktok",
    "github": "code",
    "spotify": "music_note",
    "apple": "apple",
    "whatsapp": "whatsapp",
    "telegram": "telegram",
    "discord": "discord",
    "twitch": "live_tv",
    "pinterest": "push_pin",
    "snapchat": "snapchat",
    "reddit": "reddit",
    "medium": "article",
    "behance": "brush",
    "dribbble": "sports_basketball",
    "link": "link",
}

NOTIFICATION_COLORS: dict[str, str] = {
    "success": "#10b981",
    "error": "#ef4444",
    "info": "#3b82f6",
}


def glyph_for(icon_id: str) -> str:
    return ICON_GLYPHS.get(icon_id, ICON_GLYPHS["link"])
