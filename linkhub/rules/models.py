from pydantic import BaseModel, Field

DEFAULT_IMAGE_URL = "https://via.placeholder.com/120/4f46e5/ffffff?text=%F0%9F%91%A4"


class StorageRules(BaseModel):
    key: str = "linktree-data"
    file_name: str = "linkhub_storage.json"

class ProfileDefaults(BaseModel):
    name: str = "Your Name"
    bio: str = "Your bio here"
    image: str = DEFAULT_IMAGE_URL

class DefaultsRules(BaseModel):
    profile: ProfileDefaults = Field(default_factory=ProfileDefaults)
    theme: str = "default"

class ThemeRule(BaseModel):
    tag: str
    label: str
    primary: str = "#4f46e5"
    background: str = "#f8fafc"
    surface: str = "#ffffff"
    on_surface: str = "#1e293b"
    dark: bool = False

class NotificationRules(BaseModel):
    duration_seconds: float = Field(default=3, gt=0)

class ExportRules(BaseModel):
    filename_prefix: str = "linktree-backup"

class DemoLink(BaseModel):
    title: str
    url: str

class DemoRules(BaseModel):
    seed_when_empty: bool = False
    links: list[DemoLink] = Field(default_factory=list)


def _default_themes() -> list[ThemeRule]:
    return [ThemeRule(tag="default", label="Default")]


class Rules(BaseModel):
    storage: StorageRules = Field(default_factory=StorageRules)
    defaults: DefaultsRules = Field(default_factory=DefaultsRules)
    themes: list[ThemeRule] = Field(default_factory=_default_themes)
    notifications: NotificationRules = Field(default_factory=NotificationRules)
    export: ExportRules = Field(default_factory=ExportRules)
    demo: DemoRules = Field(default_factory=DemoRules)

    def theme(self, tag: str) -> ThemeRule | None:
        return next((t for t in self.themes if t.tag == tag), None)
