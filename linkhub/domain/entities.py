from collections.abc import Mapping
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from linkhub.rules.models import ProfileDefaults

# --- Enums / Literals ---
LinkField = Literal["title", "url"]
NotificationKind = Literal["success", "error", "info"]

LINK_FIELDS: tuple[str, ...] = ("title", "url")


def new_link_id() -> str:
    return uuid4().hex


def coerce_text(value: Any) -> str:
    """Render any stored scalar as text; missing values become empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

# --- Profile ---

class Profile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    bio: str
    image_url: str = Field(alias="image")

    @classmethod
    def from_defaults(cls, defaults: ProfileDefaults) -> "Profile":
        return cls(name=defaults.name, bio=defaults.bio, image_url=defaults.image)

    @classmethod
    def from_raw(cls, raw: Any, defaults: ProfileDefaults) -> "Profile":
        """Build a profile from a stored object; missing fields take defaults."""
        data = raw if isinstance(raw, Mapping) else {}

        def pick(key: str, default: str) -> str:
            value = data.get(key)
            return default if value is None else coerce_text(value)

        return cls(
            name=pick("name", defaults.name),
            bio=pick("bio", defaults.bio),
            image_url=pick("image", defaults.image),
        )

    def to_document(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)

# --- Links ---

class Link(BaseModel):
    # Runtime identity only; the stored shape is {title, url}
    id: str = Field(default_factory=new_link_id, exclude=True)
    title: str = ""
    url: str = ""

    @field_validator("title", "url", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        return coerce_text(value)

    @classmethod
    def from_raw(cls, raw: Any) -> "Link":
        """Accept whatever a stored document holds; non-objects become empty links."""
        if isinstance(raw, Link):
            return raw
        if not isinstance(raw, Mapping):
            return cls()
        return cls(title=raw.get("title"), url=raw.get("url"))

    def to_document(self) -> dict[str, str]:
        return self.model_dump()

# --- Application State ---

class AppState(BaseModel):
    profile: Profile
    links: list[Link] = Field(default_factory=list)
    theme: str = "default"
    # Top-level keys from loaded documents that the app does not model
    extras: dict[str, Any] = Field(default_factory=dict)

    def index_of(self, link_id: str) -> int | None:
        return next((i for i, link in enumerate(self.links) if link.id == link_id), None)

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "profile": self.profile.to_document(),
            "links": [link.to_document() for link in self.links],
            "theme": self.theme,
        }
        for key, value in self.extras.items():
            doc.setdefault(key, value)
        return doc
