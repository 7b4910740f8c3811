"""
Core data structures shared by the metadata resolver and the tag generator.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Platform(str, Enum):
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    REDDIT = "reddit"
    TIKTOK = "tiktok"
    YOUTUBE = "youtube"
    GITHUB = "github"
    INSTAGRAM = "instagram"
    VIMEO = "vimeo"
    WEB = "web"


class BookmarkSource(str, Enum):
    WEB = "web"
    WHATSAPP = "whatsapp"
    EXTENSION = "extension"


def _clean(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class ResolvedMetadata:
    """
    Best-effort metadata for a single URL. The title is always populated.
    """

    title: str
    platform: Platform = Platform.WEB
    description: Optional[str] = None
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "platform": self.platform.value,
        }


@dataclass(frozen=True)
class PageMetadata:
    """
    Metadata read from a loaded page's DOM (title tag, description, og/twitter image).
    """

    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", _clean(self.title))
        object.__setattr__(self, "description", _clean(self.description))
        object.__setattr__(self, "image_url", _clean(self.image_url))

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> Optional["PageMetadata"]:
        """Build from a content-script message (`{title, url, description, imageUrl, platform}`)."""
        if not isinstance(payload, dict):
            return None
        page = cls(
            title=payload.get("title"),
            description=payload.get("description"),
            image_url=payload.get("imageUrl") or payload.get("image_url") or payload.get("image"),
        )
        return page if not page.is_empty else None

    @property
    def is_complete(self) -> bool:
        return bool(self.title and self.description and self.image_url)

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.description or self.image_url)


@dataclass(frozen=True)
class SaveContext:
    """
    Who is saving and from where. Passed explicitly to every save call.
    """

    user_id: str
    source: BookmarkSource = BookmarkSource.WEB
