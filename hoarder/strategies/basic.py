"""
Last tier: derive a title purely from URL structure. Always answers.
"""
from __future__ import annotations

from typing import Optional

from hoarder.models import Platform, ResolvedMetadata
from hoarder.strategies.base import ResolveTarget

UNKNOWN_TITLE = "Unknown"

PLATFORM_LABELS = {
    Platform.LINKEDIN: "LinkedIn Post",
    Platform.TIKTOK: "TikTok Video",
    Platform.INSTAGRAM: "Instagram Post",
}


def humanize_segment(segment: str) -> str:
    text = " ".join(segment.replace("-", " ").replace("_", " ").split())
    return text[:1].upper() + text[1:]


def _reddit_title(target: ResolveTarget) -> str:
    # /r/<sub>/comments/<id>/<slug>
    segments = target.segments
    if len(segments) >= 5 and segments[0] == "r" and segments[2] == "comments":
        slug = humanize_segment(segments[4])
        if slug:
            return slug
    return "Reddit Post"


def basic_title(target: ResolveTarget) -> str:
    if target.platform == Platform.REDDIT:
        return _reddit_title(target)
    if target.platform in PLATFORM_LABELS:
        return PLATFORM_LABELS[target.platform]
    title = humanize_segment(target.segments[-1]) if target.segments else ""
    if not title:
        host = target.parsed.host
        title = host[4:] if host.startswith("www.") else host
    return title or UNKNOWN_TITLE


class BasicUrlStrategy:
    name = "basic"

    def resolve(self, target: ResolveTarget) -> Optional[ResolvedMetadata]:
        return ResolvedMetadata(title=basic_title(target), platform=target.platform)
