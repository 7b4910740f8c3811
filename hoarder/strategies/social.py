"""
Short-circuit for platforms whose anti-bot measures defeat generic scrapers.
"""
from __future__ import annotations

from typing import Optional

from hoarder.models import Platform, ResolvedMetadata
from hoarder.strategies.base import ResolveTarget

SHORT_CIRCUIT_PLATFORMS = {Platform.TWITTER}


class SocialPathStrategy:
    """
    Synthesizes a title from the path (`/<handle>/status/<id>`) without any network call.
    """

    name = "social"

    def resolve(self, target: ResolveTarget) -> Optional[ResolvedMetadata]:
        if target.platform not in SHORT_CIRCUIT_PLATFORMS:
            return None

        segments = target.segments
        handle = segments[0].lstrip("@").strip() if segments else ""
        description = None
        if not handle:
            title = "Twitter Post"
        elif len(segments) >= 2:
            title = f"Post by @{handle}"
            if len(segments) >= 3 and segments[1] == "status":
                description = f"Post ID: {segments[2]}"
        else:
            title = f"Posts by @{handle}"
        return ResolvedMetadata(title=title, platform=target.platform, description=description)
