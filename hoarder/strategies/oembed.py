"""
oEmbed lookups for video platforms that publish an unauthenticated endpoint.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from hoarder.errors import ParseFailure
from hoarder.http_client import HttpClient
from hoarder.models import Platform, ResolvedMetadata
from hoarder.strategies.base import ResolveTarget

OEMBED_ENDPOINTS: Dict[Platform, str] = {
    Platform.YOUTUBE: "https://www.youtube.com/oembed",
    Platform.VIMEO: "https://vimeo.com/api/oembed.json",
}


class OEmbedStrategy:
    name = "oembed"

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    def resolve(self, target: ResolveTarget) -> Optional[ResolvedMetadata]:
        endpoint = OEMBED_ENDPOINTS.get(target.platform)
        if not endpoint:
            return None
        params = {"url": target.url}
        if target.platform == Platform.YOUTUBE:
            params["format"] = "json"
        payload = self.client.get_json(endpoint, params=params)
        return self._parse(payload, target)

    @staticmethod
    def _parse(payload: Any, target: ResolveTarget) -> ResolvedMetadata:
        if not isinstance(payload, dict):
            raise ParseFailure("oEmbed payload is not an object", url=target.url)
        title = payload.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ParseFailure("oEmbed payload has no title", url=target.url)
        author = payload.get("author_name")
        thumbnail = payload.get("thumbnail_url")
        return ResolvedMetadata(
            title=title.strip(),
            platform=target.platform,
            description=f"By {author.strip()}" if isinstance(author, str) and author.strip() else None,
            image=thumbnail.strip() if isinstance(thumbnail, str) and thumbnail.strip() else None,
        )
