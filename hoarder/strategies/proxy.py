"""
CORS-proxy fetch of the raw page followed by meta-tag scraping.
"""
from __future__ import annotations

from typing import Any, Optional

from hoarder.errors import ParseFailure
from hoarder.html_meta import parse_html_metadata
from hoarder.http_client import HttpClient
from hoarder.models import ResolvedMetadata
from hoarder.strategies.base import ResolveTarget
from hoarder.strategies.basic import basic_title


class ProxyScrapeStrategy:
    """
    Expects an allorigins-style envelope: `{"contents": "<html>...", "status": {...}}`.
    """

    name = "proxy"

    def __init__(self, client: HttpClient, endpoint: str) -> None:
        self.client = client
        self.endpoint = endpoint

    def resolve(self, target: ResolveTarget) -> Optional[ResolvedMetadata]:
        payload = self.client.get_json(self.endpoint, params={"url": target.url})
        html = self._contents(payload, target)
        meta = parse_html_metadata(html)
        if not any(meta.values()):
            raise ParseFailure("page has no title or meta tags", url=target.url)
        return ResolvedMetadata(
            title=meta["title"] or basic_title(target),
            platform=target.platform,
            description=meta["description"],
            image=meta["image"],
        )

    @staticmethod
    def _contents(payload: Any, target: ResolveTarget) -> str:
        if isinstance(payload, dict):
            html = payload.get("contents")
        else:
            html = payload
        if not isinstance(html, str) or not html.strip():
            raise ParseFailure("proxy returned no HTML contents", url=target.url)
        return html
