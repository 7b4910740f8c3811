"""
Link-unfurling service lookup (`GET <endpoint>?url=...` returning title/description/image JSON).
"""
from __future__ import annotations

from typing import Any, Optional

from hoarder.errors import ParseFailure
from hoarder.http_client import HttpClient
from hoarder.models import ResolvedMetadata
from hoarder.strategies.base import ResolveTarget
from hoarder.strategies.basic import basic_title


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _image_url(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return _text(value.get("url"))
    return _text(value)


class UnfurlServiceStrategy:
    name = "unfurl"

    def __init__(self, client: HttpClient, endpoint: str, api_key: Optional[str] = None) -> None:
        self.client = client
        self.endpoint = endpoint
        self.api_key = api_key

    def resolve(self, target: ResolveTarget) -> Optional[ResolvedMetadata]:
        headers = {"x-api-key": self.api_key} if self.api_key else None
        payload = self.client.get_json(self.endpoint, params={"url": target.url}, headers=headers)
        return self._parse(payload, target)

    @staticmethod
    def _parse(payload: Any, target: ResolveTarget) -> ResolvedMetadata:
        if not isinstance(payload, dict):
            raise ParseFailure("unfurl payload is not an object", url=target.url)
        if "status" in payload and payload.get("status") != "success":
            raise ParseFailure(f"unfurl service status '{payload.get('status')}'", url=target.url)
        data = payload.get("data", payload)
        if not isinstance(data, dict):
            raise ParseFailure("unfurl payload has no data object", url=target.url)

        title = _text(data.get("title"))
        description = _text(data.get("description"))
        image = _image_url(data.get("image"))
        if not (title or description or image):
            raise ParseFailure("unfurl payload carries no metadata", url=target.url)
        return ResolvedMetadata(
            title=title or basic_title(target),
            platform=target.platform,
            description=description,
            image=image,
        )
