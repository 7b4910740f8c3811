"""
Save-operation glue: resolve metadata, derive tags, hand a record to the persistence sink.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field, field_validator

from hoarder.config_loader import load_tag_vocabulary
from hoarder.models import BookmarkSource, PageMetadata, Platform, SaveContext
from hoarder.resolver import MetadataResolver
from hoarder.tagging import TagVocabulary, generate_tags

logger = logging.getLogger(__name__)

_URL_RE = re.compile(r"https?://\S+", re.IGNORECASE)
_TRAILING_PUNCT = ".,;:!?)]}>\"'"


class BookmarkRecord(BaseModel):
    url: str
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    platform: Platform = Platform.WEB
    tags: List[str] = Field(default_factory=list)
    source: BookmarkSource = BookmarkSource.WEB
    user_id: str

    @field_validator("url", mode="before")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        return (value or "").strip()

    @field_validator("title", mode="before")
    @classmethod
    def _title_or_unknown(cls, value: Optional[str]) -> str:
        return (value or "").strip() or "Unknown"

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class BookmarkSink(Protocol):
    def insert(self, record: BookmarkRecord) -> None:
        ...


def build_bookmark(
    url: str,
    context: SaveContext,
    *,
    resolver: Optional[MetadataResolver] = None,
    page: Optional[PageMetadata] = None,
    vocabulary: Optional[TagVocabulary] = None,
) -> BookmarkRecord:
    if resolver is None:
        with MetadataResolver() as owned:
            return build_bookmark(url, context, resolver=owned, page=page, vocabulary=vocabulary)

    metadata = resolver.resolve(url, page=page)
    tags = generate_tags(
        metadata.title,
        metadata.description,
        metadata.platform,
        vocabulary=vocabulary or load_tag_vocabulary(resolver.settings.tags_config_path),
        limit=resolver.settings.max_tags,
    )
    return BookmarkRecord(
        url=url,
        title=metadata.title,
        description=metadata.description,
        image_url=metadata.image,
        platform=metadata.platform,
        tags=tags,
        source=context.source,
        user_id=context.user_id,
    )


def save_url(
    url: str,
    context: SaveContext,
    sink: BookmarkSink,
    *,
    resolver: Optional[MetadataResolver] = None,
    page: Optional[PageMetadata] = None,
    vocabulary: Optional[TagVocabulary] = None,
) -> BookmarkRecord:
    record = build_bookmark(url, context, resolver=resolver, page=page, vocabulary=vocabulary)
    sink.insert(record)
    logger.info("Saved %s bookmark for user %s: %s", record.platform.value, context.user_id, record.url)
    return record


def extract_urls(text: str) -> List[str]:
    """Pull http(s) links out of a chat message, in order, without duplicates."""
    urls: List[str] = []
    for match in _URL_RE.findall(text or ""):
        url = match.rstrip(_TRAILING_PUNCT)
        if url and url not in urls:
            urls.append(url)
    return urls


def save_message_links(
    text: str,
    context: SaveContext,
    sink: BookmarkSink,
    *,
    resolver: Optional[MetadataResolver] = None,
    vocabulary: Optional[TagVocabulary] = None,
) -> List[BookmarkRecord]:
    """
    Save every link found in an inbound bot message. A failing insert does not stop the rest.
    """
    urls = extract_urls(text)
    if not urls:
        return []
    if resolver is None:
        with MetadataResolver() as owned:
            return save_message_links(text, context, sink, resolver=owned, vocabulary=vocabulary)

    saved: List[BookmarkRecord] = []
    for url in urls:
        try:
            saved.append(save_url(url, context, sink, resolver=resolver, vocabulary=vocabulary))
        except Exception as exc:
            logger.error("Failed to save %s for user %s: %s", url, context.user_id, exc)
    return saved
