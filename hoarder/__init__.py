"""
Public API for the Hoarder link pipeline: metadata resolution + tag generation.
"""
from __future__ import annotations

from hoarder.bookmarks import (
    BookmarkRecord,
    BookmarkSink,
    build_bookmark,
    extract_urls,
    save_message_links,
    save_url,
)
from hoarder.models import BookmarkSource, PageMetadata, Platform, ResolvedMetadata, SaveContext
from hoarder.platforms import detect_platform
from hoarder.resolver import MetadataResolver, resolve_metadata
from hoarder.settings import HoarderSettings, load_settings
from hoarder.tagging import TagVocabulary, generate_tags

__all__ = [
    "BookmarkRecord",
    "BookmarkSink",
    "BookmarkSource",
    "HoarderSettings",
    "MetadataResolver",
    "PageMetadata",
    "Platform",
    "ResolvedMetadata",
    "SaveContext",
    "TagVocabulary",
    "build_bookmark",
    "detect_platform",
    "extract_urls",
    "generate_tags",
    "load_settings",
    "resolve_metadata",
    "save_message_links",
    "save_url",
]
