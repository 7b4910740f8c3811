"""
URL parsing + platform classification shared by the resolver and the tag generator.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple
from urllib.parse import SplitResult, unquote, urlsplit

from hoarder.errors import URLParseFailure
from hoarder.models import Platform

logger = logging.getLogger(__name__)

# First match wins.
PLATFORM_DOMAINS: List[Tuple[Platform, Tuple[str, ...]]] = [
    (Platform.TWITTER, ("twitter.com", "x.com", "t.co")),
    (Platform.LINKEDIN, ("linkedin.com", "lnkd.in")),
    (Platform.REDDIT, ("reddit.com", "redd.it")),
    (Platform.TIKTOK, ("tiktok.com",)),
    (Platform.YOUTUBE, ("youtube.com", "youtu.be")),
    (Platform.GITHUB, ("github.com",)),
    (Platform.INSTAGRAM, ("instagram.com",)),
    (Platform.VIMEO, ("vimeo.com",)),
]


@dataclass(frozen=True)
class ParsedUrl:
    url: str
    parts: SplitResult
    host: str
    segments: Tuple[str, ...]


def parse_url(url: str) -> ParsedUrl:
    """
    Split a URL and pre-compute its host + decoded path segments.

    Raises URLParseFailure when the input is not an http(s) URL with a host.
    """
    if not isinstance(url, str) or not url.strip():
        raise URLParseFailure("empty URL", url=url if isinstance(url, str) else None)
    cleaned = url.strip()
    try:
        parts = urlsplit(cleaned)
        host = (parts.hostname or "").lower()
    except ValueError as exc:
        raise URLParseFailure(f"unparseable URL: {exc}", url=cleaned) from exc
    if parts.scheme.lower() not in {"http", "https"} or not host:
        raise URLParseFailure("URL needs an http(s) scheme and a host", url=cleaned)
    segments = tuple(unquote(seg) for seg in parts.path.split("/") if seg)
    return ParsedUrl(url=cleaned, parts=parts, host=host, segments=segments)


def platform_for_host(host: str) -> Platform:
    host = host.lower().rstrip(".")
    for platform, domains in PLATFORM_DOMAINS:
        for domain in domains:
            if host == domain or host.endswith("." + domain):
                return platform
    return Platform.WEB


def detect_platform(url: str) -> Platform:
    try:
        parsed = parse_url(url)
    except URLParseFailure:
        return Platform.WEB
    return platform_for_host(parsed.host)


def coerce_platform(value) -> Platform | None:
    """Accept a Platform, its string value, or None."""
    if value is None or isinstance(value, Platform):
        return value
    try:
        return Platform(str(value).strip().lower())
    except ValueError:
        logger.debug("Unknown platform value '%s'; ignoring.", value)
        return None
