"""
Keyword-based topical tagging for saved links.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Pattern, Sequence, Tuple

from hoarder.keywords import CONTENT_TYPE_TAGS, PLATFORM_TAGS, TOPIC_KEYWORDS
from hoarder.models import Platform

DEFAULT_TAG_LIMIT = 5


@dataclass(frozen=True)
class TagVocabulary:
    keywords: Tuple[str, ...]
    # (platform key, text triggers, tags)
    platform_tags: Tuple[Tuple[str, Tuple[str, ...], Tuple[str, ...]], ...]
    # (text triggers, tag)
    content_types: Tuple[Tuple[Tuple[str, ...], str], ...]

    @classmethod
    def default(cls) -> "TagVocabulary":
        return cls(
            keywords=tuple(TOPIC_KEYWORDS),
            platform_tags=tuple(
                (key, tuple(triggers), tuple(tags)) for key, (triggers, tags) in PLATFORM_TAGS.items()
            ),
            content_types=tuple((tuple(triggers), tag) for triggers, tag in CONTENT_TYPE_TAGS),
        )


DEFAULT_VOCABULARY = TagVocabulary.default()


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> Pattern[str]:
    # Whole-word match with an optional plural suffix: "ai" must not fire on "said".
    return re.compile(r"(?<![a-z0-9])" + re.escape(keyword.lower()) + r"(?:s|es)?(?![a-z0-9])")


def _platform_key(platform: Optional[Platform | str]) -> Optional[str]:
    if isinstance(platform, Platform):
        return platform.value
    if isinstance(platform, str) and platform.strip():
        return platform.strip().lower()
    return None


def _append(tags: List[str], values: Sequence[str]) -> None:
    for value in values:
        if value not in tags:
            tags.append(value)


def generate_tags(
    title: str,
    description: Optional[str] = None,
    platform: Optional[Platform | str] = None,
    *,
    vocabulary: Optional[TagVocabulary] = None,
    limit: Optional[int] = None,
) -> List[str]:
    """
    Derive up to `limit` lowercase tags from a title/description/platform triple.

    Ordering is by scan order over the tables, never by position in the text:
    vocabulary matches first, then platform groups, then content-type tags.
    """
    vocab = vocabulary or DEFAULT_VOCABULARY
    cap = DEFAULT_TAG_LIMIT if limit is None else max(0, limit)
    text = f"{title or ''} {description or ''}".lower()
    platform_key = _platform_key(platform)

    tags: List[str] = []
    _append(tags, [kw.lower() for kw in vocab.keywords if _keyword_pattern(kw).search(text)])

    for key, triggers, group in vocab.platform_tags:
        if platform_key == key or any(trigger in text for trigger in triggers):
            _append(tags, group)

    for triggers, tag in vocab.content_types:
        if any(trigger in text for trigger in triggers):
            _append(tags, [tag])

    return tags[:cap]
