"""
Load an optional YAML override for the tag tables, with `${ENV}` expansion.
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from hoarder.tagging import DEFAULT_VOCABULARY, TagVocabulary

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def load_tag_vocabulary(path: Optional[Path]) -> TagVocabulary:
    if path is None:
        return DEFAULT_VOCABULARY
    config_path = Path(path)
    if not config_path.exists():
        logger.warning("Tag config not found at %s; using defaults.", config_path)
        return DEFAULT_VOCABULARY
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to read tag config %s: %s; using defaults.", config_path, exc)
        return DEFAULT_VOCABULARY
    if not isinstance(data, dict):
        logger.warning("Tag config %s is not a mapping; using defaults.", config_path)
        return DEFAULT_VOCABULARY
    return vocabulary_from_dict(_expand_env(data))


def vocabulary_from_dict(data: Dict[str, Any]) -> TagVocabulary:
    """Missing or malformed sections keep their defaults."""
    keywords = DEFAULT_VOCABULARY.keywords
    raw_keywords = data.get("keywords")
    if isinstance(raw_keywords, list):
        keywords = tuple(kw.strip().lower() for kw in raw_keywords if isinstance(kw, str) and kw.strip())

    platform_tags = DEFAULT_VOCABULARY.platform_tags
    raw_platforms = data.get("platform_tags")
    if isinstance(raw_platforms, dict):
        groups = []
        for key, cfg in raw_platforms.items():
            if not isinstance(cfg, dict):
                logger.warning("Ignoring platform_tags entry '%s' (expected a mapping).", key)
                continue
            groups.append(
                (
                    str(key).strip().lower(),
                    _string_tuple(cfg.get("triggers")) or (str(key).strip().lower(),),
                    _string_tuple(cfg.get("tags")),
                )
            )
        platform_tags = tuple(groups)

    content_types = DEFAULT_VOCABULARY.content_types
    raw_content = data.get("content_types")
    if isinstance(raw_content, list):
        entries = []
        for cfg in raw_content:
            if not isinstance(cfg, dict) or not isinstance(cfg.get("tag"), str):
                logger.warning("Ignoring malformed content_types entry %r.", cfg)
                continue
            tag = cfg["tag"].strip().lower()
            entries.append((_string_tuple(cfg.get("triggers")) or (tag,), tag))
        content_types = tuple(entries)

    return TagVocabulary(keywords=keywords, platform_tags=platform_tags, content_types=content_types)


def _string_tuple(value: Any) -> tuple:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return ()
    return tuple(item.strip().lower() for item in value if isinstance(item, str) and item.strip())


def _expand_env(data: Dict[str, Any]) -> Dict[str, Any]:
    def replace(value: Any) -> Any:
        if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
            return os.getenv(value[2:-1], "")
        if isinstance(value, dict):
            return {k: replace(v) for k, v in value.items()}
        if isinstance(value, list):
            return [replace(item) for item in value]
        return value

    return replace(data)  # type: ignore[return-value]
