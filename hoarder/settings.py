"""
Centralised settings for the link pipeline (env-first, code-light).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_UNFURL_ENDPOINT = "https://api.microlink.io/"
DEFAULT_PROXY_ENDPOINT = "https://api.allorigins.win/get"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; HoarderBot/1.0)"


@dataclass
class HoarderSettings:
    unfurl_endpoint: str = DEFAULT_UNFURL_ENDPOINT
    unfurl_api_key: Optional[str] = None
    proxy_endpoint: str = DEFAULT_PROXY_ENDPOINT
    enable_proxy: bool = True
    fetch_timeout: float = 5.0
    fetch_retries: int = 0
    user_agent: str = DEFAULT_USER_AGENT
    max_tags: int = 5
    tags_config_path: Optional[Path] = None
    log_level: str = "INFO"


def _str_from_env(key: str, default: Optional[str]) -> Optional[str]:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _int_from_env(key: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
        return value if value >= minimum else default
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default


def _float_from_env(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = float(raw)
        return value if value > 0 else default
    except ValueError:
        logger.warning("Invalid float value for %s=%s; using default %s", key, raw, default)
        return default


def _bool_from_env(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    token = raw.strip().lower()
    if token in {"1", "true", "yes", "on"}:
        return True
    if token in {"0", "false", "no", "off"}:
        return False
    logger.warning("Invalid bool value for %s=%s; using default %s", key, raw, default)
    return default


def load_settings() -> HoarderSettings:
    tags_config = _str_from_env("HOARDER_TAGS_CONFIG", None)
    return HoarderSettings(
        unfurl_endpoint=_str_from_env("HOARDER_UNFURL_ENDPOINT", DEFAULT_UNFURL_ENDPOINT),
        unfurl_api_key=_str_from_env("HOARDER_UNFURL_API_KEY", None),
        proxy_endpoint=_str_from_env("HOARDER_PROXY_ENDPOINT", DEFAULT_PROXY_ENDPOINT),
        enable_proxy=_bool_from_env("HOARDER_ENABLE_PROXY", True),
        fetch_timeout=_float_from_env("HOARDER_FETCH_TIMEOUT", 5.0),
        fetch_retries=_int_from_env("HOARDER_FETCH_RETRIES", 0, minimum=0),
        user_agent=_str_from_env("HOARDER_USER_AGENT", DEFAULT_USER_AGENT),
        max_tags=_int_from_env("HOARDER_MAX_TAGS", 5),
        tags_config_path=Path(tags_config) if tags_config else None,
        log_level=(_str_from_env("HOARDER_LOG_LEVEL", "INFO") or "INFO").upper(),
    )
