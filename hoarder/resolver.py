"""
Ordered-fallback metadata resolution: social short-circuit, oEmbed, unfurl service, proxy scrape, URL basics.
"""
from __future__ import annotations

import logging
from typing import Optional

from hoarder.errors import ResolutionError, URLParseFailure
from hoarder.http_client import HttpClient
from hoarder.models import PageMetadata, Platform, ResolvedMetadata
from hoarder.platforms import parse_url, platform_for_host
from hoarder.settings import HoarderSettings, load_settings
from hoarder.strategies import (
    BasicUrlStrategy,
    OEmbedStrategy,
    ProxyScrapeStrategy,
    ResolveTarget,
    SocialPathStrategy,
    StrategyRegistry,
    UnfurlServiceStrategy,
)
from hoarder.strategies.basic import UNKNOWN_TITLE

logger = logging.getLogger(__name__)


class MetadataResolver:
    """
    Turns a raw URL into ResolvedMetadata. Never raises.

    Owns one HTTP session; use as a context manager or call close() when done.
    """

    def __init__(
        self,
        settings: Optional[HoarderSettings] = None,
        client: Optional[HttpClient] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.client = client or HttpClient(
            timeout=self.settings.fetch_timeout,
            max_retries=self.settings.fetch_retries,
            user_agent=self.settings.user_agent,
        )
        self.strategies = self._build_strategies()
        self._basic = BasicUrlStrategy()

    def _build_strategies(self) -> StrategyRegistry:
        registry = StrategyRegistry()
        registry.register(SocialPathStrategy())
        registry.register(OEmbedStrategy(self.client))
        if self.settings.unfurl_endpoint:
            registry.register(
                UnfurlServiceStrategy(
                    self.client,
                    endpoint=self.settings.unfurl_endpoint,
                    api_key=self.settings.unfurl_api_key,
                )
            )
        if self.settings.enable_proxy and self.settings.proxy_endpoint:
            registry.register(ProxyScrapeStrategy(self.client, endpoint=self.settings.proxy_endpoint))
        registry.register(BasicUrlStrategy())
        return registry

    def __enter__(self) -> "MetadataResolver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def resolve(self, url: str, page: Optional[PageMetadata] = None) -> ResolvedMetadata:
        try:
            parsed = parse_url(url)
        except URLParseFailure as exc:
            logger.warning("Cannot parse URL %r: %s", url, exc)
            return _merge_page(ResolvedMetadata(title=UNKNOWN_TITLE, platform=Platform.WEB), page)

        target = ResolveTarget(parsed=parsed, platform=platform_for_host(parsed.host))
        if page is not None and page.is_complete:
            logger.debug("Using in-page metadata for %s", target.url)
            return ResolvedMetadata(
                title=page.title,
                platform=target.platform,
                description=page.description,
                image=page.image_url,
            )
        return _merge_page(self._run_chain(target), page)

    def _run_chain(self, target: ResolveTarget) -> ResolvedMetadata:
        for strategy in self.strategies:
            try:
                result = strategy.resolve(target)
            except ResolutionError as exc:
                logger.warning("Strategy %s failed for %s: %s", strategy.name, target.url, exc)
                continue
            except Exception as exc:
                logger.error("Strategy %s crashed for %s: %s", strategy.name, target.url, exc, exc_info=True)
                continue
            if result is not None and result.title:
                logger.debug("Resolved %s via %s", target.url, strategy.name)
                return result
        # Only reachable when the chain was built without the basic tier.
        return self._basic.resolve(target)


def _merge_page(resolved: ResolvedMetadata, page: Optional[PageMetadata]) -> ResolvedMetadata:
    """In-page values win; the resolved record only fills the gaps."""
    if page is None or page.is_empty:
        return resolved
    return ResolvedMetadata(
        title=page.title or resolved.title,
        platform=resolved.platform,
        description=page.description or resolved.description,
        image=page.image_url or resolved.image,
    )


def resolve_metadata(
    url: str,
    page: Optional[PageMetadata] = None,
    *,
    settings: Optional[HoarderSettings] = None,
) -> ResolvedMetadata:
    with MetadataResolver(settings=settings) as resolver:
        return resolver.resolve(url, page=page)
