"""
Strategy protocol + ordered registry for the metadata fallback chain.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Protocol

from hoarder.models import Platform, ResolvedMetadata
from hoarder.platforms import ParsedUrl


@dataclass(frozen=True)
class ResolveTarget:
    parsed: ParsedUrl
    platform: Platform

    @property
    def url(self) -> str:
        return self.parsed.url

    @property
    def segments(self):
        return self.parsed.segments


class ResolverStrategy(Protocol):
    name: str

    def resolve(self, target: ResolveTarget) -> Optional[ResolvedMetadata]:
        """Return metadata, or None to let the next strategy try. May raise ResolutionError."""
        ...


class StrategyRegistry:
    """
    Keeps the fallback tiers in the order they were registered.
    """

    def __init__(self) -> None:
        self._strategies: Dict[str, ResolverStrategy] = {}

    def register(self, strategy: ResolverStrategy) -> None:
        if strategy.name in self._strategies:
            raise ValueError(f"Strategy '{strategy.name}' already registered")
        self._strategies[strategy.name] = strategy

    def names(self) -> List[str]:
        return list(self._strategies.keys())

    def __iter__(self) -> Iterator[ResolverStrategy]:
        return iter(list(self._strategies.values()))

    def __len__(self) -> int:
        return len(self._strategies)
