"""
Failure taxonomy for metadata resolution. All of these degrade to the next tier.
"""
from __future__ import annotations

from typing import Optional


class ResolutionError(Exception):
    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class NetworkFailure(ResolutionError):
    """Transport error, timeout or non-200 response."""


class ParseFailure(ResolutionError):
    """Malformed JSON, unexpected payload shape or HTML without usable metadata."""


class URLParseFailure(ResolutionError):
    """The input could not be parsed into an http(s) URL with a host."""
