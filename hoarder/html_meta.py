"""
Utilities for extracting title/description/image from OpenGraph, Twitter Card and plain meta tags.
"""
from __future__ import annotations

from typing import Dict, Optional

from bs4 import BeautifulSoup

TITLE_SELECTORS = ('meta[property="og:title"]', 'meta[name="twitter:title"]')
DESCRIPTION_SELECTORS = (
    'meta[name="description"]',
    'meta[property="og:description"]',
    'meta[name="twitter:description"]',
)
IMAGE_SELECTORS = (
    'meta[property="og:image"]',
    'meta[name="twitter:image"]',
    'meta[property="twitter:image"]',
)


def parse_html_metadata(html: str) -> Dict[str, Optional[str]]:
    soup = BeautifulSoup(html, "lxml")
    title = _first_content(soup, TITLE_SELECTORS)
    if not title and soup.title and soup.title.string:
        title = " ".join(soup.title.string.split()) or None
    return {
        "title": title,
        "description": _first_content(soup, DESCRIPTION_SELECTORS),
        "image": _first_content(soup, IMAGE_SELECTORS),
    }


def _first_content(soup: BeautifulSoup, selectors) -> Optional[str]:
    for selector in selectors:
        tag = soup.select_one(selector)
        if tag and tag.has_attr("content"):
            value = tag["content"].strip()
            if value:
                return value
    return None
