# sitemapper/crawler/models.py
"""
Data models for the Sitemapper crawler.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Link:
    """A reference found on a page: absolute target URL, the page it was found on, asset flag."""

    url: str
    parent_url: str
    is_asset: bool = False


@dataclass(slots=True)
class PageData:
    """Holds the URL, raw body and response metadata of a fetched page."""

    url: str
    content: bytes
    status: int = 200
    content_type: str = ""
