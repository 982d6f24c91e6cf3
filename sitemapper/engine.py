# File: sitemapper/engine.py
"""sitemapper.engine: entry points that run a crawl with a given configuration."""

from __future__ import annotations

import asyncio
from typing import Optional

from sitemapper.config import CrawlerConfig
from sitemapper.crawler.crawler import SitemapCrawler
from sitemapper.crawler.sitemap import Sitemap
from sitemapper.logger import get_logger

__all__ = ["start_crawl", "run_crawl"]

logger = get_logger("engine")


async def start_crawl(seed_url: str, config: Optional[CrawlerConfig] = None) -> Sitemap:
    """
    Open a crawler session, crawl from *seed_url* and return the Sitemap.

    Parameters
    ----------
    seed_url : str
        Absolute URL the crawl starts from.
    config : CrawlerConfig, optional
        Crawl settings; the defaults are used when omitted.

    Raises
    ------
    InvalidURL
        The seed URL has no parsable host.
    """
    async with SitemapCrawler(config) as crawler:
        return await crawler.crawl(seed_url)


def run_crawl(seed_url: str, config: Optional[CrawlerConfig] = None) -> Sitemap:
    """Blocking wrapper around :func:`start_crawl` for the CLI."""
    try:
        return asyncio.run(start_crawl(seed_url, config))
    except Exception as exc:
        logger.error("Crawl failed: %s", exc)
        raise
