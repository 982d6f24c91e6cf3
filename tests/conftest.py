# File: tests/conftest.py
import asyncio
from typing import Dict, List, Optional

import pytest

from sitemapper.config import CrawlerConfig
from sitemapper.crawler.models import PageData
from sitemapper.exceptions import FetchFailure


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class FakeFetcher:
    """
    In-memory stand-in for the HTTP fetcher.
    URLs missing from *pages* fail like a 404; *delays* slows down single URLs;
    *errors* makes single URLs raise an arbitrary exception.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        delays: Optional[Dict[str, float]] = None,
        errors: Optional[Dict[str, Exception]] = None,
    ) -> None:
        self.pages = pages
        self.delays = delays or {}
        self.errors = errors or {}
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        delay = self.delays.get(url)
        if delay:
            await asyncio.sleep(delay)
        if url in self.errors:
            raise self.errors[url]
        body = self.pages.get(url)
        if body is None:
            raise FetchFailure(url, "HTTP 404")
        return PageData(url=url, content=body.encode("utf-8"), content_type="text/html")


@pytest.fixture()
def fake_fetcher_factory():
    """Return the FakeFetcher class so tests can build one per scenario."""
    return FakeFetcher


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """
    Return a basic valid CrawlerConfig for crawler tests.
    """
    return CrawlerConfig(concurrency=4, timeout=2.0, user_agent="TestAgent/1.0")
