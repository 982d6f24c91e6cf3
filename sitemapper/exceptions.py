"""sitemapper.exceptions: error types raised by the crawl core."""

from __future__ import annotations

__all__ = ["InvalidURL", "FetchFailure"]


class InvalidURL(ValueError):
    """A string could not be parsed as a URL (or has no host where one is required)."""

    def __init__(self, url: str, reason: str = "cannot parse URL") -> None:
        super().__init__(f"{reason}: {url!r}")
        self.url = url
        self.reason = reason


class FetchFailure(Exception):
    """Network or HTTP failure while retrieving a page."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason
