# sitemapper/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per page over a shared aiohttp session.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from sitemapper.crawler.models import PageData
from sitemapper.exceptions import FetchFailure


class Fetcher:
    """Retrieves pages; every failure surfaces as :class:`FetchFailure`."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        GET the URL and return its body.

        Raises FetchFailure on connection errors, timeouts, malformed or
        non-HTTP URLs and HTTP error statuses (>= 400). Failed fetches are
        not retried.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if resp.status >= 400:
                    raise FetchFailure(url, f"HTTP {resp.status}")
                body = await resp.read()
                ctype = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                return PageData(url, body, resp.status, ctype)
        except asyncio.TimeoutError as exc:
            raise FetchFailure(url, "timed out") from exc
        except (ClientError, ValueError) as exc:
            # aiohttp.InvalidURL is both
            raise FetchFailure(url, str(exc) or type(exc).__name__) from exc
