# === FILE: sitemapper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Set

from aiohttp import ClientSession, ClientTimeout

from sitemapper.config import CrawlerConfig
from sitemapper.crawler.fetcher import Fetcher
from sitemapper.crawler.link_extractor import extract_links
from sitemapper.crawler.models import Link, PageData
from sitemapper.crawler.sitemap import Sitemap
from sitemapper.exceptions import FetchFailure, InvalidURL
from sitemapper.logger import get_logger
from sitemapper.utils import domain_of

__all__ = ("SitemapCrawler", "PendingWork", "PageFetcher")


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> PageData: ...


class PendingWork:
    """
    Counter of outstanding work: visits not yet finished plus links published
    but not yet processed by the control loop. Once it drops to zero nothing
    can raise it again, so :meth:`wait` returning means the crawl is over.
    """

    def __init__(self) -> None:
        self._count = 0
        self._idle = asyncio.Event()
        self._idle.set()

    def add(self, n: int = 1) -> None:
        self._count += n
        self._idle.clear()

    def done(self) -> None:
        if self._count <= 0:
            raise RuntimeError("PendingWork.done() called more times than add()")
        self._count -= 1
        if self._count == 0:
            self._idle.set()

    async def wait(self) -> None:
        await self._idle.wait()

    def __len__(self) -> int:
        return self._count


@dataclass(slots=True)
class _CrawlState:
    parent_domain: str
    sitemap: Sitemap = field(default_factory=Sitemap)
    seen: Set[str] = field(default_factory=set)
    pending: PendingWork = field(default_factory=PendingWork)
    visits: asyncio.Queue[str] = field(default_factory=asyncio.Queue)
    links: asyncio.Queue[Link] = field(default_factory=asyncio.Queue)


class SitemapCrawler:
    """
    Concurrent same-domain crawler that builds a :class:`Sitemap`.

    Pages are fetched by a pool of ``config.concurrency`` workers. Every link
    they find goes through one control loop, which alone owns the seen set
    and decides what to visit next. Pages are restricted to the seed's domain;
    assets may live anywhere. ``config.depth`` is accepted but not enforced.
    """

    def __init__(self, config: Optional[CrawlerConfig] = None, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config or CrawlerConfig()
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.pages_fetched: int = 0
        self.failed_pages: List[str] = []
        self.logger = get_logger("crawler")

    async def __aenter__(self) -> SitemapCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, seed_url: str) -> Sitemap:
        """Crawl from *seed_url* until no work is left; raises InvalidURL for a bad seed."""
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized; use 'async with SitemapCrawler(...)'")
        state = _CrawlState(parent_domain=domain_of(seed_url))
        self.pages_fetched = 0
        self.failed_pages = []
        self.logger.info("Crawl started: %s", seed_url)
        start = time.monotonic()
        deadline = None if self.config.max_duration is None else start + self.config.max_duration

        # links back to the seed are recorded but never refetched
        state.seen.add(seed_url)
        self._schedule(state, seed_url)
        workers = [asyncio.create_task(self._worker(state)) for _ in range(self.config.concurrency)]
        finished = asyncio.create_task(self._supervise(state.pending))
        next_link = asyncio.create_task(state.links.get())
        try:
            while True:
                timeout = None if deadline is None else max(0.0, deadline - time.monotonic())
                done, _ = await asyncio.wait(
                    {next_link, finished}, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
                )
                if next_link in done:
                    try:
                        self._dispatch(state, next_link.result())
                    finally:
                        state.pending.done()
                    next_link = asyncio.create_task(state.links.get())
                elif finished in done:
                    break
                else:
                    self.logger.warning(
                        "Crawl stopped after %.1f s with %d tasks outstanding; sitemap is partial",
                        self.config.max_duration,
                        len(state.pending),
                    )
                    break
        finally:
            next_link.cancel()
            finished.cancel()
            for w in workers:
                w.cancel()
            await asyncio.gather(next_link, finished, *workers, return_exceptions=True)

        duration = time.monotonic() - start
        self.logger.info(
            "Finished: %d pages fetched, %d links recorded in %.2f s",
            self.pages_fetched,
            state.sitemap.link_count(),
            duration,
        )
        if self.failed_pages:
            self.logger.info("Failed to fetch: %d", len(self.failed_pages))
        return state.sitemap

    def _dispatch(self, state: _CrawlState, link: Link) -> None:
        try:
            link_domain = domain_of(link.url)
        except InvalidURL:
            self.logger.debug("Discarded %s: no usable host", link.url)
            return
        # assets are commonly served from a CDN
        if not link.is_asset and link_domain != state.parent_domain:
            self.logger.debug("Discarded cross-domain page %s", link.url)
            return
        state.sitemap.add_link(link)
        if link.url in state.seen:
            return
        state.seen.add(link.url)
        self._schedule(state, link.url)

    @staticmethod
    def _schedule(state: _CrawlState, url: str) -> None:
        # count first: the supervisor must never see zero while a visit is queued
        state.pending.add()
        state.visits.put_nowait(url)

    async def _supervise(self, pending: PendingWork) -> None:
        await pending.wait()
        self.logger.debug("No outstanding work left")

    async def _worker(self, state: _CrawlState) -> None:
        while True:
            url = await state.visits.get()
            try:
                await self._visit(state, url)
            except Exception:
                # any failed visit is a dead end, the worker keeps going
                self.failed_pages.append(url)
                self.logger.exception("Visit of %s failed", url)
            finally:
                state.pending.done()
                state.visits.task_done()

    async def _visit(self, state: _CrawlState, url: str) -> None:
        assert self.fetcher is not None
        try:
            page = await self.fetcher.fetch(url)
        except FetchFailure as exc:
            self.failed_pages.append(url)
            self.logger.debug("%s", exc)
            return
        self.pages_fetched += 1
        for link in extract_links(url, page.content, self.config.script_attr):
            state.pending.add()
            state.links.put_nowait(link)
