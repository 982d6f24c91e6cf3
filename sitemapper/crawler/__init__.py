"""sitemapper.crawler: fetching, link extraction and the crawl loop."""

from sitemapper.crawler.crawler import SitemapCrawler
from sitemapper.crawler.link_extractor import extract_links
from sitemapper.crawler.models import Link, PageData
from sitemapper.crawler.sitemap import Sitemap

__all__ = ["SitemapCrawler", "Sitemap", "Link", "PageData", "extract_links"]
