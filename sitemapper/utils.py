# File: sitemapper/utils.py
"""sitemapper.utils: URL resolution and domain helpers shared by the extractor, crawler and CLI."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from sitemapper.exceptions import InvalidURL
from sitemapper.logger import get_logger

__all__: Sequence[str] = (
    "resolve_absolute",
    "domain_of",
    "normalize_seed_url",
)

logger = get_logger("utils")


def _split(url: str) -> SplitResult:
    try:
        parts = urlsplit(url)
        # port is validated lazily by urllib
        parts.port
    except ValueError as exc:
        raise InvalidURL(url, str(exc)) from exc
    return parts


def resolve_absolute(href: str, base_url: str) -> str:
    """Resolve *href* against *base_url*.

    An *href* that already carries a scheme is returned unchanged, even when it
    points to another host. Raises :class:`InvalidURL` if either string cannot
    be parsed.
    """
    ref = _split(href)
    _split(base_url)
    if ref.scheme:
        return href
    resolved = urljoin(base_url, href)
    logger.debug("Resolved URL: %s + %s -> %s", base_url, href, resolved)
    return resolved


def domain_of(url: str) -> str:
    """Return the host of *url* without the ``:port`` suffix."""
    host = _split(url).hostname
    if not host:
        raise InvalidURL(url, "URL has no host")
    return host


def normalize_seed_url(raw: str) -> str:
    """Default the scheme to ``http`` and make sure the path ends with ``/``."""
    raw = raw.strip()
    if not raw:
        raise InvalidURL(raw, "empty URL")
    if "://" not in raw:
        # "example.com:3000" would otherwise parse with scheme "example.com"
        raw = f"http://{raw}"
    parts = _split(raw)
    if not parts.path.endswith("/"):
        parts = parts._replace(path=parts.path + "/")
    url = urlunsplit(parts)
    domain_of(url)
    return url
