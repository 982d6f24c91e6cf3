# sitemapper/crawler/link_extractor.py
"""
Link and asset extraction from HTML documents.
"""
from __future__ import annotations

from typing import List, Literal, Optional, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from sitemapper.crawler.models import Link
from sitemapper.exceptions import InvalidURL
from sitemapper.utils import resolve_absolute

ScriptAttr = Literal["src", "href"]
Markup = Union[bytes, str]

_TAGS = ["a", "script", "link"]


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _target(tag: Tag, script_attr: ScriptAttr) -> tuple[Optional[str], bool]:
    """Return the raw reference carried by *tag* and whether it is an asset."""
    if tag.name == "a":
        return _attr(tag, "href"), False
    if tag.name == "script":
        # inline scripts have no reference at all
        return _attr(tag, script_attr), True
    if tag.get("rel") != "stylesheet":
        return None, True
    return _attr(tag, "href"), True


def _soup(html: Markup) -> BeautifulSoup:
    # raw attribute strings so that rel="stylesheet" is compared literally
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def _parse(html: Markup) -> BeautifulSoup:
    """
    Parse *html*; markup the parser rejects ends the document early.

    On rejection the longest prefix that still parses is kept, found by
    bisecting on its length.
    """
    try:
        return _soup(html)
    except ParserRejectedMarkup:
        pass
    # best always holds the parse of html[:good]
    good, bad = 0, len(html)
    best = _soup(html[:0])
    while bad - good > 1:
        mid = (good + bad) // 2
        try:
            soup = _soup(html[:mid])
        except ParserRejectedMarkup:
            bad = mid
        else:
            good, best = mid, soup
    return best


def extract_links(
    base_url: str,
    html: Markup,
    script_attr: ScriptAttr = "src",
) -> List[Link]:
    """
    Extract absolute page links and asset references from *html*.

    Anchors yield pages; scripts and ``<link rel="stylesheet">`` tags yield
    assets. Tags without a usable reference, and references that cannot be
    resolved against *base_url*, are skipped. Never raises: markup the parser
    rejects simply ends the scan. *script_attr* picks the attribute read from
    ``<script>`` tags: ``"src"`` (default) or the legacy ``"href"``.
    """
    soup = _parse(html)
    links: List[Link] = []
    for tag in soup.find_all(_TAGS):
        if not isinstance(tag, Tag):
            continue
        raw, is_asset = _target(tag, script_attr)
        if raw is None:
            continue
        try:
            absolute = resolve_absolute(raw, base_url)
        except InvalidURL:
            continue
        links.append(Link(absolute, base_url, is_asset))
    return links
