# File: sitemapper/crawler/sitemap.py
"""sitemapper.crawler.sitemap: thread-safe parent → children adjacency built by a crawl."""

from __future__ import annotations

import threading
from typing import Any, Dict, List

from sitemapper.crawler.models import Link

__all__ = ["Sitemap", "ROOT_PARENT"]

#: parent key reserved for the seed page, which has no discovering parent
ROOT_PARENT = ""


class Sitemap:
    """Maps every visited page to the URLs it references, tagged page or asset.

    All mutation goes through :meth:`add_entry`; readers get copies, so a
    sitemap can be printed from another thread while a crawl is finishing.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Dict[str, bool]] = {}
        self._lock = threading.Lock()

    def add_entry(self, url: str, parent_url: str, is_asset: bool) -> None:
        """Record *url* as a child of *parent_url*; re-adding overwrites the asset flag."""
        with self._lock:
            self._entries.setdefault(parent_url, {})[url] = is_asset

    def add_link(self, link: Link) -> None:
        self.add_entry(link.url, link.parent_url, link.is_asset)

    def entries(self) -> Dict[str, Dict[str, bool]]:
        with self._lock:
            return {parent: dict(children) for parent, children in self._entries.items()}

    def children(self, parent_url: str) -> Dict[str, bool]:
        with self._lock:
            return dict(self._entries.get(parent_url, {}))

    def parents(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def link_count(self) -> int:
        with self._lock:
            return sum(len(children) for children in self._entries.values())

    def __contains__(self, parent_url: object) -> bool:
        with self._lock:
            return parent_url in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view used by the reports; the root entry is left out."""
        pages = []
        for parent, children in self.entries().items():
            if parent == ROOT_PARENT:
                continue
            pages.append(
                {
                    "url": parent,
                    "links": [
                        {"url": url, "type": "ASSET" if is_asset else "PAGE"}
                        for url, is_asset in children.items()
                    ],
                }
            )
        return {"pages": pages, "total_links": sum(len(p["links"]) for p in pages)}

    def render(self) -> str:
        """Plain-text rendering: one block per parent, children tagged PAGE or ASSET."""
        lines: List[str] = []
        for parent, children in self.entries().items():
            if parent == ROOT_PARENT:
                continue
            lines.append(f"=> {parent}")
            for url, is_asset in children.items():
                lines.append(f"  -> [{'ASSET' if is_asset else 'PAGE'}] {url}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Sitemap(parents={len(self)}, links={self.link_count()})"
