# File: tests/test_sitemap.py
from concurrent.futures import ThreadPoolExecutor

from sitemapper.crawler.models import Link
from sitemapper.crawler.sitemap import ROOT_PARENT, Sitemap


def test_add_entry_creates_parent_only_when_recorded():
    sitemap = Sitemap()
    sitemap.add_entry("http://foo.bar/1", "http://foo.bar", False)
    sitemap.add_entry("http://foo.bar/2", "http://foo.bar", False)
    sitemap.add_entry("http://foo.bar/3", "http://foo.bar/1", True)

    assert "http://foo.bar" in sitemap
    assert "http://foo.bar/1" in sitemap
    assert "http://foo.bar/2" not in sitemap
    assert "http://foo.bar/3" not in sitemap

    assert sitemap.children("http://foo.bar") == {"http://foo.bar/1": False, "http://foo.bar/2": False}
    assert sitemap.children("http://foo.bar/1") == {"http://foo.bar/3": True}
    assert sitemap.children("http://foo.bar/2") == {}
    assert len(sitemap) == 2
    assert sitemap.link_count() == 3


def test_add_entry_overwrites_asset_flag():
    sitemap = Sitemap()
    sitemap.add_entry("http://foo.bar/x", "http://foo.bar", False)
    sitemap.add_entry("http://foo.bar/x", "http://foo.bar", True)
    assert sitemap.entries() == {"http://foo.bar": {"http://foo.bar/x": True}}


def test_add_link_and_snapshot_isolation():
    sitemap = Sitemap()
    sitemap.add_link(Link("http://foo.bar/a", "http://foo.bar", False))
    snapshot = sitemap.entries()
    snapshot["http://foo.bar"]["http://evil"] = True
    assert sitemap.children("http://foo.bar") == {"http://foo.bar/a": False}


def test_render_skips_root_and_tags_children():
    sitemap = Sitemap()
    sitemap.add_entry("http://foo.bar/", ROOT_PARENT, False)
    sitemap.add_entry("http://foo.bar/about", "http://foo.bar/", False)
    sitemap.add_entry("http://cdn.foo.bar/s.css", "http://foo.bar/", True)

    assert sitemap.render().splitlines() == [
        "=> http://foo.bar/",
        "  -> [PAGE] http://foo.bar/about",
        "  -> [ASSET] http://cdn.foo.bar/s.css",
    ]
    data = sitemap.to_dict()
    assert [page["url"] for page in data["pages"]] == ["http://foo.bar/"]
    assert data["total_links"] == 2


def test_empty_sitemap_renders_nothing():
    sitemap = Sitemap()
    assert sitemap.render() == ""
    assert sitemap.to_dict() == {"pages": [], "total_links": 0}


def test_concurrent_writers():
    sitemap = Sitemap()

    def write(worker: int) -> None:
        for i in range(500):
            sitemap.add_entry(f"http://foo.bar/{worker}/{i}", f"http://foo.bar/{i % 7}", worker % 2 == 0)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(write, range(8)))

    assert len(sitemap) == 7
    assert sitemap.link_count() == 8 * 500
