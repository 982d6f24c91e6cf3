"""sitemapper.report: JSON and HTML renderers for a finished Sitemap."""

from sitemapper.report.html_report import render_html
from sitemapper.report.json_report import render_json

__all__ = ["render_json", "render_html"]
