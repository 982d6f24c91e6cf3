# File: sitemapper/report/html_report.py
"""sitemapper.report.html_report: HTML report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from sitemapper.crawler.sitemap import Sitemap

TEMPLATE_NAME = "sitemap.html.j2"


def render_html(
    sitemap: Sitemap,
    template_dir: Union[Path, str],
    output_path: Union[Path, str],
) -> Path:
    """Render the HTML report from a template and save it to *output_path*.

    Args:
        sitemap: crawl result.
        template_dir: directory holding ``sitemap.html.j2``.
        output_path: path of the resulting HTML file.

    Returns:
        Path of the saved HTML file.
    """
    template_dir = Path(template_dir)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = sitemap.to_dict()

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
