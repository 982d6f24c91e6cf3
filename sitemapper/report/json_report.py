# sitemapper/report/json_report.py

"""
JSON report for Sitemapper.

Serializes a Sitemap to a file.
"""
import json
from pathlib import Path

from sitemapper.crawler.sitemap import Sitemap


def render_json(sitemap: Sitemap, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *sitemap* as JSON at the given path.

    :param sitemap: crawl result
    :param output_path: path of the JSON file
    :param pretty: indent the output by 2 spaces
    :return: Path of the saved file

    Example:
    ```python
    from sitemapper.report.json_report import render_json
    report_path = render_json(sitemap, 'reports/sitemap.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(sitemap.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
