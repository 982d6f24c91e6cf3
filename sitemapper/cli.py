# === FILE: sitemapper/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for the Sitemapper crawler.

Commands:
  crawl URL   Crawl a site and print (or save) its sitemap
  config      Show the effective configuration

Common options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only when omitted)
  --log-format FORMAT Logging format string

crawl options:
  --concurrency N         Pages fetched in parallel
  --timeout SEC           Timeout for one request
  --max-duration SEC      Stop after SEC seconds and keep the partial sitemap
  --depth N               Declared depth (not enforced)
  --legacy-script-href    Read <script href> instead of <script src>
  --json PATH             Save a JSON report
  --html PATH             Save an HTML report
  --template DIR          Directory with the Jinja2 template

Example:
  sitemapper crawl example.com --concurrency 20 --json reports/sitemap.json
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from sitemapper import __version__
from sitemapper.config import load_config
from sitemapper.engine import run_crawl
from sitemapper.exceptions import InvalidURL
from sitemapper.logger import init_logging
from sitemapper.report.html_report import render_html
from sitemapper.report.json_report import render_json
from sitemapper.utils import normalize_seed_url

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='Sitemapper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Sitemapper: crawl a site and map its pages and assets."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg
    ctx.obj['config_path'] = config_path


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--concurrency', '-n', type=int, default=None, help='Pages fetched in parallel')
@click.option('--timeout', type=float, default=None, help='Timeout for one request (seconds)')
@click.option(
    '--max-duration', 'max_duration',
    type=float,
    default=None,
    help='Stop after this many seconds and print the partial sitemap'
)
@click.option('--depth', type=int, default=None, help='Declared crawl depth (not enforced)')
@click.option(
    '--legacy-script-href', 'legacy_script_href', is_flag=True,
    help='Read <script href> instead of <script src>'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report'
)
@click.option(
    '--template', '-t', 'template_dir',
    default='templates',
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory with the Jinja2 template'
)
@click.pass_context
def crawl(ctx, url, concurrency, timeout, max_duration, depth, legacy_script_href,
          json_output, html_output, template_dir):
    """Crawl URL and print its sitemap."""
    try:
        cfg = load_config(
            ctx.obj['config_path'],
            concurrency=concurrency,
            timeout=timeout,
            max_duration=max_duration,
            depth=depth,
            script_attr='href' if legacy_script_href else None,
        )
    except ValidationError as e:
        print_error(f'Invalid option: {e}')

    try:
        seed = normalize_seed_url(url)
        sitemap = run_crawl(seed, cfg)
    except InvalidURL as e:
        print_error(f'Invalid URL: {e}')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if not json_output and not html_output:
        click.echo(sitemap.render())
        return

    if json_output:
        try:
            saved_json = render_json(sitemap, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Failed to save JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(sitemap, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Failed to save HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
