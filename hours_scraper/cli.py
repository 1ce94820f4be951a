"""
CLI argument parser for the business hours extractor.
Supports multiple URL input methods plus an optional YAML config file.
"""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional
import click
import pytz
import yaml

from . import __version__
from .browser import validate_url
from .errors import FetchError, HoursScraperError
from .models import ExtractorConfig
from .orchestrator import run_extraction

DEFAULT_CONFIG_FILE = 'config.yaml'


class URLInputProcessor:
    """Process, validate and deduplicate URLs from various input sources."""

    def __init__(self):
        self.urls: List[str] = []
        self.seen_urls: set = set()
        self.sources: List[str] = []
        self.rejected: List[str] = []

    def add_url(self, url: str, source: str = "CLI"):
        """Add a single URL (deduplicates automatically)."""
        url = url.strip()
        if not url:
            return

        try:
            validate_url(url)
        except FetchError:
            self.rejected.append(url)
            return

        # Normalize URL for deduplication
        normalized = url.lower().rstrip('/')

        if normalized not in self.seen_urls:
            self.urls.append(url)  # Keep original casing
            self.seen_urls.add(normalized)
            if source not in self.sources:
                self.sources.append(source)

    def add_urls_from_list(self, urls: List[str], source: str = "CLI"):
        """Add multiple URLs from a list."""
        for url in urls:
            self.add_url(url, source)

    def add_urls_from_file(self, file_path: str):
        """Add URLs from a text file (one per line)."""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"URL file not found: {file_path}")

        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if line and not line.startswith('#'):
                    self.add_url(line, f"file:{file_path}")

    def get_urls(self) -> List[str]:
        """Get the deduplicated list of URLs in input order."""
        return self.urls

    def get_summary(self) -> str:
        """Get a summary of URL sources."""
        return (
            f"Loaded {len(self.urls)} unique URL(s) "
            f"from {len(self.sources)} source(s): {', '.join(self.sources)}"
        )


def validate_timezone(ctx, param, value: Optional[str]) -> Optional[str]:
    """Click callback: accept only names pytz knows."""
    if value is None:
        return value
    try:
        pytz.timezone(value)
    except pytz.UnknownTimeZoneError:
        raise click.BadParameter(f"Unknown timezone: {value}")
    return value


@click.command()
@click.option(
    '--url',
    multiple=True,
    help='Single page URL (can be repeated for multiple URLs)'
)
@click.option(
    '--urls',
    help='Space-separated list of page URLs'
)
@click.option(
    '--url-file',
    type=click.Path(exists=True),
    help='Path to text file with URLs (one per line)'
)
@click.option(
    '--config',
    type=click.Path(exists=True),
    help=f'Path to configuration file (default: {DEFAULT_CONFIG_FILE} if present)'
)
@click.option(
    '--output-file',
    help='Override output file path from config'
)
@click.option(
    '--timezone',
    callback=validate_timezone,
    help='Timezone reported with each result (default: America/Chicago)'
)
@click.option(
    '--country',
    help='Country code reported with each result (default: US)'
)
@click.option(
    '--render',
    is_flag=True,
    help='Render pages in headless Chromium before extracting'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (HTML snapshots, detailed logs)'
)
@click.version_option(version=__version__, prog_name='Business Hours Extractor')
def main(
    url: tuple,
    urls: Optional[str],
    url_file: Optional[str],
    config: Optional[str],
    output_file: Optional[str],
    timezone: Optional[str],
    country: Optional[str],
    render: bool,
    debug: bool
):
    """
    Business Hours Extractor

    Extract weekly opening hours, or a list of locations with their
    addresses, phones and hours, from business web pages.

    Examples:

      # Single URL
      hours-scraper --url https://example.com/contact

      # Multiple URLs
      hours-scraper --url https://a.example.com --url https://b.example.com

      # URLs from file
      hours-scraper --url-file pages.txt

      # JavaScript-heavy pages
      hours-scraper --url https://example.com/locations --render
    """

    # Load configuration
    config_data = load_config(config)

    # Process URL inputs
    processor = URLInputProcessor()

    # Priority: CLI arguments > config file
    if url:
        processor.add_urls_from_list(list(url), "CLI:--url")

    if urls:
        processor.add_urls_from_list(urls.split(), "CLI:--urls")

    if url_file:
        try:
            processor.add_urls_from_file(url_file)
        except OSError as e:
            click.echo(f"Error reading URL file: {e}", err=True)
            sys.exit(1)

    # If no CLI URLs provided, check config file
    if not processor.get_urls() and not processor.rejected:
        input_section = config_data.get('input') or {}

        if input_section.get('urls'):
            processor.add_urls_from_list(input_section['urls'], "config")

        if input_section.get('url_file'):
            try:
                processor.add_urls_from_file(input_section['url_file'])
            except OSError as e:
                click.echo(f"Error reading config URL file: {e}", err=True)
                sys.exit(1)

    for rejected in processor.rejected:
        click.echo(f"Skipping invalid URL (must be http or https): {rejected}", err=True)

    final_urls = processor.get_urls()
    if not final_urls:
        click.echo("Error: No URLs provided.", err=True)
        click.echo("\nPlease provide URLs via:", err=True)
        click.echo("  --url <url>", err=True)
        click.echo("  --urls '<url1> <url2> ...'", err=True)
        click.echo("  --url-file <file>", err=True)
        click.echo(f"\nOr configure them in {DEFAULT_CONFIG_FILE}", err=True)
        sys.exit(1)

    click.echo(processor.get_summary())

    extractor_config = build_extractor_config(
        config_data=config_data,
        urls=final_urls,
        output_file=output_file,
        timezone=timezone,
        country=country,
        render=render,
        debug=debug
    )

    try:
        results, failures = asyncio.run(run_extraction(extractor_config))
    except HoursScraperError as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    if not results and failures:
        sys.exit(1)


def load_config(config_path: Optional[str]) -> dict:
    """Load configuration from YAML file."""
    if config_path is None:
        if not Path(DEFAULT_CONFIG_FILE).exists():
            return {}
        config_path = DEFAULT_CONFIG_FILE

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        click.echo(f"Error loading config file: {e}", err=True)
        sys.exit(1)

    if not isinstance(data, dict):
        click.echo(f"Error loading config file: {config_path} is not a mapping", err=True)
        sys.exit(1)

    return data


def build_extractor_config(
    config_data: dict,
    urls: List[str],
    output_file: Optional[str] = None,
    timezone: Optional[str] = None,
    country: Optional[str] = None,
    render: bool = False,
    debug: bool = False
) -> ExtractorConfig:
    """Build ExtractorConfig from config file and CLI overrides."""

    fetch_section = config_data.get('fetch') or {}
    browser_section = config_data.get('browser') or {}
    output_section = config_data.get('output') or {}
    debug_section = config_data.get('debug') or {}

    return ExtractorConfig(
        urls=urls,
        request_timeout_sec=fetch_section.get('timeout_sec', 10.0),
        user_agent=fetch_section.get('user_agent'),
        render_javascript=render or browser_section.get('enabled', False),
        headless=browser_section.get('headless', True),
        page_timeout_ms=browser_section.get('page_timeout_ms', 30000),
        timezone=timezone or output_section.get('timezone', 'America/Chicago'),
        country=country or output_section.get('country', 'US'),
        output_file=output_file or output_section.get('file', './output/business-hours.json'),
        debug_mode=debug or debug_section.get('enabled', False),
        debug_save_html=debug_section.get('save_html', True),
        debug_log_file=debug_section.get('log_file', './debug/debug.log'),
    )


if __name__ == '__main__':
    main()
