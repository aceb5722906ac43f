#!/usr/bin/env python3
"""
Ad Library Extractor - Main CLI Entry Point

Usage:
    python main.py extract snapshot.html            # Extract from a saved page
    python main.py scrape 1315209842900001          # Render and extract by Library ID
    python main.py scrape "https://www.facebook.com/ads/library/?id=..." --platform facebook
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional
import click

from ad_extractor.extraction import AdExtractor
from ad_extractor.models import AdRecord
from ad_extractor.scrapers.facebook import ad_url
from ad_extractor.scrapers.registry import scraper_session
from ad_extractor.utils.logger import get_logger

logger = get_logger("main")


def _emit(record: AdRecord, output: Optional[str], compact: bool):
    """Write the record as JSON to output, or stdout."""
    payload = record.to_json(indent=None if compact else 2)
    if output:
        Path(output).write_text(payload + "\n", encoding="utf-8")
        click.echo(f"Saved ad record to {output}", err=True)
    else:
        click.echo(payload)


async def _scrape(platform: str, url: str, screenshot: Optional[str]) -> AdRecord:
    async with scraper_session(platform) as scraper:
        record = await scraper.scrape_raw_content(url)
        if screenshot and hasattr(scraper, "take_screenshot"):
            await scraper.take_screenshot(screenshot)
        return record


@click.group()
def cli():
    """Ad Library ad extractor CLI."""


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write JSON to this file")
@click.option("--compact", is_flag=True, help="Single-line JSON")
def extract(snapshot: str, output: Optional[str], compact: bool):
    """Extract the ad from a saved, fully rendered page snapshot."""
    try:
        html = Path(snapshot).read_text(encoding="utf-8")
        record = AdExtractor().extract(html)
        _emit(record, output, compact)
    except OSError as e:
        logger.error("extract_failed", snapshot=snapshot, error=str(e))
        click.echo(f"Extraction failed: {e}", err=True)
        sys.exit(1)

    if not record.success:
        click.echo("No ad container found in snapshot", err=True)


@cli.command()
@click.argument("target")
@click.option("--platform", default="facebook", show_default=True, help="Ad library platform")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write JSON to this file")
@click.option("--compact", is_flag=True, help="Single-line JSON")
@click.option("--screenshot", type=click.Path(dir_okay=False), help="Save a full-page screenshot")
def scrape(target: str, platform: str, output: Optional[str], compact: bool, screenshot: Optional[str]):
    """Render an ad page (URL or Library ID) and extract its ad."""
    url = ad_url(target) if target.isdigit() else target
    click.echo(f"Scraping {platform} ad: {url}", err=True)

    try:
        record = asyncio.run(_scrape(platform, url, screenshot))
        _emit(record, output, compact)
    except KeyboardInterrupt:
        click.echo("\nScrape interrupted by user", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error("scrape_failed", url=url, error=str(e))
        click.echo(f"Scrape failed: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
