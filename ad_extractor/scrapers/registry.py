from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from ad_extractor.errors import UnsupportedPlatformError
from ad_extractor.scrapers.base import AdScraper
from ad_extractor.scrapers.facebook import FacebookAdScraper
from ad_extractor.utils.logger import get_logger

logger = get_logger("scraper_registry")

# platform -> scraper factory
SCRAPER_REGISTRY: dict[str, Callable[..., AdScraper]] = {
    "facebook": FacebookAdScraper,
}


def register_scraper(platform: str, factory: Callable[..., AdScraper]):
    """Make a scraper available under a platform name."""
    SCRAPER_REGISTRY[platform.lower()] = factory


def create_scraper(platform: str, **options) -> AdScraper:
    """Create the scraper registered for platform."""
    factory = SCRAPER_REGISTRY.get(platform.lower())
    if factory is None:
        raise UnsupportedPlatformError(platform)
    logger.debug("scraper_created", platform=platform.lower())
    return factory(**options)


@asynccontextmanager
async def scraper_session(platform: str, **options) -> AsyncIterator[AdScraper]:
    """Initialized scraper that is closed on exit, whatever the outcome."""
    scraper = create_scraper(platform, **options)
    try:
        await scraper.initialize()
        yield scraper
    finally:
        await scraper.close()
