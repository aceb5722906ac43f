import asyncio
from typing import Optional
from playwright.async_api import async_playwright, Page, Browser, TimeoutError as PlaywrightTimeout

from ad_extractor.config import (
    AD_LIBRARY_AD_URL,
    HEADLESS,
    BROWSER_TIMEOUT,
    PAGE_SETTLE_DELAY,
    USER_AGENT,
    VIEWPORT,
)
from ad_extractor.errors import ScrapeError
from ad_extractor.extraction import AdExtractor
from ad_extractor.models import AdRecord
from ad_extractor.utils.logger import get_logger

logger = get_logger("facebook_scraper")


def ad_url(ad_id: str) -> str:
    """Ad Library detail page URL for a Library ID."""
    return AD_LIBRARY_AD_URL.format(ad_id=ad_id)


class FacebookAdScraper:
    """Playwright-based scraper for Facebook Ad Library ad pages."""

    def __init__(
        self,
        headless: bool = HEADLESS,
        timeout: int = BROWSER_TIMEOUT,
        settle_delay: float = PAGE_SETTLE_DELAY,
        extractor: Optional[AdExtractor] = None,
    ):
        self.headless = headless
        self.timeout = timeout
        self.settle_delay = settle_delay
        self.extractor = extractor or AdExtractor()
        self._playwright = None
        self.browser: Optional[Browser] = None
        self.context = None
        self.page: Optional[Page] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        """Start the browser instance."""
        self._playwright = await async_playwright().start()
        self.browser = await self._playwright.chromium.launch(
            headless=self.headless,
            args=[
                "--disable-blink-features=AutomationControlled",
                "--no-sandbox",
                "--disable-setuid-sandbox",
            ]
        )
        self.context = await self.browser.new_context(
            viewport=VIEWPORT,
            user_agent=USER_AGENT,
        )
        self.page = await self.context.new_page()
        self.page.set_default_timeout(self.timeout)
        logger.info("browser_started", headless=self.headless)

    async def close(self):
        """Stop the browser instance."""
        try:
            if self.browser:
                await self.browser.close()
        finally:
            if self._playwright:
                await self._playwright.stop()
            self.browser = None
            self.context = None
            self.page = None
            self._playwright = None
        logger.info("browser_stopped")

    async def snapshot(self, url: str) -> str:
        """Navigate to url and return the fully rendered HTML."""
        if self.page is None:
            raise ScrapeError(url, "scraper is not initialized")

        logger.info("loading_ad_page", url=url)
        try:
            await self.page.goto(url, wait_until="networkidle")
            await asyncio.sleep(self.settle_delay)  # client-side rendering after network idle
            html = await self.page.content()
        except PlaywrightTimeout as e:
            logger.error("page_load_timeout", url=url, error=str(e))
            raise ScrapeError(url, f"timeout: {e}") from e
        except Exception as e:
            logger.error("page_load_error", url=url, error=str(e))
            raise ScrapeError(url, str(e)) from e

        logger.info("page_snapshot_taken", url=url, content_length=len(html))
        return html

    async def scrape_raw_content(self, url: str) -> AdRecord:
        """Render the ad page and extract its ad."""
        html = await self.snapshot(url)
        record = self.extractor.extract(html)
        if not record.success:
            logger.warning("no_ad_on_page", url=url, final_url=await self.get_current_url())
        return record

    async def take_screenshot(self, path: str):
        """Take a screenshot for debugging."""
        try:
            await self.page.screenshot(path=path, full_page=True)
            logger.info("screenshot_saved", path=path)
        except Exception as e:
            logger.error("screenshot_failed", error=str(e))

    async def get_current_url(self) -> str:
        """Get the current page URL."""
        return self.page.url if self.page else ""
