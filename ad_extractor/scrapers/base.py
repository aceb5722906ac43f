from typing import Protocol, runtime_checkable

from ad_extractor.models import AdRecord


@runtime_checkable
class AdScraper(Protocol):
    """Renders one platform's ad page and extracts it.

    Implementations own their browser and release it in close(), whatever
    happened before.
    """

    async def initialize(self) -> None:
        ...

    async def scrape_raw_content(self, url: str) -> AdRecord:
        ...

    async def close(self) -> None:
        ...
