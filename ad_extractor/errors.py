"""Exception types raised by the extractor and the scraper adapters."""


class AdExtractorError(Exception):
    """Base class for all errors raised by this package."""


class EvaluationError(AdExtractorError):
    """The DOM evaluator could not parse the markup or the query failed."""

    def __init__(self, query: str, cause: Exception):
        self.query = query
        self.cause = cause
        super().__init__(f"{query} failed: {type(cause).__name__}: {cause}")


class StructuralMismatch(AdExtractorError):
    """A fixed-depth traversal met markup of an unexpected shape."""


class UnsupportedPlatformError(AdExtractorError):
    """No scraper is registered for the requested platform."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Unsupported platform: {platform}")


class ScrapeError(AdExtractorError):
    """Navigation or rendering of the ad page failed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to scrape {url}: {reason}")
