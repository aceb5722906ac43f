import os
from dotenv import load_dotenv

load_dotenv()

# Playwright
HEADLESS = os.getenv("HEADLESS", "true").lower() == "true"
BROWSER_TIMEOUT = int(os.getenv("BROWSER_TIMEOUT", 60000))
PAGE_SETTLE_DELAY = float(os.getenv("PAGE_SETTLE_DELAY", 2))
VIEWPORT = {"width": 1920, "height": 1080}
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)

# HTML parsing (BeautifulSoup tree builder)
HTML_PARSER = os.getenv("HTML_PARSER", "lxml")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")  # e.g. logs/extractor.log, empty logs to stderr only
LOG_FORMAT = os.getenv("LOG_FORMAT", "auto")  # auto, json or console

# Facebook Ad Library URLs
AD_LIBRARY_AD_URL = "https://www.facebook.com/ads/library/?id={ad_id}"
