"""Unwrapping of the ad library's outbound link redirector."""

from typing import Optional
from urllib.parse import urlparse, parse_qs

# l.facebook.com/l.php?u=<destination>&h=...
REDIRECT_PARAM = "u"


def resolve_destination_url(raw_url: Optional[str]) -> Optional[str]:
    """Return the destination carried by a redirector link, else raw_url unchanged."""
    if not raw_url:
        return raw_url

    try:
        parsed = urlparse(raw_url)
        # Relative or scheme-less hrefs are not redirector links
        if not parsed.scheme or not parsed.netloc:
            return raw_url
        values = parse_qs(parsed.query, keep_blank_values=True).get(REDIRECT_PARAM)
    except ValueError:
        return raw_url

    if values and values[0]:
        return values[0]
    return raw_url
