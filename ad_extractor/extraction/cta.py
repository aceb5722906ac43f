"""Call-to-action parsing shared by single ads and slider cards."""

from typing import Optional

from bs4 import Tag

from ad_extractor.extraction.dom import text_content
from ad_extractor.extraction.urls import resolve_destination_url
from ad_extractor.models import CallToAction

# Button labels the ad library renders for CTA buttons. Matching is
# case-sensitive and English only.
CTA_BUTTON_TEXTS = (
    "Learn more",
    "Learn More",
    "Apply now",
    "Apply Now",
    "Visit Instagram profile",
    "Book now",
    "Book Now",
    "Download",
    "Sign up",
    "Sign Up",
    "Get quote",
    "Get Quote",
    "Send WhatsApp message",
    "Send message",
    "Send Message",
    "Get offer",
    "Get Offer",
    "Call now",
    "Call Now",
    "Contact us",
    "Contact Us",
)

CLOSE_BUTTON_TEXT = "Close"
CTA_TEXT_SEPARATOR = " - "


def button_texts(region: Tag) -> list[str]:
    """Trimmed texts of role=button elements, minus empty ones and 'Close'."""
    texts = []
    for button in region.select('[role="button"]'):
        text = text_content(button).strip()
        if text and text != CLOSE_BUTTON_TEXT:
            texts.append(text)
    return texts


def split_cta_type(texts: list[str]) -> tuple[Optional[str], list[str]]:
    """
    Pull the CTA type out of the button texts.

    The last button is the CTA when its label is a known one; every occurrence
    of that label is then removed from the remaining texts.
    """
    if texts and texts[-1] in CTA_BUTTON_TEXTS:
        cta_type = texts[-1]
        return cta_type, [text for text in texts if text != cta_type]
    return None, list(texts)


def first_link_href(region: Tag) -> Optional[str]:
    link = region.select_one("a[href]")
    if link is None:
        return None
    return link.get("href") or None


def parse_cta_region(region: Tag) -> CallToAction:
    """Build a CallToAction from a region holding buttons and a link."""
    cta_type, texts = split_cta_type(button_texts(region))
    raw_url = first_link_href(region)
    return CallToAction(
        text=CTA_TEXT_SEPARATOR.join(texts) or None,
        url=resolve_destination_url(raw_url),
        raw_url=raw_url,
        type=cta_type,
    )


def match_cta_label(text: str) -> Optional[str]:
    """First known label contained in text."""
    for label in CTA_BUTTON_TEXTS:
        if label in text:
            return label
    return None
