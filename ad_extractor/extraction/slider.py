"""
Slider (carousel) card extraction.

Each card is a `data-type="hscroll-child"` element. Cards holding a <video>
and cards holding an image use different fixed layouts:

    video card: item > div > div > [div (video), div (CTA buttons + link)]
    image card: item > div > div ... a > [div (img), div (CTA label)], a + (text)

A card whose markup does not match its layout is dropped.
"""

from typing import Optional

from bs4 import Tag

from ad_extractor.errors import StructuralMismatch
from ad_extractor.extraction.classifier import item_media_type
from ad_extractor.extraction.cta import match_cta_label, parse_cta_region
from ad_extractor.extraction.dom import (
    child_divs,
    first_element_child,
    next_element_sibling,
    text_content,
)
from ad_extractor.extraction.landmarks import slider_children
from ad_extractor.extraction.urls import resolve_destination_url
from ad_extractor.models import AdType, CallToAction, MediaItem
from ad_extractor.utils.logger import get_logger

logger = get_logger("slider")


def _card_body(item: Tag) -> Tag:
    """The div two levels below the card element."""
    current = item
    for level in (1, 2):
        current = first_element_child(current)
        if current is None or current.name != "div":
            raise StructuralMismatch(f"card level {level} is not a div")
    return current


def _content_divs(parent: Tag, minimum: int = 2) -> list[Tag]:
    divs = child_divs(parent)
    if len(divs) < minimum:
        raise StructuralMismatch(f"expected {minimum} content divs, found {len(divs)}")
    return divs


def parse_video_card(item: Tag, index: int) -> MediaItem:
    media_div, cta_div = _content_divs(_card_body(item))[:2]

    video = media_div.find("video")
    if video is None or not video.get("src"):
        raise StructuralMismatch("video card without video src")

    return MediaItem(
        index=index,
        url=video["src"],
        type=AdType.VIDEO.value,
        call_to_action=parse_cta_region(cta_div),
    )


def parse_image_card(item: Tag, index: int) -> MediaItem:
    link = _card_body(item).find("a")
    if link is None:
        raise StructuralMismatch("image card without link")

    image_div, label_div = _content_divs(link)[:2]
    image = image_div.find("img")
    if image is None or not image.get("src"):
        raise StructuralMismatch("image card without img src")

    raw_url = link.get("href") or None
    text_element = next_element_sibling(link)
    text = text_content(text_element).strip() if text_element is not None else None

    return MediaItem(
        index=index,
        url=image["src"],
        type=AdType.IMAGE.value,
        call_to_action=CallToAction(
            text=text or None,
            url=resolve_destination_url(raw_url),
            raw_url=raw_url,
            type=match_cta_label(text_content(label_div).strip()),
        ),
    )


def parse_card(item: Tag, index: int) -> Optional[MediaItem]:
    """Parse one card, None when its markup does not fit the expected layout."""
    try:
        if item_media_type(item) == AdType.VIDEO.value:
            return parse_video_card(item, index)
        return parse_image_card(item, index)
    except StructuralMismatch as e:
        logger.debug("slider_card_skipped", index=index, reason=str(e))
        return None


def extract_slider_items(root: Tag) -> list[MediaItem]:
    """All parseable slider cards, tagged with their position among the cards."""
    items = []
    for index, card in enumerate(slider_children(root)):
        item = parse_card(card, index)
        if item is not None:
            items.append(item)
    return items
