"""Text and structural landmarks of the ad library markup."""

import re
from dataclasses import dataclass
from typing import Optional

from bs4 import Tag

from ad_extractor.extraction.dom import outer_html, text_content

AD_CONTAINER_MARKER = "This ad is from a URL link"
SPONSORED_TEXT = "Sponsored"
SPONSORED_MARKUP = ">Sponsored<"
CLOSE_MARKUP = ">Close<"
PREVIOUS_ITEMS_LABEL = "Previous items"
NEXT_ITEMS_LABEL = "Next items"
SLIDER_CHILD_SELECTOR = '[data-type="hscroll-child"]'


@dataclass
class ContainerLocation:
    found: bool = False
    container_html: Optional[str] = None


def locate_ad_container(root: Tag) -> ContainerLocation:
    """First div in document order whose text contains the container marker."""
    for div in root.find_all("div"):
        if AD_CONTAINER_MARKER in text_content(div):
            return ContainerLocation(found=True, container_html=outer_html(div))
    return ContainerLocation()


def find_sponsored_element(root: Tag) -> Optional[Tag]:
    """First element whose trimmed text is exactly 'Sponsored'."""
    for element in root.find_all(True):
        if text_content(element).strip() == SPONSORED_TEXT:
            return element
    return None


def has_slider_controls(root: Tag) -> bool:
    """Both previous and next navigation controls are present."""
    previous_button = root.select_one(f'div[aria-label="{PREVIOUS_ITEMS_LABEL}"]')
    next_button = root.select_one(f'div[aria-label="{NEXT_ITEMS_LABEL}"]')
    return previous_button is not None and next_button is not None


def slider_children(root: Tag) -> list[Tag]:
    return root.select(SLIDER_CHILD_SELECTOR)


def find_tag(html: str, tag: str, start: int = 0) -> int:
    """Position of the first `<tag` start tag at or after start, or -1."""
    match = re.compile(rf"<{tag}(?=[\s/>])", re.IGNORECASE).search(html, start)
    return match.start() if match else -1


def find_marker(html: str, marker: str, start: int = 0) -> int:
    """Position of the start of the tag holding marker text, or -1.

    For '>Close<' in '<div role="button">Close</div>' this points at '<div', so
    slicing up to it never leaves a half-open tag behind.
    """
    pos = html.find(marker, start)
    if pos == -1:
        return -1
    tag_start = html.rfind("<", start, pos + 1)
    return tag_start if tag_start != -1 else pos


def end_of_sponsored_label(html: str) -> int:
    """Position right after the closing tag that follows '>Sponsored<', or -1."""
    pos = html.find(SPONSORED_MARKUP)
    if pos == -1:
        return -1
    close_end = html.find(">", pos + len(SPONSORED_MARKUP))
    if close_end == -1:
        return -1
    return close_end + 1
