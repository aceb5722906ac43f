"""
Per-field extractors.

Every function here is a DOM query: it receives the root of the parsed ad
container and returns a plain value. Misses return None or an empty default;
the engine converts unexpected errors into the same defaults.
"""

import re
from typing import Optional

from bs4 import Tag

from ad_extractor.errors import StructuralMismatch
from ad_extractor.extraction.cta import parse_cta_region
from ad_extractor.extraction.dom import (
    DomEvaluator,
    child_divs,
    first_element_child,
    inner_html,
    next_element_sibling,
    text_content,
)
from ad_extractor.extraction.landmarks import (
    CLOSE_MARKUP,
    SPONSORED_TEXT,
    end_of_sponsored_label,
    find_marker,
    find_tag,
)
from ad_extractor.extraction.text import normalize_text
from ad_extractor.models import AdType, Advertiser, CallToAction, RunningInfo

LIBRARY_ID_RE = re.compile(r"Library ID: (\d+)")
STARTED_RUNNING_RE = re.compile(r"Started running on ([A-Za-z]+ \d+, \d{4})")
ACTIVE_TIME_TEMPLATE = r"{date} · Total active time (\d+ hrs)"

# (fingerprint, platform) in check order
PLATFORM_FINGERPRINTS = (
    ("mask-position: 0px -1188px", "facebook"),
    ("mask-position: 0px -1201px", "instagram"),
    ("mask-position: -68px -189px", "audience_network"),
    ("mask-position: -294px -670px", "messenger"),
    ("mask-position: 0px -1214px", "threads"),
)

BUTTON_ROLE_DIV_MARKUP = '<div role="button"'
PREVIOUS_ITEMS_MARKUP = 'aria-label="Previous items"'

TAG_COUNT_RE = re.compile(r"</?[^>]+(>|$)")
MAX_TAG_COUNT_DRIFT = 2


def extract_library_id(root: Tag) -> Optional[str]:
    match = LIBRARY_ID_RE.search(text_content(root))
    return match.group(1).strip() if match else None


def extract_running_info(root: Tag) -> RunningInfo:
    """Start date and, when it directly follows the date, total active time."""
    content = text_content(root)
    info = RunningInfo()

    date_match = STARTED_RUNNING_RE.search(content)
    if not date_match:
        return info
    info.start_date = date_match.group(1).strip()

    active_re = ACTIVE_TIME_TEMPLATE.format(date=re.escape(info.start_date))
    time_match = re.search(active_re, content)
    if time_match:
        info.active_time = time_match.group(1).strip()
    return info


def _advertiser_block(root: Tag) -> Tag:
    """hr -> next sibling -> first child -> first child -> first div child."""
    hr = root.find("hr")
    if hr is None:
        raise StructuralMismatch("no <hr> separator")
    parent = next_element_sibling(hr)
    if parent is None:
        raise StructuralMismatch("<hr> has no next sibling")
    second_level = first_element_child(first_element_child(parent))
    if second_level is None:
        raise StructuralMismatch("advertiser header is not two levels deep")
    divs = child_divs(second_level)
    if not divs:
        raise StructuralMismatch("advertiser header has no div children")
    return divs[0]


def extract_advertiser(root: Tag) -> Advertiser:
    try:
        block = _advertiser_block(root)
    except StructuralMismatch:
        return Advertiser()

    avatar = None
    img = block.find("img")
    if img is not None and img.get("src"):
        avatar = img["src"]

    name = text_content(block).strip().replace(SPONSORED_TEXT, "").strip()
    return Advertiser(name=name or None, avatar=avatar)


def detect_platforms(container_html: str) -> list[str]:
    """Platform icons recognised by their sprite mask position."""
    platforms = []
    for fingerprint, platform in PLATFORM_FINGERPRINTS:
        if fingerprint in container_html and platform not in platforms:
            platforms.append(platform)
    return platforms


def _count_tags(html: str) -> int:
    return len(TAG_COUNT_RE.findall(html))


def _balanced_html(html: str, evaluator: DomEvaluator) -> str:
    """Return html, or its re-parsed form when cutting it unbalanced the tags."""
    reparsed = inner_html(evaluator.fragment(html))
    if abs(_count_tags(html) - _count_tags(reparsed)) > MAX_TAG_COUNT_DRIFT:
        return reparsed
    return html


def _description_end(html: str, start: int, ad_type: AdType) -> int:
    end = find_tag(html, "video" if ad_type == AdType.VIDEO else "a", start)
    if end != -1:
        return end

    candidates = [
        html.find(BUTTON_ROLE_DIV_MARKUP, start),
        find_tag(html, "button", start),
        find_tag(html, "a", start),
    ]
    found = [pos for pos in candidates if pos != -1]
    return min(found) if found else len(html)


def extract_description(root: Tag, ad_type: AdType, evaluator: DomEvaluator) -> Optional[str]:
    """
    Ad copy of a single image/video ad.

    The copy sits between the 'Sponsored' label and the media element (video
    ads) or the first link (image ads).
    """
    html = inner_html(root)
    start = end_of_sponsored_label(html)
    if start == -1:
        return None

    end = _description_end(html, start, ad_type)
    segment = _balanced_html(html[start:end], evaluator)
    return normalize_text(segment) or None


def _top_level_spans(parent: Tag) -> list[Tag]:
    """Spans with text that are not nested inside another span."""
    spans = []
    for child in parent.find_all(True, recursive=False):
        if child.name == "span":
            if text_content(child).strip():
                spans.append(child)
        else:
            spans.extend(_top_level_spans(child))
    return spans


def extract_slider_description(root: Tag, evaluator: DomEvaluator) -> Optional[str]:
    """Ad copy of a slider ad: the spans between 'Sponsored' and the slider controls."""
    html = inner_html(root)
    start = end_of_sponsored_label(html)
    if start == -1:
        return None

    end = find_marker(html, PREVIOUS_ITEMS_MARKUP, start)
    if end == -1:
        return None

    segment = evaluator.fragment(html[start:end])
    spans = _top_level_spans(segment)
    if not spans:
        spans = [span for span in segment.find_all("span") if text_content(span).strip()]

    extracted = "".join(str(span) for span in spans)
    return normalize_text(extracted) or None


def extract_call_to_action(root: Tag, ad_type: AdType, evaluator: DomEvaluator) -> CallToAction:
    """
    CTA of a single image/video ad.

    The CTA region runs from the media element (video ads) or first link
    (image ads) up to the dismiss control labelled 'Close'.
    """
    html = inner_html(root)
    start = find_tag(html, "video" if ad_type == AdType.VIDEO else "a")
    if start == -1:
        return CallToAction()

    end = find_marker(html, CLOSE_MARKUP, start)
    if end == -1:
        return CallToAction()

    region = evaluator.fragment(html[start:end])
    return parse_cta_region(region)
