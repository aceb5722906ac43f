"""Decides the shape of an ad from the located container."""

from dataclasses import dataclass
from typing import Optional

from bs4 import Tag

from ad_extractor.extraction.landmarks import (
    find_sponsored_element,
    has_slider_controls,
    slider_children,
)
from ad_extractor.models import AdType, MediaVariant


@dataclass
class Classification:
    ad_type: AdType = AdType.UNKNOWN
    media_variant: Optional[MediaVariant] = None
    media_url: Optional[str] = None
    poster_url: Optional[str] = None


def item_media_type(item: Tag) -> str:
    """Per-item media type of a slider card."""
    return AdType.VIDEO.value if item.find("video") is not None else AdType.IMAGE.value


def slider_media_variant(root: Tag) -> MediaVariant:
    """Classify every slider card on its own, then combine."""
    item_types = {item_media_type(item) for item in slider_children(root)}
    if not item_types:
        return MediaVariant.VIDEO if root.find("video") is not None else MediaVariant.IMAGE
    if item_types == {AdType.VIDEO.value}:
        return MediaVariant.VIDEO
    if item_types == {AdType.IMAGE.value}:
        return MediaVariant.IMAGE
    return MediaVariant.MIXED


def find_video(root: Tag) -> Optional[dict]:
    """src and poster of the first <video>, None when there is no video."""
    video = root.find("video")
    if video is None:
        return None
    src = video.get("src")
    if not src:
        source = video.find("source", src=True)
        src = source.get("src") if source is not None else None
    return {"src": src or None, "poster": video.get("poster") or None}


def find_image_after_sponsored(root: Tag) -> Optional[str]:
    """src of the first image that follows the 'Sponsored' label in document order."""
    sponsored = find_sponsored_element(root)
    if sponsored is None:
        return None
    for element in sponsored.find_all_next(True):
        if element.name == "img" and element.get("src"):
            return element["src"]
    return None


def classify(root: Tag) -> Classification:
    """
    Decide the ad type, first match wins:

    1. previous/next slider controls -> slider
    2. a <video> element -> video
    3. an image after the 'Sponsored' label -> image
    4. otherwise unknown
    """
    if has_slider_controls(root):
        return Classification(
            ad_type=AdType.SLIDER,
            media_variant=slider_media_variant(root),
        )

    video = find_video(root)
    if video is not None:
        return Classification(
            ad_type=AdType.VIDEO,
            media_url=video["src"],
            poster_url=video["poster"],
        )

    image_url = find_image_after_sponsored(root)
    if image_url:
        return Classification(ad_type=AdType.IMAGE, media_url=image_url)

    return Classification()
