from ad_extractor.models.ad import (
    AdType,
    MediaVariant,
    CallToAction,
    MediaItem,
    Media,
    Advertiser,
    Content,
    RunningInfo,
    AdRecord,
)

__all__ = [
    "AdType",
    "MediaVariant",
    "CallToAction",
    "MediaItem",
    "Media",
    "Advertiser",
    "Content",
    "RunningInfo",
    "AdRecord",
]
