import json
import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from dateutil.parser import parse as parse_date


class AdType(str, Enum):
    """Shape of the ad creative."""
    IMAGE = "image"
    VIDEO = "video"
    SLIDER = "slider"
    UNKNOWN = "unknown"


class MediaVariant(str, Enum):
    """Media make-up of a slider ad, classified per item."""
    IMAGE = "image"
    VIDEO = "video"
    MIXED = "mixed"


@dataclass
class CallToAction:
    """CTA button label, extra button texts and destination link."""
    text: Optional[str] = None
    url: Optional[str] = None
    raw_url: Optional[str] = None
    type: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "url": self.url,
            "rawUrl": self.raw_url,
            "type": self.type,
        }


@dataclass
class MediaItem:
    """One card of a slider ad."""
    index: int
    url: str
    type: str  # image or video
    call_to_action: CallToAction = field(default_factory=CallToAction)

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "url": self.url,
            "type": self.type,
            "callToAction": self.call_to_action.to_dict(),
        }


@dataclass
class Media:
    """Single-ad media (url, poster) or slider media (items), never both."""
    type: Optional[str] = None
    url: Optional[str] = None
    poster_url: Optional[str] = None
    items: Optional[list[MediaItem]] = None

    @property
    def is_slider(self) -> bool:
        return self.items is not None

    def to_dict(self) -> dict:
        if self.is_slider:
            return {
                "type": self.type,
                "items": [item.to_dict() for item in self.items],
            }
        result = {"type": self.type, "url": self.url}
        if self.poster_url:
            result["posterUrl"] = self.poster_url
        return result


@dataclass
class Advertiser:
    name: Optional[str] = None
    avatar: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "avatar": self.avatar}


@dataclass
class Content:
    html: Optional[str] = None  # normalized plain text

    def to_dict(self) -> dict:
        return {"html": self.html}


@dataclass
class RunningInfo:
    """Start date and total active time as shown on the ad card."""
    start_date: Optional[str] = None
    active_time: Optional[str] = None

    def started_on(self) -> Optional[date]:
        """Parse start_date like 'Jan 5, 2024' into a date."""
        if not self.start_date:
            return None
        try:
            return parse_date(self.start_date).date()
        except (ValueError, OverflowError):
            return None

    def days_running(self, today: Optional[date] = None) -> Optional[int]:
        """Calculate number of days the ad has been running."""
        started = self.started_on()
        if started is None:
            return None
        today = today or date.today()
        return (today - started).days

    def active_hours(self) -> Optional[int]:
        """Hour count from active_time like '12 hrs'."""
        if not self.active_time:
            return None
        match = re.match(r"(\d+)", self.active_time)
        return int(match.group(1)) if match else None

    def to_dict(self) -> dict:
        return {"startDate": self.start_date, "activeTime": self.active_time}


@dataclass
class AdRecord:
    """Structured data extracted from one Ad Library ad page.

    A record with success=False is the landmark-not-found outcome and keeps
    every other field at its default.
    """
    success: bool = False
    type: AdType = AdType.UNKNOWN
    media_variant: Optional[MediaVariant] = None
    library_id: Optional[str] = None
    media: Media = field(default_factory=Media)
    advertiser: Advertiser = field(default_factory=Advertiser)
    content: Content = field(default_factory=Content)
    running_info: RunningInfo = field(default_factory=RunningInfo)
    call_to_action: CallToAction = field(default_factory=CallToAction)
    platforms: list[str] = field(default_factory=list)

    def __repr__(self):
        return f"<AdRecord(library_id={self.library_id}, type={self.type.value}, success={self.success})>"

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "type": self.type.value,
            "mediaVariant": self.media_variant.value if self.media_variant else None,
            "libraryId": self.library_id,
            "media": self.media.to_dict(),
            "advertiser": self.advertiser.to_dict(),
            "content": self.content.to_dict(),
            "runningInfo": self.running_info.to_dict(),
            "callToAction": self.call_to_action.to_dict(),
            "platforms": list(self.platforms),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
