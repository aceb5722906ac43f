"""AdRecord serialization and helper tests."""

import json
from datetime import date

from ad_extractor.models import (
    AdRecord,
    AdType,
    CallToAction,
    Media,
    MediaItem,
    MediaVariant,
    RunningInfo,
)


def test_single_media_omits_missing_poster():
    assert Media(type="image", url="i.jpg").to_dict() == {"type": "image", "url": "i.jpg"}
    assert Media(type="video", url="v.mp4", poster_url="p.jpg").to_dict() == {
        "type": "video",
        "url": "v.mp4",
        "posterUrl": "p.jpg",
    }


def test_slider_media_has_items_only():
    item = MediaItem(index=0, url="a.jpg", type="image", call_to_action=CallToAction(type="Learn More"))
    media = Media(type="slider", items=[item])
    assert media.is_slider
    assert media.to_dict() == {
        "type": "slider",
        "items": [
            {
                "index": 0,
                "url": "a.jpg",
                "type": "image",
                "callToAction": {"text": None, "url": None, "rawUrl": None, "type": "Learn More"},
            }
        ],
    }


def test_empty_slider_is_still_a_slider():
    assert Media(type="slider", items=[]).to_dict() == {"type": "slider", "items": []}


def test_record_keys():
    record = AdRecord(success=True, type=AdType.SLIDER, media_variant=MediaVariant.MIXED)
    data = record.to_dict()
    assert list(data) == [
        "success",
        "type",
        "mediaVariant",
        "libraryId",
        "media",
        "advertiser",
        "content",
        "runningInfo",
        "callToAction",
        "platforms",
    ]
    assert data["type"] == "slider"
    assert data["mediaVariant"] == "mixed"


def test_to_json_keeps_unicode():
    record = AdRecord(success=True, library_id="1")
    record.content.html = "Café · open"
    assert "Café · open" in record.to_json()
    assert json.loads(record.to_json(indent=None))["content"]["html"] == "Café · open"


def test_records_do_not_share_defaults():
    first, second = AdRecord(), AdRecord()
    first.platforms.append("facebook")
    assert second.platforms == []


def test_running_info_dates():
    info = RunningInfo(start_date="Jan 5, 2024", active_time="12 hrs")
    assert info.started_on() == date(2024, 1, 5)
    assert info.days_running(today=date(2024, 1, 15)) == 10
    assert info.active_hours() == 12


def test_running_info_without_values():
    info = RunningInfo()
    assert info.started_on() is None
    assert info.days_running() is None
    assert info.active_hours() is None


def test_unparseable_start_date():
    assert RunningInfo(start_date="sometime").started_on() is None


def test_repr():
    assert repr(AdRecord(library_id="7")) == "<AdRecord(library_id=7, type=unknown, success=False)>"
