"""Ad type classification tests."""

from ad_extractor.extraction.classifier import classify, find_video
from ad_extractor.models import AdType, MediaVariant

SLIDER_CONTROLS = '<div aria-label="Previous items"></div><div aria-label="Next items"></div>'


def _card(inner: str) -> str:
    return f'<div data-type="hscroll-child"><div><div>{inner}</div></div></div>'


def test_video_with_poster(evaluator):
    html = '<div><span>Sponsored</span><video src="v.mp4" poster="p.jpg"></video></div>'
    result = evaluator.evaluate(html, classify)
    assert result.ad_type == AdType.VIDEO
    assert result.media_url == "v.mp4"
    assert result.poster_url == "p.jpg"
    assert result.media_variant is None


def test_video_source_child_used_without_src(evaluator):
    html = '<div><video poster="p.jpg"><source src="clip.mp4" type="video/mp4"></video></div>'
    video = evaluator.evaluate(html, find_video)
    assert video == {"src": "clip.mp4", "poster": "p.jpg"}


def test_image_after_sponsored(evaluator):
    html = (
        '<div><img src="avatar.jpg"><span>Sponsored</span>'
        '<div><span>copy</span></div><div><img src="i.jpg"></div></div>'
    )
    result = evaluator.evaluate(html, classify)
    assert result.ad_type == AdType.IMAGE
    assert result.media_url == "i.jpg"


def test_image_without_src_skipped(evaluator):
    html = '<div><span>Sponsored</span><img alt="lazy"><img src="real.jpg"></div>'
    assert evaluator.evaluate(html, classify).media_url == "real.jpg"


def test_image_before_sponsored_only_is_unknown(evaluator):
    html = '<div><img src="avatar.jpg"><span>Sponsored</span><span>copy</span></div>'
    result = evaluator.evaluate(html, classify)
    assert result.ad_type == AdType.UNKNOWN
    assert result.media_url is None


def test_slider_wins_over_video(evaluator):
    html = f'<div>{SLIDER_CONTROLS}{_card("<div><video src=a.mp4></video></div>")}</div>'
    result = evaluator.evaluate(html, classify)
    assert result.ad_type == AdType.SLIDER
    assert result.media_url is None


def test_slider_variant_per_item(evaluator):
    images = _card('<a href="#"><div><img src="1.jpg"></div><div></div></a>')
    video = _card('<div><video src="2.mp4"></video></div><div></div>')

    mixed = evaluator.evaluate(f"<div>{SLIDER_CONTROLS}{images}{video}</div>", classify)
    only_images = evaluator.evaluate(f"<div>{SLIDER_CONTROLS}{images}{images}</div>", classify)
    only_videos = evaluator.evaluate(f"<div>{SLIDER_CONTROLS}{video}{video}</div>", classify)

    assert mixed.media_variant == MediaVariant.MIXED
    assert only_images.media_variant == MediaVariant.IMAGE
    assert only_videos.media_variant == MediaVariant.VIDEO


def test_slider_without_cards_falls_back_to_video_presence(evaluator):
    with_video = f'<div>{SLIDER_CONTROLS}<video src="x.mp4"></video></div>'
    without_video = f"<div>{SLIDER_CONTROLS}</div>"
    assert evaluator.evaluate(with_video, classify).media_variant == MediaVariant.VIDEO
    assert evaluator.evaluate(without_video, classify).media_variant == MediaVariant.IMAGE


def test_video_without_any_source_is_still_video(evaluator):
    html = '<div><span>Sponsored</span><video poster="p.jpg"></video><img src="later.jpg"></div>'
    result = evaluator.evaluate(html, classify)
    assert result.ad_type == AdType.VIDEO
    assert result.media_url is None
    assert result.poster_url == "p.jpg"
