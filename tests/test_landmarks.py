"""Landmark locator tests."""

from ad_extractor.extraction.landmarks import (
    end_of_sponsored_label,
    find_marker,
    find_sponsored_element,
    find_tag,
    has_slider_controls,
    locate_ad_container,
)


def test_container_found_in_page(evaluator, image_page):
    location = evaluator.evaluate_document(image_page, locate_ad_container)
    assert location.found is True
    assert location.container_html.startswith('<div id="mount">')
    assert "This ad is from a URL link" in location.container_html


def test_container_missing(evaluator, removed_page):
    location = evaluator.evaluate_document(removed_page, locate_ad_container)
    assert location.found is False
    assert location.container_html is None


def test_marker_outside_div_is_ignored(evaluator):
    html = "<html><body><span>This ad is from a URL link</span></body></html>"
    assert evaluator.evaluate_document(html, locate_ad_container).found is False


def test_first_match_in_document_order(evaluator):
    html = (
        '<div id="outer"><div id="inner"><span>This ad is from a URL link</span></div></div>'
        '<div id="second"><span>This ad is from a URL link</span></div>'
    )
    location = evaluator.evaluate_document(html, locate_ad_container)
    assert location.container_html.startswith('<div id="outer">')


def test_sponsored_element_is_exact_text_match(evaluator):
    html = "<div><span>Not Sponsored content</span><span> Sponsored </span></div>"
    element = evaluator.evaluate(html, find_sponsored_element)
    assert element.name == "span"
    assert element.get_text() == " Sponsored "


def test_slider_controls_need_both_buttons(evaluator):
    both = '<div><div aria-label="Previous items"></div><div aria-label="Next items"></div></div>'
    only_next = '<div><div aria-label="Next items"></div></div>'
    assert evaluator.evaluate(both, has_slider_controls) is True
    assert evaluator.evaluate(only_next, has_slider_controls) is False


def test_find_tag_skips_longer_tag_names():
    html = "<abbr>x</abbr><article></article><a href='#'>link</a>"
    assert find_tag(html, "a") == html.index("<a href")
    assert find_tag(html, "video") == -1


def test_find_marker_points_at_tag_start():
    html = '<a href="#">x</a><div role="button">Close</div>'
    assert find_marker(html, ">Close<") == html.index('<div role="button">')
    assert find_marker(html, ">Missing<") == -1


def test_end_of_sponsored_label():
    html = "<div><span>Sponsored</span>Body text</div>"
    assert html[end_of_sponsored_label(html):].startswith("Body text")
    assert end_of_sponsored_label("<div>no label</div>") == -1
