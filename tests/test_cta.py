"""Call-to-action parsing tests."""

from ad_extractor.extraction.cta import (
    CTA_BUTTON_TEXTS,
    match_cta_label,
    parse_cta_region,
    split_cta_type,
)


def test_last_known_label_becomes_type():
    assert split_cta_type(["Spring Sale", "Learn More"]) == ("Learn More", ["Spring Sale"])


def test_unknown_last_label_stays_in_text():
    assert split_cta_type(["Learn More", "Shop the look"]) == (None, ["Learn More", "Shop the look"])


def test_type_removed_from_every_text():
    cta_type, texts = split_cta_type(["Sign Up", "Free trial", "Sign Up"])
    assert cta_type == "Sign Up"
    assert texts == ["Free trial"]


def test_label_match_is_case_sensitive():
    assert split_cta_type(["LEARN MORE"]) == (None, ["LEARN MORE"])


def test_parse_region(evaluator):
    html = (
        '<div><a href="https://l.facebook.com/l.php?u=https%3A%2F%2Fshop.example">shop</a>'
        '<div role="button">Free shipping</div>'
        '<div role="button">  </div>'
        '<div role="button">Close</div>'
        '<div role="button">Shop now</div>'
        '<div role="button">Get Offer</div></div>'
    )
    cta = evaluator.evaluate(html, parse_cta_region)
    assert cta.type == "Get Offer"
    assert cta.text == "Free shipping - Shop now"
    assert cta.raw_url == "https://l.facebook.com/l.php?u=https%3A%2F%2Fshop.example"
    assert cta.url == "https://shop.example"


def test_parse_region_without_buttons_or_links(evaluator):
    cta = evaluator.evaluate("<div><span>nothing here</span></div>", parse_cta_region)
    assert (cta.text, cta.url, cta.raw_url, cta.type) == (None, None, None, None)


def test_match_label_follows_vocabulary_order():
    assert match_cta_label("Red runnerLearn More") == "Learn More"
    assert match_cta_label("Send WhatsApp message now") == "Send WhatsApp message"
    assert match_cta_label("Shop the look") is None


def test_vocabulary_has_no_duplicates():
    assert len(set(CTA_BUTTON_TEXTS)) == len(CTA_BUTTON_TEXTS)
