from pathlib import Path

import pytest

from ad_extractor.extraction import AdExtractor, DomEvaluator

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def evaluator():
    return DomEvaluator()


@pytest.fixture
def extractor():
    return AdExtractor()


@pytest.fixture
def image_page():
    return load_fixture("image_ad.html")


@pytest.fixture
def video_page():
    return load_fixture("video_ad.html")


@pytest.fixture
def slider_page():
    return load_fixture("slider_ad.html")


@pytest.fixture
def removed_page():
    return load_fixture("removed_ad.html")
