from ad_extractor.extraction.dom import DomEvaluator
from ad_extractor.extraction.engine import AdExtractor, extract_ad
from ad_extractor.extraction.text import normalize_text
from ad_extractor.extraction.urls import resolve_destination_url

__all__ = [
    "DomEvaluator",
    "AdExtractor",
    "extract_ad",
    "normalize_text",
    "resolve_destination_url",
]
