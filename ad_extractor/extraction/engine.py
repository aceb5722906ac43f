from typing import Any, Callable, Optional, TypeVar

from ad_extractor.extraction.classifier import Classification, classify
from ad_extractor.extraction.dom import DomEvaluator
from ad_extractor.extraction.fields import (
    detect_platforms,
    extract_advertiser,
    extract_call_to_action,
    extract_description,
    extract_library_id,
    extract_running_info,
    extract_slider_description,
)
from ad_extractor.extraction.landmarks import ContainerLocation, locate_ad_container
from ad_extractor.extraction.slider import extract_slider_items
from ad_extractor.models import (
    AdRecord,
    AdType,
    Advertiser,
    CallToAction,
    Content,
    Media,
    RunningInfo,
)
from ad_extractor.utils.logger import get_logger

logger = get_logger("ad_extractor")

T = TypeVar("T")


class AdExtractor:
    """Turns a rendered Ad Library page snapshot into an AdRecord."""

    def __init__(self, evaluator: Optional[DomEvaluator] = None):
        self.evaluator = evaluator or DomEvaluator()

    def extract(self, html: str) -> AdRecord:
        """Extract the ad shown on the page. success=False when no ad container is found."""
        location = self._locate_container(html)
        if not location.found:
            logger.info("ad_container_not_found")
            return AdRecord()

        container = location.container_html
        record = AdRecord(success=True)

        # Fields common to every ad type
        record.library_id = self._run("library_id", None, container, extract_library_id)
        record.running_info = self._run("running_info", RunningInfo(), container, extract_running_info)
        record.advertiser = self._run("advertiser", Advertiser(), container, extract_advertiser)
        record.platforms = self._platforms(container)

        classification = self._run("ad_type", Classification(), container, classify)
        record.type = classification.ad_type

        if classification.ad_type == AdType.SLIDER:
            self._extract_slider(record, classification, container)
        else:
            self._extract_single(record, classification, container)

        logger.info(
            "ad_extracted",
            library_id=record.library_id,
            ad_type=record.type.value,
            media_variant=record.media_variant.value if record.media_variant else None,
            items=len(record.media.items) if record.media.is_slider else None,
            has_cta=record.call_to_action.type is not None,
        )
        return record

    def _locate_container(self, html: str) -> ContainerLocation:
        try:
            return self.evaluator.evaluate_document(html, locate_ad_container)
        except Exception as e:
            logger.warning("ad_container_extraction_error", error=str(e))
            return ContainerLocation()

    def _run(self, name: str, default: T, container: str, query: Callable[..., T], *args: Any) -> T:
        """Evaluate one extractor, falling back to its default on any error."""
        try:
            return self.evaluator.evaluate(container, query, *args)
        except Exception as e:
            logger.warning(f"{name}_extraction_error", error=str(e))
            return default

    def _platforms(self, container: str) -> list[str]:
        try:
            return detect_platforms(container)
        except Exception as e:
            logger.warning("platforms_extraction_error", error=str(e))
            return []

    def _extract_slider(self, record: AdRecord, classification: Classification, container: str):
        """Slider ads carry per-card media and CTAs, no ad-level CTA."""
        record.media_variant = classification.media_variant
        items = self._run("slider_items", [], container, extract_slider_items)
        record.media = Media(type=AdType.SLIDER.value, items=items)
        record.content = Content(
            html=self._run("slider_description", None, container, extract_slider_description, self.evaluator)
        )

    def _extract_single(self, record: AdRecord, classification: Classification, container: str):
        ad_type = classification.ad_type
        record.media = Media(
            type=ad_type.value if ad_type != AdType.UNKNOWN else None,
            url=classification.media_url,
            poster_url=classification.poster_url,
        )
        record.content = Content(
            html=self._run("description", None, container, extract_description, ad_type, self.evaluator)
        )
        record.call_to_action = self._run(
            "call_to_action", CallToAction(), container, extract_call_to_action, ad_type, self.evaluator
        )


def extract_ad(html: str) -> AdRecord:
    """Extract an ad with a default AdExtractor."""
    return AdExtractor().extract(html)
