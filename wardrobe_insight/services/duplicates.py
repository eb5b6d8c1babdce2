"""Duplicate detection workflow used by the purchase-analysis flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from openai import OpenAIError

from wardrobe_insight.catalog.attribute_extractor import ExtractedAttributes
from wardrobe_insight.nlp.extraction_client import AttributeExtractionClient
from wardrobe_insight.recommender.engine import DuplicateDetectionEngine
from wardrobe_insight.recommender.models import (
    CandidateItem,
    DuplicateDetectionResult,
    ExistingItem,
)

logger = logging.getLogger(__name__)

UNKNOWN_VALUES = frozenset({"unknown", "n/a", "undefined"})
NO_SILHOUETTE_CATEGORIES = frozenset({"accessory"})
SILHOUETTE_DEFAULTS = {"leggings": "Skinny"}


def _known(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() in UNKNOWN_VALUES:
        return None
    return text


def normalize_silhouette(silhouette: str | None, subcategory: str | None) -> str | None:
    """Keep a provided silhouette, otherwise fall back to a subcategory default."""

    known = _known(silhouette)
    if known:
        return known
    default = SILHOUETTE_DEFAULTS.get((subcategory or "").strip().lower())
    if default:
        logger.debug("Applied default silhouette %s for %s", default, subcategory)
    return default


@dataclass(slots=True)
class DuplicateDetectionOutcome:
    """Attributes the analysis ran on plus the engine result."""

    extracted_attributes: dict[str, Any]
    analysis: DuplicateDetectionResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "extracted_attributes": dict(self.extracted_attributes),
            "analysis": self.analysis.to_dict(),
        }


class DuplicateDetectionService:
    """Facade over attribute extraction and the duplicate detection engine."""

    def __init__(
        self,
        engine: DuplicateDetectionEngine | None = None,
        client: AttributeExtractionClient | None = None,
    ) -> None:
        self._engine = engine or DuplicateDetectionEngine()
        self._client = client

    async def analyze_with_ai(
        self,
        image_base64: str,
        form_data: Mapping[str, Any],
        existing_items: Iterable[ExistingItem],
    ) -> DuplicateDetectionOutcome | None:
        """Extract attributes from the image, then run the engine.

        Returns ``None`` whenever the analysis has to be skipped: missing
        category, no configured client, an unresolvable extraction or an
        upstream provider failure.
        """

        category = _known(form_data.get("category"))
        if not category or self._client is None:
            logger.info("Skipping duplicate detection: insufficient data")
            return None

        try:
            extracted = await self._client.extract(
                image_base64,
                category,
                _known(form_data.get("subcategory")),
            )
        except OpenAIError as exc:
            logger.error("Attribute extraction failed: %s", exc)
            return None

        if extracted is None:
            logger.info("Failed to extract attributes, skipping duplicate analysis")
            return None

        candidate = self._candidate_from_extraction(extracted, category, form_data)
        attributes = extracted.to_dict()
        attributes["silhouette"] = candidate.silhouette
        return DuplicateDetectionOutcome(
            extracted_attributes=attributes,
            analysis=self._engine.analyze(candidate, existing_items),
        )

    def analyze_with_form_data(
        self,
        form_data: Mapping[str, Any],
        existing_items: Iterable[ExistingItem],
    ) -> DuplicateDetectionOutcome | None:
        """Run the engine on attributes the user already entered."""

        category = _known(form_data.get("category"))
        if not category:
            logger.info("Skipping duplicate detection: insufficient data")
            return None

        subcategory = _known(form_data.get("subcategory"))
        silhouette = None
        if category.lower() not in NO_SILHOUETTE_CATEGORIES:
            silhouette = normalize_silhouette(form_data.get("silhouette"), subcategory)

        attributes = {
            "color": _known(form_data.get("color")),
            "silhouette": silhouette,
            "style": _known(form_data.get("style")),
            "material": _known(form_data.get("material")),
        }
        candidate = CandidateItem.from_mapping(
            {
                **attributes,
                "category": category,
                "subcategory": subcategory,
                "seasons": form_data.get("seasons"),
            }
        )
        return DuplicateDetectionOutcome(
            extracted_attributes=attributes,
            analysis=self._engine.analyze(candidate, existing_items),
        )

    @staticmethod
    def _candidate_from_extraction(
        extracted: ExtractedAttributes,
        category: str,
        form_data: Mapping[str, Any],
    ) -> CandidateItem:
        subcategory = _known(form_data.get("subcategory"))
        silhouette = None
        if category.lower() not in NO_SILHOUETTE_CATEGORIES:
            silhouette = normalize_silhouette(extracted.silhouette, subcategory)

        return CandidateItem.from_mapping(
            {
                "category": category,
                "subcategory": subcategory,
                "color": extracted.color,
                "silhouette": silhouette,
                "style": _known(extracted.style),
                "material": _known(form_data.get("material")),
                "seasons": form_data.get("seasons"),
            }
        )
