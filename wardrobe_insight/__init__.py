"""Duplicate detection and wardrobe variety analysis."""

from .catalog.attribute_extractor import (
    ExtractedAttributes,
    generate_extraction_prompt,
    parse_extraction_response,
)
from .recommender.engine import DuplicateDetectionEngine, analyze
from .recommender.models import CandidateItem, DuplicateDetectionResult, ExistingItem

__all__ = [
    "CandidateItem",
    "DuplicateDetectionEngine",
    "DuplicateDetectionResult",
    "ExistingItem",
    "ExtractedAttributes",
    "analyze",
    "generate_extraction_prompt",
    "parse_extraction_response",
]
