"""Duplicate scoring, variety analysis and purchase recommendations."""

from .duplicates import (
    CRITICAL_DUPLICATE_THRESHOLD,
    SIMILAR_ITEM_THRESHOLD,
    analyze_duplicates,
    find_critical_duplicates,
    find_similar_items,
)
from .engine import DuplicateDetectionEngine, analyze
from .matchers import colors_match, silhouettes_match
from .rules_engine import generate_recommendation
from .scorer import SimilarityScorer, calculate_similarity_score, get_overlap_factors
from .diversity import analyze_style_diversity
from .variety import VARIETY_RISK_THRESHOLD, analyze_variety_impact

__all__ = [
    "CRITICAL_DUPLICATE_THRESHOLD",
    "SIMILAR_ITEM_THRESHOLD",
    "VARIETY_RISK_THRESHOLD",
    "DuplicateDetectionEngine",
    "SimilarityScorer",
    "analyze",
    "analyze_duplicates",
    "analyze_style_diversity",
    "analyze_variety_impact",
    "calculate_similarity_score",
    "colors_match",
    "find_critical_duplicates",
    "find_similar_items",
    "generate_recommendation",
    "get_overlap_factors",
    "silhouettes_match",
]
