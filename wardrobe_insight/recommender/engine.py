"""Entry point combining duplicate, variety and recommendation analysis."""

from __future__ import annotations

from typing import Iterable

from wardrobe_insight.catalog.options import DEFAULT_OPTIONS, WardrobeOptions
from wardrobe_insight.recommender.duplicates import analyze_duplicates
from wardrobe_insight.recommender.models import (
    DEFAULT_WEIGHTS,
    CandidateItem,
    DuplicateDetectionResult,
    ExistingItem,
    SimilarityWeights,
)
from wardrobe_insight.recommender.rules_engine import generate_recommendation
from wardrobe_insight.recommender.scorer import SimilarityScorer
from wardrobe_insight.recommender.variety import analyze_variety_impact


class DuplicateDetectionEngine:
    """Stateless analyzer; one instance can serve any number of callers."""

    def __init__(
        self,
        options: WardrobeOptions = DEFAULT_OPTIONS,
        weights: SimilarityWeights = DEFAULT_WEIGHTS,
        include_style_diversity: bool = True,
    ) -> None:
        self._options = options
        self._include_style_diversity = include_style_diversity
        self._scorer = SimilarityScorer(options, weights)

    @property
    def options(self) -> WardrobeOptions:
        return self._options

    def analyze(
        self,
        candidate: CandidateItem,
        existing_items: Iterable[ExistingItem],
    ) -> DuplicateDetectionResult:
        """Analyze ``candidate`` against a snapshot of ``existing_items``."""

        snapshot = tuple(existing_items)
        duplicate_analysis = analyze_duplicates(candidate, snapshot, self._scorer)
        variety_impact = analyze_variety_impact(
            candidate,
            snapshot,
            self._options,
            self._include_style_diversity,
        )
        return DuplicateDetectionResult(
            duplicate_analysis=duplicate_analysis,
            variety_impact=variety_impact,
            recommendation=generate_recommendation(duplicate_analysis, variety_impact),
        )


_default_engine = DuplicateDetectionEngine()


def analyze(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
) -> DuplicateDetectionResult:
    """Run the default engine."""

    return _default_engine.analyze(candidate, existing_items)
