"""Weighted similarity between a candidate garment and one wardrobe item."""

from __future__ import annotations

import math

from wardrobe_insight.catalog.options import DEFAULT_OPTIONS, WardrobeOptions
from wardrobe_insight.recommender.matchers import colors_match, silhouettes_match, values_match
from wardrobe_insight.recommender.models import (
    DEFAULT_WEIGHTS,
    CandidateItem,
    ExistingItem,
    SimilarityWeights,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""

    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def same_slot(candidate: CandidateItem, existing: ExistingItem) -> bool:
    """Category and subcategory gate shared by the scorer and the finders."""

    return (
        candidate.category == existing.category
        and candidate.subcategory == existing.subcategory
    )


class SimilarityScorer:
    """Scores candidate/existing pairs on a 0-100 scale."""

    def __init__(
        self,
        options: WardrobeOptions = DEFAULT_OPTIONS,
        weights: SimilarityWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self._options = options
        self._weights = weights

    @property
    def weights(self) -> SimilarityWeights:
        return self._weights

    def _matched_attributes(
        self,
        candidate: CandidateItem,
        existing: ExistingItem,
    ) -> list[tuple[str, str]]:
        """Return ``(attribute, candidate value)`` for every attribute credited."""

        matched: list[tuple[str, str]] = []
        if colors_match(candidate.color, existing.color, self._options.color_families):
            matched.append(("color", candidate.color))  # type: ignore[arg-type]
        if silhouettes_match(
            candidate.silhouette,
            existing.silhouette,
            self._options.silhouette_families,
        ):
            matched.append(("silhouette", candidate.silhouette))  # type: ignore[arg-type]
        if values_match(candidate.style, existing.style):
            matched.append(("style", candidate.style))  # type: ignore[arg-type]
        if values_match(candidate.material, existing.material):
            matched.append(("material", candidate.material))  # type: ignore[arg-type]
        # Zero-weight attributes earn no points and are not reported either.
        return [pair for pair in matched if getattr(self._weights, pair[0]) > 0]

    def score(self, candidate: CandidateItem, existing: ExistingItem) -> int:
        """Return a score where 100 means every weighted attribute matched."""

        if not same_slot(candidate, existing):
            return 0

        points = sum(
            getattr(self._weights, attribute)
            for attribute, _ in self._matched_attributes(candidate, existing)
        )
        return round_half_up(100 * points / self._weights.total)

    def overlap_factors(self, candidate: CandidateItem, existing: ExistingItem) -> list[str]:
        """Human-readable list of the attributes the score credited."""

        if not same_slot(candidate, existing):
            return []
        return [
            f"Same {attribute} ({value})"
            for attribute, value in self._matched_attributes(candidate, existing)
        ]


_default_scorer = SimilarityScorer()


def calculate_similarity_score(candidate: CandidateItem, existing: ExistingItem) -> int:
    return _default_scorer.score(candidate, existing)


def get_overlap_factors(candidate: CandidateItem, existing: ExistingItem) -> list[str]:
    return _default_scorer.overlap_factors(candidate, existing)
