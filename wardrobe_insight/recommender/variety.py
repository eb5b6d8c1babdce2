"""Category-level color and silhouette concentration analysis.

For the candidate's category the analyzer simulates adding the candidate and
measures how much of the category would then share the candidate's color and
silhouette. A value is *dominant* once it would cover at least
``VARIETY_RISK_THRESHOLD`` percent of the category. The variety score starts at
``MAX_VARIETY_SCORE`` and loses ``DOMINANCE_PENALTY`` points per dominant
dimension, plus one point per ten percentage points of concentration above
``PENALTY_INFLECTION``.

Two situations do not count as concentration:

* the candidate has no value for a dimension (e.g. footwear silhouettes), so it
  does not contribute to that dimension at all;
* the category holds no existing items yet, so there is nothing to dominate
  and the snapshot reports 0%.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Literal

from wardrobe_insight.catalog.options import DEFAULT_OPTIONS, WardrobeOptions
from wardrobe_insight.recommender.diversity import analyze_style_diversity
from wardrobe_insight.recommender.models import (
    CandidateItem,
    DistributionSnapshot,
    ExistingItem,
    VarietyImpact,
)
from wardrobe_insight.recommender.scorer import round_half_up

VARIETY_RISK_THRESHOLD = 60
PENALTY_INFLECTION = 40
DOMINANCE_PENALTY = 3
MAX_VARIETY_SCORE = 10
GOOD_VARIETY_MESSAGE = "Good variety maintained"

Dimension = Literal["color", "silhouette"]


def calculate_distribution(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
    dimension: Dimension,
) -> DistributionSnapshot:
    """Snapshot of ``dimension`` in the candidate's category after the hypothetical add."""

    category_items = [item for item in existing_items if item.category == candidate.category]
    counts = Counter(
        value
        for value in (getattr(item, dimension) for item in category_items)
        if value
    )
    target = getattr(candidate, dimension)
    size = len(category_items)

    if not target or not size:
        return DistributionSnapshot(
            dimension=dimension,
            category=candidate.category,
            category_size=size,
            target_value=target or None,
            current_distinct=len(counts),
            target_count=0,
            after_addition=0,
            percentage_of_category=0,
            is_dominant=False,
        )

    target_count = counts.get(target, 0)
    after_addition = target_count + 1
    total_after = size + 1
    return DistributionSnapshot(
        dimension=dimension,
        category=candidate.category,
        category_size=size,
        target_value=target,
        current_distinct=len(counts),
        target_count=target_count,
        after_addition=after_addition,
        percentage_of_category=round_half_up(100 * after_addition / total_after),
        is_dominant=after_addition * 100 >= VARIETY_RISK_THRESHOLD * total_after,
    )


def calculate_color_distribution(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
) -> DistributionSnapshot:
    return calculate_distribution(candidate, existing_items, "color")


def calculate_silhouette_distribution(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
) -> DistributionSnapshot:
    return calculate_distribution(candidate, existing_items, "silhouette")


def _concentration_penalty(snapshot: DistributionSnapshot) -> float:
    if not snapshot.category_size or not snapshot.target_value:
        return 0.0
    return max(0.0, (snapshot.percentage_of_category - PENALTY_INFLECTION) / 10)


def calculate_variety_score(
    color: DistributionSnapshot,
    silhouette: DistributionSnapshot,
) -> int:
    """Return the 0-10 variety score, higher meaning a more varied category."""

    score = float(MAX_VARIETY_SCORE)
    if color.is_dominant:
        score -= DOMINANCE_PENALTY
    if silhouette.is_dominant:
        score -= DOMINANCE_PENALTY
    score -= _concentration_penalty(color) + _concentration_penalty(silhouette)
    return round_half_up(max(0.0, min(float(MAX_VARIETY_SCORE), score)))


def generate_variety_message(
    color: DistributionSnapshot,
    silhouette: DistributionSnapshot,
    options: WardrobeOptions = DEFAULT_OPTIONS,
) -> str:
    parts: list[str] = []
    if color.is_dominant:
        parts.append(
            f"{color.percentage_of_category}% of your "
            f"{options.category_label(color.category)} would be the same color"
        )
    if silhouette.is_dominant:
        parts.append(f"{silhouette.percentage_of_category}% would have the same silhouette")
    if not parts:
        return GOOD_VARIETY_MESSAGE
    return ", ".join(parts)


def analyze_variety_impact(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
    options: WardrobeOptions = DEFAULT_OPTIONS,
    include_style_diversity: bool = True,
) -> VarietyImpact:
    """Compute both distributions and derive the score and message.

    The season-aware style diversity report is attached unless
    ``include_style_diversity`` is false.
    """

    items = tuple(existing_items)
    color = calculate_color_distribution(candidate, items)
    silhouette = calculate_silhouette_distribution(candidate, items)
    return VarietyImpact(
        color_distribution=color,
        silhouette_distribution=silhouette,
        variety_score=calculate_variety_score(color, silhouette),
        impact_message=generate_variety_message(color, silhouette, options),
        style_diversity=(
            analyze_style_diversity(candidate, items, options) if include_style_diversity else None
        ),
    )
