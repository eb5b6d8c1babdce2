"""Season-aware style diversity of a category.

Only items that could be worn in the same season as the candidate are
considered: items sharing at least one season with it, plus items without any
season information. A candidate without seasons is compared against the whole
category.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from wardrobe_insight.catalog.options import DEFAULT_OPTIONS, WardrobeOptions
from wardrobe_insight.recommender.models import (
    CandidateItem,
    DimensionDiversity,
    ExistingItem,
    StyleDiversity,
    VarietyLevel,
)
from wardrobe_insight.recommender.scorer import round_half_up

logger = logging.getLogger(__name__)

MONOTONY_THRESHOLD = 70
DIVERSITY_DIMENSIONS = ("style", "silhouette", "color")

_LEVEL_POINTS = {VarietyLevel.LOW: 1, VarietyLevel.MEDIUM: 2, VarietyLevel.HIGH: 3}


def seasonal_items(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
) -> list[ExistingItem]:
    """Items of the candidate's category that overlap its seasons."""

    category_items = [item for item in existing_items if item.category == candidate.category]
    if not candidate.seasons:
        return category_items
    wanted = set(candidate.seasons)
    return [
        item
        for item in category_items
        if not item.seasons or wanted.intersection(item.seasons)
    ]


def variety_level(unique_count: int) -> VarietyLevel:
    if unique_count >= 4:
        return VarietyLevel.HIGH
    if unique_count >= 2:
        return VarietyLevel.MEDIUM
    return VarietyLevel.LOW


def analyze_dimension(
    candidate: CandidateItem,
    items: list[ExistingItem],
    dimension: str,
) -> DimensionDiversity:
    """Spread of ``dimension`` once the candidate joins ``items``."""

    existing_values = [value for value in (getattr(item, dimension) for item in items) if value]
    target = getattr(candidate, dimension)
    counts = Counter(existing_values)
    if target:
        counts[target] += 1

    total = len(items) + 1
    most_common = counts.most_common(1)
    dominant_option, dominant_count = most_common[0] if most_common else (None, 0)
    dominant_percentage = round_half_up(100 * dominant_count / total)

    return DimensionDiversity(
        dimension=dimension,
        unique_count=len(counts),
        dominant_option=dominant_option,
        dominant_percentage=dominant_percentage,
        is_monotonous=dominant_percentage >= MONOTONY_THRESHOLD,
        adds_new_option=bool(target) and target not in existing_values,
        variety_level=variety_level(len(counts)),
    )


def _traps(dimensions: dict[str, DimensionDiversity]) -> list[str]:
    traps: list[str] = []
    style = dimensions["style"]
    if style.is_monotonous:
        traps.append(
            f'STYLE_TRAP: {style.dominant_percentage}% of items are "{style.dominant_option}"'
        )
    silhouette = dimensions["silhouette"]
    if silhouette.is_monotonous:
        traps.append(
            f"SILHOUETTE_TRAP: {silhouette.dominant_percentage}% are "
            f'"{silhouette.dominant_option}" silhouette'
        )
    color = dimensions["color"]
    if color.is_monotonous:
        traps.append(
            f'COLOR_TRAP: {color.dominant_percentage}% are "{color.dominant_option}" colored'
        )
    return traps


def _benefits(
    candidate: CandidateItem,
    dimensions: dict[str, DimensionDiversity],
    options: WardrobeOptions,
) -> list[str]:
    benefits: list[str] = []
    if dimensions["style"].adds_new_option:
        benefits.append(f'Adds new style "{candidate.style}" - great for variety!')
    if dimensions["silhouette"].adds_new_option:
        benefits.append(f'Introduces "{candidate.silhouette}" silhouette - expands your options')
    if dimensions["color"].adds_new_option:
        benefits.append(
            f'Brings new color "{candidate.color}" to your '
            f"{options.category_label(candidate.category)} collection"
        )
    return benefits


def analyze_style_diversity(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
    options: WardrobeOptions = DEFAULT_OPTIONS,
) -> StyleDiversity:
    """Report monotony traps and variety benefits for the candidate's season."""

    items = seasonal_items(candidate, existing_items)
    dimensions = {
        dimension: analyze_dimension(candidate, items, dimension)
        for dimension in DIVERSITY_DIMENSIONS
    }
    logger.debug(
        "Style diversity for %s over %s seasonal items: %s",
        candidate.category,
        len(items),
        {name: item.dominant_percentage for name, item in dimensions.items()},
    )
    return StyleDiversity(
        seasonal_item_count=len(items),
        dimensions=dimensions,
        stylistic_traps=_traps(dimensions),
        variety_benefits=_benefits(candidate, dimensions, options),
        overall_variety_score=sum(
            _LEVEL_POINTS[item.variety_level] for item in dimensions.values()
        ),
    )
