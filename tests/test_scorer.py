"""Tests for the weighted similarity scorer."""

from __future__ import annotations

import pytest

from wardrobe_insight.recommender.models import SimilarityWeights
from wardrobe_insight.recommender.scorer import (
    SimilarityScorer,
    calculate_similarity_score,
    get_overlap_factors,
    round_half_up,
)


def test_identical_items_score_100(make_candidate, make_item) -> None:
    candidate = make_candidate()
    existing = make_item()

    assert calculate_similarity_score(candidate, existing) == 100
    assert get_overlap_factors(candidate, existing) == [
        "Same color (Black)",
        "Same silhouette (Fitted)",
        "Same style (Casual)",
        "Same material (Cotton)",
    ]


@pytest.mark.parametrize(
    "overrides",
    [{"category": "bottom"}, {"subcategory": "blouse"}, {"subcategory": "T-Shirt"}],
)
def test_category_gate_returns_zero(make_candidate, make_item, overrides: dict) -> None:
    candidate = make_candidate()
    existing = make_item(**overrides)

    assert calculate_similarity_score(candidate, existing) == 0
    assert get_overlap_factors(candidate, existing) == []


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({"style": "Elegant", "material": "Wool"}, 75),
        ({"silhouette": "Loose"}, 65),
        ({"material": "Wool"}, 90),
        ({"color": "White", "silhouette": "Loose", "style": "Elegant", "material": "Wool"}, 0),
    ],
)
def test_partial_matches(make_candidate, make_item, overrides: dict, expected: int) -> None:
    assert calculate_similarity_score(make_candidate(), make_item(**overrides)) == expected


def test_family_match_credits_full_color_weight(make_candidate, make_item) -> None:
    candidate = make_candidate(color="Grey")
    existing = make_item(color="Black")

    assert calculate_similarity_score(candidate, existing) == 100
    assert "Same color (Grey)" in get_overlap_factors(candidate, existing)


def test_missing_style_and_material_never_match(make_candidate, make_item) -> None:
    candidate = make_candidate(style=None, material=None)
    existing = make_item(style=None, material=None)

    assert calculate_similarity_score(candidate, existing) == 75
    assert get_overlap_factors(candidate, existing) == [
        "Same color (Black)",
        "Same silhouette (Fitted)",
    ]


def test_adding_matches_never_lowers_the_score(make_candidate, make_item) -> None:
    candidate = make_candidate()
    chain = [
        make_item(color="White", silhouette="Loose", style="Elegant", material="Wool"),
        make_item(silhouette="Loose", style="Elegant", material="Wool"),
        make_item(style="Elegant", material="Wool"),
        make_item(material="Wool"),
        make_item(),
    ]

    scores = [calculate_similarity_score(candidate, item) for item in chain]

    assert scores == [0, 40, 75, 90, 100]
    assert scores == sorted(scores)


def test_factors_follow_injected_weights(make_candidate, make_item) -> None:
    scorer = SimilarityScorer(weights=SimilarityWeights(color=84, silhouette=16, style=0, material=0))
    candidate = make_candidate()
    existing = make_item(silhouette="Loose", style="Elegant", material="Wool")

    assert scorer.score(candidate, existing) == 84
    assert scorer.overlap_factors(candidate, existing) == ["Same color (Black)"]


@pytest.mark.parametrize(
    "values",
    [(50, 50, 10, 0), (40, 35, 15, 5), (110, -10, 0, 0)],
)
def test_invalid_weights_are_rejected(values: tuple[int, int, int, int]) -> None:
    with pytest.raises(ValueError):
        SimilarityWeights(*values)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(84.5, 85), (84.49, 84), (0.5, 1), (2.0, 2), (-1.5, -2)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
