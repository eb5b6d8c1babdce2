"""End-to-end tests for the duplicate detection engine."""

from __future__ import annotations

from wardrobe_insight import analyze
from wardrobe_insight.recommender.engine import DuplicateDetectionEngine
from wardrobe_insight.recommender.models import Action, Reason, Severity, SimilarityWeights, Verdict


def test_exact_duplicate(make_candidate, make_item) -> None:
    result = analyze(make_candidate(), [make_item()])

    assert result.duplicate_analysis.matches[0].similarity_score == 100
    assert result.duplicate_analysis.severity is Severity.MODERATE
    assert result.duplicate_analysis.verdict is Verdict.CRITICAL_DUPLICATES
    assert result.recommendation.action is Action.CONSIDER


def test_three_exact_duplicates(make_candidate, make_item) -> None:
    result = analyze(make_candidate(), [make_item() for _ in range(3)])

    assert result.duplicate_analysis.severity is Severity.EXCESSIVE
    assert result.recommendation.action is Action.SKIP
    assert result.recommendation.reason is Reason.EXCESSIVE_DUPLICATION
    assert result.recommendation.confidence == 95


def test_different_category(make_candidate, make_item) -> None:
    candidate = make_candidate(category="bottom", subcategory="jeans", silhouette="Skinny")

    result = analyze(candidate, [make_item(), make_item(color="White")])

    assert not result.duplicate_analysis.found
    assert result.variety_impact.variety_score == 10
    assert result.recommendation.action is Action.RECOMMEND
    assert result.recommendation.reason is Reason.NO_CRITICAL_DUPLICATES


def test_color_family_match(make_candidate, make_item) -> None:
    result = analyze(make_candidate(color="Grey"), [make_item(color="Black")])

    [match] = result.duplicate_analysis.matches
    assert match.similarity_score == 100
    assert "Same color (Grey)" in match.overlap_factors


def test_empty_wardrobe(make_candidate) -> None:
    result = analyze(make_candidate(), [])

    assert result.duplicate_analysis.verdict is Verdict.NO_DUPLICATES
    assert result.variety_impact.impact_message == "Good variety maintained"
    assert result.recommendation.action is Action.RECOMMEND


def test_generator_input_is_snapshotted(make_candidate, make_item) -> None:
    items = [make_item(), make_item(style="Elegant", material="Wool")]

    from_list = analyze(make_candidate(), items)
    from_generator = analyze(make_candidate(), (item for item in items))

    assert from_generator.to_dict() == from_list.to_dict()
    assert from_generator.variety_impact.color_distribution.category_size == 2


def test_repeated_calls_are_identical(make_candidate, make_item) -> None:
    engine = DuplicateDetectionEngine()
    items = [make_item(), make_item(color="White")]

    first = engine.analyze(make_candidate(), items)
    second = engine.analyze(make_candidate(), items)

    assert first.to_dict() == second.to_dict()


def test_injected_weights_change_partition(make_candidate, make_item) -> None:
    engine = DuplicateDetectionEngine(
        weights=SimilarityWeights(color=100, silhouette=0, style=0, material=0),
    )

    result = engine.analyze(make_candidate(), [make_item(silhouette="Loose", style="Elegant")])

    assert result.duplicate_analysis.verdict is Verdict.CRITICAL_DUPLICATES
    assert result.duplicate_analysis.matches[0].overlap_factors == ["Same color (Black)"]


def test_result_serialises_enum_values(make_candidate, make_item) -> None:
    payload = analyze(make_candidate(), [make_item()]).to_dict()

    assert payload["duplicate_analysis"]["severity"] == "MODERATE"
    assert payload["recommendation"]["reason"] == "MODERATE_DUPLICATION"
    assert payload["variety_impact"]["color_distribution"]["is_dominant"] is True
