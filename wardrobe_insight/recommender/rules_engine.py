"""Business rules turning duplicate and variety findings into purchase advice."""

from __future__ import annotations

from wardrobe_insight.recommender.models import (
    Action,
    DuplicateAnalysis,
    Reason,
    RecommendationResult,
    Severity,
    Verdict,
    VarietyImpact,
)

HIGH_DUPLICATION_VARIETY_CEILING = 3
VARIETY_CONCERN_CEILING = 5


def generate_recommendation(
    duplicates: DuplicateAnalysis,
    variety: VarietyImpact,
) -> RecommendationResult:
    """Return the first matching rule of the recommendation ladder.

    The order matters: HIGH severity with poor variety must be caught before
    the generic critical-duplicate rule, which would otherwise also apply.
    """

    if duplicates.severity is Severity.EXCESSIVE:
        return RecommendationResult(
            action=Action.SKIP,
            reason=Reason.EXCESSIVE_DUPLICATION,
            message=(
                f"You already have {duplicates.count} very similar items. "
                "This would be wasteful."
            ),
            confidence=95,
        )

    if (
        duplicates.severity is Severity.HIGH
        and variety.variety_score <= HIGH_DUPLICATION_VARIETY_CEILING
    ):
        return RecommendationResult(
            action=Action.SKIP,
            reason=Reason.HIGH_DUPLICATION_LOW_VARIETY,
            message=(
                "This would create too much similarity in your wardrobe. "
                f"{variety.impact_message}"
            ),
            confidence=88,
        )

    if duplicates.verdict is Verdict.CRITICAL_DUPLICATES:
        return RecommendationResult(
            action=Action.CONSIDER,
            reason=Reason.MODERATE_DUPLICATION,
            message=(
                f"You have {duplicates.count} similar item(s). "
                "Consider if this adds meaningful variety."
            ),
            confidence=70,
        )

    if (
        duplicates.verdict is Verdict.SIMILAR_ITEMS
        and variety.variety_score <= VARIETY_CONCERN_CEILING
    ):
        return RecommendationResult(
            action=Action.CONSIDER,
            reason=Reason.VARIETY_CONCERN,
            message=f"This might reduce wardrobe variety. {variety.impact_message}",
            confidence=65,
        )

    return RecommendationResult(
        action=Action.RECOMMEND,
        reason=Reason.NO_CRITICAL_DUPLICATES,
        message="No critical duplicates detected. This could add useful variety.",
        confidence=80,
    )
