"""Partitioning of scored wardrobe items into critical and similar matches."""

from __future__ import annotations

import logging
from typing import Iterable

from wardrobe_insight.recommender.models import (
    CandidateItem,
    DuplicateAnalysis,
    DuplicateMatch,
    ExistingItem,
    Severity,
    Verdict,
)
from wardrobe_insight.recommender.scorer import SimilarityScorer, same_slot

logger = logging.getLogger(__name__)

CRITICAL_DUPLICATE_THRESHOLD = 85
SIMILAR_ITEM_THRESHOLD = 70

_default_scorer = SimilarityScorer()


def classify_score(score: int) -> Verdict | None:
    """Map a similarity score onto its bucket; ``None`` below the similar threshold."""

    if score >= CRITICAL_DUPLICATE_THRESHOLD:
        return Verdict.CRITICAL_DUPLICATES
    if score >= SIMILAR_ITEM_THRESHOLD:
        return Verdict.SIMILAR_ITEMS
    return None


def severity_for(critical_count: int) -> Severity:
    if critical_count <= 0:
        return Severity.NONE
    if critical_count == 1:
        return Severity.MODERATE
    if critical_count == 2:
        return Severity.HIGH
    return Severity.EXCESSIVE


def _scored_matches(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
    scorer: SimilarityScorer,
    bucket: Verdict,
) -> list[DuplicateMatch]:
    matches: list[DuplicateMatch] = []
    for item in existing_items:
        if not same_slot(candidate, item):
            continue
        score = scorer.score(candidate, item)
        logger.debug(
            "Compared %s/%s candidate with %r: score=%s",
            candidate.category,
            candidate.subcategory,
            item.name,
            score,
        )
        if classify_score(score) is not bucket:
            continue
        matches.append(
            DuplicateMatch(
                item=item,
                similarity_score=score,
                overlap_factors=scorer.overlap_factors(candidate, item),
            )
        )
    matches.sort(key=lambda match: match.similarity_score, reverse=True)
    return matches


def find_critical_duplicates(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
    scorer: SimilarityScorer | None = None,
) -> list[DuplicateMatch]:
    """Items scoring at least the critical threshold, best first."""

    return _scored_matches(
        candidate,
        existing_items,
        scorer or _default_scorer,
        Verdict.CRITICAL_DUPLICATES,
    )


def find_similar_items(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
    scorer: SimilarityScorer | None = None,
) -> list[DuplicateMatch]:
    """Items between the similar and critical thresholds, best first."""

    return _scored_matches(
        candidate,
        existing_items,
        scorer or _default_scorer,
        Verdict.SIMILAR_ITEMS,
    )


def analyze_duplicates(
    candidate: CandidateItem,
    existing_items: Iterable[ExistingItem],
    scorer: SimilarityScorer | None = None,
) -> DuplicateAnalysis:
    """Assemble the duplicate section of the analysis result.

    Criticals always precede similar items in ``matches``; the two sorted
    lists are concatenated, never re-merged by score. Severity only counts
    criticals.
    """

    items = tuple(existing_items)
    criticals = find_critical_duplicates(candidate, items, scorer)
    similars = find_similar_items(candidate, items, scorer)

    if criticals:
        verdict = Verdict.CRITICAL_DUPLICATES
    elif similars:
        verdict = Verdict.SIMILAR_ITEMS
    else:
        verdict = Verdict.NO_DUPLICATES

    matches = [*criticals, *similars]
    return DuplicateAnalysis(
        found=bool(matches),
        count=len(matches),
        matches=matches,
        severity=severity_for(len(criticals)),
        verdict=verdict,
    )
