"""Domain types exchanged by the duplicate detection engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping


class Severity(str, Enum):
    """How many critical duplicates already exist."""

    NONE = "NONE"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    EXCESSIVE = "EXCESSIVE"


class Verdict(str, Enum):
    """Strongest kind of match found for the candidate."""

    NO_DUPLICATES = "NO_DUPLICATES"
    SIMILAR_ITEMS = "SIMILAR_ITEMS"
    CRITICAL_DUPLICATES = "CRITICAL_DUPLICATES"


class Action(str, Enum):
    """Final purchase advice."""

    SKIP = "SKIP"
    CONSIDER = "CONSIDER"
    RECOMMEND = "RECOMMEND"


class Reason(str, Enum):
    """Machine-readable code explaining an :class:`Action`."""

    EXCESSIVE_DUPLICATION = "EXCESSIVE_DUPLICATION"
    HIGH_DUPLICATION_LOW_VARIETY = "HIGH_DUPLICATION_LOW_VARIETY"
    MODERATE_DUPLICATION = "MODERATE_DUPLICATION"
    VARIETY_CONCERN = "VARIETY_CONCERN"
    NO_CRITICAL_DUPLICATES = "NO_CRITICAL_DUPLICATES"


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _seasons(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(season) for season in value)


@dataclass(frozen=True, slots=True)
class CandidateItem:
    """Garment under evaluation. Never persisted by the engine."""

    category: str
    subcategory: str
    color: str | None = None
    silhouette: str | None = None
    style: str | None = None
    material: str | None = None
    seasons: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CandidateItem":
        """Build a candidate from a plain mapping such as submitted form data."""

        return cls(
            category=str(data.get("category") or ""),
            subcategory=str(data.get("subcategory") or ""),
            color=_clean(data.get("color")),
            silhouette=_clean(data.get("silhouette")),
            style=_clean(data.get("style")),
            material=_clean(data.get("material")),
            seasons=_seasons(data.get("seasons")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ExistingItem:
    """Read-only wardrobe entry the candidate is compared against."""

    id: str
    name: str
    category: str
    subcategory: str
    color: str | None = None
    silhouette: str | None = None
    style: str | None = None
    material: str | None = None
    seasons: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ExistingItem":
        """Build an existing item from a stored wardrobe record."""

        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            category=str(data.get("category") or ""),
            subcategory=str(data.get("subcategory") or ""),
            color=_clean(data.get("color")),
            silhouette=_clean(data.get("silhouette")),
            style=_clean(data.get("style")),
            material=_clean(data.get("material")),
            seasons=_seasons(data.get("seasons")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SimilarityWeights:
    """Per-attribute points used by the similarity scorer.

    Category and subcategory carry no weight: they gate the comparison instead.
    """

    color: int = 40
    silhouette: int = 35
    style: int = 15
    material: int = 10

    def __post_init__(self) -> None:
        values = (self.color, self.silhouette, self.style, self.material)
        if any(value < 0 for value in values):
            raise ValueError("Similarity weights must be non-negative.")
        if sum(values) != 100:
            raise ValueError(f"Similarity weights must sum to 100, got {sum(values)}.")

    @property
    def total(self) -> int:
        return self.color + self.silhouette + self.style + self.material


DEFAULT_WEIGHTS = SimilarityWeights()


@dataclass(slots=True)
class DuplicateMatch:
    """Existing item that scored above one of the duplicate thresholds."""

    item: ExistingItem
    similarity_score: int
    overlap_factors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "item": self.item.to_dict(),
            "similarity_score": self.similarity_score,
            "overlap_factors": list(self.overlap_factors),
        }


@dataclass(slots=True)
class DuplicateAnalysis:
    """Critical and similar matches for one candidate."""

    found: bool
    count: int
    matches: list[DuplicateMatch]
    severity: Severity
    verdict: Verdict

    @property
    def item_names(self) -> list[str]:
        return [match.item.name for match in self.matches]

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": self.found,
            "count": self.count,
            "matches": [match.to_dict() for match in self.matches],
            "severity": self.severity.value,
            "verdict": self.verdict.value,
        }


@dataclass(slots=True)
class DistributionSnapshot:
    """How one attribute dimension of a category looks after a hypothetical add."""

    dimension: str
    category: str
    category_size: int
    target_value: str | None
    current_distinct: int
    target_count: int
    after_addition: int
    percentage_of_category: int
    is_dominant: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class VarietyLevel(str, Enum):
    """Coarse spread of distinct values within a dimension."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(slots=True)
class DimensionDiversity:
    """Spread of one attribute across the season-relevant part of a category."""

    dimension: str
    unique_count: int
    dominant_option: str | None
    dominant_percentage: int
    is_monotonous: bool
    adds_new_option: bool
    variety_level: VarietyLevel

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["variety_level"] = self.variety_level.value
        return data


@dataclass(slots=True)
class StyleDiversity:
    """Season-aware diversity report with stylistic traps and variety benefits."""

    seasonal_item_count: int
    dimensions: dict[str, DimensionDiversity]
    stylistic_traps: list[str] = field(default_factory=list)
    variety_benefits: list[str] = field(default_factory=list)
    overall_variety_score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "seasonal_item_count": self.seasonal_item_count,
            "dimensions": {name: item.to_dict() for name, item in self.dimensions.items()},
            "stylistic_traps": list(self.stylistic_traps),
            "variety_benefits": list(self.variety_benefits),
            "overall_variety_score": self.overall_variety_score,
        }


@dataclass(slots=True)
class VarietyImpact:
    """Aggregate variety outcome for the candidate's category."""

    color_distribution: DistributionSnapshot
    silhouette_distribution: DistributionSnapshot
    variety_score: int
    impact_message: str
    style_diversity: StyleDiversity | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "color_distribution": self.color_distribution.to_dict(),
            "silhouette_distribution": self.silhouette_distribution.to_dict(),
            "variety_score": self.variety_score,
            "impact_message": self.impact_message,
            "style_diversity": self.style_diversity.to_dict() if self.style_diversity else None,
        }


@dataclass(slots=True)
class RecommendationResult:
    """Categorical purchase advice with a human-readable explanation."""

    action: Action
    reason: Reason
    message: str
    confidence: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action.value,
            "reason": self.reason.value,
            "message": self.message,
            "confidence": self.confidence,
        }


@dataclass(slots=True)
class DuplicateDetectionResult:
    """Everything :func:`analyze` returns for one candidate."""

    duplicate_analysis: DuplicateAnalysis
    variety_impact: VarietyImpact
    recommendation: RecommendationResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "duplicate_analysis": self.duplicate_analysis.to_dict(),
            "variety_impact": self.variety_impact.to_dict(),
            "recommendation": self.recommendation.to_dict(),
        }
