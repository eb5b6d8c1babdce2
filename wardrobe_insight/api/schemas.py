"""Request and response models for the HTTP API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from wardrobe_insight.recommender.models import CandidateItem, ExistingItem


class CandidatePayload(BaseModel):
    """Garment the user is thinking about buying."""

    category: str = Field(min_length=1)
    subcategory: str = Field(min_length=1)
    color: str | None = None
    silhouette: str | None = None
    style: str | None = None
    material: str | None = None
    seasons: list[str] = Field(default_factory=list)

    def to_domain(self) -> CandidateItem:
        return CandidateItem.from_mapping(self.model_dump())


class ExistingItemPayload(CandidatePayload):
    """Wardrobe entry as stored by the wardrobe service."""

    id: str
    name: str

    def to_domain(self) -> ExistingItem:  # type: ignore[override]
        return ExistingItem.from_mapping(self.model_dump())


class AnalyzeRequest(BaseModel):
    candidate: CandidatePayload
    existing_items: list[ExistingItemPayload] = Field(default_factory=list)


class ExtractionParseRequest(BaseModel):
    text: str
    category: str = Field(min_length=1)


class ExtractionParseResponse(BaseModel):
    attributes: dict[str, Any] | None


class ExtractionPromptResponse(BaseModel):
    prompt: str
