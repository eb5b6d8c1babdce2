"""Shared factories for wardrobe items."""

from __future__ import annotations

from itertools import count
from typing import Any, Callable

import pytest

from wardrobe_insight.recommender.models import CandidateItem, ExistingItem

BASE_ATTRIBUTES: dict[str, Any] = {
    "category": "top",
    "subcategory": "t-shirt",
    "color": "Black",
    "silhouette": "Fitted",
    "style": "Casual",
    "material": "Cotton",
}


@pytest.fixture
def make_candidate() -> Callable[..., CandidateItem]:
    def _factory(**overrides: Any) -> CandidateItem:
        return CandidateItem(**{**BASE_ATTRIBUTES, **overrides})

    return _factory


@pytest.fixture
def make_item() -> Callable[..., ExistingItem]:
    ids = count(1)

    def _factory(**overrides: Any) -> ExistingItem:
        index = next(ids)
        data = {"id": f"item-{index}", "name": f"Item {index}", **BASE_ATTRIBUTES, **overrides}
        return ExistingItem(**data)

    return _factory
