"""Tests for the duplicate detection service facade."""

from __future__ import annotations

import pytest
import pytest_mock
from openai import OpenAIError

from wardrobe_insight.catalog.attribute_extractor import ExtractedAttributes
from wardrobe_insight.recommender.models import Action, Severity
from wardrobe_insight.services.duplicates import DuplicateDetectionService, normalize_silhouette


@pytest.mark.parametrize(
    ("silhouette", "subcategory", "expected"),
    [
        ("Slim Fit", "leggings", "Slim Fit"),
        (None, "Leggings", "Skinny"),
        ("unknown", "leggings", "Skinny"),
        ("N/A", "jeans", None),
        (None, None, None),
    ],
)
def test_normalize_silhouette(silhouette: str | None, subcategory: str | None, expected: str | None) -> None:
    assert normalize_silhouette(silhouette, subcategory) == expected


def _client(mocker: pytest_mock.MockerFixture, **kwargs):
    client = mocker.Mock()
    client.extract = mocker.AsyncMock(**kwargs)
    return client


@pytest.mark.asyncio
async def test_analyze_with_ai_applies_silhouette_default(
    mocker: pytest_mock.MockerFixture,
    make_item,
) -> None:
    client = _client(mocker, return_value=ExtractedAttributes(color="Black", style="Casual"))
    service = DuplicateDetectionService(client=client)
    existing = make_item(category="bottom", subcategory="leggings", silhouette="Skinny")

    outcome = await service.analyze_with_ai(
        "aGVsbG8=",
        {"category": "bottom", "subcategory": "leggings", "material": "Cotton"},
        [existing],
    )

    assert outcome is not None
    client.extract.assert_awaited_once_with("aGVsbG8=", "bottom", "leggings")
    assert outcome.extracted_attributes["silhouette"] == "Skinny"
    assert outcome.analysis.duplicate_analysis.matches[0].similarity_score == 100
    assert outcome.analysis.duplicate_analysis.severity is Severity.MODERATE
    assert outcome.to_dict()["analysis"]["recommendation"]["action"] == "CONSIDER"


@pytest.mark.asyncio
async def test_analyze_with_ai_skips_on_provider_error(mocker: pytest_mock.MockerFixture) -> None:
    service = DuplicateDetectionService(client=_client(mocker, side_effect=OpenAIError("boom")))

    assert await service.analyze_with_ai("aGVsbG8=", {"category": "top"}, []) is None


@pytest.mark.asyncio
async def test_analyze_with_ai_skips_unresolved_extraction(mocker: pytest_mock.MockerFixture) -> None:
    service = DuplicateDetectionService(client=_client(mocker, return_value=None))

    assert await service.analyze_with_ai("aGVsbG8=", {"category": "top"}, []) is None


@pytest.mark.asyncio
async def test_analyze_with_ai_requires_category(mocker: pytest_mock.MockerFixture) -> None:
    client = _client(mocker)
    service = DuplicateDetectionService(client=client)

    assert await service.analyze_with_ai("aGVsbG8=", {"category": "unknown"}, []) is None
    client.extract.assert_not_awaited()


@pytest.mark.asyncio
async def test_analyze_with_ai_without_client() -> None:
    service = DuplicateDetectionService()

    assert await service.analyze_with_ai("aGVsbG8=", {"category": "top"}, []) is None


def test_analyze_with_form_data_drops_accessory_silhouette(make_item) -> None:
    service = DuplicateDetectionService()
    existing = make_item(category="accessory", subcategory="bag", silhouette=None)

    outcome = service.analyze_with_form_data(
        {
            "category": "accessory",
            "subcategory": "bag",
            "color": "Black",
            "silhouette": "Fitted",
            "style": "Casual",
            "material": "Cotton",
        },
        [existing],
    )

    assert outcome is not None
    assert outcome.extracted_attributes["silhouette"] is None
    # color, style and material without silhouette: 65
    assert outcome.analysis.duplicate_analysis.count == 0
    assert outcome.analysis.recommendation.action is Action.RECOMMEND


def test_analyze_with_form_data_ignores_unknown_values(make_item) -> None:
    service = DuplicateDetectionService()

    outcome = service.analyze_with_form_data(
        {"category": "top", "subcategory": "t-shirt", "color": "undefined", "style": "Casual"},
        [make_item()],
    )

    assert outcome is not None
    assert outcome.extracted_attributes["color"] is None
    assert outcome.analysis.variety_impact.color_distribution.target_value is None


def test_analyze_with_form_data_requires_category() -> None:
    assert DuplicateDetectionService().analyze_with_form_data({"color": "Black"}, []) is None


@pytest.mark.asyncio
async def test_padded_category_gives_same_result_on_both_paths(
    mocker: pytest_mock.MockerFixture,
    make_item,
) -> None:
    form_data = {
        "category": " top ",
        "subcategory": "t-shirt",
        "color": "Black",
        "silhouette": "Fitted",
        "style": "Casual",
        "material": "Cotton",
    }
    extracted = ExtractedAttributes(color="Black", style="Casual", silhouette="Fitted")
    service = DuplicateDetectionService(client=_client(mocker, return_value=extracted))
    existing = [make_item()]

    from_ai = await service.analyze_with_ai("aGVsbG8=", form_data, existing)
    from_form = service.analyze_with_form_data(form_data, existing)

    assert from_ai is not None and from_form is not None
    assert from_ai.analysis.duplicate_analysis.count == 1
    assert from_ai.analysis.recommendation.action is Action.CONSIDER
    assert from_ai.analysis.to_dict() == from_form.analysis.to_dict()
