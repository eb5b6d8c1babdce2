"""Attribute extraction helpers for garments.

The extraction model is asked to answer with ``key: value`` lines. The answer
is then validated against the closed vocabularies so that the duplicate
engine never scores against values the wardrobe forms cannot produce.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Sequence

from wardrobe_insight.catalog.options import DEFAULT_OPTIONS, WardrobeOptions

logger = logging.getLogger(__name__)

NOT_APPLICABLE = "n/a"

_LINE_PATTERN = re.compile(r"^\s*(?:[-*•]\s*)?([A-Za-z_ ]+?)\s*:\s*(.*?)\s*$")


@dataclass(slots=True)
class AttributeConfidence:
    """Stores attribute value with confidence scores."""

    value: str | None
    confidence: int


@dataclass(slots=True)
class ExtractedAttributes:
    """Validated attributes ready to enrich a duplicate-detection candidate."""

    color: str
    style: str
    silhouette: str | None = None
    confidence: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "color": self.color,
            "silhouette": self.silhouette,
            "style": self.style,
            "confidence": dict(self.confidence),
        }


def parse_key_values(text: str) -> dict[str, str]:
    """Collect ``key: value`` pairs from line-oriented model output.

    Keys are lower-cased; the first occurrence of a key wins.
    """

    pairs: dict[str, str] = {}
    for line in text.splitlines():
        match = _LINE_PATTERN.match(line)
        if not match:
            continue
        key = match.group(1).strip().lower()
        pairs.setdefault(key, match.group(2))
    return pairs


def match_option(raw: str | None, options: Sequence[str]) -> str | None:
    """Map ``raw`` onto one of ``options``.

    Exact case-insensitive matches win; otherwise the first option that
    contains, or is contained in, the raw value is used.
    """

    if not raw or raw.strip().lower() == NOT_APPLICABLE:
        return None

    needle = raw.strip().lower()
    for option in options:
        if option.lower() == needle:
            return option
    for option in options:
        if needle in option.lower() or option.lower() in needle:
            return option
    return None


def calculate_confidence(raw: str | None, value: str | None) -> int:
    if not raw or not value:
        return 0
    original = raw.strip().lower()
    validated = value.lower()
    if original == validated:
        return 95
    if original in validated:
        return 85
    if validated in original:
        return 80
    return 70


def resolve_option(raw: str | None, options: Sequence[str]) -> AttributeConfidence:
    value = match_option(raw, options)
    return AttributeConfidence(value=value, confidence=calculate_confidence(raw, value))


class AttributeExtractor:
    """Builds extraction prompts and validates the model's answers."""

    def __init__(self, options: WardrobeOptions = DEFAULT_OPTIONS) -> None:
        self._options = options

    def generate_prompt(self, category: str, subcategory: str | None = None) -> str:
        """Return the instruction text asking for color, silhouette and style."""

        silhouettes = self._options.silhouettes_for(category)
        item = f"{subcategory} ({category})" if subcategory else category

        if silhouettes:
            silhouette_block = "SILHOUETTE (select exactly one):\n" + ", ".join(silhouettes)
        else:
            silhouette_block = "SILHOUETTE: Not applicable for this category"

        return "\n".join(
            [
                f"EXTRACT STRUCTURED DATA for this {item} - you must select from the exact options below.",
                "",
                "CRITICAL: Only select from these predefined lists. Do not create new options.",
                "",
                "COLOR (select exactly one):",
                ", ".join(self._options.colors),
                "",
                silhouette_block,
                "",
                "STYLE (select exactly one):",
                ", ".join(self._options.styles),
                "",
                "FORMAT YOUR RESPONSE EXACTLY LIKE THIS:",
                "color: [your selection]",
                "silhouette: [your selection or 'N/A' if not applicable]",
                "style: [your selection]",
                "",
                "RULES:",
                "- You MUST select from the lists above - no other options allowed",
                "- Use exact capitalization as shown in the lists",
                "- If uncertain, select the closest match",
                "- For silhouette, use 'N/A' if the category doesn't have silhouette options",
                "- Do not add explanations or additional text",
            ]
        )

    def parse_response(self, text: str, category: str) -> ExtractedAttributes | None:
        """Validate model output; ``None`` when color or style cannot be resolved."""

        pairs = parse_key_values(text or "")
        color = resolve_option(pairs.get("color"), self._options.colors)
        silhouette = resolve_option(
            pairs.get("silhouette"),
            self._options.silhouettes_for(category),
        )
        style = resolve_option(pairs.get("style"), self._options.styles)

        if color.value is None or style.value is None:
            logger.info(
                "Extraction rejected for %s: color=%r style=%r",
                category,
                pairs.get("color"),
                pairs.get("style"),
            )
            return None

        return ExtractedAttributes(
            color=color.value,
            style=style.value,
            silhouette=silhouette.value,
            confidence={
                "color": color.confidence,
                "silhouette": silhouette.confidence,
                "style": style.confidence,
            },
        )


_default_extractor = AttributeExtractor()


def generate_extraction_prompt(category: str, subcategory: str | None = None) -> str:
    return _default_extractor.generate_prompt(category, subcategory)


def parse_extraction_response(text: str, category: str) -> ExtractedAttributes | None:
    return _default_extractor.parse_response(text, category)
