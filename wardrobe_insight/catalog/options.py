"""Closed vocabularies shared with the wardrobe item forms.

These tables are versioned together with the UI form options. A value that is
accepted by the forms but missing here silently degrades family matching to
exact string equality, so both sides must be updated in lockstep.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

COLOR_OPTIONS: tuple[str, ...] = (
    "Black",
    "Grey",
    "Charcoal",
    "White",
    "Off-White",
    "Cream",
    "Ivory",
    "Beige",
    "Tan",
    "Camel",
    "Brown",
    "Navy",
    "Blue",
    "Light Blue",
    "Teal",
    "Green",
    "Olive",
    "Sage",
    "Red",
    "Burgundy",
    "Maroon",
    "Pink",
    "Blush",
    "Purple",
    "Lavender",
    "Yellow",
    "Mustard",
    "Orange",
    "Coral",
    "Gold",
    "Silver",
    "Multicolor",
)

STYLE_OPTIONS: tuple[str, ...] = (
    "Casual",
    "Elegant",
    "Special Occasion",
    "Smart Casual",
    "Sporty",
    "Business",
    "Bohemian",
    "Minimalist",
    "Streetwear",
    "Vintage",
)

SILHOUETTE_OPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "top": ("Fitted", "Regular", "Loose", "Oversized", "Slim Fit", "Cropped", "Boxy"),
        "bottom": (
            "Skinny",
            "Slim Fit",
            "Straight",
            "Regular Fit",
            "Wide Leg",
            "Relaxed Fit",
            "Bootcut",
            "Flared",
            "Tapered",
        ),
        "one_piece": ("A-Line", "Bodycon", "Shift", "Wrap", "Fit-and-Flare", "Sheath"),
        "outerwear": ("Fitted", "Regular", "Oversized", "Cropped", "Longline"),
        "footwear": (),
        "accessory": (),
    }
)

# Families partition the vocabularies: a value belongs to at most one family.
COLOR_FAMILIES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "dark_neutrals": ("Black", "Grey", "Charcoal"),
        "light_neutrals": ("White", "Off-White", "Cream", "Ivory"),
        "earth_tones": ("Beige", "Tan", "Camel", "Brown"),
        "blues": ("Navy", "Blue", "Light Blue"),
        "greens": ("Green", "Olive", "Sage"),
        "reds": ("Red", "Burgundy", "Maroon"),
        "pinks": ("Pink", "Blush"),
        "purples": ("Purple", "Lavender"),
        "yellows": ("Yellow", "Mustard"),
        "oranges": ("Orange", "Coral"),
    }
)

SILHOUETTE_FAMILIES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "close_fit": ("Skinny", "Slim Fit", "Fitted", "Bodycon", "Sheath"),
        "straight": ("Straight", "Regular Fit", "Regular", "Shift"),
        "relaxed": ("Wide Leg", "Relaxed Fit", "Loose", "Oversized", "Boxy"),
        "flared": ("Bootcut", "Flared", "A-Line", "Fit-and-Flare"),
    }
)

CATEGORY_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "top": "tops",
        "bottom": "bottoms",
        "one_piece": "one-pieces",
        "outerwear": "outerwear",
        "footwear": "footwear",
        "accessory": "accessories",
    }
)


@dataclass(frozen=True, slots=True)
class WardrobeOptions:
    """Injectable bundle of the vocabularies and family tables."""

    colors: tuple[str, ...] = COLOR_OPTIONS
    styles: tuple[str, ...] = STYLE_OPTIONS
    silhouettes: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: SILHOUETTE_OPTIONS)
    color_families: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: COLOR_FAMILIES)
    silhouette_families: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: SILHOUETTE_FAMILIES)
    category_labels: Mapping[str, str] = field(default_factory=lambda: CATEGORY_LABELS)

    def silhouettes_for(self, category: str | None) -> tuple[str, ...]:
        """Return the silhouette vocabulary for ``category``."""

        if not category:
            return ()
        return tuple(self.silhouettes.get(category.strip().lower(), ()))

    def category_label(self, category: str | None) -> str:
        """Plural label used in user-facing messages."""

        if not category:
            return "items"
        return self.category_labels.get(category.strip().lower(), "items")


DEFAULT_OPTIONS = WardrobeOptions()
