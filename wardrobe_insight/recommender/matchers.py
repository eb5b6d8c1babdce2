"""Fuzzy equivalence predicates for garment attributes."""

from __future__ import annotations

from typing import Mapping

from wardrobe_insight.catalog.options import COLOR_FAMILIES, SILHOUETTE_FAMILIES


def _same_family(first: str, second: str, families: Mapping[str, tuple[str, ...]]) -> bool:
    # First family listing both values wins; overlapping tables are not rejected.
    for members in families.values():
        if first in members and second in members:
            return True
    return False


def values_match(first: str | None, second: str | None) -> bool:
    """Exact match of two present values."""

    if not first or not second:
        return False
    return first == second


def colors_match(
    first: str | None,
    second: str | None,
    families: Mapping[str, tuple[str, ...]] = COLOR_FAMILIES,
) -> bool:
    """Return ``True`` for identical colors or colors from the same family.

    Values are compared as stored (case sensitive). Missing values never match.
    """

    if not first or not second:
        return False
    if first == second:
        return True
    return _same_family(first, second, families)


def silhouettes_match(
    first: str | None,
    second: str | None,
    families: Mapping[str, tuple[str, ...]] = SILHOUETTE_FAMILIES,
) -> bool:
    """Silhouette counterpart of :func:`colors_match`."""

    if not first or not second:
        return False
    if first == second:
        return True
    return _same_family(first, second, families)
