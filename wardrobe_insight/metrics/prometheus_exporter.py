"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter


duplicate_analysis_total = Counter(
    "duplicate_analysis_total",
    "Total number of duplicate analyses, labelled by recommended action.",
    ["action"],
)

attribute_extraction_total = Counter(
    "attribute_extraction_total",
    "Total number of attribute extraction parses, labelled by outcome.",
    ["outcome"],
)
