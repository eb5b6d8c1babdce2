"""Application services."""

from .duplicates import DuplicateDetectionOutcome, DuplicateDetectionService, normalize_silhouette

__all__ = ["DuplicateDetectionOutcome", "DuplicateDetectionService", "normalize_silhouette"]
