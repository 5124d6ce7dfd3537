"""Stage bucket classification of sheet records."""

from dealboard.filtering.engine import (
    ClassificationResult,
    StageClassifier,
    classify,
    classify_buckets,
)
from dealboard.filtering.rules import has_access_column

__all__ = [
    "ClassificationResult",
    "StageClassifier",
    "classify",
    "classify_buckets",
    "has_access_column",
]
