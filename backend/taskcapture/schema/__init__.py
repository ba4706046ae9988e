"""Controlled vocabularies shared with the category repository."""

from taskcapture.schema.categories import (
    CATEGORY_IDS,
    CATEGORY_LABELS,
    DEFAULT_CATEGORY_ID,
    normalize_category_id,
)

__all__ = [
    "CATEGORY_IDS",
    "CATEGORY_LABELS",
    "DEFAULT_CATEGORY_ID",
    "normalize_category_id",
]
