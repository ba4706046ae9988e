"""Controlled task category list consumed from the category repository."""

from __future__ import annotations


CATEGORY_IDS: tuple[str, ...] = (
    "personal",
    "household",
    "work",
    "family",
    "health",
    "finance",
)
CATEGORY_ID_SET = set(CATEGORY_IDS)
DEFAULT_CATEGORY_ID = "personal"

CATEGORY_LABELS: dict[str, str] = {
    "personal": "Personal",
    "household": "Household",
    "work": "Work",
    "family": "Family",
    "health": "Health",
    "finance": "Finance",
}

_CATEGORY_SYNONYMS: dict[str, str] = {
    "home": "household",
    "house": "household",
    "chores": "household",
    "errands": "household",
    "shopping": "household",
    "job": "work",
    "office": "work",
    "medical": "health",
    "wellness": "health",
    "kids": "family",
    "money": "finance",
    "bills": "finance",
    "self": "personal",
}


def normalize_category_id(raw_id: str | None, known_ids: set[str] | None = None) -> str:
    """Map a suggested or user-edited category onto a known id, else ``personal``."""

    valid = known_ids if known_ids is not None else CATEGORY_ID_SET
    cleaned = _clean_text(raw_id).lower()
    if not cleaned:
        return DEFAULT_CATEGORY_ID
    if cleaned in valid:
        return cleaned
    normalized = _CATEGORY_SYNONYMS.get(cleaned)
    if normalized and normalized in valid:
        return normalized
    return DEFAULT_CATEGORY_ID


def _clean_text(value: str | None) -> str:
    if not value:
        return ""
    return " ".join(value.strip().split())
