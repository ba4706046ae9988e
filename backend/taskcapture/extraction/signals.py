"""Keyword-driven signals attached to each candidate: category, keywords, priority."""

from __future__ import annotations

import re
from typing import Iterable

from taskcapture.extraction.types import Priority


def compile_terms(terms: Iterable[str], suffix: str = "") -> re.Pattern[str]:
    """One case-insensitive, whole-word alternation over ``terms``."""

    ordered = sorted({term.lower() for term in terms}, key=len, reverse=True)
    alternation = "|".join(re.escape(term).replace(r"\ ", r"\s+") for term in ordered)
    return re.compile(r"(?<![\w'])(?:" + alternation + r")" + suffix + r"(?![\w'])", re.IGNORECASE)


# First match wins, so table order is significant.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "household",
        ("grocery", "groceries", "cleaning", "dishes", "laundry", "home", "buy", "shop", "shopping"),
    ),
    (
        "health",
        ("doctor", "dentist", "pharmacy", "medication", "exercise", "gym", "appointment"),
    ),
    (
        "work",
        ("meeting", "presentation", "deadline", "project", "client", "office", "work", "report"),
    ),
    (
        "family",
        ("kid", "kids", "school", "parent", "family", "birthday", "anniversary", "dinner"),
    ),
    (
        "finance",
        ("bill", "payment", "bank", "insurance", "tax", "taxes", "money", "pay", "rent"),
    ),
    (
        "personal",
        ("haircut", "friend", "hobby", "lunch", "coffee"),
    ),
)
_CATEGORY_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (category, compile_terms(keywords, suffix=r"(?:s|es)?")) for category, keywords in CATEGORY_KEYWORDS
)

IMPORTANCE_KEYWORDS: tuple[str, ...] = (
    "urgent",
    "important",
    "asap",
    "today",
    "tomorrow",
    "deadline",
    "remember",
    "don't forget",
    "make sure",
    "grocery",
    "groceries",
    "meeting",
    "appointment",
    "doctor",
    "dentist",
    "work",
    "family",
)
_IMPORTANCE_PATTERN = compile_terms(IMPORTANCE_KEYWORDS)

_URGENT_PATTERN = re.compile(
    r"\b(?:urgent|urgently|asap|immediately|critical|emergency)\b|(?<!from )\bright now\b|(?<!from )\bnow\b",
    re.IGNORECASE,
)
_HIGH_PATTERN = compile_terms(("important", "soon", "today", "deadline", "priority", "crucial", "must"))
_LOW_PATTERN = compile_terms(
    ("whenever", "eventually", "when possible", "no rush", "optional", "someday", "low priority")
)


def suggest_category(text: str) -> str | None:
    """Return the first category whose keyword list appears in ``text``."""

    if not text:
        return None
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(text):
            return category
    return None


def extract_keywords(text: str) -> frozenset[str]:
    """Importance-signal vocabulary words present in ``text``."""

    found = {" ".join(match.group(0).lower().split()) for match in _IMPORTANCE_PATTERN.finditer(text or "")}
    return frozenset(found)


def infer_priority(text: str) -> Priority:
    """Urgency lookup; ``medium`` unless a keyword says otherwise."""

    if not text:
        return Priority.MEDIUM
    if _URGENT_PATTERN.search(text):
        return Priority.URGENT
    if _LOW_PATTERN.search(text):
        return Priority.LOW
    if _HIGH_PATTERN.search(text):
        return Priority.HIGH
    return Priority.MEDIUM
