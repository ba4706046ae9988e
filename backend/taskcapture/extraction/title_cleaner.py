"""Strip date/time phrasing from an action phrase to leave a task title."""

from __future__ import annotations

import re

from taskcapture.datetime_resolution.resolver import MONTH_ALTERNATION, WEEKDAY_ALTERNATION
from taskcapture.datetime_resolution.time_of_day import TIME_PHRASE_PATTERNS

_LEADING_TO_RE = re.compile(r"^to\s+", re.IGNORECASE)
_COUNT = r"(?:\d+|a|an|one|two|three|four|five|six|seven|eight|nine|ten|eleven|twelve)"

DATE_PHRASE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:on\s+|by\s+)?(?:the\s+)?day\s+after\s+tomorrow\b", re.IGNORECASE),
    re.compile(r"(?<!from )\b(?:by\s+|until\s+|for\s+)?(?:today|tonight|tonite|tomorrow|tmrw|yesterday)\b", re.IGNORECASE),
    re.compile(
        r"\b(?:(?:on|by|until|before)\s+)?(?:(?:next|this)\s+)?(?:" + WEEKDAY_ALTERNATION + r")\b"
        r"(?:\s+(?:next|this)\s+week\b)?",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:in|after)\s+" + _COUNT + r"\s+(?:day|week|month|hour|hr|minute|min)s?\b", re.IGNORECASE
    ),
    re.compile(
        r"\b" + _COUNT + r"\s+(?:day|week|month)s?\s+from\s+(?:now|today)\b", re.IGNORECASE
    ),
    re.compile(
        r"\b(?:(?:on|by|before)\s+)?(?:" + MONTH_ALTERNATION + r")\.?\s+\d{1,2}(?:st|nd|rd|th)?\b(?:,?\s+\d{4}\b)?",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:(?:on|by|before)\s+)?(?:the\s+)?\d{1,2}(?:st|nd|rd|th)?\s+of\s+(?:" + MONTH_ALTERNATION + r")\b"
        r"(?:,?\s+\d{4}\b)?",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:(?:on|by|before)\s+)?\d{4}-\d{1,2}-\d{1,2}\b", re.IGNORECASE),
    re.compile(r"(?:\b(?:on|by|before)\s+)?(?<![\d/])\d{1,2}/\d{1,2}(?:/\d{2,4})?(?![\d/])", re.IGNORECASE),
    re.compile(
        r"\b(?:(?:by|before|until)\s+)?(?:the\s+)?(?:end\s+of\s+(?:the\s+|this\s+)?|(?:beginning|start)\s+of\s+(?:the\s+)?next\s+)"
        r"(?:week|month|year)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:(?:by|until|before)\s+)?(?:next|this)\s+(?:week|month|year)\b", re.IGNORECASE),
    re.compile(r"\b(?:(?:on|by|before)\s+)?the\s+\d{1,2}(?:st|nd|rd|th)\b", re.IGNORECASE),
    re.compile(r"(?<!from )\b(?:right\s+)?now\b", re.IGNORECASE),
)

_DANGLING_TAIL_RE = re.compile(r"(?:[\s,;:\-]+(?:at|by|before|after|for|from|until|and))+\s*$", re.IGNORECASE)
_DANGLING_HEAD_RE = re.compile(r"^(?:at|on|by|before|until)\s+", re.IGNORECASE)
_MULTISPACE_RE = re.compile(r"\s+")
_EDGE_PUNCT = " .,:;!?-\"'"

MIN_TITLE_LENGTH = 3


def strip_datetime_phrases(text: str) -> str:
    """Remove date and time sub-phrases; may return an empty string."""

    cleaned = _LEADING_TO_RE.sub("", _MULTISPACE_RE.sub(" ", text or "").strip())
    for pattern in TIME_PHRASE_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)
    for pattern in DATE_PHRASE_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)

    cleaned = _MULTISPACE_RE.sub(" ", cleaned).strip(_EDGE_PUNCT)
    cleaned = _DANGLING_TAIL_RE.sub("", cleaned)
    cleaned = _DANGLING_HEAD_RE.sub("", cleaned).strip(_EDGE_PUNCT)
    return _MULTISPACE_RE.sub(" ", cleaned)


def clean_title(action_phrase: str) -> str:
    """Return a capitalised title with date/time sub-phrases removed.

    Falls back to the trimmed action phrase when cleaning leaves fewer than
    three characters.
    """

    original = _MULTISPACE_RE.sub(" ", action_phrase or "").strip()
    cleaned = strip_datetime_phrases(original)
    if len(cleaned) < MIN_TITLE_LENGTH:
        cleaned = original.strip(_EDGE_PUNCT) or original
    return capitalize_first(cleaned)


def capitalize_first(value: str) -> str:
    if not value:
        return value
    return value[0].upper() + value[1:]
