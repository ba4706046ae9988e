"""Heuristic confidence scoring for extracted task candidates."""

from __future__ import annotations

import re

from taskcapture.extraction.signals import compile_terms
from taskcapture.extraction.types import ExtractedTaskCandidate

BASE_CONFIDENCE = 0.3

ACTION_VERBS: tuple[str, ...] = (
    "pick up",
    "buy",
    "get",
    "grab",
    "remember",
    "don't forget",
    "dont forget",
    "make sure",
)
TIME_REFERENCES: tuple[str, ...] = (
    "today",
    "tonight",
    "tomorrow",
    "next",
    "this",
    "at",
    "by",
    "before",
)
REQUEST_KEYWORDS: tuple[str, ...] = ("please", "can you", "could you", "would you")
SPECIFIC_TASK_KEYWORDS: tuple[str, ...] = (
    "buy",
    "get",
    "pick up",
    "purchase",
    "order",
    "call",
    "email",
    "send",
    "schedule",
    "book",
    "reserve",
    "cancel",
    "confirm",
    "pay",
    "deposit",
    "clean",
    "wash",
    "organize",
    "pack",
    "prepare",
    "finish",
    "complete",
    "submit",
    "deliver",
    "return",
    "exchange",
    "repair",
    "fix",
)
GENERIC_PHRASES: frozenset[str] = frozenset(
    {
        "ok",
        "okay",
        "yes",
        "no",
        "sure",
        "thanks",
        "thank you",
        "hello",
        "hi",
        "bye",
        "goodbye",
        "see you",
        "talk later",
        "good",
        "great",
        "awesome",
        "nice",
        "cool",
        "sounds good",
    }
)
URGENCY_KEYWORDS: tuple[str, ...] = ("urgent", "asap", "immediately", "now", "soon", "quickly")
OBLIGATION_PHRASES: tuple[str, ...] = (
    "i need",
    "i have to",
    "i must",
    "you need",
    "you should",
    "we need",
    "we should",
)

_ACTION_VERB_RE = compile_terms(ACTION_VERBS)
_TIME_REFERENCE_RE = compile_terms(TIME_REFERENCES)
_REQUEST_RE = compile_terms(REQUEST_KEYWORDS)
_SPECIFIC_TASK_RE = compile_terms(SPECIFIC_TASK_KEYWORDS)
_URGENCY_RE = re.compile(r"\b(?:urgent|asap|immediately|soon|quickly)\b|(?<!from )\bnow\b", re.IGNORECASE)
_OBLIGATION_RE = compile_terms(OBLIGATION_PHRASES)
_QUESTION_START_RE = re.compile(r"^\s*(?:what|where|when|why|how)\b", re.IGNORECASE)
_QUESTION_YOU_RE = compile_terms(("do you", "can you", "will you"))
_EDGE_PUNCT = " .,:;!?-\"'"


def clamp_confidence(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def is_generic_text(text: str) -> bool:
    """Pleasantries and fillers that never describe a task."""

    lowered = " ".join((text or "").lower().split()).strip(_EDGE_PUNCT)
    return lowered in GENERIC_PHRASES or len(lowered) < 3


def has_question_indicator(text: str) -> bool:
    return "?" in text or bool(_QUESTION_START_RE.search(text)) or bool(_QUESTION_YOU_RE.search(text))


def score_confidence(full_span: str, action_phrase: str) -> float:
    """Base score plus independent signal adjustments, clamped to [0, 1]."""

    score = BASE_CONFIDENCE
    word_count = len(action_phrase.split())
    if 2 <= word_count <= 8:
        score += 0.2
    elif word_count > 8:
        score -= 0.1

    if _ACTION_VERB_RE.search(full_span):
        score += 0.3
    if _TIME_REFERENCE_RE.search(full_span):
        score += 0.2
    if _REQUEST_RE.search(full_span):
        score += 0.25
    if _SPECIFIC_TASK_RE.search(action_phrase):
        score += 0.15

    if is_generic_text(action_phrase):
        score -= 0.4
    if len(action_phrase.strip()) < 3:
        score -= 0.3
    if has_question_indicator(full_span):
        score -= 0.2

    if _URGENCY_RE.search(full_span):
        score += 0.1
    if _OBLIGATION_RE.search(full_span):
        score += 0.05
    return clamp_confidence(score)


class ConfidenceScorer:
    """Sets ``confidence`` on candidates; the only writer of that field."""

    def score(
        self,
        candidate: ExtractedTaskCandidate,
        action_phrase: str,
        boost: float = 0.0,
    ) -> ExtractedTaskCandidate:
        confidence = score_confidence(candidate.source_span, action_phrase)
        candidate.confidence = clamp_confidence(confidence + boost)
        return candidate
