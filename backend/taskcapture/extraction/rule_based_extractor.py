"""Deterministic task extractor built on the regex strategy table."""

from __future__ import annotations

import logging
import re
from datetime import datetime

from taskcapture.datetime_resolution.resolver import DateTimeResolver
from taskcapture.extraction.extractor_interface import TaskExtractorInterface
from taskcapture.extraction.scoring import ConfidenceScorer, is_generic_text
from taskcapture.extraction.signals import extract_keywords, infer_priority, suggest_category
from taskcapture.extraction.similarity import DEFAULT_DEDUP_THRESHOLD, deduplicate_and_rank
from taskcapture.extraction.strategies import STRATEGIES, Strategy
from taskcapture.extraction.title_cleaner import clean_title
from taskcapture.extraction.types import ExtractedTaskCandidate, RawMatch
from taskcapture.schema.categories import normalize_category_id

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
# One-word list labels are content, not a speaker.
_SPEAKER_PREFIX_RE = re.compile(r"^(?!(?:grocery|groceries|shopping|todos?)\s*:)\w+:\s*", re.IGNORECASE)
_METADATA_RE = re.compile(r"\[.*?\]")
_DOTTED_MERIDIEM_RE = re.compile(r"\b([ap])\.m\.", re.IGNORECASE)


def preprocess(text: str) -> str:
    """Normalise chat text before the strategies see it."""

    cleaned = _WHITESPACE_RE.sub(" ", text or "").strip()
    cleaned = _SPEAKER_PREFIX_RE.sub("", cleaned)
    cleaned = _METADATA_RE.sub("", cleaned)
    cleaned = _DOTTED_MERIDIEM_RE.sub(r"\1m", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


class RuleBasedTaskExtractor(TaskExtractorInterface):
    """Runs every strategy, scores the hits, then deduplicates and ranks them."""

    def __init__(
        self,
        *,
        strategies: tuple[tuple[str, Strategy], ...] = STRATEGIES,
        resolver: DateTimeResolver | None = None,
        scorer: ConfidenceScorer | None = None,
        dedup_threshold: float = DEFAULT_DEDUP_THRESHOLD,
    ) -> None:
        self.strategies = strategies
        self.resolver = resolver or DateTimeResolver()
        self.scorer = scorer or ConfidenceScorer()
        self.dedup_threshold = dedup_threshold

    def extract(self, text: str, now: datetime | None = None) -> list[ExtractedTaskCandidate]:
        """Extract ranked task candidates from free text."""

        content = preprocess(text)
        if not content:
            return []
        now = now or datetime.now()

        candidates: list[ExtractedTaskCandidate] = []
        for name, strategy in self.strategies:
            matches = strategy(content)
            logger.debug("Strategy %s produced %d matches", name, len(matches))
            for match in matches:
                candidate = self._build_candidate(content, match, now)
                if candidate is not None:
                    candidates.append(candidate)

        ranked = deduplicate_and_rank(candidates, self.dedup_threshold)
        logger.debug("Kept %d of %d candidates after deduplication", len(ranked), len(candidates))
        return ranked

    def _build_candidate(
        self,
        content: str,
        match: RawMatch,
        now: datetime,
    ) -> ExtractedTaskCandidate | None:
        action = match.action_phrase.strip()
        if is_generic_text(action):
            return None

        parsed = self.resolver.resolve(match.date_fragment or action, now)
        if parsed is None and match.full_span != (match.date_fragment or action):
            parsed = self.resolver.resolve(match.full_span, now)

        if match.category is not None:
            category = normalize_category_id(match.category)
        else:
            category = suggest_category(action) or suggest_category(match.full_span)

        candidate = ExtractedTaskCandidate(
            original_text=content,
            title=clean_title(match.title or action),
            date=parsed.date if parsed else None,
            time=parsed.time if parsed else None,
            suggested_category=category,
            keywords=extract_keywords(action),
            inferred_priority=match.priority or infer_priority(action),
            source_span=match.full_span,
            strategy=match.strategy,
        )
        return self.scorer.score(candidate, action, match.confidence_boost)


_DEFAULT_EXTRACTOR = RuleBasedTaskExtractor()


def extract_tasks(text: str, now: datetime | None = None) -> list[ExtractedTaskCandidate]:
    """Extract with the default strategy table."""

    return _DEFAULT_EXTRACTOR.extract(text, now)
