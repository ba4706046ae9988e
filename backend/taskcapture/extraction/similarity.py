"""Word-overlap deduplication and ranking of task candidates."""

from __future__ import annotations

import logging
import re

from taskcapture.extraction.types import ExtractedTaskCandidate

logger = logging.getLogger(__name__)

DEFAULT_DEDUP_THRESHOLD = 0.7

_NON_WORD_RE = re.compile(r"[^a-z0-9'\s]")


def title_words(title: str) -> set[str]:
    """Lowercased title words with punctuation dropped."""

    return set(_NON_WORD_RE.sub(" ", title.lower()).split())


def word_overlap_ratio(left: str, right: str) -> float:
    """Shared words divided by the mean word count of the two titles."""

    left_words = title_words(left)
    right_words = title_words(right)
    if not left_words or not right_words:
        return 0.0
    average = (len(left_words) + len(right_words)) / 2
    return len(left_words & right_words) / average


def deduplicate_and_rank(
    candidates: list[ExtractedTaskCandidate],
    threshold: float = DEFAULT_DEDUP_THRESHOLD,
) -> list[ExtractedTaskCandidate]:
    """Collapse near-identical titles and order by descending confidence.

    Within a duplicate pair the higher-confidence candidate survives and the
    other is discarded untouched; equal confidence keeps the earlier one.
    Ties in the final ordering keep extraction order.
    """

    kept: list[ExtractedTaskCandidate] = []
    for candidate in candidates:
        duplicate_index = next(
            (
                index
                for index, existing in enumerate(kept)
                if word_overlap_ratio(existing.title, candidate.title) > threshold
            ),
            None,
        )
        if duplicate_index is None:
            kept.append(candidate)
            continue
        existing = kept[duplicate_index]
        if candidate.confidence > existing.confidence:
            logger.debug("Replacing %r with higher-confidence %r", existing.title, candidate.title)
            kept[duplicate_index] = candidate
        else:
            logger.debug("Dropping duplicate candidate %r", candidate.title)

    return sorted(kept, key=lambda c: c.confidence, reverse=True)
