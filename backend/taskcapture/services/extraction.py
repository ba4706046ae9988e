"""Chat-path extraction orchestration."""

from datetime import datetime
import logging
from time import perf_counter

from taskcapture.config import get_settings
from taskcapture.extraction.extractor_interface import TaskExtractorInterface
from taskcapture.extraction.rule_based_extractor import RuleBasedTaskExtractor
from taskcapture.extraction.types import ExtractedTaskCandidate, SharedContent

logger = logging.getLogger(__name__)


def get_default_extractor() -> TaskExtractorInterface:
    """Return the rule-based extractor configured from settings."""

    settings = get_settings()
    return RuleBasedTaskExtractor(dedup_threshold=settings.dedup_threshold)


def extract_from_shared_content(
    content: SharedContent,
    now: datetime | None = None,
    *,
    extractor: TaskExtractorInterface | None = None,
) -> list[ExtractedTaskCandidate]:
    """Run extraction over shared chat text and return ranked candidates."""

    extractor = extractor or get_default_extractor()
    reference = now or content.received_at or datetime.now()
    started = perf_counter()
    candidates = extractor.extract(content.text, reference)
    logger.info(
        "Extracted %d task candidates from %s in %.1f ms",
        len(candidates),
        content.app_name or "shared text",
        (perf_counter() - started) * 1000,
    )
    return candidates
