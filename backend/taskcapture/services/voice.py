"""Single-candidate flow for voice transcripts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
import logging
import re

from taskcapture.config import get_settings
from taskcapture.datetime_resolution.formatting import describe_parsed
from taskcapture.datetime_resolution.resolver import DateTimeResolver
from taskcapture.extraction.signals import infer_priority, suggest_category
from taskcapture.extraction.title_cleaner import clean_title
from taskcapture.extraction.types import ParsedDateTime, Priority, TaskSource
from taskcapture.schema.categories import DEFAULT_CATEGORY_ID, normalize_category_id
from taskcapture.services.review import TaskDraft, build_task_draft

logger = logging.getLogger(__name__)

_COMMAND_PHRASE_RE = re.compile(
    r"^(?:remind me to|remember to|add task to|create task to|i need to|don'?t forget to|make sure to)\s*",
    re.IGNORECASE,
)
_COMMAND_WORD_RE = re.compile(r"^(?:remind|remember|add|create|note|task)\b\s*", re.IGNORECASE)


class VoiceParseStatus(str, Enum):
    SUCCESS = "success"
    NEEDS_CONFIRMATION = "needs_confirmation"
    FAILED = "failed"


@dataclass(slots=True)
class VoiceParseResult:
    """Outcome of interpreting one transcript."""

    status: VoiceParseStatus
    transcript: str
    title: str
    category_id: str
    priority: Priority
    parsed: ParsedDateTime | None = None
    display: str | None = None
    message: str | None = None

    def to_task_draft(self) -> TaskDraft | None:
        """Draft for the persistence layer; ``None`` when no date was understood."""

        if self.parsed is None:
            return None
        return build_task_draft(
            title=self.title,
            category_id=self.category_id,
            due_date=self.parsed.date,
            due_time=self.parsed.time,
            priority=self.priority,
            source=TaskSource.VOICE,
        )


def voice_title(transcript: str) -> str:
    """Drop spoken command prefixes and date/time phrases from a transcript."""

    cleaned = " ".join(transcript.split())
    cleaned = _COMMAND_PHRASE_RE.sub("", cleaned)
    cleaned = _COMMAND_WORD_RE.sub("", cleaned)
    return clean_title(cleaned or transcript)


def parse_voice_input(
    transcript: str,
    now: datetime | None = None,
    *,
    suggested_category_id: str | None = None,
    confidence_threshold: float | None = None,
    resolver: DateTimeResolver | None = None,
) -> VoiceParseResult:
    """Classify a transcript as success, needs-confirmation or failed."""

    if confidence_threshold is None:
        confidence_threshold = get_settings().voice_confidence_threshold
    now = now or datetime.now()
    resolver = resolver or DateTimeResolver()

    text = " ".join((transcript or "").split())
    if suggested_category_id:
        category_id = normalize_category_id(suggested_category_id)
    else:
        category_id = suggest_category(text) or DEFAULT_CATEGORY_ID
    title = voice_title(text) if text else ""
    priority = infer_priority(text)

    parsed = resolver.resolve(text, now)
    if parsed is None:
        logger.info("No date understood in voice transcript")
        return VoiceParseResult(
            status=VoiceParseStatus.FAILED,
            transcript=transcript,
            title=title,
            category_id=category_id,
            priority=priority,
            message=f'Could not understand the date/time from: "{text}"',
        )

    status = (
        VoiceParseStatus.NEEDS_CONFIRMATION
        if parsed.confidence < confidence_threshold
        else VoiceParseStatus.SUCCESS
    )
    logger.info("Voice transcript parsed with status %s (confidence %.2f)", status.value, parsed.confidence)
    return VoiceParseResult(
        status=status,
        transcript=transcript,
        title=title,
        category_id=category_id,
        priority=priority,
        parsed=parsed,
        display=describe_parsed(parsed, now.date()),
    )
