"""Review surface over extracted candidates and conversion to task drafts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time, timedelta
from enum import Enum
import logging

from taskcapture.config import get_settings
from taskcapture.extraction.types import ExtractedTaskCandidate, Priority, TaskSource
from taskcapture.schema.categories import normalize_category_id

logger = logging.getLogger(__name__)


class CandidateReviewError(IndexError):
    """Raised when a review operation targets a candidate that does not exist."""


class ReminderInterval(str, Enum):
    """How long before the due moment a reminder fires."""

    ONE_HOUR = "one_hour"
    SIX_HOURS = "six_hours"
    TWELVE_HOURS = "twelve_hours"
    ONE_DAY = "one_day"

    @property
    def duration(self) -> timedelta:
        return _REMINDER_DURATIONS[self]

    @property
    def display_name(self) -> str:
        return _REMINDER_LABELS[self]


_REMINDER_DURATIONS: dict[ReminderInterval, timedelta] = {
    ReminderInterval.ONE_HOUR: timedelta(hours=1),
    ReminderInterval.SIX_HOURS: timedelta(hours=6),
    ReminderInterval.TWELVE_HOURS: timedelta(hours=12),
    ReminderInterval.ONE_DAY: timedelta(days=1),
}
_REMINDER_LABELS: dict[ReminderInterval, str] = {
    ReminderInterval.ONE_HOUR: "1 hour before",
    ReminderInterval.SIX_HOURS: "6 hours before",
    ReminderInterval.TWELVE_HOURS: "12 hours before",
    ReminderInterval.ONE_DAY: "1 day before",
}

DEFAULT_REMINDERS: dict[TaskSource, tuple[ReminderInterval, ...]] = {
    TaskSource.CHAT: (ReminderInterval.ONE_DAY,),
    TaskSource.VOICE: (ReminderInterval.ONE_HOUR,),
    TaskSource.MANUAL: (ReminderInterval.ONE_HOUR,),
}


@dataclass(slots=True)
class TaskDraft:
    """Task payload handed to the persistence and notification collaborators."""

    title: str
    category_id: str
    due_date: date | None = None
    due_time: time | None = None
    priority: Priority = Priority.MEDIUM
    source: TaskSource = TaskSource.CHAT
    reminder_intervals: tuple[ReminderInterval, ...] = field(default_factory=tuple)

    @property
    def has_reminder(self) -> bool:
        return bool(self.reminder_intervals)


def build_task_draft(
    *,
    title: str,
    category_id: str | None,
    due_date: date | None,
    due_time: time | None,
    priority: Priority,
    source: TaskSource,
) -> TaskDraft:
    """Assemble a draft; reminders are only attached when a due date exists."""

    reminders = DEFAULT_REMINDERS.get(source, ()) if due_date is not None else ()
    return TaskDraft(
        title=title,
        category_id=normalize_category_id(category_id),
        due_date=due_date,
        due_time=due_time,
        priority=priority,
        source=source,
        reminder_intervals=reminders,
    )


def candidate_to_draft(candidate: ExtractedTaskCandidate, source: TaskSource = TaskSource.CHAT) -> TaskDraft:
    return build_task_draft(
        title=candidate.title,
        category_id=candidate.suggested_category,
        due_date=candidate.date,
        due_time=candidate.time,
        priority=candidate.inferred_priority,
        source=source,
    )


@dataclass(slots=True)
class _ReviewEntry:
    candidate: ExtractedTaskCandidate
    edited: bool = False


class CandidateReview:
    """Ordered, editable view of one extraction result.

    Indexes always refer to the current order, so a removal shifts every later
    candidate down by one. Candidates the user edited count as confirmed and
    survive the acceptance threshold.
    """

    def __init__(
        self,
        candidates: list[ExtractedTaskCandidate],
        source: TaskSource = TaskSource.CHAT,
    ) -> None:
        self._entries = [_ReviewEntry(candidate) for candidate in candidates]
        self.source = source

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def candidates(self) -> list[ExtractedTaskCandidate]:
        return [entry.candidate for entry in self._entries]

    def get(self, index: int) -> ExtractedTaskCandidate:
        self._check_index(index)
        return self._entries[index].candidate

    def edit(self, index: int, updated: ExtractedTaskCandidate) -> ExtractedTaskCandidate:
        """Replace the candidate at ``index`` with a user-edited version."""

        self._check_index(index)
        self._entries[index] = _ReviewEntry(updated, edited=True)
        return updated

    def remove(self, index: int) -> ExtractedTaskCandidate:
        """Reject the candidate at ``index``."""

        self._check_index(index)
        return self._entries.pop(index).candidate

    def accepted(self, threshold: float | None = None) -> list[ExtractedTaskCandidate]:
        """Candidates at or above ``threshold`` plus every edited candidate."""

        if threshold is None:
            threshold = get_settings().acceptance_threshold
        return [
            entry.candidate
            for entry in self._entries
            if entry.edited or entry.candidate.confidence >= threshold
        ]

    def to_task_drafts(self, threshold: float | None = None) -> list[TaskDraft]:
        drafts = [candidate_to_draft(candidate, self.source) for candidate in self.accepted(threshold)]
        logger.info("Prepared %d task drafts from %d reviewed candidates", len(drafts), len(self._entries))
        return drafts

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise CandidateReviewError(f"No candidate at index {index}; {len(self._entries)} under review.")
