"""Typed extraction outputs independent of persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum


class Priority(str, Enum):
    """Inferred urgency of a candidate task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskSource(str, Enum):
    """How a task entered the system."""

    MANUAL = "manual"
    VOICE = "voice"
    CHAT = "chat"


@dataclass(frozen=True, slots=True)
class ParsedDateTime:
    """Concrete calendar date (and optional clock time) resolved from a phrase."""

    date: date
    time: time | None
    confidence: float
    original_input: str

    def as_datetime(self) -> datetime:
        """Combine date and time; a missing time means midnight."""

        return datetime.combine(self.date, self.time or time.min)

    @property
    def is_high_confidence(self) -> bool:
        return self.confidence >= 0.8

    @property
    def needs_confirmation(self) -> bool:
        return self.confidence < 0.6


@dataclass(frozen=True, slots=True)
class RawMatch:
    """One strategy hit before date resolution and scoring.

    ``title``, ``category``, ``priority`` and ``date_fragment`` let a strategy
    override what the pipeline would otherwise derive from ``action_phrase``.
    """

    full_span: str
    action_phrase: str
    strategy: str = ""
    title: str | None = None
    date_fragment: str | None = None
    category: str | None = None
    priority: Priority | None = None
    confidence_boost: float = 0.0


@dataclass(slots=True)
class ExtractedTaskCandidate:
    """Unconfirmed task guess produced by one extraction call."""

    original_text: str
    title: str
    date: date | None = None
    time: time | None = None
    suggested_category: str | None = None
    confidence: float = 0.0
    keywords: frozenset[str] = field(default_factory=frozenset)
    inferred_priority: Priority = Priority.MEDIUM
    source_span: str = ""
    strategy: str = ""

    def due_datetime(self) -> datetime | None:
        """Combined due moment, only when both date and time are known."""

        if self.date is None or self.time is None:
            return None
        return datetime.combine(self.date, self.time)


@dataclass(slots=True)
class SharedContent:
    """Text shared into the app from a messaging client."""

    text: str
    app_name: str | None = None
    conversation_context: str | None = None
    sender_info: str | None = None
    received_at: datetime | None = None
