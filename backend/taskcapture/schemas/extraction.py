"""Extraction endpoint schemas."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskcapture.extraction.types import ExtractedTaskCandidate, Priority, SharedContent


class SharedContentRequest(BaseModel):
    """Text shared into the app, with an optional reference clock."""

    text: str
    app_name: str | None = None
    conversation_context: str | None = None
    sender_info: str | None = None
    received_at: dt.datetime | None = None
    now: dt.datetime | None = None

    def to_shared_content(self) -> SharedContent:
        return SharedContent(
            text=self.text,
            app_name=self.app_name,
            conversation_context=self.conversation_context,
            sender_info=self.sender_info,
            received_at=self.received_at,
        )


class CandidateRead(BaseModel):
    """One ranked task candidate."""

    model_config = ConfigDict(from_attributes=True)

    title: str = Field(min_length=1)
    date: dt.date | None = None
    time: dt.time | None = None
    suggested_category: str | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    keywords: list[str] = Field(default_factory=list)
    inferred_priority: Priority = Priority.MEDIUM
    source_span: str = ""
    strategy: str = ""
    original_text: str = ""

    @field_validator("keywords", mode="before")
    @classmethod
    def sort_keywords(cls, value: Any) -> Any:
        if isinstance(value, (set, frozenset)):
            return sorted(value)
        return value

    def to_candidate(self) -> ExtractedTaskCandidate:
        return ExtractedTaskCandidate(
            original_text=self.original_text,
            title=self.title,
            date=self.date,
            time=self.time,
            suggested_category=self.suggested_category,
            confidence=self.confidence,
            keywords=frozenset(self.keywords),
            inferred_priority=self.inferred_priority,
            source_span=self.source_span,
            strategy=self.strategy,
        )


class ExtractionResponse(BaseModel):
    """Ranked candidates for one piece of shared text."""

    candidates: list[CandidateRead]
    count: int
