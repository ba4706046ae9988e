"""Schemas for turning reviewed candidates into task drafts."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator

from taskcapture.extraction.types import Priority, TaskSource
from taskcapture.schemas.extraction import CandidateRead
from taskcapture.services.review import ReminderInterval


class CandidateEdit(BaseModel):
    """User changes to the candidate at ``index``; unset fields are kept."""

    index: int = Field(ge=0)
    title: str | None = Field(default=None, min_length=1)
    date: dt.date | None = None
    time: dt.time | None = None
    suggested_category: str | None = None
    inferred_priority: Priority | None = None

    @model_validator(mode="after")
    def validate_non_empty_update(self) -> "CandidateEdit":
        changed = self.model_fields_set - {"index"}
        if not changed:
            raise ValueError("At least one field must be provided.")
        return self


class ReviewDraftsRequest(BaseModel):
    """Ranked candidates plus the user's edits and rejections.

    Edit and removal indexes both refer to the order of ``candidates`` as sent.
    """

    candidates: list[CandidateRead]
    edits: list[CandidateEdit] = Field(default_factory=list)
    removals: list[int] = Field(default_factory=list)
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)
    source: TaskSource = TaskSource.CHAT


class TaskDraftRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    category_id: str
    due_date: dt.date | None = None
    due_time: dt.time | None = None
    priority: Priority
    source: TaskSource
    reminder_intervals: list[ReminderInterval]


class ReviewDraftsResponse(BaseModel):
    drafts: list[TaskDraftRead]
    count: int
