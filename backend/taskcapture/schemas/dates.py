"""Date resolution endpoint schemas."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class DateResolveRequest(BaseModel):
    fragment: str
    now: dt.datetime | None = None


class ParsedDateTimeRead(BaseModel):
    """Concrete date, optional time and confidence for a phrase."""

    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    time: dt.time | None = None
    confidence: float = Field(ge=0.0, le=1.0)
    original_input: str


class DateResolveResponse(BaseModel):
    parsed: ParsedDateTimeRead | None = None
    display: str | None = None
