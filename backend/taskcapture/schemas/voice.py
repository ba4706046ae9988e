"""Voice parsing endpoint schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskcapture.extraction.types import Priority
from taskcapture.schemas.dates import ParsedDateTimeRead
from taskcapture.services.voice import VoiceParseStatus


class VoiceParseRequest(BaseModel):
    """Transcript produced by the speech-to-text collaborator."""

    transcript: str = Field(min_length=1)
    now: datetime | None = None
    suggested_category_id: str | None = None
    confidence_threshold: float | None = Field(default=None, ge=0.0, le=1.0)


class VoiceParseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    status: VoiceParseStatus
    transcript: str
    title: str
    category_id: str
    priority: Priority
    parsed: ParsedDateTimeRead | None = None
    display: str | None = None
    message: str | None = None
