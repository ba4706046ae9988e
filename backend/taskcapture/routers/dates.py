"""Date phrase resolution routes."""

from datetime import datetime

from fastapi import APIRouter

from taskcapture.datetime_resolution import resolve_datetime
from taskcapture.datetime_resolution.formatting import describe_parsed
from taskcapture.schemas.common import ApiResponse
from taskcapture.schemas.dates import DateResolveRequest, DateResolveResponse, ParsedDateTimeRead

router = APIRouter(prefix="/dates")


@router.post("/resolve", response_model=ApiResponse[DateResolveResponse])
def resolve_date_phrase(payload: DateResolveRequest) -> ApiResponse[DateResolveResponse]:
    """Resolve a date/time phrase; ``parsed`` is null when nothing is recognised."""

    now = payload.now or datetime.now()
    parsed = resolve_datetime(payload.fragment, now)
    if parsed is None:
        return ApiResponse(data=DateResolveResponse())
    return ApiResponse(
        data=DateResolveResponse(
            parsed=ParsedDateTimeRead.model_validate(parsed),
            display=describe_parsed(parsed, now.date()),
        )
    )
