"""Voice transcript routes."""

from fastapi import APIRouter

from taskcapture.schemas.common import ApiResponse
from taskcapture.schemas.voice import VoiceParseRead, VoiceParseRequest
from taskcapture.services.voice import parse_voice_input

router = APIRouter(prefix="/voice")


@router.post("/parse", response_model=ApiResponse[VoiceParseRead])
def parse_voice(payload: VoiceParseRequest) -> ApiResponse[VoiceParseRead]:
    """Interpret one transcript as a single task with a due date."""

    result = parse_voice_input(
        payload.transcript,
        payload.now,
        suggested_category_id=payload.suggested_category_id,
        confidence_threshold=payload.confidence_threshold,
    )
    return ApiResponse(data=VoiceParseRead.model_validate(result))
