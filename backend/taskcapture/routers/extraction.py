"""Chat-path extraction routes."""

from fastapi import APIRouter

from taskcapture.schemas.common import ApiResponse
from taskcapture.schemas.extraction import CandidateRead, ExtractionResponse, SharedContentRequest
from taskcapture.services.extraction import extract_from_shared_content

router = APIRouter()


@router.post("/extract", response_model=ApiResponse[ExtractionResponse])
def extract_shared_content(payload: SharedContentRequest) -> ApiResponse[ExtractionResponse]:
    """Extract ranked task candidates from shared chat text."""

    candidates = extract_from_shared_content(payload.to_shared_content(), payload.now)
    items = [CandidateRead.model_validate(candidate) for candidate in candidates]
    return ApiResponse(data=ExtractionResponse(candidates=items, count=len(items)))
