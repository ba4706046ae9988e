"""Candidate review routes."""

from dataclasses import replace

from fastapi import APIRouter, HTTPException

from taskcapture.schemas.common import ApiResponse
from taskcapture.schemas.review import ReviewDraftsRequest, ReviewDraftsResponse, TaskDraftRead
from taskcapture.services.review import CandidateReview, CandidateReviewError

router = APIRouter(prefix="/review")


@router.post("/drafts", response_model=ApiResponse[ReviewDraftsResponse])
def build_review_drafts(payload: ReviewDraftsRequest) -> ApiResponse[ReviewDraftsResponse]:
    """Apply edits and removals, then convert accepted candidates into drafts."""

    review = CandidateReview([item.to_candidate() for item in payload.candidates], source=payload.source)
    try:
        for edit in payload.edits:
            changes = edit.model_dump(exclude_unset=True, exclude={"index"})
            review.edit(edit.index, replace(review.get(edit.index), **changes))
        for index in sorted(set(payload.removals), reverse=True):
            review.remove(index)
    except CandidateReviewError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    drafts = [TaskDraftRead.model_validate(draft) for draft in review.to_task_drafts(payload.threshold)]
    return ApiResponse(data=ReviewDraftsResponse(drafts=drafts, count=len(drafts)))
