"""Attempt endpoints — submit a transcription for grading, list past work."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from errors.exceptions import EntityNotFoundError
from models.errors import ErrorCode, format_error
from models.grading import AttemptListing
from models.request import AttemptCreateRequest, AttemptCreateResponse
from services.training_service import TrainingService, get_training_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/attempts", tags=["attempts"])


@router.post("", response_model=AttemptCreateResponse, response_model_by_alias=True)
async def create_attempt(
    req: AttemptCreateRequest,
    service: TrainingService = Depends(get_training_service),
):
    """Grade a submission against the document's ground truth and save it."""
    try:
        attempt, outcome = service.submit_attempt(
            req.user_id,
            req.document_id,
            req.to_submission(),
            time_taken_seconds=req.time_taken_seconds,
        )
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail=format_error(ErrorCode.DOCUMENT_NOT_FOUND, str(e)),
        )

    return AttemptCreateResponse(
        attempt=attempt,
        score=outcome.total_score,
        feedback=outcome.feedback,
        results=outcome.results,
    )


@router.get("/my", response_model=list[AttemptListing], response_model_by_alias=True)
async def list_my_attempts(
    user_id: str = Query(..., alias="userId", min_length=1),
    service: TrainingService = Depends(get_training_service),
):
    """The caller's attempts, newest first."""
    return service.list_attempts(user_id)
