"""Document endpoints — next assignment, lookup, registration, correction."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from errors.exceptions import ContentProbeError, EntityNotFoundError
from models.deed import CatalogEntry, DocumentRef
from models.errors import ErrorCode, format_error
from models.request import DocumentCreateRequest, DocumentResponse, DocumentUpdateRequest
from services.training_service import TrainingService, get_training_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])


def _not_found(e: EntityNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=format_error(ErrorCode.DOCUMENT_NOT_FOUND, str(e)),
    )


def _to_response(service: TrainingService, entry: CatalogEntry) -> DocumentResponse:
    return DocumentResponse(
        id=entry.id,
        filename=entry.filename,
        record=entry.record,
        public_url=service.public_url(entry),
    )


# Sync handler: the content probe may block on storage I/O, so FastAPI
# runs it in the threadpool.
@router.get("/next", response_model=DocumentRef, response_model_by_alias=True)
def next_document(
    user_id: str = Query(..., alias="userId", min_length=1),
    service: TrainingService = Depends(get_training_service),
):
    """The next document this user has not attempted and can open."""
    try:
        ref = service.next_assignment(user_id)
    except ContentProbeError as e:
        logger.error("Assignment for %s failed: %s", user_id, e)
        raise HTTPException(
            status_code=503,
            detail=format_error(ErrorCode.CONTENT_UNAVAILABLE, str(e)),
        )
    if ref is None:
        raise HTTPException(
            status_code=404,
            detail=format_error(
                ErrorCode.NO_WORK_AVAILABLE,
                "No more documents with a scan available for this user",
            ),
        )
    return ref


@router.get("/{document_id}", response_model=DocumentResponse, response_model_by_alias=True)
async def get_document(
    document_id: int,
    service: TrainingService = Depends(get_training_service),
):
    try:
        entry = service.get_document(document_id)
    except EntityNotFoundError as e:
        raise _not_found(e)
    return _to_response(service, entry)


@router.post("", response_model=DocumentResponse, response_model_by_alias=True)
async def register_document(
    req: DocumentCreateRequest,
    service: TrainingService = Depends(get_training_service),
):
    """Register ground truth for a scan that is already in storage."""
    entry = service.register_document(req.to_record(), filename=req.filename)
    return _to_response(service, entry)


@router.patch("/{document_id}", response_model=DocumentResponse, response_model_by_alias=True)
async def correct_document(
    document_id: int,
    req: DocumentUpdateRequest,
    service: TrainingService = Depends(get_training_service),
):
    """Correct ground-truth metadata; only the fields sent are changed."""
    try:
        entry = service.correct_document(document_id, req.changes())
    except EntityNotFoundError as e:
        raise _not_found(e)
    return _to_response(service, entry)
