"""Trainer dashboard endpoints — aggregate stats and recent attempts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from models.grading import AttemptListing, DashboardStats
from services.training_service import TrainingService, get_training_service

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats, response_model_by_alias=True)
async def dashboard_stats(service: TrainingService = Depends(get_training_service)):
    """Totals, average and best score, and attempts per day."""
    return service.dashboard_stats()


@router.get("/attempts", response_model=list[AttemptListing], response_model_by_alias=True)
async def recent_attempts(
    user_id: str | None = Query(None, alias="userId"),
    limit: int = Query(50, ge=0),
    offset: int = Query(0, ge=0),
    service: TrainingService = Depends(get_training_service),
):
    """Attempts newest first; ``limit`` is capped at 100."""
    return service.list_recent_attempts(user_id=user_id, limit=limit, offset=offset)
