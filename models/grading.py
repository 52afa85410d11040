"""Grading result models — per-field outcomes, scores, persisted attempts."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import Field

from models.base import CamelModel, FrozenCamelModel
from models.deed import Submission

BLANK_MARKER = "(blank)"


class FieldResult(FrozenCamelModel):
    """Outcome for one graded field.

    ``expected`` and ``got`` hold the raw values as entered (never the
    normalized form) so feedback shows users exactly what they typed.
    """

    field: str  # attribute name, e.g. "recording_book"
    label: str  # display label, e.g. "Recording Book"
    passed: bool
    expected: str = BLANK_MARKER
    got: str = BLANK_MARKER
    points: int = 0  # awarded
    weight: int = 0  # possible


class ScoreOutcome(FrozenCamelModel):
    """Result of one grading call."""

    total_score: int = Field(ge=0, le=100)
    results: list[FieldResult] = Field(default_factory=list)
    feedback: str = ""
    possible_score: int = 0  # sum of weights of every gradable field


class Attempt(CamelModel):
    """A persisted grading event. Created once, never updated."""

    id: int
    user_id: str
    document_id: int
    submission: Submission
    total_score: int
    feedback: str
    time_taken_seconds: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AttemptListing(Attempt):
    """An attempt as listed back to users, with the document's filename."""

    filename: str = ""


class DailyAttemptCount(CamelModel):
    day: str  # YYYY-MM-DD
    attempts: int


class DashboardStats(CamelModel):
    """Aggregate numbers for the trainer dashboard."""

    total_attempts: int = 0
    avg_score: int = 0
    best_score: int = 0
    documents_with_content: int = 0
    last_days: list[DailyAttemptCount] = Field(default_factory=list)
