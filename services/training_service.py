"""Training service — the grading and assignment entry points.

``TrainingService`` is built from explicit repositories and a content
probe; it holds no process-wide state of its own.  ``grade`` and
``next_assignment`` are the pure core contracts (``None`` means not
found).  The remaining methods are what an HTTP handler needs around
them: persisting attempts, registering and correcting documents, and
dashboard numbers.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from errors.exceptions import EntityNotFoundError
from models.deed import CatalogEntry, DocumentRef, GroundTruthRecord, Submission
from models.grading import Attempt, AttemptListing, DashboardStats, ScoreOutcome
from services.assignment import select_next
from services.content_probe import ContentProbe
from services.normalization import coerce_stored_date
from services.repositories import AttemptRepository, DocumentRepository
from services.scoring import score
from services.stats import compute_dashboard_stats

logger = logging.getLogger(__name__)

MAX_PAGE_LIMIT = 100
_DATE_FIELDS = ("recording_date", "dated_date")
_CORRECTABLE_FIELDS = frozenset(GroundTruthRecord.model_fields)


class TrainingService:
    """Grades submissions and hands out work for one document catalog."""

    def __init__(
        self,
        documents: DocumentRepository,
        attempts: AttemptRepository,
        content_probe: ContentProbe,
        *,
        page_limit: int = MAX_PAGE_LIMIT,
        stats_window_days: int = 7,
    ) -> None:
        self.documents = documents
        self.attempts = attempts
        self.content_probe = content_probe
        self._page_limit = page_limit
        self._stats_window_days = stats_window_days

    # ── Core contracts ───────────────────────────────────────

    def grade(self, document_id: int, submission: Submission) -> ScoreOutcome | None:
        """Score *submission* against the document's ground truth.

        Returns None when *document_id* has no ground-truth record.
        """
        truth = self.documents.get_by_id(document_id)
        if truth is None:
            return None
        return score(truth, submission)

    def next_assignment(self, user_id: str) -> DocumentRef | None:
        """Next unattempted, retrievable document for *user_id*, or None."""
        return select_next(
            user_id,
            self.documents.list_all(),
            self.attempts.list_attempted_document_ids,
            self.content_probe,
        )

    # ── Attempts ─────────────────────────────────────────────

    def submit_attempt(
        self,
        user_id: str,
        document_id: int,
        submission: Submission,
        time_taken_seconds: int = 0,
    ) -> tuple[Attempt, ScoreOutcome]:
        """Grade and persist one attempt.

        Raises:
            EntityNotFoundError: *document_id* is not in the catalog.
        """
        outcome = self.grade(document_id, submission)
        if outcome is None:
            raise EntityNotFoundError(document_id)

        attempt = self.attempts.insert(
            user_id, document_id, submission, outcome, time_taken_seconds
        )
        logger.info(
            "Graded attempt %d: user=%s document=%d score=%d/%d",
            attempt.id,
            user_id,
            document_id,
            outcome.total_score,
            outcome.possible_score,
        )
        return attempt, outcome

    def list_attempts(self, user_id: str) -> list[AttemptListing]:
        """All of *user_id*'s attempts, newest first."""
        return self._with_filenames(self.attempts.list_for_user(user_id))

    def list_recent_attempts(
        self, user_id: str | None = None, limit: int = 50, offset: int = 0
    ) -> list[AttemptListing]:
        """A page of attempts, newest first; *limit* is capped."""
        limit = max(0, min(self._page_limit, limit))
        page = self.attempts.list_all(user_id=user_id, limit=limit, offset=max(0, offset))
        return self._with_filenames(page)

    def _with_filenames(self, attempts: list[Attempt]) -> list[AttemptListing]:
        names = {entry.id: entry.filename for entry in self.documents.list_all()}
        return [
            AttemptListing(**attempt.model_dump(), filename=names.get(attempt.document_id, ""))
            for attempt in attempts
        ]

    # ── Catalog ──────────────────────────────────────────────

    def get_document(self, document_id: int) -> CatalogEntry:
        entry = self.documents.get_entry(document_id)
        if entry is None:
            raise EntityNotFoundError(document_id)
        return entry

    def register_document(self, record: GroundTruthRecord, filename: str = "") -> CatalogEntry:
        """Add a document whose scan is already stored under ``content_ref``.

        Date fields given as spreadsheet serials are stored as ISO dates.
        """
        record = record.model_copy(update=_stored_dates(record.model_dump()))
        entry = self.documents.add(record, filename=filename)
        logger.info("Registered document %d (%s)", entry.id, filename or entry.content_ref)
        return entry

    def correct_document(self, document_id: int, changes: dict[str, Any]) -> CatalogEntry:
        """Apply a metadata correction to a registered document.

        Raises:
            EntityNotFoundError: *document_id* is not in the catalog.
        """
        changes = {k: v for k, v in changes.items() if k in _CORRECTABLE_FIELDS}
        changes.update(_stored_dates(changes))
        entry = self.documents.update(document_id, changes)
        if entry is None:
            raise EntityNotFoundError(document_id)
        logger.info("Corrected document %d: %s", document_id, sorted(changes))
        return entry

    def public_url(self, entry: CatalogEntry) -> str | None:
        if not entry.content_ref:
            return None
        return self.content_probe.public_url(entry.content_ref)

    # ── Dashboard ────────────────────────────────────────────

    def dashboard_stats(self, now: datetime | None = None) -> DashboardStats:
        return compute_dashboard_stats(
            self.attempts.list_all(limit=None),
            self.documents.list_all(),
            now=now,
            window_days=self._stats_window_days,
        )


def _stored_dates(fields: dict[str, Any]) -> dict[str, Any]:
    return {name: coerce_stored_date(fields[name]) for name in _DATE_FIELDS if name in fields}


# ── Module-level Singleton ───────────────────────────────────

_service: TrainingService | None = None


def get_training_service() -> TrainingService:
    """Get the service wired from settings (in-memory repositories)."""
    global _service
    if _service is None:
        from config.settings import get_settings
        from services.content_probe import get_content_probe
        from services.repositories import (
            InMemoryAttemptRepository,
            InMemoryDocumentRepository,
        )

        settings = get_settings()
        _service = TrainingService(
            InMemoryDocumentRepository(),
            InMemoryAttemptRepository(),
            get_content_probe(),
            page_limit=settings.attempts_page_limit,
            stats_window_days=settings.stats_window_days,
        )
    return _service
