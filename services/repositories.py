"""Document catalog and attempt log repositories.

Abstract interfaces plus thread-safe in-memory implementations.  The
grading core only ever reads through these; writes happen when the
service registers a document or persists an attempt.
"""

from __future__ import annotations

import itertools
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any

from models.deed import CatalogEntry, GroundTruthRecord, Submission
from models.grading import Attempt, ScoreOutcome

logger = logging.getLogger(__name__)


# ── Abstract Interfaces ──────────────────────────────────────


class DocumentRepository(ABC):
    """Catalog of registered documents keyed by integer id."""

    @abstractmethod
    def get_entry(self, document_id: int) -> CatalogEntry | None:
        ...

    @abstractmethod
    def list_all(self) -> list[CatalogEntry]:
        """Every entry, ascending by id."""
        ...

    @abstractmethod
    def add(self, record: GroundTruthRecord, filename: str = "") -> CatalogEntry:
        ...

    @abstractmethod
    def update(self, document_id: int, changes: dict[str, Any]) -> CatalogEntry | None:
        """Apply a metadata correction.  Returns None for an unknown id."""
        ...

    def get_by_id(self, document_id: int) -> GroundTruthRecord | None:
        entry = self.get_entry(document_id)
        return entry.record if entry else None


class AttemptRepository(ABC):
    """Append-only log of grading attempts."""

    @abstractmethod
    def insert(
        self,
        user_id: str,
        document_id: int,
        submission: Submission,
        outcome: ScoreOutcome,
        time_taken_seconds: int = 0,
    ) -> Attempt:
        ...

    @abstractmethod
    def list_attempted_document_ids(self, user_id: str) -> set[int]:
        ...

    @abstractmethod
    def list_all(
        self, user_id: str | None = None, limit: int | None = 50, offset: int = 0
    ) -> list[Attempt]:
        """Attempts newest first, optionally for one user, paginated."""
        ...

    def list_for_user(self, user_id: str) -> list[Attempt]:
        """Every attempt by *user_id*, newest first."""
        return self.list_all(user_id=user_id, limit=None, offset=0)


# ── In-Memory Implementations ────────────────────────────────


class InMemoryDocumentRepository(DocumentRepository):
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: dict[int, CatalogEntry] = {}
        self._ids = itertools.count(1)

    def get_entry(self, document_id: int) -> CatalogEntry | None:
        with self._lock:
            return self._entries.get(document_id)

    def list_all(self) -> list[CatalogEntry]:
        with self._lock:
            return [self._entries[k] for k in sorted(self._entries)]

    def add(self, record: GroundTruthRecord, filename: str = "") -> CatalogEntry:
        with self._lock:
            entry = CatalogEntry(id=next(self._ids), record=record, filename=filename)
            self._entries[entry.id] = entry
            return entry

    def update(self, document_id: int, changes: dict[str, Any]) -> CatalogEntry | None:
        with self._lock:
            entry = self._entries.get(document_id)
            if entry is None:
                return None
            updated = entry.model_copy(
                update={"record": entry.record.model_copy(update=changes)}
            )
            self._entries[document_id] = updated
            return updated

    @property
    def size(self) -> int:
        return len(self._entries)


class InMemoryAttemptRepository(AttemptRepository):
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._attempts: list[Attempt] = []
        self._ids = itertools.count(1)

    def insert(
        self,
        user_id: str,
        document_id: int,
        submission: Submission,
        outcome: ScoreOutcome,
        time_taken_seconds: int = 0,
    ) -> Attempt:
        with self._lock:
            attempt = Attempt(
                id=next(self._ids),
                user_id=user_id,
                document_id=document_id,
                submission=submission,
                total_score=outcome.total_score,
                feedback=outcome.feedback,
                time_taken_seconds=time_taken_seconds,
            )
            self._attempts.append(attempt)
            logger.debug("Stored attempt %d for user %s", attempt.id, user_id)
            return attempt

    def list_attempted_document_ids(self, user_id: str) -> set[int]:
        with self._lock:
            return {a.document_id for a in self._attempts if a.user_id == user_id}

    def list_all(
        self, user_id: str | None = None, limit: int | None = 50, offset: int = 0
    ) -> list[Attempt]:
        with self._lock:
            rows = [a for a in self._attempts if user_id is None or a.user_id == user_id]
        rows.sort(key=lambda a: (a.created_at, a.id), reverse=True)
        end = None if limit is None else offset + limit
        return rows[offset:end]
