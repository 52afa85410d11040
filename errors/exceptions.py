"""Domain-specific exceptions for the deed trainer.

The grading core never raises these: a missing document is a ``None``
result there.  They are raised one layer up, where the service persists
attempts or talks to storage, so the API layer can pick an HTTP status.
"""

from __future__ import annotations


class TrainerError(Exception):
    """Base class for service-level errors."""


class EntityNotFoundError(TrainerError):
    """A referenced entity (document, attempt) does not exist."""

    def __init__(self, entity_id: object, entity_type: str = "document") -> None:
        self.entity_id = entity_id
        self.entity_type = entity_type
        super().__init__(f"{entity_type} '{entity_id}' not found")


class ContentProbeError(TrainerError):
    """The storage backend could not say whether a scan exists.

    Distinct from "the scan is missing", which a probe reports as ``False``.
    """

    def __init__(self, content_ref: str, message: str) -> None:
        self.content_ref = content_ref
        super().__init__(f"Content probe for '{content_ref}' failed: {message}")
