"""API request / response models."""

from __future__ import annotations

from pydantic import Field

from models.base import CamelModel
from models.deed import FieldValue, GroundTruthRecord, Submission
from models.grading import Attempt, FieldResult

_FIELD_NAMES = tuple(Submission.model_fields)


class AttemptCreateRequest(CamelModel):
    """POST /api/attempts — request body."""

    user_id: str = Field(min_length=1)
    document_id: int
    grantor: FieldValue = None
    grantee: FieldValue = None
    recording_date: FieldValue = None
    dated_date: FieldValue = None
    document_type: FieldValue = None
    recording_book: FieldValue = None
    recording_page: FieldValue = None
    instrument_number: FieldValue = None
    time_taken_seconds: int = Field(default=0, ge=0)

    def to_submission(self) -> Submission:
        return Submission(**{name: getattr(self, name) for name in _FIELD_NAMES})


class AttemptCreateResponse(CamelModel):
    """POST /api/attempts — response body."""

    attempt: Attempt
    score: int
    feedback: str
    results: list[FieldResult] = Field(default_factory=list)


class DocumentCreateRequest(CamelModel):
    """POST /api/documents — register metadata for an already stored scan."""

    filename: str = ""
    content_ref: str | None = None
    grantor: FieldValue = None
    grantee: FieldValue = None
    recording_date: FieldValue = None
    dated_date: FieldValue = None
    document_type: FieldValue = None
    recording_book: FieldValue = None
    recording_page: FieldValue = None
    instrument_number: FieldValue = None

    def to_record(self) -> GroundTruthRecord:
        return GroundTruthRecord(
            content_ref=self.content_ref,
            **{name: getattr(self, name) for name in _FIELD_NAMES},
        )


class DocumentUpdateRequest(CamelModel):
    """PATCH /api/documents/{id} — only the fields sent are changed."""

    content_ref: str | None = None
    grantor: FieldValue = None
    grantee: FieldValue = None
    recording_date: FieldValue = None
    dated_date: FieldValue = None
    document_type: FieldValue = None
    recording_book: FieldValue = None
    recording_page: FieldValue = None
    instrument_number: FieldValue = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class DocumentResponse(CamelModel):
    """GET /api/documents/{id} — response body."""

    id: int
    filename: str = ""
    record: GroundTruthRecord
    public_url: str | None = None
