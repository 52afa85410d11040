"""Tests for record and result models — camelCase I/O, immutability."""

import pytest
from pydantic import ValidationError

from models.deed import CatalogEntry, DocumentRef, GroundTruthRecord, Submission
from models.grading import FieldResult, ScoreOutcome
from models.request import AttemptCreateRequest, DocumentUpdateRequest


class TestDeedModels:
    def test_accepts_camel_and_snake_names(self):
        a = Submission(recordingDate="09/24/2020")
        b = Submission(recording_date="09/24/2020")
        assert a == b

    def test_dumps_camel_case(self):
        dumped = GroundTruthRecord(instrument_number="X1", content_ref="k").model_dump(by_alias=True)
        assert dumped["instrumentNumber"] == "X1"
        assert dumped["contentRef"] == "k"

    def test_date_fields_keep_serial_type(self):
        assert GroundTruthRecord(recording_date=44098).recording_date == 44098
        assert GroundTruthRecord(recording_date="44098").recording_date == "44098"

    def test_submission_is_frozen(self):
        submission = Submission(grantor="A")
        with pytest.raises(ValidationError):
            submission.grantor = "B"

    def test_document_ref_hides_answers(self):
        entry = CatalogEntry(
            id=5,
            record=GroundTruthRecord(grantor="SECRET", document_type="Deed of Trust", content_ref="5.pdf"),
            filename="5.pdf",
        )
        ref = DocumentRef.from_entry(entry)
        assert ref.model_dump() == {
            "id": 5,
            "filename": "5.pdf",
            "document_type": "Deed of Trust",
            "content_ref": "5.pdf",
        }

    def test_document_ref_blank_type(self):
        entry = CatalogEntry(id=1, record=GroundTruthRecord(document_type=""))
        assert DocumentRef.from_entry(entry).document_type is None


class TestGradingModels:
    def test_score_bounds_enforced(self):
        with pytest.raises(ValidationError):
            ScoreOutcome(total_score=101)
        with pytest.raises(ValidationError):
            ScoreOutcome(total_score=-1)

    def test_field_result_defaults_blank(self):
        result = FieldResult(field="grantor", label="Grantor", passed=False)
        assert result.expected == "(blank)"
        assert result.got == "(blank)"


class TestRequestModels:
    def test_attempt_request_to_submission(self):
        req = AttemptCreateRequest.model_validate(
            {"userId": "u1", "documentId": 3, "grantor": "A", "recordingBook": "12", "timeTakenSeconds": 5}
        )
        submission = req.to_submission()
        assert submission.grantor == "A"
        assert submission.recording_book == "12"
        assert req.time_taken_seconds == 5

    def test_attempt_request_rejects_negative_time(self):
        with pytest.raises(ValidationError):
            AttemptCreateRequest(user_id="u1", document_id=1, time_taken_seconds=-3)

    def test_update_request_only_sent_fields(self):
        req = DocumentUpdateRequest.model_validate({"grantor": "A", "datedDate": None})
        assert req.changes() == {"grantor": "A", "dated_date": None}
