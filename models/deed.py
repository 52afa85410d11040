"""Document models — ground-truth deed records, user submissions, catalog rows.

Date fields accept either text or a spreadsheet serial number because
trainers paste values straight out of county index spreadsheets.
"""

from __future__ import annotations

from datetime import date

from models.base import FrozenCamelModel

FieldValue = str | int | float | date | None


class DeedFields(FrozenCamelModel):
    """Field set shared by ground truth and submissions."""

    grantor: FieldValue = None
    grantee: FieldValue = None
    recording_date: FieldValue = None
    dated_date: FieldValue = None
    document_type: FieldValue = None
    recording_book: FieldValue = None
    recording_page: FieldValue = None
    instrument_number: FieldValue = None


class GroundTruthRecord(DeedFields):
    """Authoritative facts for one document.

    ``content_ref`` is opaque to grading; it is a disk filename or an
    object-storage key, used only to test whether the scan is retrievable.
    """

    content_ref: str | None = None


class Submission(DeedFields):
    """A user's typed answers for one grading attempt."""


class CatalogEntry(FrozenCamelModel):
    """One registered document as the catalog lists it."""

    id: int
    record: GroundTruthRecord
    filename: str = ""

    @property
    def content_ref(self) -> str | None:
        return self.record.content_ref


class DocumentRef(FrozenCamelModel):
    """What assignment hands back: enough to open the scan, no answers."""

    id: int
    filename: str = ""
    document_type: str | None = None
    content_ref: str | None = None

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> DocumentRef:
        doc_type = entry.record.document_type
        return cls(
            id=entry.id,
            filename=entry.filename,
            document_type=str(doc_type) if doc_type not in (None, "") else None,
            content_ref=entry.content_ref,
        )
