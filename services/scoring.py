"""Weighted rubric scoring of a submission against a ground-truth record.

Five buckets of 20 points each: Grantor, Grantee, Recording Date,
Dated Date, and the recording reference.  The recording reference is
split over book (7), page (7) and instrument number (6); each part counts
only when the ground truth has a value for it, and the split is not
renormalized, so a document with only a page recorded can give at most
7 points for that bucket.

A field whose ground truth is empty is not graded at all: it adds nothing
to the score, the possible score, or the per-field results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from models.deed import GroundTruthRecord, Submission
from models.grading import BLANK_MARKER, FieldResult, ScoreOutcome
from services.feedback import compose
from services.normalization import normalize_date, normalize_text, stringify

MAX_SCORE = 100


@dataclass(frozen=True)
class RubricField:
    field: str
    label: str
    weight: int
    normalize: Callable[[Any], str]


# Order here is the order of results and feedback clauses.
RUBRIC: tuple[RubricField, ...] = (
    RubricField("grantor", "Grantor", 20, normalize_text),
    RubricField("grantee", "Grantee", 20, normalize_text),
    RubricField("recording_date", "Recording Date", 20, normalize_date),
    RubricField("dated_date", "Dated Date", 20, normalize_date),
    RubricField("recording_book", "Recording Book", 7, normalize_text),
    RubricField("recording_page", "Recording Page", 7, normalize_text),
    RubricField("instrument_number", "Instrument Number", 6, normalize_text),
)


def _display(value: Any) -> str:
    if value is None:
        return BLANK_MARKER
    text = stringify(value)
    return text if text.strip() else BLANK_MARKER


def _grade_field(rule: RubricField, expected: Any, got: Any) -> FieldResult | None:
    canonical = rule.normalize(expected)
    if not canonical:
        return None
    passed = canonical == rule.normalize(got)
    return FieldResult(
        field=rule.field,
        label=rule.label,
        passed=passed,
        expected=_display(expected),
        got=_display(got),
        points=rule.weight if passed else 0,
        weight=rule.weight,
    )


def score(truth: GroundTruthRecord, submission: Submission | None) -> ScoreOutcome:
    """Grade *submission* against *truth*.

    Never raises: blank or malformed answers are recorded as mismatches.
    """
    results: list[FieldResult] = []
    for rule in RUBRIC:
        result = _grade_field(
            rule,
            getattr(truth, rule.field, None),
            getattr(submission, rule.field, None),
        )
        if result is not None:
            results.append(result)

    total = sum(r.points for r in results)
    total = max(0, min(MAX_SCORE, total))

    return ScoreOutcome(
        total_score=total,
        results=results,
        feedback=compose(results),
        possible_score=sum(r.weight for r in results),
    )
