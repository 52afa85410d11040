"""Render per-field grading outcomes as one human-readable message."""

from __future__ import annotations

from collections.abc import Sequence

from models.grading import FieldResult

EMPTY_FEEDBACK = "Attempt saved."


def _clause(result: FieldResult) -> str:
    if result.passed:
        return f"{result.label} correct"
    return f'{result.label} mismatch: expected "{result.expected}" but got "{result.got}"'


def compose(results: Sequence[FieldResult]) -> str:
    """Join one clause per result with ``". "`` and end with a period.

    Order follows *results*.  Returns ``"Attempt saved."`` when nothing
    was graded.
    """
    if not results:
        return EMPTY_FEEDBACK
    return ". ".join(_clause(r) for r in results) + "."
