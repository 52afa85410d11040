"""Dashboard statistics — deterministic aggregates over the attempt log."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

import numpy as np

from models.deed import CatalogEntry
from models.grading import Attempt, DailyAttemptCount, DashboardStats


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def compute_dashboard_stats(
    attempts: Sequence[Attempt],
    catalog: Sequence[CatalogEntry],
    now: datetime | None = None,
    window_days: int = 7,
) -> DashboardStats:
    """Aggregate attempt scores and recent activity.

    Args:
        attempts: Every attempt to include.
        catalog: Every registered document.
        now: Reference time for the activity window (defaults to now, UTC).
        window_days: Length of the per-day activity window.

    Returns:
        :class:`DashboardStats`; averages and bests are 0 with no attempts.
    """
    now = _as_utc(now or datetime.now(timezone.utc))
    with_content = sum(1 for e in catalog if e.content_ref)

    if not attempts:
        return DashboardStats(documents_with_content=with_content)

    scores = np.array([a.total_score for a in attempts], dtype=float)

    since = now - timedelta(days=window_days)
    per_day = Counter(
        _as_utc(a.created_at).date().isoformat()
        for a in attempts
        if _as_utc(a.created_at) >= since
    )

    return DashboardStats(
        total_attempts=len(attempts),
        avg_score=int(np.floor(np.mean(scores) + 0.5)),  # half up
        best_score=int(np.max(scores)),
        documents_with_content=with_content,
        last_days=[
            DailyAttemptCount(day=day, attempts=count)
            for day, count in sorted(per_day.items())
        ],
    )
