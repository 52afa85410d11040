"""Pick the next document a user should transcribe.

The catalog is walked in ascending id order.  A document is assignable
when the user has no attempt for it yet and its scan can actually be
fetched; orphaned catalog rows whose file never arrived (or was deleted)
are skipped rather than served as a blank viewer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable

from models.deed import CatalogEntry, DocumentRef
from services.content_probe import ContentProbe

logger = logging.getLogger(__name__)

AttemptHistory = Callable[[str], Collection[int]]


def select_next(
    user_id: str,
    catalog: Iterable[CatalogEntry],
    history: AttemptHistory,
    content_probe: ContentProbe,
) -> DocumentRef | None:
    """Return the first unattempted, retrievable document, or None.

    Args:
        user_id: The user asking for work.
        catalog: Registered documents, in any order.
        history: Returns the ids of documents *user_id* already attempted.
            Called once; the result is treated as a snapshot.
        content_probe: Answers whether a ``content_ref`` is retrievable.

    Returns:
        A :class:`DocumentRef`, or None when no more work is available.
    """
    attempted = frozenset(history(user_id))

    for entry in sorted(catalog, key=lambda e: e.id):
        if entry.id in attempted:
            continue
        if not entry.content_ref:
            logger.debug("Skipping document %d: no content reference", entry.id)
            continue
        if not content_probe.exists(entry.content_ref):
            logger.debug("Skipping document %d: content %s not retrievable", entry.id, entry.content_ref)
            continue
        return DocumentRef.from_entry(entry)

    logger.info("No assignable document left for user %s", user_id)
    return None
