"""Custom exception hierarchy for the deed trainer."""

from errors.exceptions import ContentProbeError, EntityNotFoundError, TrainerError

__all__ = ["ContentProbeError", "EntityNotFoundError", "TrainerError"]
