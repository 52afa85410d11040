"""Structured error codes returned in HTTP ``detail`` strings.

Errors follow the format::

    {ERROR_CODE}: {human_readable_detail}
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes shared by every endpoint."""

    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
    NO_WORK_AVAILABLE = "NO_WORK_AVAILABLE"
    CONTENT_UNAVAILABLE = "CONTENT_UNAVAILABLE"


def format_error(code: ErrorCode, detail: str) -> str:
    """Format an error for an HTTP ``detail`` field.

    Returns:
        ``{ERROR_CODE}: {detail}``
    """
    return f"{code.value}: {detail}"
