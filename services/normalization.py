"""Canonical forms for comparing transcribed text and dates.

Both functions are total: any text, number, date or ``None`` maps to a
string, and applying them twice gives the same result as applying once.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Any

# Day zero of spreadsheet date serials (accounts for the 1900 leap-year bug).
SPREADSHEET_EPOCH = date(1899, 12, 30)

_STRIP_PUNCT_RE = re.compile(r"[.,]")
_WHITESPACE_RE = re.compile(r"\s+")
_US_DATE_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")
_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
# Longer digit runs lie beyond the range of `date`.
_SERIAL_RE = re.compile(r"^\d{1,9}$")


def stringify(value: Any) -> str:
    """Text form of a raw value; integral floats drop their ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    try:
        return str(value)
    except ValueError:
        # int too long for decimal conversion
        return hex(value)


def _format_us(d: date) -> str:
    return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"


def _serial_to_date(serial: int) -> date | None:
    try:
        return SPREADSHEET_EPOCH + timedelta(days=serial)
    except OverflowError:
        return None


def _as_serial(value: Any) -> int | None:
    """Return the whole-day serial a value represents, if it is one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return math.floor(value) if math.isfinite(value) else None
    if isinstance(value, str) and _SERIAL_RE.match(value):
        return int(value)
    return None


def normalize_text(value: Any) -> str:
    """Canonical text form: trimmed, upper-cased, no periods or commas,
    single spaces.  ``None`` becomes ``""``.
    """
    if value is None:
        return ""
    text = stringify(value).strip().upper()
    text = _STRIP_PUNCT_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def normalize_date(value: Any) -> str:
    """Canonical date form ``MM/DD/YYYY``.

    Accepts ``MM/DD/YYYY`` (unchanged), ``YYYY-MM-DD`` (reordered), a
    spreadsheet serial given as a number or a string of digits, and
    ``date``/``datetime`` objects.  Anything else comes back trimmed, so
    comparison falls back to exact text equality.
    """
    if value is None:
        return ""
    if isinstance(value, date):
        return _format_us(value.date() if isinstance(value, datetime) else value)

    if isinstance(value, str):
        text = value.strip()
        if _US_DATE_RE.match(text):
            return text
        iso = _ISO_DATE_RE.match(text)
        if iso:
            year, month, day = iso.groups()
            return f"{month}/{day}/{year}"
        value = text

    serial = _as_serial(value)
    if serial is not None:
        converted = _serial_to_date(serial)
        if converted is not None:
            return _format_us(converted)

    return stringify(value).strip()


def coerce_stored_date(value: Any) -> str | None:
    """Form a date takes when a document is registered.

    Spreadsheet serials and date objects become ISO ``YYYY-MM-DD``; other
    text is kept as entered (trimmed); blanks become ``None``.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return (value.date() if isinstance(value, datetime) else value).isoformat()
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    serial = _as_serial(value)
    if serial is not None:
        converted = _serial_to_date(serial)
        if converted is not None:
            return converted.isoformat()
    return stringify(value).strip() or None
