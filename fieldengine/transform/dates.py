# fieldengine/transform/dates.py
# --------------------------------------------------------------------------------------
# Turn an extracted date substring into a UTC ISO-8601 instant.
# dd/mm/yyyy is read day-first (order exports use regional dates); anything else goes
# through pandas' generic parser.
# --------------------------------------------------------------------------------------
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

import pandas as pd

_RELATIVE_WORDS = re.compile(r"\b(?:now|today|tomorrow|yesterday)\b", re.IGNORECASE)
_YEAR = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def parse_day_first(text: str) -> Optional[datetime]:
    """
    Parse "dd/mm/yyyy" as midnight UTC.

    Returns None when the text is not in that shape or names an impossible date.
    """
    parts = text.split("/")
    if len(parts) != 3 or len(parts[2]) != 4:
        return None
    try:
        day, month, year = (int(p) for p in parts)
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return None


def _to_timestamp(text: str, fmt: Optional[str] = None):
    try:
        ts = pd.to_datetime(text, format=fmt, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return ts


def parse_generic(text: str) -> Optional[datetime]:
    """
    Parse a free-form date that names its own year.

    Relative words ("now", "today", ...) and partial dates are rejected so the result
    depends on the text alone. ISO-8601 is tried first, then pandas' general parser.
    """
    s = text.strip()
    if not s or _RELATIVE_WORDS.search(s):
        return None
    years = {int(y) for y in _YEAR.findall(s)}
    if not years:
        return None
    ts = _to_timestamp(s, "ISO8601")
    if ts is None:
        ts = _to_timestamp(s)
    # the parser must not have filled in a year of its own (checked before moving to UTC)
    if ts is None or ts.year not in years:
        return None
    ts = ts.tz_convert("UTC") if ts.tzinfo is not None else ts.tz_localize("UTC")
    return ts.to_pydatetime()


def is_day_first_shape(text: str) -> bool:
    parts = text.split("/")
    return len(parts) == 3 and len(parts[2]) == 4


def to_iso_instant(dt: datetime) -> str:
    """UTC instant with millisecond precision and a `Z` suffix: 2025-06-21T00:00:00.000Z"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return f"{dt.year:04d}-{dt:%m-%dT%H:%M:%S}.{dt.microsecond // 1000:03d}Z"


def parse_iso_instant(text: str) -> Optional[datetime]:
    """Read back an ISO string (as produced by to_iso_instant); None if it is not one."""
    if not isinstance(text, str) or not text.strip():
        return None
    s = text.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def normalize_date(text: str) -> Optional[str]:
    """ISO instant for `text`, or None when it does not parse as a valid date."""
    if is_day_first_shape(text):
        dt = parse_day_first(text)
    else:
        dt = parse_generic(text)
    return to_iso_instant(dt) if dt is not None else None
