# fieldengine/present/formatter.py
# --------------------------------------------------------------------------------------
# Map a transformed value + declared field type to a toolkit-independent display value.
# The renderer decides how each `kind` looks (badge, select, multi-line text, ...).
# --------------------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from fieldengine.config import settings
from fieldengine.models.directories import Lookup, label_color_lookup, user_lookup
from fieldengine.schema.registry import ASSIGNMENT_FIELD_ID, COMPLETION_FIELD_ID, DIFFICULTY_FIELD_ID
from fieldengine.transform.dates import parse_iso_instant

UNSET = "unset"
TEXT = "text"
MULTILINE = "multiline"
DATE = "date"
TAGS = "tags"
STATUS = "status"
SELECT = "select"
LABEL = "label"

COMPLETED = "Completed"
PENDING = "Pending"

_COMPLETED_WORDS = {"completed", "complete", "true", "1", "yes", "fulfilled"}


@dataclass(frozen=True)
class DisplayValue:
    kind: str
    text: str
    items: Tuple[str, ...] = ()
    color: Optional[str] = None
    raw: Any = None

    @property
    def is_set(self) -> bool:
        return self.kind != UNSET


def is_unset(value: Any) -> bool:
    return value is None or value == ""


def is_completed(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _COMPLETED_WORDS
    return bool(value)


def _completion_caption(value: Any) -> str:
    return COMPLETED if is_completed(value) else PENDING


def _tag_items(value: Any) -> Optional[Tuple[str, ...]]:
    if isinstance(value, (list, tuple)):
        return tuple(str(t) for t in value)
    if isinstance(value, str):
        return tuple(t.strip() for t in value.split(",") if t.strip())
    return None


def format_date(value: Any, fmt: Optional[str] = None) -> str:
    """Calendar date (UTC) of an ISO string; anything unparseable is shown verbatim."""
    dt = parse_iso_instant(value) if isinstance(value, str) else None
    if dt is None:
        return str(value)
    return dt.strftime(fmt or settings.DATE_FORMAT)


def format_value(value: Any, field_type: str, field_id: Optional[str] = None, *,
                 users: Any = None, labels: Any = None) -> DisplayValue:
    """
    Display value for `value` of a field of type `field_type`.

    `users` resolves assignee ids to names and `labels` resolves difficulty label
    names to colours; both may be omitted (raw id / neutral colour are used).
    Formatting a DisplayValue again returns it unchanged.
    """
    if isinstance(value, DisplayValue):
        return value
    if is_unset(value):
        return DisplayValue(UNSET, settings.UNSET_TEXT, raw=value)

    if field_type == "select":
        if field_id == ASSIGNMENT_FIELD_ID:
            return _assignee(value, users)
        if field_id == COMPLETION_FIELD_ID:
            return DisplayValue(STATUS, _completion_caption(value), raw=value)
        return DisplayValue(SELECT, str(value), raw=value)

    if field_type == "textarea":
        return DisplayValue(MULTILINE, str(value), raw=value)

    if field_type == "date":
        return DisplayValue(DATE, format_date(value), raw=value)

    if field_type == "tags":
        items = _tag_items(value)
        if items is None:
            return DisplayValue(TEXT, str(value), raw=value)
        return DisplayValue(TAGS, ", ".join(items), items=items, raw=value)

    if field_type == "status":
        return DisplayValue(STATUS, _completion_caption(value), raw=value)

    if field_id == DIFFICULTY_FIELD_ID:
        lookup: Lookup = label_color_lookup(labels)
        color = lookup(value) or settings.DEFAULT_LABEL_COLOR
        return DisplayValue(LABEL, str(value), color=color, raw=value)
    if field_id == ASSIGNMENT_FIELD_ID:
        return _assignee(value, users)
    return DisplayValue(TEXT, str(value), raw=value)


def _assignee(value: Any, users: Any) -> DisplayValue:
    name = user_lookup(users)(value)
    return DisplayValue(SELECT, name or str(value), raw=value)
