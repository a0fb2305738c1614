# fieldengine/schema/patterns.py
# Predefined extraction rules offered when a field is switched to `extract`.
from __future__ import annotations

from typing import Dict, NamedTuple, Optional


class ExtractionPattern(NamedTuple):
    pattern: str
    description: str
    example: str


REGEX_PATTERNS: Dict[str, ExtractionPattern] = {
    "timeslot": ExtractionPattern(
        r"\b(?:0?[0-9]|1[0-2]):[0-5][0-9]-(?:0?[0-9]|1[0-2]):[0-5][0-9]\b",
        "Extract timeslot in format hh:mm-hh:mm (e.g., 09:30-11:30)",
        "09:30-11:30",
    ),
    "date": ExtractionPattern(
        r"\b(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[0-2])/([0-9]{4})\b",
        "Extract date in format dd/mm/yyyy (e.g., 25/12/2024)",
        "25/12/2024",
    ),
    "time": ExtractionPattern(
        r"\b(?:0?[0-9]|1[0-2]):[0-5][0-9]\s*(?:AM|PM|am|pm)?\b",
        "Extract time in format hh:mm or hh:mm AM/PM",
        "14:30 or 2:30 PM",
    ),
    "phone": ExtractionPattern(
        r"\b(?:\+?[0-9]{1,3}[-.\s]?)?(?:[0-9]{3,4}[-.\s]?){2}[0-9]{4}\b",
        "Extract phone numbers in various formats",
        "+1-555-123-4567 or 555-123-4567",
    ),
    "email": ExtractionPattern(
        r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b",
        "Extract email addresses",
        "customer@example.com",
    ),
}

CUSTOM_PATTERN = "Custom pattern"


def describe_rule(rule: Optional[str]) -> str:
    for p in REGEX_PATTERNS.values():
        if p.pattern == rule:
            return p.description
    return CUSTOM_PATTERN
