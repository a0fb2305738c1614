# fieldengine/transform/pipeline.py
# --------------------------------------------------------------------------------------
# Optional extraction + date coercion of a resolved raw value.
#
# Extraction rules are tenant-authored regexes. Every failure degrades to a visible
# sentinel string instead of raising, so one bad rule only blanks one field.
# --------------------------------------------------------------------------------------
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any, Optional

from fieldengine.config import settings
from fieldengine.models.field_definition import FieldDefinition
from fieldengine.transform.dates import normalize_date

logger = logging.getLogger("fieldengine")

INVALID_REGEX = "Invalid Regex"
NO_MATCH = "No match"
INVALID_DATE = "Invalid Date"


@lru_cache(maxsize=settings.REGEX_CACHE_SIZE)
def _compile(rule: str) -> re.Pattern:
    # failures raise and are therefore never cached
    return re.compile(rule)


def compile_rule(rule: str) -> Optional[re.Pattern]:
    """Compiled pattern for `rule`, or None if the rule does not compile."""
    try:
        return _compile(rule)
    except (re.error, OverflowError, RecursionError, ValueError, TypeError) as e:
        logger.warning("[EXTRACT] invalid rule %r: %s", rule, e)
        return None


def clear_rule_cache() -> None:
    _compile.cache_clear()


def transform(raw_value: Any, field: FieldDefinition | None) -> Any:
    """
    Apply the field's declared transformation to a resolved raw value.

    - no transformation (or an `extract` without a rule) → raw value unchanged
    - non-string input to `extract` → None
    - malformed rule → "Invalid Regex"; no match → "No match"
    - `date` fields: the match is normalised to a UTC ISO instant, or "Invalid Date"
    """
    if field is None or not field.extracts:
        return raw_value
    if not field.transformation_rule:
        logger.info("[EXTRACT] field=%s declares extract without a rule; passing value through", field.id)
        return raw_value
    if not isinstance(raw_value, str):
        return None

    pattern = compile_rule(field.transformation_rule)
    if pattern is None:
        return INVALID_REGEX
    m = pattern.search(raw_value)
    if not m or not m.group(0):
        return NO_MATCH
    extracted = m.group(0)

    if field.type == "date":
        iso = normalize_date(extracted)
        if iso is None:
            logger.info("[EXTRACT] field=%s unparseable date %r", field.id, extracted)
            return INVALID_DATE
        return iso
    return extracted
