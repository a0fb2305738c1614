#=================================================================
# fieldengine/engine.py
# Render pass: field schema + order record → display values.
#=================================================================
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

import fieldengine.logging_filters  # noqa: F401  (installs PayloadTrimFilter on the engine logger)
from fieldengine.models.directories import label_color_lookup, user_lookup
from fieldengine.models.field_definition import FieldDefinition, load_field_definitions
from fieldengine.models.records import ExternalRecord, SourceRecord, detect_shape
from fieldengine.present.formatter import DisplayValue, format_value, is_completed
from fieldengine.resolve.source_resolver import product_image_ref, resolve_local, resolve_record
from fieldengine.schema.registry import (
    ASSIGNMENT_FIELD_ID,
    COMPLETION_FIELD_ID,
    DIFFICULTY_FIELD_ID,
    get_field,
    visible_fields,
)
from fieldengine.transform.pipeline import transform

logger = logging.getLogger("fieldengine")

UNASSIGNED = "unassigned"
ASSIGNED = "assigned"
COMPLETED = "completed"


def _shape(entity: Any) -> Optional[SourceRecord]:
    shape = detect_shape(entity)
    if shape is None:
        logger.debug("[RENDER] record is not a mapping: %r", entity)
    return shape


def transformed_value(field: FieldDefinition, shape: Optional[SourceRecord]) -> Any:
    if shape is None:
        return transform(None, field)
    return transform(resolve_record(field, shape), field)


def field_value(entity: Any, fields: Iterable[Any] | None, field_id: str) -> Any:
    """Resolved + transformed value of one field; "" when the schema has no such field."""
    field = get_field(load_field_definitions(fields), field_id)
    if field is None:
        return ""
    return transformed_value(field, _shape(entity))


def render_record(entity: Any, fields: Iterable[Any] | None, *,
                  users: Any = None, labels: Any = None,
                  visible_only: bool = True) -> Dict[str, DisplayValue]:
    """
    Display value of every (visible) field of `fields` for one order, in schema order.
    `fields` may be definitions or stored schema entries; invalid entries are skipped.
    The record shape is detected once for the whole pass.
    """
    shape = _shape(entity)
    users = user_lookup(users)
    labels = label_color_lookup(labels)
    selected: List[FieldDefinition] = load_field_definitions(fields)
    if visible_only:
        selected = visible_fields(selected)
    out: Dict[str, DisplayValue] = {}
    for field in selected:
        value = transformed_value(field, shape)
        out[field.id] = format_value(value, field.type, field.id, users=users, labels=labels)
    return out


def card_status(entity: Mapping[str, Any] | None) -> str:
    if not isinstance(entity, Mapping):
        return UNASSIGNED
    if is_completed(entity.get(COMPLETION_FIELD_ID)) or entity.get("status") == COMPLETED:
        return COMPLETED
    if resolve_local(ASSIGNMENT_FIELD_ID, entity):
        return ASSIGNED
    return UNASSIGNED


def difficulty_badge(entity: Any, fields: Iterable[Any] | None,
                     labels: Any = None) -> Optional[Dict[str, str]]:
    """Name and colour of the order's difficulty label, if it is in the label directory."""
    name = field_value(entity, fields, DIFFICULTY_FIELD_ID)
    if not isinstance(name, str) or not name:
        return None
    color = label_color_lookup(labels)(name)
    if color is None:
        return None
    return {"name": name, "color": color}


def image_ref(entity: Any) -> Optional[tuple]:
    """(product id, variant id) for the product image button, from the platform payload."""
    shape = _shape(entity)
    if isinstance(shape, ExternalRecord):
        return product_image_ref(shape.payload)
    return None
