# fieldengine/schema/registry.py
# ===================================================
# Built-in order-card fields and tenant config merge
# ===================================================
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from fieldengine.models.field_definition import LEGACY_SOURCE_KEY, FieldDefinition

logger = logging.getLogger("fieldengine")

# Field ids with behaviour of their own in the formatter / edit mapper
ASSIGNMENT_FIELD_ID = "assignedTo"
COMPLETION_FIELD_ID = "isCompleted"
DIFFICULTY_FIELD_ID = "difficultyLabel"
PRODUCT_TYPE_FIELD_ID = "productTypeLabel"
NOTES_FIELD_ID = "customisations"

# snake_case spellings a saved entry may use → stored camelCase keys
_STORED_KEYS = {
    "source_path": "sourcePath",
    "transformation_rule": "transformationRule",
    "is_editable": "isEditable",
    "is_visible": "isVisible",
    "is_system": "isSystem",
}

_DEFAULT_FIELDS: List[Dict[str, Any]] = [
    {
        "id": "productTitle",
        "label": "Product Title",
        "description": "Name of the product",
        "type": "text",
        "isVisible": True,
        "isEditable": False,
        "sourcePath": "lineItems.edges.0.node.title",
    },
    {
        "id": "productVariantTitle",
        "label": "Product Variant Title",
        "description": "Specific variant of the product",
        "type": "text",
        "isVisible": True,
        "isEditable": False,
        "sourcePath": "lineItems.edges.0.node.variant.title",
    },
    {
        "id": "timeslot",
        "label": "Timeslot",
        "description": "Scheduled order preparation timeslot",
        "type": "text",
        "isVisible": True,
        "isEditable": True,
        "sourcePath": "tags",
        "transformation": "extract",
        "transformationRule": r"\d{2}:\d{2}-\d{2}:\d{2}",
    },
    {
        "id": "orderId",
        "label": "Order ID",
        "description": "Unique order identifier",
        "type": "text",
        "isVisible": True,
        "isEditable": False,
        "sourcePath": "name",
    },
    {
        "id": "orderDate",
        "label": "Order Date",
        "description": "Date when order was placed",
        "type": "date",
        "isVisible": True,
        "isEditable": False,
        "sourcePath": "tags",
        "transformation": "extract",
        "transformationRule": r"\b(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[0-2])/([0-9]{4})\b",
    },
    {
        "id": "orderTags",
        "label": "Order Tags",
        "description": "Tags associated with the order",
        "type": "tags",
        "isVisible": True,
        "isEditable": True,
        "sourcePath": "tags",
    },
    {
        "id": ASSIGNMENT_FIELD_ID,
        "label": "Assigned To",
        "description": "Florist assigned to this order",
        "type": "select",
        "isVisible": True,
        "isEditable": True,
    },
    {
        "id": DIFFICULTY_FIELD_ID,
        "label": "Difficulty Label",
        "description": "Difficulty/Priority level",
        "type": "text",
        "isVisible": True,
        "isEditable": False,
        "sourcePath": "product:difficultyLabel",
    },
    {
        "id": PRODUCT_TYPE_FIELD_ID,
        "label": "Product Type Label",
        "description": "Product type assigned to the product from Product Management",
        "type": "text",
        "isVisible": True,
        "isEditable": False,
        "sourcePath": "product:productTypeLabel",
    },
    {
        "id": "addOns",
        "label": "Add-Ons",
        "description": "Special requests or add-ons for the order",
        "type": "textarea",
        "isVisible": True,
        "isEditable": True,
        "sourcePath": "note",
    },
    {
        "id": NOTES_FIELD_ID,
        "label": "Customisations",
        "description": "Additional remarks and customisation notes",
        "type": "textarea",
        "isVisible": False,
        "isEditable": True,
        "sourcePath": "note",
    },
    {
        "id": COMPLETION_FIELD_ID,
        "label": "Status",
        "description": "Whether the order is completed",
        "type": "status",
        "isVisible": True,
        "isEditable": True,
        "sourcePath": "displayFulfillmentStatus",
    },
]


def default_fields() -> List[FieldDefinition]:
    """Fresh copy of the built-in order-card fields, in card order."""
    return [FieldDefinition.from_mapping(dict(f)) for f in _DEFAULT_FIELDS]


def _stored(entry: Mapping[str, Any] | FieldDefinition) -> Dict[str, Any]:
    if isinstance(entry, FieldDefinition):
        return entry.to_mapping()
    return {_STORED_KEYS.get(k, k): v for k, v in entry.items()}


def merge_tenant_config(saved: Iterable[Mapping[str, Any] | FieldDefinition] | None) -> List[FieldDefinition]:
    """
    Overlay a tenant's saved field entries on the built-in fields.

    Saved values win key by key; defaults without a saved entry are kept and the
    default order is preserved. Saved entries for unknown ids (custom tenant
    fields) follow in saved order. An entry that no longer validates is logged
    and the default (or nothing, for custom fields) is used instead.
    """
    saved_by_id: Dict[str, Dict[str, Any]] = {}
    for entry in saved or []:
        if not isinstance(entry, (Mapping, FieldDefinition)):
            continue
        stored = _stored(entry)
        fid = stored.get("id")
        if fid and fid not in saved_by_id:
            saved_by_id[str(fid)] = stored

    merged: List[FieldDefinition] = []
    for field in default_fields():
        overlay = saved_by_id.pop(field.id, None)
        if overlay is None:
            merged.append(field)
            continue
        data = {**field.to_mapping(), **overlay}
        if LEGACY_SOURCE_KEY in overlay and "sourcePath" not in overlay:
            data.pop("sourcePath", None)
        try:
            merged.append(FieldDefinition.from_mapping(data))
        except ValidationError as e:
            logger.warning("[SCHEMA] saved config for field=%s rejected, using default: %s", field.id, e.errors())
            merged.append(field)

    for fid, stored in saved_by_id.items():
        try:
            merged.append(FieldDefinition.from_mapping(stored))
        except ValidationError as e:
            logger.warning("[SCHEMA] custom field=%s rejected: %s", fid, e.errors())
    return merged


def visible_fields(fields: Iterable[FieldDefinition]) -> List[FieldDefinition]:
    return [f for f in fields if f.is_visible]


def get_field(fields: Iterable[FieldDefinition] | None, field_id: str) -> Optional[FieldDefinition]:
    for f in fields or []:
        if f.id == field_id:
            return f
    return None


def with_visibility(fields: Iterable[FieldDefinition], field_id: str, is_visible: bool) -> List[FieldDefinition]:
    return [f.model_copy(update={"is_visible": is_visible}) if f.id == field_id else f for f in fields]
