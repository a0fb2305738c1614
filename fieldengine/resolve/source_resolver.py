# fieldengine/resolve/source_resolver.py
# --------------------------------------------------------------------------------------
# Locate the raw value of one field inside a record.
#   - no source path   → record[field.id] (then a local synonym key)
#   - "product:<prop>" → payload.localProduct (labels via the pair table)
#   - "tags"           → payload.tags joined with ", "
#   - "line_items.*"   → first line item node
#   - anything else    → payload[path], then a dotted walk
# Unresolvable paths give None; nothing here raises.
# --------------------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from fieldengine.models.field_definition import FieldDefinition
from fieldengine.models.records import ExternalRecord, LocalRecord, SourceRecord, detect_shape
from fieldengine.resolve.labels import LABEL_FIELD_CATEGORIES, LabelPair, first_label, product_label_pairs

logger = logging.getLogger("fieldengine")

PRODUCT_PREFIX = "product:"
TAGS_PATH = "tags"
LINE_ITEM_TITLE_PATH = "line_items.title"
LINE_ITEM_VARIANT_TITLE_PATH = "line_items.variant_title"

# Local orders keep some card fields under their own column names
LOCAL_SYNONYMS = {
    "productTitle": "productName",
    "productVariantTitle": "productVariant",
    "customisations": "productCustomizations",
    "assignedTo": "assignedFloristId",
    "addOns": "remarks",
    "orderId": "id",
}


def _get(d: Any, key: str, default=None):
    if not isinstance(d, Mapping):
        return default
    return d.get(key, default)


def _walk(data: Any, path: str) -> Any:
    current = data
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return None
            current = current[part]
        elif isinstance(current, (list, tuple)) and part.isdigit():
            idx = int(part)
            if idx >= len(current):
                return None
            current = current[idx]
        else:
            return None
    return current


def first_line_item(payload: Mapping[str, Any] | None) -> Optional[Mapping[str, Any]]:
    edges = _get(_get(payload, "lineItems"), "edges")
    if not isinstance(edges, (list, tuple)) or not edges:
        return None
    node = _get(edges[0], "node")
    return node if isinstance(node, Mapping) else None


def product_image_ref(payload: Mapping[str, Any] | None) -> Optional[Tuple[Any, Any]]:
    """(product id, variant id) of the first line item, or None without a product id."""
    node = first_line_item(payload)
    product_id = _get(_get(node, "product"), "id")
    if not product_id:
        return None
    return product_id, _get(_get(node, "variant"), "id")


def resolve_local(field_id: str, record: Mapping[str, Any] | None) -> Any:
    if not isinstance(record, Mapping):
        return None
    value = record.get(field_id)
    if value is None:
        synonym = LOCAL_SYNONYMS.get(field_id)
        if synonym:
            value = record.get(synonym)
    return value


def _resolve_product(prop: str, payload: Mapping[str, Any], labels: Optional[List[LabelPair]]) -> Any:
    product = _get(payload, "localProduct")
    category = LABEL_FIELD_CATEGORIES.get(prop)
    if category:
        pairs = labels if labels is not None else product_label_pairs(product)
        return first_label(pairs, category)

    value = _get(product, prop)
    if prop == "labelNames":
        if isinstance(value, (list, tuple)):
            return value[0] if value else None
        if isinstance(value, str):
            names = [n.strip() for n in value.split(",") if n.strip()]
            return names[0] if names else None
    return value


def resolve_external(path: str, payload: Mapping[str, Any] | None, *, labels: Optional[List[LabelPair]] = None) -> Any:
    if not path or not isinstance(payload, Mapping):
        return None

    if path.startswith(PRODUCT_PREFIX):
        parts = path.split(":")
        return _resolve_product(parts[1], payload, labels)

    if path == TAGS_PATH:
        tags = payload.get("tags")
        if isinstance(tags, (list, tuple)):
            return ", ".join("" if t is None else str(t) for t in tags)
        return tags

    if path == LINE_ITEM_TITLE_PATH:
        return _get(first_line_item(payload), "title")
    if path == LINE_ITEM_VARIANT_TITLE_PATH:
        return _get(_get(first_line_item(payload), "variant"), "title")

    # direct properties like 'name', 'createdAt', 'note'
    if path in payload:
        return payload[path]
    if "." in path:
        return _walk(payload, path)
    return None


def resolve(field: FieldDefinition | None, raw_record: Mapping[str, Any] | None,
            *, labels: Optional[List[LabelPair]] = None) -> Any:
    """
    Raw value of `field` in `raw_record`, or None when it cannot be found.

    With a source path the record is read as the platform payload; without one
    it is read as a flat local record.
    """
    if field is None or not isinstance(raw_record, Mapping):
        return None
    if not field.source_path:
        return resolve_local(field.id, raw_record)
    return resolve_external(field.source_path, raw_record, labels=labels)


def resolve_record(field: FieldDefinition | None, record: SourceRecord | Mapping[str, Any] | None) -> Any:
    """
    Resolve against a stored order that may wrap a platform payload.

    The platform payload is used only for fields declaring a source path;
    every other field reads the local order.
    """
    if field is None or record is None:
        return None
    shape = record if isinstance(record, (LocalRecord, ExternalRecord)) else detect_shape(record)
    if shape is None:
        return None
    if isinstance(shape, ExternalRecord) and field.source_path:
        value = resolve_external(field.source_path, shape.payload, labels=shape.labels)
        logger.debug("[RESOLVE] field=%s path=%s value=%r", field.id, field.source_path, value)
        return value
    return resolve_local(field.id, shape.entity)
