# fieldengine/resolve/labels.py
# --------------------------------------------------------------------------------------
# Product labels arrive as two index-aligned arrays on the imported product:
#   labelNames      = ["Hard", "Bouquet"]
#   labelCategories = ["difficulty", "productType"]
# They are re-encoded once into ordered (name, category) pairs; nothing downstream
# reads the two arrays independently.
# --------------------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, NamedTuple, Optional

DIFFICULTY = "difficulty"
PRODUCT_TYPE = "productType"

# product:<field> names that are answered from the pairs rather than read literally
LABEL_FIELD_CATEGORIES = {
    "difficultyLabel": DIFFICULTY,
    "productTypeLabel": PRODUCT_TYPE,
}


class LabelPair(NamedTuple):
    name: str
    category: str


def _as_list(value: Any) -> List[Any]:
    """Arrays pass through; comma-joined strings (aggregate query output) are split."""
    if value is None:
        return []
    if isinstance(value, str):
        return [p.strip() for p in value.split(",")] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def pair_labels(label_names: Any, label_categories: Any) -> List[LabelPair]:
    """Index-aligned pairing; stops at the shorter of the two arrays."""
    names = _as_list(label_names)
    cats = _as_list(label_categories)
    return [LabelPair(n, c) for n, c in zip(names, cats)]


def product_label_pairs(local_product: Mapping[str, Any] | None) -> List[LabelPair]:
    if not isinstance(local_product, Mapping):
        return []
    return pair_labels(local_product.get("labelNames"), local_product.get("labelCategories"))


def first_label(pairs: Iterable[LabelPair], category: str) -> Optional[str]:
    for pair in pairs:
        if pair.category == category:
            # an empty name counts as "no label"
            return pair.name or None
    return None


def disambiguate(category: str, label_names: Any, label_categories: Any) -> Optional[str]:
    """First label name whose aligned category equals `category`, else None."""
    return first_label(pair_labels(label_names, label_categories), category)
