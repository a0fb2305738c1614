from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from fieldengine.config import settings
from fieldengine.resolve.labels import LabelPair, product_label_pairs


@dataclass(frozen=True)
class LocalRecord:
    """Flat, locally stored order: field id (or a synonym) -> already typed value."""
    entity: Mapping[str, Any]


@dataclass(frozen=True)
class ExternalRecord:
    """Local order wrapping the payload imported from the commerce platform."""
    entity: Mapping[str, Any]
    payload: Mapping[str, Any]
    labels: List[LabelPair] = field(default_factory=list)


SourceRecord = Union[LocalRecord, ExternalRecord]


def detect_shape(entity: Any, external_key: str | None = None) -> Optional[SourceRecord]:
    """
    Classify a record once per render pass.

    A record carrying a non-empty platform payload under the envelope key is external;
    any other mapping is local. Anything that is not a mapping yields None.
    """
    if not isinstance(entity, Mapping):
        return None
    key = external_key or settings.EXTERNAL_KEY
    payload = entity.get(key)
    if isinstance(payload, Mapping) and payload:
        return ExternalRecord(
            entity=entity,
            payload=payload,
            labels=product_label_pairs(payload.get("localProduct")),
        )
    return LocalRecord(entity=entity)
