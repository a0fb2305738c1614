from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger("fieldengine")

FieldType = Literal["text", "select", "textarea", "date", "tags", "status"]

# Stored schemas predating `sourcePath` carry a list of platform paths instead
LEGACY_SOURCE_KEY = "shopifyFields"


class FieldDefinition(BaseModel):
    """
    One entry of a tenant's order-card schema.

    Accepts the camelCase keys the schema store persists (`sourcePath`,
    `transformationRule`, `isEditable`, ...) as well as the snake_case
    attribute names. Unknown keys are kept as extras and ignored here.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Stable field id, unique within a schema")
    label: str = Field("", description="Caption shown next to the value")
    type: FieldType = Field("text", description="Semantic type; drives coercion and formatting")
    description: Optional[str] = Field(None, description="Free text shown in the settings screen")
    source_path: Optional[str] = Field(None, alias="sourcePath", description="Locator inside the platform payload")
    transformation: Optional[Literal["extract"]] = Field(None, description="Optional rewrite applied to the raw value")
    transformation_rule: Optional[str] = Field(None, alias="transformationRule", description="Regex for `extract`")
    is_editable: bool = Field(False, alias="isEditable")
    is_visible: bool = Field(True, alias="isVisible")
    is_system: bool = Field(False, alias="isSystem")

    @model_validator(mode="before")
    @classmethod
    def _legacy_source_path(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if data.get("sourcePath") or data.get("source_path"):
            return data
        legacy = data.get(LEGACY_SOURCE_KEY)
        if isinstance(legacy, (list, tuple)):
            first = next((str(p).strip() for p in legacy if p and str(p).strip()), None)
            if first:
                data = dict(data)
                data["sourcePath"] = first
        return data

    # "none" and the unimplemented "transform" leave the raw value as is
    @field_validator("transformation", mode="before")
    @classmethod
    def _none_means_absent(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and v.strip().lower() in {"", "none", "transform"}):
            return None
        return v

    @field_validator("source_path", "transformation_rule", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # ---- convenience ---------------------------------------------------------

    @property
    def extracts(self) -> bool:
        return self.transformation == "extract"

    @property
    def has_extraction_rule(self) -> bool:
        return self.extracts and bool(self.transformation_rule)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "FieldDefinition":
        return cls.model_validate(data)

    def to_mapping(self) -> Dict[str, Any]:
        """Stored (camelCase) representation, without unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


def load_field_definitions(entries: Iterable[Any] | None) -> List[FieldDefinition]:
    """
    Build definitions from stored schema entries, in order.
    Invalid entries are logged and skipped so that one broken entry hides one field only.
    """
    out: List[FieldDefinition] = []
    for idx, entry in enumerate(entries or []):
        if isinstance(entry, FieldDefinition):
            out.append(entry)
            continue
        try:
            out.append(FieldDefinition.from_mapping(entry))
        except ValidationError as e:
            fid = entry.get("id") if isinstance(entry, dict) else None
            logger.warning("[SCHEMA] skipping invalid field entry #%d id=%s: %s", idx, fid, e.errors())
    return out
