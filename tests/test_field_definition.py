import pytest
from pydantic import ValidationError

from fieldengine.models.field_definition import FieldDefinition, load_field_definitions


def test_camel_and_snake_case_names():
    stored = FieldDefinition.from_mapping({
        "id": "orderDate",
        "label": "Order Date",
        "type": "date",
        "sourcePath": "tags",
        "transformation": "extract",
        "transformationRule": r"\d{2}/\d{2}/\d{4}",
        "isEditable": False,
        "isVisible": True,
    })
    direct = FieldDefinition(id="orderDate", label="Order Date", type="date", source_path="tags",
                             transformation="extract", transformation_rule=r"\d{2}/\d{2}/\d{4}")
    assert stored == direct
    assert stored.has_extraction_rule


def test_defaults():
    field = FieldDefinition(id="x")
    assert field.type == "text"
    assert field.source_path is None
    assert field.transformation is None
    assert not field.is_editable
    assert field.is_visible


def test_legacy_source_list_first_entry():
    field = FieldDefinition.from_mapping({"id": "productTitle", "shopifyFields": ["", "lineItems.edges.0.node.title"]})
    assert field.source_path == "lineItems.edges.0.node.title"
    assert FieldDefinition.from_mapping({"id": "assignedTo", "shopifyFields": []}).source_path is None


def test_explicit_source_path_beats_legacy_list():
    field = FieldDefinition.from_mapping({"id": "a", "sourcePath": "note", "shopifyFields": ["tags"]})
    assert field.source_path == "note"


def test_transformation_none_means_absent():
    assert FieldDefinition.from_mapping({"id": "a", "transformation": "none"}).transformation is None
    assert FieldDefinition.from_mapping({"id": "a", "transformation": ""}).transformation is None


def test_extract_without_rule_is_accepted():
    field = FieldDefinition.from_mapping({"id": "a", "transformation": "extract", "transformationRule": "  "})
    assert field.extracts
    assert not field.has_extraction_rule


def test_transform_transformation_means_absent():
    fields = load_field_definitions([{"id": "orderId", "sourcePath": "name", "transformation": "transform"}])
    assert [f.id for f in fields] == ["orderId"]
    assert fields[0].transformation is None
    assert not fields[0].extracts


def test_unknown_type_or_transformation_rejected():
    with pytest.raises(ValidationError):
        FieldDefinition.from_mapping({"id": "a", "type": "number"})
    with pytest.raises(ValidationError):
        FieldDefinition.from_mapping({"id": "a", "transformation": "uppercase"})
    with pytest.raises(ValidationError):
        FieldDefinition.from_mapping({"id": ""})


def test_to_mapping_uses_stored_names():
    out = FieldDefinition(id="a", source_path="note", is_editable=True).to_mapping()
    assert out["sourcePath"] == "note"
    assert out["isEditable"] is True
    assert "transformation" not in out


def test_load_skips_invalid_entries():
    fields = load_field_definitions([
        {"id": "a"},
        {"type": "text"},
        {"id": "b", "type": "bogus"},
        "not a mapping",
        FieldDefinition(id="c"),
    ])
    assert [f.id for f in fields] == ["a", "c"]
    assert load_field_definitions(None) == []
