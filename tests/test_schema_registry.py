"""Tests for the bundled schemas and SchemaRegistry."""

import pytest
from jsonschema.exceptions import SchemaError

from ossd_validator.models.json_schema_loader import (
    BUNDLED_SCHEMAS,
    get_schema_path,
    load_bundled_schemas,
    load_schema,
)
from ossd_validator.models.schema_registry import SchemaRegistry, default_registry


def test_bundled_schema_files_exist():
    for name in BUNDLED_SCHEMAS:
        assert get_schema_path(name).is_file(), name


def test_bundled_schemas_use_their_name_as_id():
    for name, document in load_bundled_schemas().items():
        assert document["$id"] == name


def test_load_unknown_schema_raises():
    with pytest.raises(FileNotFoundError):
        load_schema("widget.json")


def test_default_registry_holds_the_four_schemas():
    registry = default_registry()
    assert set(registry.names()) == {
        "project.json",
        "collection.json",
        "url.json",
        "blockchain-address.json",
    }
    for name in BUNDLED_SCHEMAS:
        assert name in registry
        assert registry.lookup(name) is not None


def test_default_registry_is_built_once():
    assert default_registry() is default_registry()


def test_lookup_unknown_returns_none():
    assert default_registry().lookup("widget.json") is None
    assert "widget.json" not in default_registry()


def test_lookup_reuses_compiled_validator():
    registry = default_registry()
    assert registry.lookup("project.json") is registry.lookup("project.json")


def test_register_rejects_invalid_schema_document():
    registry = SchemaRegistry()
    with pytest.raises(SchemaError):
        registry.register("broken.json", {"type": "not-a-type"})
    assert "broken.json" not in registry


def test_cross_schema_reference_resolves_in_custom_registry():
    registry = SchemaRegistry()
    registry.register("list.json", {
        "$id": "list.json",
        "type": "array",
        "items": {"$ref": "item.json"},
    })
    registry.register("item.json", {
        "$id": "item.json",
        "type": "object",
        "required": ["id"],
    })

    validator = registry.lookup("list.json")
    assert list(validator.iter_errors([{"id": 1}])) == []

    errors = list(validator.iter_errors([{"id": 1}, {}]))
    assert len(errors) == 1
    assert errors[0].missing_property == "id"


def test_required_errors_use_missing_property_message():
    validator = default_registry().lookup("url.json")
    (error,) = list(validator.iter_errors({}))
    assert error.message == "must have required property 'url'"
    assert error.missing_property == "url"


def test_evm_address_format_is_enforced():
    validator = default_registry().lookup("blockchain-address.json")
    good = {
        "address": "0x1234567890abcdef1234567890ABCDEF12345678",
        "networks": ["mainnet"],
        "tags": ["eoa"],
    }
    assert list(validator.iter_errors(good)) == []

    bad = dict(good, address="0x1234")
    errors = list(validator.iter_errors(bad))
    assert [e.validator for e in errors] == ["format"]


def test_uri_format_is_enforced():
    validator = default_registry().lookup("url.json")
    assert list(validator.iter_errors({"url": "https://github.com/example"})) == []
    errors = list(validator.iter_errors({"url": "not a url"}))
    assert [e.validator for e in errors] == ["format"]
