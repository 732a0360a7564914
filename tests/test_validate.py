"""Tests for validate_* and the collapsing error map."""

import pytest

from ossd_validator import ValidationResult, validate_collection, validate_project
from ossd_validator.models.schema_registry import SchemaRegistry
from ossd_validator.validator.validate import validate_object


def test_valid_project(project):
    result = validate_project(project)
    assert result.valid is True
    assert result.errors == {}
    assert result.issues == ()


def test_valid_project_with_artifacts(project):
    project["github"] = [{"url": "https://github.com/example/example-project"}]
    project["blockchain"] = [{
        "address": "0x1234567890abcdef1234567890ABCDEF12345678",
        "networks": ["optimism"],
        "tags": ["contract", "deployer"],
    }]
    assert validate_project(project).valid is True


def test_valid_collection(collection):
    result = validate_collection(collection)
    assert result == ValidationResult(valid=True)


def test_missing_name_is_keyed_by_property(project):
    del project["name"]
    result = validate_project(project)
    assert result.valid is False
    assert result.errors == {"name": "must have required property 'name'"}


def test_each_missing_property_gets_its_own_key(collection):
    del collection["name"]
    del collection["projects"]
    result = validate_collection(collection)
    assert set(result.errors) == {"name", "projects"}
    assert all(result.errors.values())


def test_nested_missing_property_is_keyed_by_name(project):
    project["github"] = [{"href": "https://github.com/example"}]
    result = validate_project(project)
    assert result.errors == {"url": "must have required property 'url'"}
    assert result.issues[0].path == "/github/0"


def test_referenced_url_missing_in_websites_is_keyed_by_name(project):
    project["websites"] = [{"url": "https://example.org"}, {}]
    result = validate_project(project)
    assert result.errors == {"url": "must have required property 'url'"}
    assert [issue.keyword for issue in result.issues] == ["required"]
    assert result.issues[0].path == "/websites/1"


@pytest.mark.parametrize("missing", ["address", "networks", "tags"])
def test_missing_blockchain_field_is_keyed_by_name(project, missing):
    entry = {
        "address": "0x1234567890abcdef1234567890ABCDEF12345678",
        "networks": ["mainnet"],
        "tags": ["eoa"],
    }
    del entry[missing]
    project["blockchain"] = [entry]

    result = validate_project(project)

    assert result.errors == {missing: f"must have required property '{missing}'"}
    assert result.issues[0].path == "/blockchain/0"


def test_blockchain_entry_missing_everything(project):
    project["blockchain"] = [{"name": "treasury"}]
    result = validate_project(project)
    assert set(result.errors) == {"address", "networks", "tags"}
    assert "other" not in result.errors


def test_single_type_violation_is_keyed_other(project):
    project["version"] = "three"
    result = validate_project(project)
    assert result.valid is False
    assert list(result.errors) == ["other"]
    assert result.errors["other"]
    assert result.issues[0].path == "/version"
    assert result.issues[0].keyword == "type"


def test_multiple_violations_collapse_onto_last_message(project):
    project["version"] = "three"
    project["slug"] = "Not A Slug"
    project["github"] = [{"url": "not a url"}]

    result = validate_project(project)

    assert len(result.issues) == 3
    assert list(result.errors) == ["other"]
    assert result.errors["other"] == result.issues[-1].message
    assert {issue.path for issue in result.issues} == {"/version", "/slug", "/github/0/url"}


def test_missing_and_other_violations_coexist(project):
    del project["slug"]
    project["version"] = "three"
    result = validate_project(project)
    assert set(result.errors) == {"slug", "other"}


def test_non_mapping_value_is_other():
    result = validate_project(["not", "a", "project"])
    assert result.valid is False
    assert list(result.errors) == ["other"]


def test_none_value_is_invalid():
    assert validate_collection(None).valid is False


def test_unknown_schema_returns_result_without_raising(project):
    result = validate_object(project, "widget.json")
    assert result == ValidationResult(valid=False, errors={"schema": "Schema not found"})


def test_empty_registry_reports_schema_not_found(project):
    result = validate_project(project, registry=SchemaRegistry())
    assert result.errors == {"schema": "Schema not found"}


@pytest.mark.parametrize("network", ["mainnet", "optimism", "arbitrum", "base"])
def test_known_networks_are_accepted(project, network):
    project["blockchain"] = [{
        "address": "0x1234567890abcdef1234567890ABCDEF12345678",
        "networks": [network],
        "tags": ["eoa"],
    }]
    assert validate_project(project).valid is True


def test_unknown_network_is_rejected(project):
    project["blockchain"] = [{
        "address": "0x1234567890abcdef1234567890ABCDEF12345678",
        "networks": ["dogecoin"],
        "tags": ["eoa"],
    }]
    result = validate_project(project)
    assert result.valid is False
    assert result.issues[0].path == "/blockchain/0/networks/0"


def test_validation_does_not_modify_value(project):
    before = dict(project)
    validate_project(project)
    assert project == before
