"""Tests for the schema validation adapter (jsonschema and pydantic engines)."""

from datetime import datetime

import pytest
from pydantic import BaseModel, TypeAdapter

from schema_mismatch.exceptions import ConfigurationError
from schema_mismatch.services.validation import run_validation

USER_JSON_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["id", "name"],
    "properties": {
        "id": {"type": "integer"},
        "name": {"type": "string"},
        "tags": {"type": "array", "items": {"type": "string"}},
    },
}


class User(BaseModel):
    id: int
    name: str
    created_at: datetime | None = None


def test_valid_json_schema_data():
    outcome = run_validation(USER_JSON_SCHEMA, {"id": 1, "name": "Jane"})
    assert outcome.valid is True
    assert outcome.issues == []


def test_json_schema_type_error_keeps_path_and_message():
    outcome = run_validation(USER_JSON_SCHEMA, {"id": "x", "name": "Jane"})

    assert outcome.valid is False
    [issue] = outcome.issues
    assert issue.path == ("id",)
    assert issue.message == "'x' is not of type 'integer'"
    assert issue.code == "type"


def test_json_schema_required_becomes_one_issue_per_property():
    """Each absent property gets its own path and the shared 'Required' message."""
    outcome = run_validation(USER_JSON_SCHEMA, {})

    assert [issue.path for issue in outcome.issues] == [("id",), ("name",)]
    assert all(issue.message == "Required" for issue in outcome.issues)


def test_json_schema_nested_paths_include_indices():
    outcome = run_validation(USER_JSON_SCHEMA, {"id": 1, "name": "Jane", "tags": ["ok", 5]})
    [issue] = outcome.issues
    assert issue.path == ("tags", 1)


def test_invalid_json_schema_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="You must provide a valid schema!"):
        run_validation({"type": 12}, {})


def test_valid_pydantic_data():
    outcome = run_validation(User, {"id": 1, "name": "Jane", "created_at": "2024-05-01T10:00:00Z"})
    assert outcome.valid is True


def test_pydantic_does_not_coerce_strings_into_numbers():
    outcome = run_validation(User, {"id": "49", "name": "Jane"})

    [issue] = outcome.issues
    assert issue.path == ("id",)
    assert issue.code == "int_type"
    assert issue.message != "Required"


def test_pydantic_missing_field_is_reported_as_required():
    outcome = run_validation(User, {"id": 1})

    [issue] = outcome.issues
    assert issue.path == ("name",)
    assert issue.message == "Required"
    assert issue.code == "missing"


def test_pydantic_type_adapter_and_list_types():
    data = [{"id": 1, "name": "Jane"}, {"id": 2}]

    for schema in (TypeAdapter(list[User]), list[User]):
        outcome = run_validation(schema, data)
        assert [issue.path for issue in outcome.issues] == [(1, "name")]


def test_missing_schema_is_rejected():
    with pytest.raises(ConfigurationError, match="You must provide a valid schema!"):
        run_validation(None, {"id": 1})


def test_unsupported_schema_type_is_rejected():
    with pytest.raises(ConfigurationError, match="Unsupported schema type"):
        run_validation("User", {"id": 1})


class Item(BaseModel):
    value: int | str


class Cat(BaseModel):
    meow: int


class Dog(BaseModel):
    bark: int


class Owner(BaseModel):
    pet: Cat | Dog


def test_union_member_tags_are_dropped_from_the_path():
    """Errors from every member of a scalar union land on the field itself, once."""
    outcome = run_validation(Item, {"value": [1, 2]})

    [issue] = outcome.issues
    assert issue.path == ("value",)
    assert issue.code == "string_type"


def test_model_union_errors_point_at_real_keys():
    outcome = run_validation(Owner, {"pet": {"meow": "x"}})

    paths = {issue.path: issue for issue in outcome.issues}
    assert set(paths) == {("pet", "meow"), ("pet", "bark")}
    assert paths[("pet", "meow")].code == "int_type"
    assert paths[("pet", "bark")].message == "Required"
