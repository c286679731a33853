"""
Schema validation adapter.

Runs data through an external schema engine and normalizes what it reports
into an ordered list of Issues:
- JSON Schema documents (plain dicts) are checked with jsonschema
- pydantic models, TypeAdapters and other annotated types with pydantic

Collects every error rather than failing on the first one. Missing
properties always come out with the same "Required" message, whichever
engine found them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import jsonschema
from jsonschema.exceptions import SchemaError, ValidationError as JsonSchemaError
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for
from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import to_json

from schema_mismatch.exceptions import INVALID_SCHEMA_MESSAGE, ConfigurationError
from schema_mismatch.schemas.result import REQUIRED_MESSAGE, Issue
from schema_mismatch.services.paths import MISSING, get_path

logger = logging.getLogger(__name__)


@dataclass
class ValidationOutcome:
    """Normalized engine result: valid flag plus issues in engine order."""

    valid: bool
    issues: list[Issue] = field(default_factory=list)


def run_validation(schema: Any, data: Any) -> ValidationOutcome:
    """
    Validate ``data`` against ``schema``.
    Raises ConfigurationError for a missing or unusable schema, before the
    data is looked at.
    """
    if schema is None:
        raise ConfigurationError(INVALID_SCHEMA_MESSAGE)

    if isinstance(schema, (Mapping, bool)):
        validator = _json_schema_validator(schema)
        issues = list(_json_schema_issues(validator, data))
        engine = "jsonschema"
    else:
        adapter = _type_adapter(schema)
        issues = _pydantic_issues(adapter, data)
        engine = "pydantic"

    logger.debug("%s reported %d issue(s)", engine, len(issues))
    return ValidationOutcome(valid=not issues, issues=issues)


# ---------------------------------------------------------------------------
# JSON Schema
# ---------------------------------------------------------------------------


def _json_schema_validator(schema: Mapping[str, Any] | bool) -> Validator:
    validator_cls = validator_for(schema, default=jsonschema.Draft7Validator)
    try:
        validator_cls.check_schema(schema)
    except SchemaError as exc:
        raise ConfigurationError(f"{INVALID_SCHEMA_MESSAGE} {exc.message}") from exc
    return validator_cls(schema)


def _missing_properties(error: JsonSchemaError) -> list[str]:
    if not isinstance(error.instance, Mapping):
        return []
    return [name for name in error.validator_value if name not in error.instance]


def _json_schema_issues(validator: Validator, data: Any) -> Iterator[Issue]:
    # One "required" error is raised per absent property; all of them are
    # expanded on the first one seen for a given instance/schema location.
    expanded: set[tuple] = set()

    for error in validator.iter_errors(data):
        path = tuple(error.absolute_path)
        if error.validator == "required":
            key = (path, tuple(error.absolute_schema_path))
            if key in expanded:
                continue
            expanded.add(key)
            for name in _missing_properties(error):
                yield Issue(path=path + (name,), message=REQUIRED_MESSAGE, code="required")
            continue
        yield Issue(path=path, message=error.message, code=str(error.validator))


# ---------------------------------------------------------------------------
# pydantic
# ---------------------------------------------------------------------------


def _type_adapter(schema: Any) -> TypeAdapter:
    if isinstance(schema, TypeAdapter):
        return schema
    if isinstance(schema, str):
        raise ConfigurationError(f"Unsupported schema type: {type(schema).__name__}")
    try:
        return TypeAdapter(schema)
    except (PydanticUserError, NameError, TypeError) as exc:
        raise ConfigurationError(f"Unsupported schema type: {type(schema).__name__}") from exc


def _pydantic_issues(adapter: TypeAdapter, data: Any) -> list[Issue]:
    # Strict JSON mode: no "49" -> 49 coercion, but ISO strings still parse
    # into dates, UUIDs and enums the way they arrive from an API.
    try:
        adapter.validate_json(to_json(data, fallback=str), strict=True)
    except ValidationError as exc:
        issues = [_issue_from_pydantic(error, data) for error in exc.errors(include_url=False)]
        return _merge_same_path(issues)
    return []


def _data_path(loc: tuple[str | int, ...], data: Any, keep_last: bool) -> tuple[str | int, ...]:
    """
    Map a pydantic ``loc`` onto the data. Segments that address nothing in
    the data (union member tags such as ``int`` or ``Cat``) are dropped; the
    last segment of a missing-field error is kept since it names the absent key.
    """
    path = []
    current = data
    for position, segment in enumerate(loc):
        value = get_path(current, [segment])
        if value is not MISSING:
            path.append(segment)
            current = value
        elif keep_last and position == len(loc) - 1:
            path.append(segment)
    return tuple(path)


def _issue_from_pydantic(error: Mapping[str, Any], data: Any) -> Issue:
    code = error["type"]
    missing = code == "missing"
    message = REQUIRED_MESSAGE if missing else error["msg"]
    path = _data_path(tuple(error["loc"]), data, keep_last=missing)
    return Issue(path=path, message=message, code=code)


def _merge_same_path(issues: list[Issue]) -> list[Issue]:
    # Union members each report on the same data location; the last one wins
    # and keeps the position of the first.
    merged: dict[tuple[str | int, ...], Issue] = {}
    for issue in issues:
        merged[issue.path] = issue
    return list(merged.values())
