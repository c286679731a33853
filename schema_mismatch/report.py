"""Readable output for test assertions built on validate_schema."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic_core import to_json

from schema_mismatch.exceptions import SchemaMismatchError
from schema_mismatch.schemas.result import Issue, IssuesStyles, ValidationResult
from schema_mismatch.validator import validate_schema


def format_mismatches(result: ValidationResult, indent: int = 2) -> str:
    """Pretty-printed JSON of the annotated data."""
    return to_json(result.data_mismatches, indent=indent, fallback=str).decode()


def format_issues(errors: Sequence[Issue] | None) -> str:
    return "\n".join(f"- {issue.accessor or '<root>'}: {issue.message}" for issue in errors or [])


def assert_schema(
    data: Any,
    schema: Any,
    issues_styles: IssuesStyles | Mapping[str, Any] | None = None,
) -> ValidationResult:
    """
    Validate and raise SchemaMismatchError when the data does not match.
    The error message lists every issue, then the annotated data.
    """
    result = validate_schema(data, schema, issues_styles)
    if result.valid:
        return result

    message = (
        f"Schema validation failed with {len(result.errors)} issue(s):\n"
        f"{format_issues(result.errors)}\n"
        f"Data mismatches:\n"
        f"{format_mismatches(result)}"
    )
    raise SchemaMismatchError(message, result)
