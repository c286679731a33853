"""
Public entry point: validate data against a schema and flag mismatches.

Usage:
    from pydantic import BaseModel

    class User(BaseModel):
        id: int
        name: str

    result = validate_schema({"id": "x"}, User)
    result.errors           # [Issue(path=('id',), ...), Issue(path=('name',), message='Required')]
    result.data_mismatches  # {"id": " ⚠️ 'x' Input should be a valid integer", "name": "❌ Missing property"}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schema_mismatch.exceptions import INVALID_SCHEMA_MESSAGE, ConfigurationError
from schema_mismatch.schemas.result import IssuesStyles, ValidationResult
from schema_mismatch.services.annotation import annotate
from schema_mismatch.services.paths import clone_tree
from schema_mismatch.services.validation import run_validation

logger = logging.getLogger(__name__)


def validate_schema(
    data: Any,
    schema: Any,
    issues_styles: IssuesStyles | Mapping[str, Any] | None = None,
) -> ValidationResult:
    """
    Validate ``data`` against ``schema``.

    ``schema`` is a JSON Schema document (dict) or anything pydantic can
    validate with (a model class, a TypeAdapter, ``list[Model]``...).
    ``issues_styles`` overrides some or all of the marker icons.

    Returns a ValidationResult whose ``errors`` is None when the data is
    valid, and whose ``data_mismatches`` is a copy of the data with every
    mismatch flagged in place.
    """
    if schema is None:
        logger.error(INVALID_SCHEMA_MESSAGE)
        raise ConfigurationError(INVALID_SCHEMA_MESSAGE)

    styles = IssuesStyles.from_overrides(issues_styles)
    outcome = run_validation(schema, data)

    if outcome.valid:
        logger.info("Schema validation passed")
        return ValidationResult(errors=None, data_mismatches=clone_tree(data), issues_styles=styles)

    logger.info("Schema validation failed: %d issue(s)", len(outcome.issues))
    return ValidationResult(
        errors=outcome.issues,
        data_mismatches=annotate(data, outcome.issues, styles),
        issues_styles=styles,
    )
