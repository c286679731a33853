"""Exceptions raised by schema-mismatch."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schema_mismatch.schemas.result import ValidationResult

INVALID_SCHEMA_MESSAGE = "You must provide a valid schema!"


class SchemaMismatchBaseError(Exception):
    """Base exception for schema-mismatch errors."""
    pass


class ConfigurationError(SchemaMismatchBaseError):
    """Raised when the call itself is wrong: missing schema, bad styles."""
    pass


class SchemaMismatchError(SchemaMismatchBaseError, AssertionError):
    """Raised by assert_schema when the data does not match the schema."""

    def __init__(self, message: str, result: ValidationResult):
        super().__init__(message)
        self.result = result
