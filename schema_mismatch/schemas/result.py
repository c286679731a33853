"""Pydantic models describing validation issues and results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from schema_mismatch.exceptions import ConfigurationError
from schema_mismatch.services.paths import format_path

# Message an engine issue carries when the property is absent altogether.
REQUIRED_MESSAGE = "Required"


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------

class Issue(BaseModel):
    """One mismatch between data and schema, addressed by path."""
    model_config = ConfigDict(frozen=True)

    path: tuple[str | int, ...] = ()
    message: str
    code: str | None = None

    @property
    def accessor(self) -> str:
        return format_path(self.path)

    @property
    def is_missing(self) -> bool:
        return self.message == REQUIRED_MESSAGE


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

class IssuesStyles(BaseModel):
    """Icons used to flag mismatches inside the annotated data."""
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
    )

    icon_property_error: str = Field("⚠️", alias="iconPropertyError")
    icon_property_missing: str = Field("❌", alias="iconPropertyMissing")

    @classmethod
    def from_overrides(
        cls, overrides: IssuesStyles | Mapping[str, Any] | None = None
    ) -> IssuesStyles:
        """
        Merge caller overrides over the defaults.
        Keys may use either the snake_case names or the camelCase aliases.
        """
        if overrides is None:
            return cls()
        if isinstance(overrides, IssuesStyles):
            return overrides
        if not isinstance(overrides, Mapping):
            raise ConfigurationError(
                f"Issues styles must be a mapping, got {type(overrides).__name__}"
            )
        try:
            return cls.model_validate(dict(overrides))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid issues styles: {exc}") from exc


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class ValidationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    errors: list[Issue] | None = None
    data_mismatches: Any = Field(None, alias="dataMismatches")
    issues_styles: IssuesStyles = Field(default_factory=IssuesStyles, alias="issuesStyles")

    @property
    def valid(self) -> bool:
        return self.errors is None
