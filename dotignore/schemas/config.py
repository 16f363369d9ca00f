"""Pydantic schema for .dotignore.yml configuration files.

A configuration file names where ignore patterns come from: inline pattern
lines, pattern files, and optionally the built-in version control patterns.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IgnoreConfig(BaseModel):
    """Schema for .dotignore.yml configuration file.

    Patterns are collected in a fixed order: defaults, then each file in the
    order listed, then inline patterns.
    """

    model_config = ConfigDict(extra="forbid")

    patterns: list[str] = Field(
        default_factory=list,
        description="Inline pattern lines, in gitignore syntax"
    )
    files: list[str] = Field(
        default_factory=list,
        description="Pattern files to read, relative to the configuration file"
    )
    include_defaults: bool = Field(
        default=False,
        description="Whether to prepend the version control directory patterns"
    )

    @field_validator("patterns", "files", mode="before")
    @classmethod
    def normalize_list_fields(cls, v: Any) -> list[str]:
        """Normalize None to empty list for list fields."""
        if v is None:
            return []
        return v


def validate_config(data: dict[str, Any] | None) -> IgnoreConfig:
    """Validate .dotignore.yml configuration data.

    Args:
        data: Raw YAML data from file (None for an empty file)

    Returns:
        Validated IgnoreConfig model

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return IgnoreConfig.model_validate(data or {})
