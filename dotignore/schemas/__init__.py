"""Pydantic schemas for dotignore configuration files."""

from .config import IgnoreConfig, validate_config

__all__ = [
    "IgnoreConfig",
    "validate_config",
]
