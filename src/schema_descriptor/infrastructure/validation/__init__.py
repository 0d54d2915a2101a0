"""Descriptor validation infrastructure.

Components:
- types: Shared types (ValidationErrorDetail)
- adapter: validate / is_valid / collect_errors over pydantic's TypeAdapter
"""

from schema_descriptor.infrastructure.validation.adapter import (
    collect_errors,
    is_valid,
    validate,
)
from schema_descriptor.infrastructure.validation.types import ValidationErrorDetail

__all__ = [
    "ValidationErrorDetail",
    "validate",
    "is_valid",
    "collect_errors",
]
