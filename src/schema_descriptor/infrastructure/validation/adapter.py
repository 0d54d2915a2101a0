"""Validate and cast values against compiled descriptors.

Descriptors are consumed through ``pydantic.TypeAdapter``; this module is the
thin seam between compiled descriptors and pydantic's validator.

Usage:
    >>> from schema_descriptor import transform
    >>> from schema_descriptor.infrastructure.validation import validate, is_valid
    >>> Age = transform({"type": "integer", "minimum": 0})
    >>> validate(Age, 5)
    5
    >>> is_valid(Age, -1)
    False
"""

from __future__ import annotations

from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from schema_descriptor.infrastructure.validation.types import ValidationErrorDetail
from schema_descriptor.utils.logging import bind_context


def validate(descriptor: Any, value: Any) -> Any:
    """Validate ``value`` and return the cast result.

    Raises:
        pydantic.ValidationError: If the value does not satisfy the descriptor
    """
    return TypeAdapter(descriptor).validate_python(value)


def is_valid(descriptor: Any, value: Any) -> bool:
    try:
        validate(descriptor, value)
    except ValidationError:
        return False
    return True


def collect_errors(descriptor: Any, value: Any) -> List[ValidationErrorDetail]:
    """Validate ``value`` and return its errors; empty when it is valid."""
    try:
        validate(descriptor, value)
    except ValidationError as exc:
        details = _collect_from_pydantic_error(exc)
        bind_context(error_count=len(details)).debug(
            "validation.failed", paths=[detail.path for detail in details]
        )
        return details
    return []


def _collect_from_pydantic_error(exc: ValidationError) -> List[ValidationErrorDetail]:
    """Extract error details from a pydantic ValidationError.

    Pydantic ValidationError.errors() returns dicts with:
    - loc: tuple path of the failing value (empty for the root)
    - msg: error message
    - type: error type (e.g., 'missing', 'int_type')
    - input: the input value that failed
    """
    result: List[ValidationErrorDetail] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        result.append(
            ValidationErrorDetail(
                path=".".join(str(part) for part in loc),
                error_type=str(error.get("type", "validation_error")),
                error_message=str(error.get("msg", "Validation failed")),
                original_value=error.get("input"),
            )
        )

    return result


__all__ = ["validate", "is_valid", "collect_errors"]
