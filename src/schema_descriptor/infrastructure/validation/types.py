"""Validation types shared by the descriptor validation adapter.

ValidationErrorDetail gives pydantic's per-location error dicts a stable,
structured shape so callers do not depend on pydantic's error layout.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class ValidationErrorDetail:
    """Structured validation error for consistent handling.

    Attributes:
        path: Dotted location of the failing value ("" for the root value)
        error_type: Pydantic error type (e.g., 'string_too_short', 'missing')
        error_message: Human-readable error description
        original_value: Raw value that failed validation

    Example:
        >>> error = ValidationErrorDetail(
        ...     path='age',
        ...     error_type='greater_than_equal',
        ...     error_message='Input should be greater than or equal to 0',
        ...     original_value=-1
        ... )
    """

    path: str
    error_type: str
    error_message: str
    original_value: Any


__all__ = ["ValidationErrorDetail"]
