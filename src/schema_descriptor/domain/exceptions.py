"""Exceptions raised while compiling schemas or mutating registries.

Two families exist:
- SchemaCompilationError: the schema handed to ``transform`` cannot be
  compiled (bad shape, unknown type, missing format).
- RegistrationError: a setup-time programmer error in the extension API
  (duplicate names, reserved names, broken format configuration).

Every failure is a hard stop for the current call; no partial descriptor
is ever returned.
"""

from __future__ import annotations

import json
from typing import Any, Optional


def _stringify(schema: Any) -> str:
    try:
        return json.dumps(schema, default=repr, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(schema)


class SchemaDescriptorError(Exception):
    """Base exception for schema-descriptor failures."""


class SchemaCompilationError(SchemaDescriptorError):
    """Raised when a schema node cannot be compiled.

    Attributes:
        schema: The offending schema node, kept for diagnostics
    """

    def __init__(self, message: str, *, schema: Any = None) -> None:
        super().__init__(message)
        self.schema = schema


class InvalidSchemaError(SchemaCompilationError):
    """Raised when a schema node has an invalid shape (e.g. not a mapping)."""


class UnsupportedSchemaError(SchemaCompilationError):
    """Raised when a schema node matches no reserved kind or custom type.

    Example:
        >>> raise UnsupportedSchemaError.for_schema({"type": "unknown"})
    """

    @classmethod
    def for_schema(cls, schema: Any) -> "UnsupportedSchemaError":
        return cls(f"Unsupported json schema {_stringify(schema)}", schema=schema)


class MissingFormatError(SchemaCompilationError):
    """Raised when a string schema references an unregistered format.

    This is a configuration error, not a data error: register the format
    with ``register_format(name, predicate)`` before compiling.
    """

    def __init__(self, format_name: str, *, schema: Any = None) -> None:
        super().__init__(
            f"Missing format {format_name}, use the "
            "register_format(name, predicate) API",
            schema=schema,
        )
        self.format_name = format_name


class RegistrationError(SchemaDescriptorError):
    """Raised when a registry operation is rejected."""

    def __init__(self, message: str, *, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.name = name


class DuplicateFormatError(RegistrationError):
    """Raised when a format name is registered twice."""


class DuplicateTypeError(RegistrationError):
    """Raised when a custom type name is registered twice."""


class ReservedTypeNameError(RegistrationError):
    """Raised when a custom type name collides with a reserved kind."""


class FormatConfigError(RegistrationError):
    """Raised when a YAML format configuration cannot be loaded."""


__all__ = [
    "SchemaDescriptorError",
    "SchemaCompilationError",
    "InvalidSchemaError",
    "UnsupportedSchemaError",
    "MissingFormatError",
    "RegistrationError",
    "DuplicateFormatError",
    "DuplicateTypeError",
    "ReservedTypeNameError",
    "FormatConfigError",
]
