"""schema-descriptor: compile JSON Schema into composable pydantic type descriptors.

Usage:
    >>> from schema_descriptor import transform, validate
    >>> Person = transform({
    ...     "type": "object",
    ...     "properties": {
    ...         "name": {"type": "string"},
    ...         "age": {"type": "integer", "minimum": 0},
    ...     },
    ...     "required": ["name"],
    ... })
    >>> validate(Person, {"name": "A"})
    {'name': 'A'}

Extension API (operates on the default registry):
    register_format(name, predicate) / reset_formats()
    register_type(name, descriptor) / reset_types()

For isolated configurations, build a ``SchemaRegistry`` and pass it to
``SchemaCompiler`` or ``transform(schema, registry)``.
"""

from schema_descriptor.domain import (
    RESERVED_TYPE_NAMES,
    DuplicateFormatError,
    DuplicateTypeError,
    FormatConfigError,
    InvalidSchemaError,
    MissingFormatError,
    RegistrationError,
    ReservedTypeNameError,
    SchemaCompilationError,
    SchemaCompiler,
    SchemaDescriptorError,
    SchemaRegistry,
    SchemaType,
    UnsupportedSchemaError,
    get_schema_registry,
    register_format,
    register_type,
    reset_formats,
    reset_types,
    transform,
)
from schema_descriptor.infrastructure.validation import (
    ValidationErrorDetail,
    collect_errors,
    is_valid,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "transform",
    "SchemaCompiler",
    "SchemaRegistry",
    "SchemaType",
    "RESERVED_TYPE_NAMES",
    "get_schema_registry",
    "register_format",
    "reset_formats",
    "register_type",
    "reset_types",
    "validate",
    "is_valid",
    "collect_errors",
    "ValidationErrorDetail",
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
