"""Schema compilation domain: kinds, facet handlers, registries and the compiler."""

from .compiler import SchemaCompiler, transform
from .exceptions import (
    DuplicateFormatError,
    DuplicateTypeError,
    FormatConfigError,
    InvalidSchemaError,
    MissingFormatError,
    RegistrationError,
    ReservedTypeNameError,
    SchemaCompilationError,
    SchemaDescriptorError,
    UnsupportedSchemaError,
)
from .kinds import RESERVED_TYPE_NAMES, SchemaType
from .registry import (
    SchemaRegistry,
    get_schema_registry,
    register_format,
    register_type,
    reset_formats,
    reset_types,
)

__all__ = [
    "SchemaCompiler",
    "transform",
    "SchemaType",
    "RESERVED_TYPE_NAMES",
    "SchemaRegistry",
    "get_schema_registry",
    "register_format",
    "reset_formats",
    "register_type",
    "reset_types",
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
