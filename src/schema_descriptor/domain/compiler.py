"""
Recursive JSON Schema compiler.

Maps an already-parsed, fully-resolved schema node onto a type descriptor:

- no ``type``: the universal ``Any`` descriptor
- a reserved kind: the kind's facet handler (``string`` nodes carrying a
  descriptor-producing ``format`` such as ``date-time`` short-circuit to that
  format's descriptor)
- a list of kinds: the union of each kind's handler applied to the same node
- a registered custom type name: the registered descriptor, verbatim
- anything else: ``UnsupportedSchemaError``

Compilation is deterministic for a fixed registry state and never mutates the
input schema.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Any, List, Mapping, Optional

from schema_descriptor.domain.exceptions import (
    InvalidSchemaError,
    UnsupportedSchemaError,
)
from schema_descriptor.domain.facets import FACET_HANDLERS
from schema_descriptor.domain.formats import get_descriptor_format
from schema_descriptor.domain.kinds import SchemaType
from schema_descriptor.domain.registry import (
    EMAIL_FORMAT,
    SchemaRegistry,
    get_schema_registry,
)
from schema_descriptor.infrastructure import descriptors as d
from schema_descriptor.utils.logging import get_logger

logger = get_logger(__name__)


class SchemaCompiler:
    """Compile schema nodes against one registry.

    Example:
        >>> compiler = SchemaCompiler(SchemaRegistry())
        >>> Person = compiler.transform({
        ...     "type": "object",
        ...     "properties": {"name": {"type": "string"}},
        ...     "required": ["name"],
        ... })
    """

    def __init__(self, registry: Optional[SchemaRegistry] = None) -> None:
        self.registry = registry if registry is not None else get_schema_registry()

    def transform(self, schema: Mapping[str, Any]) -> Any:
        if not isinstance(schema, MappingABC):
            raise InvalidSchemaError(
                f"Schema must be a mapping, got {type(schema).__name__}",
                schema=schema,
            )
        if "type" not in schema:
            return d.ANY

        schema_type = schema["type"]
        kind = SchemaType.parse(schema_type)
        if kind is not None:
            return self._compile_kind(kind, schema)

        if isinstance(schema_type, list):
            return self._compile_union(schema_type, schema)

        if self.registry.has_type(schema_type):
            logger.debug("compiler.custom_type", type_name=schema_type)
            return self.registry.get_type(schema_type)

        raise UnsupportedSchemaError.for_schema(schema)

    def _compile_kind(self, kind: SchemaType, schema: Mapping[str, Any]) -> Any:
        if kind is SchemaType.STRING and "format" in schema:
            format_name = schema["format"]
            if format_name == EMAIL_FORMAT:
                self.registry.ensure_email_format()
            builder = get_descriptor_format(format_name)
            if builder is not None:
                logger.debug("compiler.compiled", kind=kind.value, format=format_name)
                return builder(schema)

        descriptor = FACET_HANDLERS[kind](schema, self)
        logger.debug("compiler.compiled", kind=kind.value)
        return descriptor

    def _compile_union(self, type_names: List[Any], schema: Mapping[str, Any]) -> Any:
        kinds = [SchemaType.parse(name) for name in type_names]
        if not kinds or any(kind is None for kind in kinds):
            raise UnsupportedSchemaError.for_schema(schema)

        members = [FACET_HANDLERS[kind](schema, self) for kind in kinds]
        logger.debug("compiler.compiled", kind=[kind.value for kind in kinds])
        return d.union_of(members)


def transform(
    schema: Mapping[str, Any], registry: Optional[SchemaRegistry] = None
) -> Any:
    """Compile ``schema`` against ``registry`` (the default registry if omitted)."""
    return SchemaCompiler(registry).transform(schema)


__all__ = ["SchemaCompiler", "transform"]
