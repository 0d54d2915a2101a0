"""Facet handlers, one per reserved JSON Schema kind.

Each handler receives the full schema node and the compiler (for recursion
into nested schemas and access to the format registry) and returns a
descriptor, refined by a predicate chain when any facet is present.
"""

from __future__ import annotations

import re
from collections.abc import Mapping as MappingABC
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional

from schema_descriptor.domain.exceptions import (
    InvalidSchemaError,
    MissingFormatError,
    UnsupportedSchemaError,
)
from schema_descriptor.domain.kinds import SchemaType
from schema_descriptor.infrastructure import descriptors as d
from schema_descriptor.infrastructure import predicates as p

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from schema_descriptor.domain.compiler import SchemaCompiler

Schema = Mapping[str, Any]
FacetHandler = Callable[[Schema, "SchemaCompiler"], Any]


def _numeric_bounds(schema: Schema) -> Optional[p.PredicateChain]:
    """Lower and upper bounds; each bound's exclusivity is independent."""
    predicate: Optional[p.PredicateChain] = None
    exclusive_minimum = schema.get("exclusiveMinimum")
    exclusive_maximum = schema.get("exclusiveMaximum")

    if "minimum" in schema:
        predicate = p.and_(
            predicate,
            p.lower_bound(schema["minimum"], exclusive=exclusive_minimum is True),
        )
    if "maximum" in schema:
        predicate = p.and_(
            predicate,
            p.upper_bound(schema["maximum"], exclusive=exclusive_maximum is True),
        )

    # Draft 6 spells exclusive bounds as numbers rather than flags
    if _is_number(exclusive_minimum):
        predicate = p.and_(predicate, p.lower_bound(exclusive_minimum, exclusive=True))
    if _is_number(exclusive_maximum):
        predicate = p.and_(predicate, p.upper_bound(exclusive_maximum, exclusive=True))
    return predicate


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def handle_null(schema: Schema, compiler: "SchemaCompiler") -> Any:
    return d.NULL


def handle_boolean(schema: Schema, compiler: "SchemaCompiler") -> Any:
    return d.BOOLEAN


def handle_string(schema: Schema, compiler: "SchemaCompiler") -> Any:
    if "enum" in schema:
        values = schema["enum"]
        if not isinstance(values, (list, tuple)) or not values:
            raise InvalidSchemaError(
                f"enum must be a non-empty list, got {values!r}", schema=schema
            )
        return d.enums_of(values)

    predicate: Optional[p.PredicateChain] = None
    if "minLength" in schema:
        predicate = p.and_(predicate, p.min_length(schema["minLength"]))
    if "maxLength" in schema:
        predicate = p.and_(predicate, p.max_length(schema["maxLength"]))
    if "pattern" in schema:
        try:
            pattern = re.compile(schema["pattern"])
        except (re.error, TypeError) as exc:
            raise InvalidSchemaError(
                f"Invalid pattern {schema['pattern']!r}: {exc}", schema=schema
            ) from exc
        predicate = p.and_(predicate, p.regexp(pattern))
    if "format" in schema:
        format_name = schema["format"]
        format_predicate = (
            compiler.registry.get_format(format_name)
            if isinstance(format_name, str)
            else None
        )
        if format_predicate is None:
            raise MissingFormatError(str(format_name), schema=schema)
        predicate = p.and_(predicate, p.as_predicate(format_predicate))

    return d.refine(d.STRING, predicate)


def handle_number(schema: Schema, compiler: "SchemaCompiler") -> Any:
    predicate = _numeric_bounds(schema)
    if schema.get("integer"):
        predicate = p.and_(predicate, p.as_predicate(p.is_integer))
    return d.refine(d.NUMBER, predicate)


def handle_integer(schema: Schema, compiler: "SchemaCompiler") -> Any:
    return d.refine(d.INTEGER, _numeric_bounds(schema))


def handle_object(schema: Schema, compiler: "SchemaCompiler") -> Any:
    properties = schema.get("properties") or {}
    if not isinstance(properties, MappingABC):
        raise UnsupportedSchemaError.for_schema(schema)
    if not properties:
        return d.OBJECT

    required_names = schema.get("required") or ()
    if not isinstance(required_names, (list, tuple)):
        raise InvalidSchemaError(
            f"required must be a list, got {required_names!r}", schema=schema
        )
    required = set(required_names)
    fields: Dict[str, Any] = {}
    optional: List[str] = []
    for name, property_schema in properties.items():
        descriptor = compiler.transform(property_schema)
        fields[name] = descriptor
        # Booleans are never auto-wrapped optional
        if name not in required and descriptor is not d.BOOLEAN:
            optional.append(name)

    return d.struct(fields, name=schema.get("description"), optional=optional)


def handle_array(schema: Schema, compiler: "SchemaCompiler") -> Any:
    if "items" in schema:
        items = schema["items"]
        if isinstance(items, MappingABC):
            return d.list_of(compiler.transform(items))
        if isinstance(items, (list, tuple)):
            return d.tuple_of([compiler.transform(item) for item in items])
        raise UnsupportedSchemaError.for_schema(schema)

    predicate: Optional[p.PredicateChain] = None
    if "minItems" in schema:
        predicate = p.and_(predicate, p.min_length(schema["minItems"]))
    if "maxItems" in schema:
        predicate = p.and_(predicate, p.max_length(schema["maxItems"]))
    return d.refine(d.ARRAY, predicate)


FACET_HANDLERS: Dict[SchemaType, FacetHandler] = {
    SchemaType.NULL: handle_null,
    SchemaType.STRING: handle_string,
    SchemaType.NUMBER: handle_number,
    SchemaType.INTEGER: handle_integer,
    SchemaType.BOOLEAN: handle_boolean,
    SchemaType.OBJECT: handle_object,
    SchemaType.ARRAY: handle_array,
}


__all__ = [
    "FacetHandler",
    "FACET_HANDLERS",
    "handle_null",
    "handle_string",
    "handle_number",
    "handle_integer",
    "handle_boolean",
    "handle_object",
    "handle_array",
]
