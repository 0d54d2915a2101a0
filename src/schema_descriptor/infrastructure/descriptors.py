"""Type descriptors built on pydantic and the ``typing`` constructs it validates.

A descriptor is anything ``pydantic.TypeAdapter`` accepts. This module owns
the base descriptors (one per reserved kind plus the universal ``ANY``) and
the constructors used to wrap and refine them. The compiler never looks
inside a descriptor; the only identity check it performs is against
``BOOLEAN``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import Strict
from typing_extensions import Annotated, Literal, NotRequired, TypedDict

from schema_descriptor.infrastructure.predicates import PredicateChain

# Base descriptors. Primitives are strict so JSON kinds do not coerce into
# each other ("1" is not an integer, 1 is not a boolean).
ANY: Any = Any
NULL: Any = None
STRING: Any = Annotated[str, Strict()]
NUMBER: Any = Annotated[float, Strict()]
INTEGER: Any = Annotated[int, Strict()]
BOOLEAN: Any = Annotated[bool, Strict()]
OBJECT: Any = Dict[str, Any]
ARRAY: Any = List[Any]

# Dedicated "parses to a valid date" descriptor for the date-time format.
# Lax on purpose: ISO-8601 strings, timestamps and datetime objects are cast
# to ``datetime``.
DATE_TIME: Any = datetime

DEFAULT_STRUCT_NAME = "Struct"


def refine(base: Any, predicate: Optional[PredicateChain]) -> Any:
    """Refine ``base`` by a predicate chain; return it unchanged if empty."""
    if not predicate:
        return base
    return Annotated[(base, *predicate)]


def maybe(descriptor: Any) -> Any:
    return Optional[descriptor]


def list_of(descriptor: Any) -> Any:
    return List[descriptor]


def tuple_of(descriptors: Sequence[Any]) -> Any:
    if not descriptors:
        return Tuple[()]
    return Tuple[tuple(descriptors)]


def union_of(descriptors: Sequence[Any]) -> Any:
    return Union[tuple(descriptors)]


def enums_of(values: Sequence[Any]) -> Any:
    return Literal[tuple(values)]


def struct(
    fields: Mapping[str, Any],
    name: Optional[str] = None,
    optional: Sequence[str] = (),
) -> Any:
    """Build a structured descriptor validating mapping-shaped values.

    Args:
        fields: Field name to descriptor
        name: Human label for the structure (not semantically load-bearing)
        optional: Field names that may be absent or None

    Returns:
        A ``TypedDict`` class; validated values stay plain dicts.
    """
    optional_names = set(optional)
    annotations: Dict[str, Any] = {}
    for field_name, descriptor in fields.items():
        if field_name in optional_names:
            annotations[field_name] = NotRequired[maybe(descriptor)]
        else:
            annotations[field_name] = descriptor
    return TypedDict(name or DEFAULT_STRUCT_NAME, annotations)


__all__ = [
    "ANY",
    "NULL",
    "STRING",
    "NUMBER",
    "INTEGER",
    "BOOLEAN",
    "OBJECT",
    "ARRAY",
    "DATE_TIME",
    "refine",
    "maybe",
    "list_of",
    "tuple_of",
    "union_of",
    "enums_of",
    "struct",
]
