"""Reserved JSON Schema primitive kinds."""

from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, Optional


class SchemaType(Enum):
    """The seven primitive kinds a schema ``type`` may name."""

    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def parse(cls, value: Any) -> Optional["SchemaType"]:
        """Return the kind named by ``value``, or None if it is not reserved."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


RESERVED_TYPE_NAMES: FrozenSet[str] = frozenset(kind.value for kind in SchemaType)


def is_reserved(name: Any) -> bool:
    return SchemaType.parse(name) is not None


__all__ = ["SchemaType", "RESERVED_TYPE_NAMES", "is_reserved"]
