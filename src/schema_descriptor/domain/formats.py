"""Built-in formats that produce a dedicated descriptor.

These formats bypass the generic ``string`` facets entirely: the compiler
returns the format's own descriptor instead of a refined string. They live
outside the extensible format table, so ``reset_formats()`` never removes
them.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from schema_descriptor.infrastructure import descriptors as d

DescriptorBuilder = Callable[[Mapping[str, Any]], Any]


def build_date_time(schema: Mapping[str, Any]) -> Any:
    return d.DATE_TIME


DESCRIPTOR_FORMATS: Dict[str, DescriptorBuilder] = {
    "date-time": build_date_time,
}


def get_descriptor_format(name: Any) -> Optional[DescriptorBuilder]:
    if not isinstance(name, str):
        return None
    return DESCRIPTOR_FORMATS.get(name)


__all__ = ["DESCRIPTOR_FORMATS", "DescriptorBuilder", "get_descriptor_format"]
