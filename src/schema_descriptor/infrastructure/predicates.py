"""Predicate composition on top of ``annotated_types`` comparators.

A predicate chain is a tuple of ``annotated_types`` constraints that pydantic
applies in order. Length and numeric bounds map onto the native comparators
(``MinLen``, ``MaxLen``, ``Ge``, ``Gt``, ``Le``, ``Lt``); anything else is a
plain callable wrapped in ``annotated_types.Predicate``.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Tuple

import annotated_types as at

PredicateChain = Tuple[Any, ...]

EMAIL_REGEX = re.compile(r"(.)+@(.)+")


def and_(existing: Optional[PredicateChain], new: Any) -> PredicateChain:
    """Append ``new`` to the chain, keeping left-to-right order."""
    if existing is None:
        return (new,)
    return (*existing, new)


def as_predicate(func: Callable[[Any], Any]) -> at.Predicate:
    """Wrap a value-classifying callable as a constraint."""
    if isinstance(func, at.Predicate):
        return func
    return at.Predicate(func)


def min_length(n: int) -> at.MinLen:
    return at.MinLen(n)


def max_length(n: int) -> at.MaxLen:
    return at.MaxLen(n)


def lower_bound(value: Any, exclusive: bool = False) -> Any:
    return at.Gt(value) if exclusive else at.Ge(value)


def upper_bound(value: Any, exclusive: bool = False) -> Any:
    return at.Lt(value) if exclusive else at.Le(value)


def regexp(pattern: "re.Pattern[str]") -> at.Predicate:
    """Match anywhere in the string, like JSON Schema ``pattern``."""

    def matches_pattern(value: str) -> bool:
        return pattern.search(value) is not None

    matches_pattern.__qualname__ = f"matches_pattern({pattern.pattern!r})"
    return at.Predicate(matches_pattern)


def is_integer(value: Any) -> bool:
    """True for integral numbers (3 and 3.0, not 3.5)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_REGEX.search(value) is not None


__all__ = [
    "PredicateChain",
    "and_",
    "as_predicate",
    "min_length",
    "max_length",
    "lower_bound",
    "upper_bound",
    "regexp",
    "is_integer",
    "is_email",
]
