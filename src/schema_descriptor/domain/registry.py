"""
Format and custom-type registries consulted by the schema compiler.

A ``SchemaRegistry`` is an explicit, caller-owned object holding two tables:

- formats: format name -> value-classifying predicate, consulted by the
  ``string`` facet's ``format`` keyword
- types: custom type name -> prebuilt descriptor, substituted verbatim when a
  schema ``type`` names it

A process default instance backs the module-level ``register_format`` /
``reset_formats`` / ``register_type`` / ``reset_types`` functions. Registries
are not locked: concurrent mutation must be serialized by the caller.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml

from schema_descriptor.config import get_settings
from schema_descriptor.domain.exceptions import (
    DuplicateFormatError,
    DuplicateTypeError,
    FormatConfigError,
    RegistrationError,
    ReservedTypeNameError,
)
from schema_descriptor.domain.kinds import is_reserved
from schema_descriptor.infrastructure.predicates import is_email
from schema_descriptor.utils.logging import get_logger

logger = get_logger(__name__)

FormatPredicate = Callable[[Any], Any]

# The only format name whose re-registration replaces instead of failing
EMAIL_FORMAT = "email"


class SchemaRegistry:
    """Format and custom-type tables for one compiler configuration."""

    def __init__(self) -> None:
        self._formats: Dict[str, FormatPredicate] = {}
        self._types: Dict[str, Any] = {}

    # --- Formats ---------------------------------------------------------------
    def register_format(self, name: str, predicate: FormatPredicate) -> None:
        """
        Register a named string format.

        Args:
            name: Format name referenced by a schema's ``format`` keyword
            predicate: Callable classifying candidate strings

        Raises:
            RegistrationError: If predicate is not callable
            DuplicateFormatError: If name is taken (``email`` is replaced instead)
        """
        if not callable(predicate):
            raise RegistrationError(
                f"Format {name} must have a callable predicate", name=name
            )
        if name in self._formats:
            if name != EMAIL_FORMAT:
                raise DuplicateFormatError(f"Duplicated format {name}", name=name)
            logger.debug("registry.format_replaced", format=name)

        self._formats[name] = predicate
        logger.debug("registry.format_registered", format=name)

    def ensure_email_format(self) -> None:
        """Register the built-in email predicate unless one is already present."""
        if not self.has_format(EMAIL_FORMAT):
            self.register_format(EMAIL_FORMAT, is_email)

    def reset_formats(self) -> None:
        self._formats = {}
        logger.debug("registry.formats_reset")

    def get_format(self, name: str) -> Optional[FormatPredicate]:
        return self._formats.get(name)

    def has_format(self, name: str) -> bool:
        return name in self._formats

    def list_formats(self) -> List[str]:
        return sorted(self._formats.keys())

    def load_formats(self, path: Union[str, Path]) -> List[str]:
        """
        Register pattern formats declared in a YAML file.

        Expected layout::

            formats:
              zip-code:
                pattern: "^[0-9]{5}$"

        Args:
            path: YAML file location

        Returns:
            Names of the formats registered, in file order

        Raises:
            FormatConfigError: If the file is missing, unreadable or malformed
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FormatConfigError(f"Format configuration not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as handle:
                parsed = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise FormatConfigError(
                f"Invalid YAML in format configuration {config_path}: {exc}"
            ) from exc

        if not isinstance(parsed, dict):
            raise FormatConfigError(
                f"Format configuration {config_path} must be a mapping"
            )
        formats = parsed.get("formats") or {}
        if not isinstance(formats, dict):
            raise FormatConfigError("'formats' section must be a mapping")

        loaded: List[str] = []
        for name, entry in formats.items():
            if not isinstance(entry, dict) or not isinstance(entry.get("pattern"), str):
                raise FormatConfigError(
                    f"Format '{name}' must declare a string 'pattern'", name=str(name)
                )
            try:
                compiled = re.compile(entry["pattern"])
            except re.error as exc:
                raise FormatConfigError(
                    f"Format '{name}' has an invalid pattern: {exc}", name=str(name)
                ) from exc
            self.register_format(str(name), _pattern_predicate(compiled))
            loaded.append(str(name))

        logger.info(
            "registry.formats_loaded",
            config_path=str(config_path),
            formats=loaded,
        )
        return loaded

    # --- Custom types ----------------------------------------------------------
    def register_type(self, name: str, descriptor: Any) -> None:
        """
        Register a prebuilt descriptor under a custom type name.

        Raises:
            ReservedTypeNameError: If name is one of the seven reserved kinds
            DuplicateTypeError: If name is already registered
        """
        if is_reserved(name):
            raise ReservedTypeNameError(f"Reserved type {name}", name=name)
        if name in self._types:
            raise DuplicateTypeError(f"Duplicated type {name}", name=name)

        self._types[name] = descriptor
        logger.debug("registry.type_registered", type_name=name)

    def reset_types(self) -> None:
        self._types = {}
        logger.debug("registry.types_reset")

    def get_type(self, name: str) -> Any:
        return self._types.get(name)

    def has_type(self, name: Any) -> bool:
        return isinstance(name, str) and name in self._types

    def list_types(self) -> List[str]:
        return sorted(self._types.keys())

    def get_statistics(self) -> Dict[str, Any]:
        """Return registry statistics."""
        return {
            "total_formats": len(self._formats),
            "total_types": len(self._types),
        }


def _pattern_predicate(pattern: "re.Pattern[str]") -> FormatPredicate:
    def matches_format(value: Any) -> bool:
        return isinstance(value, str) and pattern.search(value) is not None

    return matches_format


# Process default instance, created lazily
_default_registry: Optional[SchemaRegistry] = None


def get_schema_registry() -> SchemaRegistry:
    """Return the process default registry, creating it on first use.

    If ``formats_config`` is configured, its formats are pre-loaded.
    """
    global _default_registry
    if _default_registry is None:
        registry = SchemaRegistry()
        formats_config = get_settings().formats_config
        if formats_config:
            registry.load_formats(formats_config)
        _default_registry = registry
    return _default_registry


def register_format(name: str, predicate: FormatPredicate) -> None:
    get_schema_registry().register_format(name, predicate)


def reset_formats() -> None:
    get_schema_registry().reset_formats()


def register_type(name: str, descriptor: Any) -> None:
    get_schema_registry().register_type(name, descriptor)


def reset_types() -> None:
    get_schema_registry().reset_types()


__all__ = [
    "SchemaRegistry",
    "FormatPredicate",
    "EMAIL_FORMAT",
    "get_schema_registry",
    "register_format",
    "reset_formats",
    "register_type",
    "reset_types",
]
