"""Pytest configuration and shared fixtures.

Every test runs against a fresh default registry so registrations made through
the module-level API never leak between tests.
"""

from __future__ import annotations

from typing import Generator

import pytest

from schema_descriptor.config import get_settings
from schema_descriptor.domain import registry as registry_module
from schema_descriptor.domain.compiler import SchemaCompiler
from schema_descriptor.domain.registry import SchemaRegistry


@pytest.fixture(autouse=True)
def isolated_default_registry(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[SchemaRegistry, None, None]:
    """Replace the process default registry for the duration of a test."""
    fresh = SchemaRegistry()
    monkeypatch.setattr(registry_module, "_default_registry", fresh)
    yield fresh


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> SchemaRegistry:
    """A caller-owned registry, independent of the default one."""
    return SchemaRegistry()


@pytest.fixture
def compiler(registry: SchemaRegistry) -> SchemaCompiler:
    return SchemaCompiler(registry)
