"""Unit tests for SchemaRegistry and the module-level registration API."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from schema_descriptor import (
    DuplicateFormatError,
    DuplicateTypeError,
    FormatConfigError,
    RegistrationError,
    ReservedTypeNameError,
    transform,
    is_valid,
)
from schema_descriptor.domain import registry as registry_module
from schema_descriptor.domain.kinds import RESERVED_TYPE_NAMES
from schema_descriptor.domain.registry import (
    SchemaRegistry,
    get_schema_registry,
    register_format,
    register_type,
    reset_formats,
    reset_types,
)
from schema_descriptor.infrastructure import descriptors as d
from schema_descriptor.infrastructure.predicates import is_email


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "formats.yml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.unit
class TestFormatRegistration:
    def test_register_and_lookup(self, registry: SchemaRegistry) -> None:
        registry.register_format("upper", str.isupper)

        assert registry.has_format("upper")
        assert registry.get_format("upper") is str.isupper
        assert registry.get_format("lower") is None
        assert registry.list_formats() == ["upper"]

    def test_duplicate_custom_format_is_rejected(self, registry: SchemaRegistry) -> None:
        registry.register_format("upper", str.isupper)

        with pytest.raises(DuplicateFormatError, match="Duplicated format upper") as exc_info:
            registry.register_format("upper", str.islower)

        assert exc_info.value.name == "upper"
        assert registry.get_format("upper") is str.isupper

    def test_email_may_be_registered_twice(self, registry: SchemaRegistry) -> None:
        def strict_email(value: str) -> bool:
            return value.count("@") == 1

        registry.register_format("email", is_email)
        registry.register_format("email", strict_email)

        assert registry.get_format("email") is strict_email

    def test_non_callable_predicate_is_rejected(self, registry: SchemaRegistry) -> None:
        with pytest.raises(RegistrationError):
            registry.register_format("upper", "^[A-Z]+$")
        assert not registry.has_format("upper")

    def test_reset_forgets_formats(self, registry: SchemaRegistry) -> None:
        registry.register_format("upper", str.isupper)
        registry.reset_formats()

        assert registry.list_formats() == []
        registry.register_format("upper", str.islower)
        assert registry.get_format("upper") is str.islower

    def test_ensure_email_only_fills_a_gap(self, registry: SchemaRegistry) -> None:
        registry.ensure_email_format()
        assert registry.get_format("email") is is_email

        def other(value: str) -> bool:
            return True

        registry.register_format("email", other)
        registry.ensure_email_format()
        assert registry.get_format("email") is other

    def test_registration_is_logged(
        self, registry: SchemaRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="schema_descriptor")

        registry.register_format("upper", str.isupper)

        payload = json.loads(caplog.records[-1].message)
        assert payload["event"] == "registry.format_registered"
        assert payload["format"] == "upper"


@pytest.mark.unit
class TestTypeRegistration:
    def test_register_and_lookup(self, registry: SchemaRegistry) -> None:
        registry.register_type("label", d.STRING)

        assert registry.has_type("label")
        assert registry.get_type("label") is d.STRING
        assert registry.list_types() == ["label"]
        assert not registry.has_type(["label"])

    @pytest.mark.parametrize("name", sorted(RESERVED_TYPE_NAMES))
    def test_reserved_names_are_rejected(self, registry: SchemaRegistry, name: str) -> None:
        with pytest.raises(ReservedTypeNameError, match=f"Reserved type {name}"):
            registry.register_type(name, d.STRING)
        assert not registry.has_type(name)

    def test_duplicate_type_is_rejected(self, registry: SchemaRegistry) -> None:
        registry.register_type("label", d.STRING)

        with pytest.raises(DuplicateTypeError, match="Duplicated type label"):
            registry.register_type("label", d.INTEGER)
        assert registry.get_type("label") is d.STRING

    def test_reset_allows_reregistration(self, registry: SchemaRegistry) -> None:
        registry.register_type("label", d.STRING)
        registry.reset_types()

        assert registry.list_types() == []
        registry.register_type("label", d.INTEGER)
        assert registry.get_type("label") is d.INTEGER

    def test_registration_errors_share_a_base(self) -> None:
        assert issubclass(DuplicateTypeError, RegistrationError)
        assert issubclass(ReservedTypeNameError, RegistrationError)
        assert issubclass(DuplicateFormatError, RegistrationError)


@pytest.mark.unit
def test_statistics(registry: SchemaRegistry) -> None:
    assert registry.get_statistics() == {"total_formats": 0, "total_types": 0}

    registry.register_format("upper", str.isupper)
    registry.register_type("label", d.STRING)
    registry.register_type("count", d.INTEGER)

    assert registry.get_statistics() == {"total_formats": 1, "total_types": 2}


@pytest.mark.unit
class TestLoadFormats:
    def test_loads_pattern_formats(
        self, registry: SchemaRegistry, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        path = _write(
            tmp_path,
            'formats:\n  zip-code:\n    pattern: "^[0-9]{5}$"\n  slug:\n    pattern: "^[a-z-]+$"\n',
        )

        loaded = registry.load_formats(path)

        assert loaded == ["zip-code", "slug"]
        predicate = registry.get_format("zip-code")
        assert predicate("12345")
        assert not predicate("1234")
        assert not predicate(12345)

        payload = json.loads(caplog.records[-1].message)
        assert payload["event"] == "registry.formats_loaded"
        assert payload["formats"] == ["zip-code", "slug"]

    def test_loaded_format_is_usable_in_schemas(
        self, registry: SchemaRegistry, tmp_path: Path
    ) -> None:
        registry.load_formats(_write(tmp_path, 'formats:\n  zip-code:\n    pattern: "^[0-9]{5}$"\n'))

        descriptor = transform({"type": "string", "format": "zip-code"}, registry)

        assert is_valid(descriptor, "90210")
        assert not is_valid(descriptor, "9021")

    def test_empty_file_loads_nothing(self, registry: SchemaRegistry, tmp_path: Path) -> None:
        assert registry.load_formats(_write(tmp_path, "")) == []

    def test_missing_file(self, registry: SchemaRegistry, tmp_path: Path) -> None:
        with pytest.raises(FormatConfigError, match="not found"):
            registry.load_formats(tmp_path / "absent.yml")

    def test_invalid_yaml(self, registry: SchemaRegistry, tmp_path: Path) -> None:
        with pytest.raises(FormatConfigError, match="Invalid YAML"):
            registry.load_formats(_write(tmp_path, "formats: [unclosed\n"))

    def test_top_level_must_be_mapping(self, registry: SchemaRegistry, tmp_path: Path) -> None:
        with pytest.raises(FormatConfigError, match="must be a mapping"):
            registry.load_formats(_write(tmp_path, "- zip-code\n"))

    def test_entry_without_pattern(self, registry: SchemaRegistry, tmp_path: Path) -> None:
        with pytest.raises(FormatConfigError) as exc_info:
            registry.load_formats(_write(tmp_path, "formats:\n  zip-code:\n    regex: x\n"))
        assert exc_info.value.name == "zip-code"

    def test_invalid_pattern(self, registry: SchemaRegistry, tmp_path: Path) -> None:
        with pytest.raises(FormatConfigError, match="invalid pattern"):
            registry.load_formats(_write(tmp_path, 'formats:\n  broken:\n    pattern: "("\n'))
        assert not registry.has_format("broken")

    def test_duplicate_against_existing_format(
        self, registry: SchemaRegistry, tmp_path: Path
    ) -> None:
        registry.register_format("zip-code", str.isdigit)

        with pytest.raises(DuplicateFormatError):
            registry.load_formats(_write(tmp_path, 'formats:\n  zip-code:\n    pattern: "x"\n'))


@pytest.mark.unit
class TestDefaultRegistry:
    def test_module_functions_share_the_default(self) -> None:
        register_format("upper", str.isupper)
        register_type("label", d.STRING)

        default = get_schema_registry()
        assert default.has_format("upper")
        assert default.has_type("label")

        reset_formats()
        reset_types()
        assert default.get_statistics() == {"total_formats": 0, "total_types": 0}

    def test_default_is_created_lazily_with_configured_formats(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        path = _write(tmp_path, 'formats:\n  zip-code:\n    pattern: "^[0-9]{5}$"\n')
        monkeypatch.setenv("SDESC_FORMATS_CONFIG", str(path))
        monkeypatch.setattr(registry_module, "_default_registry", None)

        default = get_schema_registry()

        assert default.list_formats() == ["zip-code"]
        assert get_schema_registry() is default

    def test_default_without_configuration_is_empty(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("SDESC_FORMATS_CONFIG", raising=False)
        monkeypatch.setattr(registry_module, "_default_registry", None)

        assert get_schema_registry().get_statistics() == {
            "total_formats": 0,
            "total_types": 0,
        }
