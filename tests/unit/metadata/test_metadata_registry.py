"""Unit tests for MetadataRegistry."""

from __future__ import annotations

import logging

import pytest

from rehydrate.exceptions import SkipConverterConflictError
from rehydrate.metadata.models import FieldMetadata
from rehydrate.metadata.registry import MetadataRegistry, get_default_registry

# -------- Model types used as registry keys --------


class User:
    pass


class Admin(User):
    pass


class Product:
    pass


# ------------------------- Tests -------------------------


class TestMetadataRegistry:
    @pytest.fixture
    def registry(self) -> MetadataRegistry:
        return MetadataRegistry()

    # --- register & lookup ---

    def test_lookup_missing_field_returns_none(self, registry: MetadataRegistry) -> None:
        assert registry.lookup(User, "name") is None
        assert len(registry) == 0

    def test_register_and_lookup(self, registry: MetadataRegistry) -> None:
        meta = FieldMetadata(target_type=Product)
        registry.register(User, "favourite", meta)

        assert registry.lookup(User, "favourite") is meta
        assert (User, "favourite") in registry
        assert len(registry) == 1

    def test_metadata_is_keyed_by_type_and_field(self, registry: MetadataRegistry) -> None:
        user_meta = FieldMetadata(target_type=Product)
        product_meta = FieldMetadata(skip=True)
        registry.register(User, "data", user_meta)
        registry.register(Product, "data", product_meta)

        assert registry.lookup(User, "data") is user_meta
        assert registry.lookup(Product, "data") is product_meta

    def test_redeclaration_last_write_wins(
        self, registry: MetadataRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        registry.register(User, "data", FieldMetadata(target_type=Product))
        replacement = FieldMetadata(skip=True)

        with caplog.at_level(logging.WARNING):
            registry.register(User, "data", replacement)

        assert registry.lookup(User, "data") is replacement
        assert len(registry) == 1
        assert "Overwriting metadata for User.data" in caplog.text

    def test_skip_with_converters_conflicts(self, registry: MetadataRegistry) -> None:
        meta = FieldMetadata(skip=True, converters={"string": str})

        with pytest.raises(SkipConverterConflictError, match=r"User\.raw"):
            registry.register(User, "raw", meta)
        assert registry.lookup(User, "raw") is None

    def test_register_rejects_non_class(self, registry: MetadataRegistry) -> None:
        with pytest.raises(ValueError, match="must be a class"):
            registry.register(User(), "name", FieldMetadata())

    def test_register_rejects_empty_field(self, registry: MetadataRegistry) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            registry.register(User, "", FieldMetadata())

    # --- update ---

    def test_update_merges_declarations(self, registry: MetadataRegistry) -> None:
        registry.update(User, "joined", target_type=Product)
        merged = registry.update(User, "joined", converters={"number": int})

        assert merged.target_type is Product
        assert merged.converter_for("number") is int
        assert registry.lookup(User, "joined") is merged

    def test_update_detects_conflict_in_either_order(
        self, registry: MetadataRegistry
    ) -> None:
        registry.update(User, "a", skip=True)
        with pytest.raises(SkipConverterConflictError):
            registry.update(User, "a", converters={"string": str})

        registry.update(User, "b", converters={"string": str})
        with pytest.raises(SkipConverterConflictError):
            registry.update(User, "b", skip=True)

    # --- inheritance ---

    def test_subclass_inherits_base_metadata(self, registry: MetadataRegistry) -> None:
        meta = FieldMetadata(target_type=Product)
        registry.register(User, "favourite", meta)

        assert registry.lookup(Admin, "favourite") is meta
        assert (Admin, "favourite") in registry

    def test_subclass_redeclaration_shadows_base(self, registry: MetadataRegistry) -> None:
        registry.register(User, "favourite", FieldMetadata(target_type=Product))
        override = FieldMetadata(skip=True)
        registry.register(Admin, "favourite", override)

        assert registry.lookup(Admin, "favourite") is override
        assert registry.lookup(User, "favourite").target_type is Product

    def test_update_does_not_copy_inherited_entry(self, registry: MetadataRegistry) -> None:
        registry.register(User, "favourite", FieldMetadata(target_type=Product))
        merged = registry.update(Admin, "favourite", is_array=True)

        assert merged.target_type is None
        assert merged.is_array is True

    def test_fields_of_includes_inherited(self, registry: MetadataRegistry) -> None:
        registry.register(User, "favourite", FieldMetadata(target_type=Product))
        registry.register(Admin, "grants", FieldMetadata(is_array=True))

        assert set(registry.fields_of(Admin)) == {"favourite", "grants"}
        assert set(registry.fields_of(User)) == {"favourite"}

    # --- housekeeping ---

    def test_iteration_and_clear(self, registry: MetadataRegistry) -> None:
        registry.register(User, "a", FieldMetadata())
        registry.register(Product, "b", FieldMetadata())

        assert {(t, f) for t, f, _ in registry} == {(User, "a"), (Product, "b")}
        assert set(registry.model_types()) == {User, Product}

        registry.clear()
        assert len(registry) == 0
        assert registry.lookup(User, "a") is None


def test_default_registry_is_shared() -> None:
    assert get_default_registry() is get_default_registry()
