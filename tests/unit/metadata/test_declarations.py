"""Unit tests for the class-decorator declaration API."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from rehydrate.exceptions import SkipConverterConflictError
from rehydrate.metadata.declarations import converters, data_type, declare, skip
from rehydrate.metadata.models import TargetKind
from rehydrate.metadata.registry import MetadataRegistry
from rehydrate.metadata.runtime_types import RuntimeType


@pytest.fixture
def registry() -> MetadataRegistry:
    return MetadataRegistry()


class Product:
    pass


def from_epoch_ms(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000)


def test_decorators_return_the_class_unchanged(registry: MetadataRegistry) -> None:
    @data_type("product", Product, registry=registry)
    class OrderProduct:
        quantity = 0

    assert isinstance(OrderProduct, type)
    assert OrderProduct.quantity == 0
    assert registry.lookup(OrderProduct, "product").target_type is Product


def test_data_type_records_array_flag(registry: MetadataRegistry) -> None:
    @data_type("products", Product, is_array=True, registry=registry)
    @data_type("created_date", datetime, registry=registry)
    class Order:
        pass

    products = registry.lookup(Order, "products")
    assert products.is_array is True
    assert products.target_kind is TargetKind.MODEL
    assert registry.lookup(Order, "created_date").target_kind is TargetKind.DATE


def test_skip_declaration(registry: MetadataRegistry) -> None:
    @skip("payload", registry=registry)
    class Event:
        pass

    assert registry.lookup(Event, "payload").skip is True


def test_data_type_and_converters_combine(registry: MetadataRegistry) -> None:
    @data_type("created_date", datetime, registry=registry)
    @converters("created_date", {"number": from_epoch_ms}, registry=registry)
    class Order:
        pass

    meta = registry.lookup(Order, "created_date")
    assert meta.target_type is datetime
    assert meta.converter_for(RuntimeType.NUMBER) is from_epoch_ms


@pytest.mark.parametrize("converters_first", [True, False])
def test_skip_and_converters_conflict_at_declaration(
    registry: MetadataRegistry, converters_first: bool
) -> None:
    def declare_model() -> type:
        class Model:
            pass

        skip_decl = skip("raw", registry=registry)
        conv_decl = converters("raw", {"string": str}, registry=registry)
        first, second = (conv_decl, skip_decl) if converters_first else (skip_decl, conv_decl)
        return second(first(Model))

    with pytest.raises(SkipConverterConflictError, match="skip and converters"):
        declare_model()


def test_unknown_converter_tag_rejected(registry: MetadataRegistry) -> None:
    with pytest.raises(ValidationError):

        @converters("when", {"date": str}, registry=registry)
        class Model:
            pass


def test_declare_replaces_full_metadata(registry: MetadataRegistry) -> None:
    class Order:
        pass

    declare(Order, "products", target_type=Product, is_array=True, registry=registry)
    declare(Order, "products", skip=True, registry=registry)

    meta = registry.lookup(Order, "products")
    assert meta.skip is True
    assert meta.target_type is None
    assert meta.is_array is False


def test_declare_defaults_to_shared_registry() -> None:
    from rehydrate.metadata.registry import get_default_registry

    class Standalone:
        pass

    declare(Standalone, "note", converters={"string": str.upper})
    assert get_default_registry().lookup(Standalone, "note") is not None
