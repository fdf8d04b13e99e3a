"""
Declaration API used by model classes.

Python attributes cannot be decorated individually, so every declaration
is a class decorator naming the field it describes::

    @data_type("products", OrderProduct, is_array=True)
    @data_type("created_date", datetime)
    class Order:
        ...

Declarations on the same field combine; repeating one replaces it.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar

from .registry import MetadataRegistry, get_default_registry
from .runtime_types import RuntimeType

ModelT = TypeVar("ModelT", bound=type)


def _resolve(registry: MetadataRegistry | None) -> MetadataRegistry:
    return registry if registry is not None else get_default_registry()


def declare(
    model_type: type,
    field_name: str,
    *,
    target_type: type | None = None,
    is_array: bool = False,
    skip: bool = False,
    converters: Mapping[RuntimeType | str, Callable[[Any], Any]] | None = None,
    registry: MetadataRegistry | None = None,
) -> None:
    """Explicitly register the full metadata of one field."""
    _resolve(registry).update(
        model_type,
        field_name,
        target_type=target_type,
        is_array=is_array,
        skip=skip,
        converters=dict(converters) if converters is not None else None,
    )


def data_type(
    field_name: str,
    target_type: type,
    is_array: bool = False,
    *,
    registry: MetadataRegistry | None = None,
) -> Callable[[ModelT], ModelT]:
    """Declare the model or date type a field is rebuilt as."""

    def decorator(model_type: ModelT) -> ModelT:
        _resolve(registry).update(
            model_type, field_name, target_type=target_type, is_array=is_array
        )
        return model_type

    return decorator


def skip(
    field_name: str, *, registry: MetadataRegistry | None = None
) -> Callable[[ModelT], ModelT]:
    """Declare a field whose raw value is copied verbatim."""

    def decorator(model_type: ModelT) -> ModelT:
        _resolve(registry).update(model_type, field_name, skip=True)
        return model_type

    return decorator


def converters(
    field_name: str,
    table: Mapping[RuntimeType | str, Callable[[Any], Any]],
    *,
    registry: MetadataRegistry | None = None,
) -> Callable[[ModelT], ModelT]:
    """
    Declare a converter table for a field.

    The table must cover every runtime type that can arrive for the field;
    an uncovered type fails at deserialization time.
    """

    def decorator(model_type: ModelT) -> ModelT:
        _resolve(registry).update(model_type, field_name, converters=dict(table))
        return model_type

    return decorator
