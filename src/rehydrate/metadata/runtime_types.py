"""Coarse runtime classification of decoded values."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class RuntimeType(str, Enum):
    """Runtime-type tags used to select a converter for a raw value."""

    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


PRIMITIVE_TYPES = frozenset(
    {RuntimeType.NULL, RuntimeType.STRING, RuntimeType.NUMBER, RuntimeType.BOOLEAN}
)


def runtime_type_of(value: Any) -> RuntimeType:
    """
    Return the runtime-type tag of a decoded value.

    ``bool`` is checked before numbers since it subclasses ``int``.
    Mappings and any other non-primitive object are tagged ``object``.
    """
    if value is None:
        return RuntimeType.NULL
    if isinstance(value, bool):
        return RuntimeType.BOOLEAN
    if isinstance(value, (int, float)):
        return RuntimeType.NUMBER
    if isinstance(value, str):
        return RuntimeType.STRING
    if is_sequence(value):
        return RuntimeType.ARRAY
    return RuntimeType.OBJECT


def is_sequence(value: Any) -> bool:
    """True for the ordered sequences a decoder produces (list, tuple)."""
    return isinstance(value, (list, tuple))


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_primitive(value: Any) -> bool:
    return runtime_type_of(value) in PRIMITIVE_TYPES
