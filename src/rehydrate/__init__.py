"""
Package façade – a single import gives users everything they need:

    from rehydrate import data_type, deserialize

    @data_type("created_date", datetime)
    class Order:
        ...

    order = deserialize(Order, {"created_date": 1577836800000})

Design
------
* Declarations write to a registry; the engine only reads it.
* Re-exports only what external callers should see (encapsulation).
"""

from __future__ import annotations

from .config import DeserializerConfig, EpochUnit
from .conversion import (
    ConverterResolver,
    Deserializer,
    deserialize,
    make_deserializer,
)
from .exceptions import (
    ArrayNotExpectedError,
    DeclarationError,
    DeserializationError,
    ExpectedArrayError,
    ExpectedObjectError,
    FixtureLoadError,
    InvalidDateCastError,
    InvalidFieldKeyError,
    MissingDataTypeAnnotationError,
    MissingRequiredConverterError,
    RehydrateError,
    SkipConverterConflictError,
)
from .metadata import (
    FieldMetadata,
    MetadataRegistry,
    RuntimeType,
    TargetKind,
    converters,
    data_type,
    declare,
    get_default_registry,
    skip,
)
from .pipeline import FixturePipeline

__all__ = [
    "ArrayNotExpectedError",
    "ConverterResolver",
    "DeclarationError",
    "DeserializationError",
    "Deserializer",
    "DeserializerConfig",
    "EpochUnit",
    "ExpectedArrayError",
    "ExpectedObjectError",
    "FieldMetadata",
    "FixtureLoadError",
    "FixturePipeline",
    "InvalidDateCastError",
    "InvalidFieldKeyError",
    "MetadataRegistry",
    "MissingDataTypeAnnotationError",
    "MissingRequiredConverterError",
    "RehydrateError",
    "RuntimeType",
    "SkipConverterConflictError",
    "TargetKind",
    "converters",
    "data_type",
    "declare",
    "deserialize",
    "get_default_registry",
    "make_deserializer",
    "skip",
]
