"""
Metadata package

Declares, per model type and field, how a raw value is rebuilt.
"""

from __future__ import annotations

from .declarations import converters, data_type, declare, skip
from .models import DATE_TYPES, FieldMetadata, TargetKind
from .registry import MetadataRegistry, get_default_registry
from .runtime_types import RuntimeType, runtime_type_of

__all__ = [
    "DATE_TYPES",
    "FieldMetadata",
    "MetadataRegistry",
    "RuntimeType",
    "TargetKind",
    "converters",
    "data_type",
    "declare",
    "get_default_registry",
    "runtime_type_of",
    "skip",
]
