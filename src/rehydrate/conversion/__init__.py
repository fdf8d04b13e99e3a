"""
Conversion package

Rebuilds model instances from decoded records without performing any I/O.

Public helpers
--------------
deserialize(model_type, raw, is_array=False)
    Convenience wrapper over a Deserializer bound to the default registry.
"""

from __future__ import annotations

from typing import Any

from .engine import Deserializer
from .factory import make_deserializer
from .resolver import ConverterResolver

__all__ = ["ConverterResolver", "Deserializer", "deserialize", "make_deserializer"]


def deserialize(model_type: type, raw: Any, is_array: bool = False) -> Any:
    """Rebuild raw as model_type using the default registry."""
    return Deserializer().deserialize(model_type, raw, is_array)
