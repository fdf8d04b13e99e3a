from __future__ import annotations

"""
models.py – field metadata
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Declared reconstruction rule for one (model type, field name) pair.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .runtime_types import RuntimeType

#: Target types rebuilt by the date construction rule rather than recursion.
DATE_TYPES: tuple[type, ...] = (datetime, date)

ConverterTable = Dict[RuntimeType, Callable[[Any], Any]]


class TargetKind(str, Enum):
    """Closed set of reconstruction strategies for a field."""

    ABSENT = "absent"
    DATE = "date"
    MODEL = "model"


def target_kind_of(target_type: Optional[type]) -> TargetKind:
    if target_type is None:
        return TargetKind.ABSENT
    if target_type in DATE_TYPES:
        return TargetKind.DATE
    return TargetKind.MODEL


class FieldMetadata(BaseModel):
    """How the engine rebuilds one field of a model type."""

    target_type: Optional[type] = Field(
        None,
        description="Model class or date type to rebuild; None means primitive.",
    )
    is_array: bool = Field(
        False, description="Raw value must be a sequence of `target_type` items."
    )
    skip: bool = Field(
        False, description="Copy the raw value verbatim, bypassing all checks."
    )
    converters: Optional[ConverterTable] = Field(
        None,
        description="Runtime-type tag → conversion function; must cover every "
        "tag that can arrive for the field.",
    )

    model_config = ConfigDict(
        extra="forbid", frozen=True, arbitrary_types_allowed=True
    )

    # ----- validators --------------------------------------------------------
    @field_validator("converters")
    @classmethod
    def _not_empty(cls, v: Optional[ConverterTable]) -> Optional[ConverterTable]:
        if v is not None and not v:
            raise ValueError("converters must map at least one runtime type")
        return v

    # ----- derived -----------------------------------------------------------
    @property
    def target_kind(self) -> TargetKind:
        return target_kind_of(self.target_type)

    @property
    def has_converters(self) -> bool:
        return self.converters is not None

    def converter_for(self, runtime_type: RuntimeType | str) -> Optional[Callable[[Any], Any]]:
        if self.converters is None:
            return None
        return self.converters.get(RuntimeType(runtime_type))
