"""Engine configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EpochUnit(str, Enum):
    """Unit of numeric timestamps handed to date fields."""

    MILLISECONDS = "ms"
    SECONDS = "s"

    @property
    def per_second(self) -> int:
        return 1000 if self is EpochUnit.MILLISECONDS else 1


class DeserializerConfig(BaseModel):
    """Settings shared by the engine and the converter resolver."""

    epoch_unit: EpochUnit = Field(
        EpochUnit.MILLISECONDS,
        description="Unit of numbers converted by the built-in date rule.",
    )
    strict_iso_dates: bool = Field(
        False,
        description="Only accept ISO 8601 strings for date fields "
        "(otherwise any format dateutil understands).",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)


DEFAULT_CONFIG = DeserializerConfig()
