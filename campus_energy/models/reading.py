# campus_energy/models/reading.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campus_energy.core.clock import as_utc
from campus_energy.core.units import to_decimal
from campus_energy.models.common import KWh


class ReadingCreate(BaseModel):
    """A reading as submitted, before it gets an id."""

    model_config = ConfigDict(str_strip_whitespace=True)

    building: str = Field(min_length=1)
    room: str = Field(min_length=1)
    device: str = Field(min_length=1)
    kwh: KWh
    timestamp: Optional[datetime] = None

    @field_validator("kwh", mode="before")
    @classmethod
    def _float_to_decimal(cls, v):
        # keep 2.2 as 2.2 instead of its binary expansion
        if isinstance(v, float):
            return to_decimal(v)
        if isinstance(v, bool):
            raise ValueError("kwh must be a number")
        return v

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class Reading(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    building: str
    room: str
    device: str
    timestamp: datetime  # always UTC, whatever the clock handed in
    kwh: KWh

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, v: datetime) -> datetime:
        return as_utc(v)
