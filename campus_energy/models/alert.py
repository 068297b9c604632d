# campus_energy/models/alert.py

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from campus_energy.core.clock import as_utc


class Criticality(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class AlertStatus(str, Enum):
    ACTIVE = "Active"
    RESOLVED = "Resolved"

    def toggled(self) -> "AlertStatus":
        if self is AlertStatus.ACTIVE:
            return AlertStatus.RESOLVED
        return AlertStatus.ACTIVE


class Alert(BaseModel):
    # Only AlertRegistry.toggle changes the status, by storing a new copy.
    model_config = ConfigDict(frozen=True)

    id: str
    alert_type: str
    description: str
    criticality: Criticality
    timestamp: datetime
    status: AlertStatus = AlertStatus.ACTIVE

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, v: datetime) -> datetime:
        return as_utc(v)
