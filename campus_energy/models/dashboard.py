# campus_energy/models/dashboard.py

from typing import List

from pydantic import BaseModel

from campus_energy.models.alert import Alert
from campus_energy.models.common import DisplayKWh, Quantity


class HourBucket(BaseModel):
    hour: str  # "00".."23", UTC
    kwh: DisplayKWh


class EntityTotal(BaseModel):
    name: str
    kwh: Quantity


class DashboardMetrics(BaseModel):
    total_kwh: Quantity
    cost_estimate: Quantity
    co2_estimate: Quantity
    currency: str
    hour_series: List[HourBucket]
    entity_series: List[EntityTotal]
    active_alerts: List[Alert]
