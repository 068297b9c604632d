# campus_energy/models/scenario.py

from typing import List, Optional

from pydantic import BaseModel, Field

from campus_energy.models.common import Quantity


class ScenarioPoint(BaseModel):
    name: str
    kwh: Quantity


class ScenarioResult(BaseModel):
    scenario: str
    reduction_percent: Quantity
    baseline_kwh: Quantity
    saved_kwh: Quantity
    saved_cost: Quantity
    saved_emissions: Quantity
    remaining_kwh: Quantity
    comparison: List[ScenarioPoint]


class ScenarioRequest(BaseModel):
    # Not bounds-checked; see ScenarioSimulator.simulate.
    reduction_percent: float = Field(allow_inf_nan=False)
    scenario: Optional[str] = None
