# campus_energy/api/simulations.py

from fastapi import APIRouter, Depends
from typing import List

from campus_energy.core.state import get_manager
from campus_energy.models.scenario import ScenarioRequest, ScenarioResult
from campus_energy.services.energy_manager import EnergyManager

router = APIRouter()


@router.get("/scenarios", response_model=List[str])
async def list_scenarios(manager: EnergyManager = Depends(get_manager)):
    return manager.list_scenarios()


@router.post("", response_model=ScenarioResult)
async def simulate_scenario(
    payload: ScenarioRequest, manager: EnergyManager = Depends(get_manager)
):
    """
    Project savings against the current total consumption.

    reduction_percent is not bounds-checked; remaining energy never goes below 0.
    """
    return manager.simulate_scenario(payload.reduction_percent, payload.scenario)
