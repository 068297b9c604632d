# campus_energy/api/readings.py

from fastapi import APIRouter, Depends, status
from typing import List, Optional
import logging

from campus_energy.core.state import get_manager
from campus_energy.models.reading import Reading, ReadingCreate
from campus_energy.services.energy_manager import EnergyManager

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=Reading, status_code=status.HTTP_201_CREATED)
async def add_reading(payload: ReadingCreate, manager: EnergyManager = Depends(get_manager)):
    """Record a new energy reading. Timestamp defaults to now (UTC)."""
    return manager.add_reading(
        building=payload.building,
        room=payload.room,
        device=payload.device,
        kwh=payload.kwh,
        timestamp=payload.timestamp,
    )


@router.get("", response_model=List[Reading])
async def list_readings(
    building: Optional[str] = None,
    manager: EnergyManager = Depends(get_manager),
):
    """
    List readings in insertion order.

    Parameters:
    - building: only readings of this building ("all" or omitted for every building)
    """
    return manager.list_readings(building)


@router.get("/buildings", response_model=List[str])
async def list_buildings(manager: EnergyManager = Depends(get_manager)):
    return manager.list_buildings()
