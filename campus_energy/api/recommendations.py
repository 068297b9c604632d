# campus_energy/api/recommendations.py

from fastapi import APIRouter, Depends
from typing import List

from campus_energy.core.state import get_manager
from campus_energy.models.recommendation import Recommendation
from campus_energy.services.energy_manager import EnergyManager

router = APIRouter()


@router.get("", response_model=List[Recommendation])
async def list_recommendations(manager: EnergyManager = Depends(get_manager)):
    return manager.list_recommendations()


@router.post("/{rec_id}/apply", response_model=Recommendation)
async def apply_recommendation(rec_id: str, manager: EnergyManager = Depends(get_manager)):
    """Mark a recommendation as applied. Re-applying returns it unchanged."""
    return manager.apply_recommendation(rec_id)
