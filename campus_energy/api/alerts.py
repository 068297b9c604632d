# campus_energy/api/alerts.py

from fastapi import APIRouter, Depends
from typing import List, Optional

from campus_energy.core.state import get_manager
from campus_energy.models.alert import Alert, AlertStatus
from campus_energy.services.energy_manager import EnergyManager

router = APIRouter()


@router.get("", response_model=List[Alert])
async def list_alerts(
    status: Optional[AlertStatus] = None,
    manager: EnergyManager = Depends(get_manager),
):
    return manager.list_alerts(status)


@router.post("/{alert_id}/toggle", response_model=Alert)
async def toggle_alert(alert_id: str, manager: EnergyManager = Depends(get_manager)):
    """Resolve an active alert, or reopen a resolved one."""
    return manager.toggle_alert(alert_id)
