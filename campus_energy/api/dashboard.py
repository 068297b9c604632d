# campus_energy/api/dashboard.py

from fastapi import APIRouter, Depends

from campus_energy.core.state import get_manager
from campus_energy.models.dashboard import DashboardMetrics
from campus_energy.services.energy_manager import EnergyManager

router = APIRouter()


@router.get("/metrics", response_model=DashboardMetrics)
async def dashboard_metrics(manager: EnergyManager = Depends(get_manager)):
    """Totals, cost and CO2 KPIs plus the hourly and per-building series."""
    return manager.dashboard_metrics()
