# campus_energy/api/__init__.py

from campus_energy.api import readings
from campus_energy.api import dashboard
from campus_energy.api import alerts
from campus_energy.api import recommendations
from campus_energy.api import simulations

__all__ = [
    "readings",
    "dashboard",
    "alerts",
    "recommendations",
    "simulations",
]
