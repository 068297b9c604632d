# campus_energy/core/state.py

import logging
from typing import Optional

from campus_energy.core.config import settings
from campus_energy.services.energy_manager import EnergyManager
from campus_energy.services.seed import seed_demo_data

logger = logging.getLogger(__name__)

_manager: Optional[EnergyManager] = None


def init_manager(seed: Optional[bool] = None) -> EnergyManager:
    """Replace the process-wide manager with a fresh one."""
    global _manager

    if seed is None:
        seed = settings.SEED_DEMO_DATA

    manager = EnergyManager()
    if seed:
        seed_demo_data(manager)
    _manager = manager
    logger.info(f"Energy manager ready (seeded={seed})")
    return _manager


def close_manager() -> None:
    global _manager
    _manager = None
    logger.info("Energy manager released")


# FastAPI dependency
def get_manager() -> EnergyManager:
    if _manager is None:
        return init_manager()
    return _manager
