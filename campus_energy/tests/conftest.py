import sys
import pathlib
from datetime import datetime, timezone
from itertools import count

import pytest

# Ensure the project root is importable so `import campus_energy` works
ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Prevent pydantic-settings from attempting to read any .env files during tests.
# A developer .env with other tariffs would change the expected figures.
try:
    import pydantic_settings.sources as _psources
    _psources.DotEnvSettingsSource._read_env_files = lambda self, *args, **kwargs: {}
except (ImportError, AttributeError):
    # If pydantic-settings internals change, don't fail tests at import time.
    pass

from campus_energy.core.clock import fixed_clock  # noqa: E402
from campus_energy.core.config import settings  # noqa: E402
from campus_energy.services.cost_model import CostModel  # noqa: E402
from campus_energy.services.energy_manager import EnergyManager  # noqa: E402

NOW = datetime(2025, 9, 2, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return fixed_clock(NOW)


@pytest.fixture
def sequential_ids():
    counter = count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def cost_model():
    return CostModel(tariff_rate="0.22", emission_factor="0.4")


@pytest.fixture
def manager(clock, sequential_ids, cost_model):
    return EnergyManager(cost_model=cost_model, clock=clock, id_factory=sequential_ids)


@pytest.fixture
def client(monkeypatch):
    from fastapi.testclient import TestClient
    from campus_energy.main import app

    monkeypatch.setattr(settings, "SEED_DEMO_DATA", True)
    monkeypatch.setattr(settings, "TARIFF_RATE", 0.22)
    monkeypatch.setattr(settings, "EMISSION_FACTOR", 0.4)
    with TestClient(app) as c:
        yield c
