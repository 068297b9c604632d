# campus_energy/services/scenario_simulator.py

from decimal import Decimal
from typing import Optional

from campus_energy.core.config import settings
from campus_energy.core.units import Number, round2, to_decimal
from campus_energy.models.scenario import ScenarioPoint, ScenarioResult
from campus_energy.services.cost_model import CostModel

SCENARIOS = [
    "Apagado inteligente",
    "Horario valle",
    "Mantenimiento A/C",
    "Sensores presencia",
]


class ScenarioSimulator:
    """Projects savings for a hypothetical percentage cut in consumption."""

    def __init__(self, cost_model: Optional[CostModel] = None):
        self.cost_model = cost_model or CostModel()

    def simulate(
        self,
        baseline_kwh: Number,
        reduction_percent: Number,
        scenario: Optional[str] = None,
    ) -> ScenarioResult:
        """
        Savings for cutting `baseline_kwh` by `reduction_percent`.

        The percentage is not bounds-checked. Above 100 the projected
        remaining energy is clamped at 0; below 0 the "savings" come out
        negative.
        """
        baseline = to_decimal(baseline_kwh)
        percent = to_decimal(reduction_percent)

        saved = round2(baseline * percent / 100)
        remaining = max(baseline - saved, Decimal(0))

        return ScenarioResult(
            scenario=scenario or settings.DEFAULT_SCENARIO,
            reduction_percent=percent,
            baseline_kwh=baseline,
            saved_kwh=saved,
            saved_cost=self.cost_model.cost(saved),
            saved_emissions=self.cost_model.emissions(saved),
            remaining_kwh=remaining,
            comparison=[
                ScenarioPoint(name="Actual", kwh=baseline),
                ScenarioPoint(name="Scenario", kwh=remaining),
            ],
        )
