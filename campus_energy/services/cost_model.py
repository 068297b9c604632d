# campus_energy/services/cost_model.py

from decimal import Decimal
from typing import Optional

from campus_energy.core.config import settings
from campus_energy.core.units import Number, to_decimal


class CostModel:
    """
    Converts energy into money and CO2 with fixed, linear factors.

    tariff_rate is currency units per kWh, emission_factor is kg CO2 per kWh.
    Both default to the configured TARIFF_RATE / EMISSION_FACTOR.
    """

    def __init__(
        self,
        tariff_rate: Optional[Number] = None,
        emission_factor: Optional[Number] = None,
    ):
        self.tariff_rate = to_decimal(
            settings.TARIFF_RATE if tariff_rate is None else tariff_rate
        )
        self.emission_factor = to_decimal(
            settings.EMISSION_FACTOR if emission_factor is None else emission_factor
        )

    def cost(self, kwh: Number) -> Decimal:
        return to_decimal(kwh) * self.tariff_rate

    def emissions(self, kwh: Number) -> Decimal:
        return to_decimal(kwh) * self.emission_factor

    def __repr__(self) -> str:
        return f"CostModel(tariff_rate={self.tariff_rate}, emission_factor={self.emission_factor})"
