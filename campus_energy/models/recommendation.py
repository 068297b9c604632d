# campus_energy/models/recommendation.py

from pydantic import BaseModel, ConfigDict

from campus_energy.models.common import KWh


class Recommendation(BaseModel):
    # Only RecommendationCatalog.apply flips `applied`, by storing a new copy.
    model_config = ConfigDict(frozen=True)

    id: str
    recommendation_type: str
    description: str
    estimated_kwh_savings: KWh
    estimated_co2_savings: KWh  # kg CO2
    applied: bool = False
