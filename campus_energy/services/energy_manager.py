# campus_energy/services/energy_manager.py

import logging
from datetime import datetime
from typing import Callable, List, Optional

from campus_energy.core.clock import Clock, utc_now
from campus_energy.core.config import settings
from campus_energy.core.units import Number
from campus_energy.models.alert import Alert, AlertStatus, Criticality
from campus_energy.models.common import new_id
from campus_energy.models.dashboard import DashboardMetrics
from campus_energy.models.reading import Reading
from campus_energy.models.recommendation import Recommendation
from campus_energy.models.scenario import ScenarioResult
from campus_energy.services import aggregator
from campus_energy.services.alert_registry import AlertRegistry
from campus_energy.services.cost_model import CostModel
from campus_energy.services.reading_store import ReadingStore
from campus_energy.services.recommendation_catalog import RecommendationCatalog
from campus_energy.services.scenario_simulator import SCENARIOS, ScenarioSimulator

logger = logging.getLogger(__name__)


class EnergyManager:
    """
    Everything the dashboard can ask for or change.

    Owns the reading store, the alert registry and the recommendation
    catalog; each collection is only mutated through its own operations.
    """

    def __init__(
        self,
        cost_model: Optional[CostModel] = None,
        clock: Clock = utc_now,
        id_factory: Callable[[], str] = new_id,
    ):
        self.cost_model = cost_model or CostModel()
        self.clock = clock
        self.id_factory = id_factory
        self.readings = ReadingStore(clock=clock, id_factory=id_factory)
        self.alerts = AlertRegistry()
        self.recommendations = RecommendationCatalog()
        self.simulator = ScenarioSimulator(self.cost_model)

    # -------------------------------------------------------------------
    # Readings
    # -------------------------------------------------------------------
    def add_reading(
        self,
        building: str,
        room: str,
        device: str,
        kwh: Number,
        timestamp: Optional[datetime] = None,
    ) -> Reading:
        reading = self.readings.add(
            {
                "building": building,
                "room": room,
                "device": device,
                "kwh": kwh,
                "timestamp": timestamp,
            }
        )
        logger.info(
            f"Reading {reading.id} added: {reading.building}/{reading.room}/"
            f"{reading.device} {reading.kwh} kWh at {reading.timestamp.isoformat()}"
        )
        return reading

    def list_readings(self, building: Optional[str] = None) -> List[Reading]:
        return aggregator.filter_by_building(self.readings.all(), building)

    def list_buildings(self) -> List[str]:
        return aggregator.buildings(self.readings.all())

    def dashboard_metrics(self) -> DashboardMetrics:
        readings = self.readings.all()
        total_kwh = aggregator.total(readings)
        return DashboardMetrics(
            total_kwh=total_kwh,
            cost_estimate=self.cost_model.cost(total_kwh),
            co2_estimate=self.cost_model.emissions(total_kwh),
            currency=settings.CURRENCY,
            hour_series=aggregator.by_hour(readings),
            entity_series=aggregator.entity_series(readings),
            active_alerts=self.alerts.active_alerts(),
        )

    # -------------------------------------------------------------------
    # Alerts
    # -------------------------------------------------------------------
    def add_alert(
        self,
        alert_type: str,
        description: str,
        criticality: Criticality,
        timestamp: Optional[datetime] = None,
        status: AlertStatus = AlertStatus.ACTIVE,
    ) -> Alert:
        alert = Alert(
            id=self.id_factory(),
            alert_type=alert_type,
            description=description,
            criticality=criticality,
            timestamp=timestamp or self.clock(),
            status=status,
        )
        return self.alerts.add(alert)

    def list_alerts(self, status: Optional[AlertStatus] = None) -> List[Alert]:
        return self.alerts.all(status)

    def active_alerts(self) -> List[Alert]:
        return self.alerts.active_alerts()

    def toggle_alert(self, alert_id: str) -> Alert:
        return self.alerts.toggle(alert_id)

    # -------------------------------------------------------------------
    # Recommendations
    # -------------------------------------------------------------------
    def add_recommendation(
        self,
        recommendation_type: str,
        description: str,
        estimated_kwh_savings: Number,
        estimated_co2_savings: Number,
    ) -> Recommendation:
        rec = Recommendation(
            id=self.id_factory(),
            recommendation_type=recommendation_type,
            description=description,
            estimated_kwh_savings=estimated_kwh_savings,
            estimated_co2_savings=estimated_co2_savings,
        )
        return self.recommendations.add(rec)

    def list_recommendations(self) -> List[Recommendation]:
        return self.recommendations.all()

    def apply_recommendation(self, rec_id: str) -> Recommendation:
        return self.recommendations.apply(rec_id)

    # -------------------------------------------------------------------
    # Simulations
    # -------------------------------------------------------------------
    def simulate_scenario(
        self, reduction_percent: Number, scenario: Optional[str] = None
    ) -> ScenarioResult:
        baseline = aggregator.total(self.readings.all())
        return self.simulator.simulate(baseline, reduction_percent, scenario)

    def list_scenarios(self) -> List[str]:
        return list(SCENARIOS)
