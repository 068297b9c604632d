# campus_energy/services/alert_registry.py

import logging
from typing import Dict, List, Optional

from campus_energy.core.errors import NotFoundError
from campus_energy.models.alert import Alert, AlertStatus

logger = logging.getLogger(__name__)


class AlertRegistry:
    """
    Alerts keyed by id, in insertion order.

    Each alert is either Active or Resolved. toggle() flips between the two
    in both directions; nothing expires or re-triggers on its own.
    """

    def __init__(self):
        self._alerts: Dict[str, Alert] = {}

    def add(self, alert: Alert) -> Alert:
        if alert.id in self._alerts:
            raise ValueError(f"Duplicate alert id: {alert.id}")
        self._alerts[alert.id] = alert
        return alert

    def get(self, alert_id: str) -> Alert:
        alert = self._alerts.get(alert_id)
        if alert is None:
            raise NotFoundError("Alert", alert_id)
        return alert

    def all(self, status: Optional[AlertStatus] = None) -> List[Alert]:
        if status is None:
            return list(self._alerts.values())
        return [a for a in self._alerts.values() if a.status == status]

    def active_alerts(self) -> List[Alert]:
        return self.all(AlertStatus.ACTIVE)

    def toggle(self, alert_id: str) -> Alert:
        current = self.get(alert_id)
        alert = current.model_copy(update={"status": current.status.toggled()})
        self._alerts[alert_id] = alert
        logger.info(f"Alert {alert_id} is now {alert.status.value}")
        return alert

    def __len__(self) -> int:
        return len(self._alerts)
