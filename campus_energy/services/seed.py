# campus_energy/services/seed.py
"""Demo data for a fresh dashboard: one morning of readings on campus."""

import logging
from datetime import datetime, timezone

from campus_energy.models.alert import Criticality
from campus_energy.services.energy_manager import EnergyManager

logger = logging.getLogger(__name__)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


READINGS = [
    ("A", "101", "Luces", "2025-09-01T08:15:00", "2.2"),
    ("A", "101", "Aire Acond.", "2025-09-01T09:15:00", "3.5"),
    ("B", "Lab 301", "Computadoras", "2025-09-01T10:30:00", "5.8"),
    ("Biblioteca", "2do piso", "Iluminación", "2025-09-01T11:10:00", "1.4"),
    ("Gimnasio", "Sala cardio", "Aire Acond.", "2025-09-01T12:20:00", "4.1"),
]

ALERTS = [
    (
        "Uso fuera de horario",
        "Luces encendidas Edif. A 101 a las 23:10",
        Criticality.HIGH,
        "2025-09-01T23:10:00",
    ),
    (
        "Consumo anómalo",
        "Aire Acond. Gimnasio +35%",
        Criticality.MEDIUM,
        "2025-09-01T12:40:00",
    ),
    (
        "Standby prolongado",
        "PCs Lab 301 toda la noche",
        Criticality.HIGH,
        "2025-09-01T05:40:00",
    ),
]

RECOMMENDATIONS = [
    ("Iluminación inteligente", "Instalar sensores de presencia en Edif. A 1er piso", 45, 18),
    ("Horario valle", "Mover renderizado del Lab 301 a 1-5am", 62, 24),
    ("Mantenimiento A/C", "Mant. preventivo al A/C del Gimnasio", 30, 12),
]


def seed_demo_data(manager: EnergyManager) -> EnergyManager:
    for building, room, device, ts, kwh in READINGS:
        manager.add_reading(building, room, device, kwh, timestamp=_ts(ts))

    for alert_type, description, criticality, ts in ALERTS:
        manager.add_alert(alert_type, description, criticality, timestamp=_ts(ts))

    for rec_type, description, kwh, co2 in RECOMMENDATIONS:
        manager.add_recommendation(rec_type, description, kwh, co2)

    logger.info(
        f"Seeded demo data: {len(READINGS)} readings, {len(ALERTS)} alerts, "
        f"{len(RECOMMENDATIONS)} recommendations"
    )
    return manager
