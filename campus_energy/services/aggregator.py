# campus_energy/services/aggregator.py
"""
Aggregations over readings for the dashboard KPIs and charts.

All sums are exact Decimals. Hourly buckets use the UTC hour of each
reading's timestamp; rounding to 2 places only happens when the series is
serialized for display.
"""

from decimal import Decimal
from datetime import timezone
from typing import Callable, Dict, Iterable, List, Optional

from campus_energy.models.dashboard import EntityTotal, HourBucket
from campus_energy.models.reading import Reading

HOURS = [f"{h:02d}" for h in range(24)]

# Sentinel used by the readings table filter for "every building".
ALL_BUILDINGS = "all"


def by_building(reading: Reading) -> str:
    return reading.building


def total(readings: Iterable[Reading]) -> Decimal:
    return sum((r.kwh for r in readings), Decimal(0))


def hour_of(reading: Reading) -> str:
    return f"{reading.timestamp.astimezone(timezone.utc).hour:02d}"


def by_hour(readings: Iterable[Reading]) -> List[HourBucket]:
    """Exactly 24 buckets "00".."23"; hours without readings are 0."""
    sums: Dict[str, Decimal] = {h: Decimal(0) for h in HOURS}
    for r in readings:
        sums[hour_of(r)] += r.kwh
    return [HourBucket(hour=h, kwh=sums[h]) for h in HOURS]


def by_entity(
    readings: Iterable[Reading],
    key: Callable[[Reading], str] = by_building,
) -> Dict[str, Decimal]:
    """kWh per entity, keyed in order of first occurrence."""
    sums: Dict[str, Decimal] = {}
    for r in readings:
        label = key(r)
        sums[label] = sums.get(label, Decimal(0)) + r.kwh
    return sums


def entity_series(
    readings: Iterable[Reading],
    key: Callable[[Reading], str] = by_building,
) -> List[EntityTotal]:
    return [EntityTotal(name=k, kwh=v) for k, v in by_entity(readings, key).items()]


def buildings(readings: Iterable[Reading]) -> List[str]:
    return list(dict.fromkeys(r.building for r in readings))


def filter_by_building(
    readings: Iterable[Reading], building: Optional[str] = None
) -> List[Reading]:
    if building is None or building == ALL_BUILDINGS:
        return list(readings)
    return [r for r in readings if r.building == building]
