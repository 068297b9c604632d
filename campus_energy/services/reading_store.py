# campus_energy/services/reading_store.py

import logging
from typing import Callable, List

import pydantic

from campus_energy.core.clock import Clock, utc_now
from campus_energy.core.errors import ValidationError
from campus_energy.models.common import new_id
from campus_energy.models.reading import Reading, ReadingCreate

logger = logging.getLogger(__name__)


def _field_errors(exc: pydantic.ValidationError) -> List[dict]:
    return [
        {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]


class ReadingStore:
    """
    Append-only collection of readings.

    Readings are kept in insertion order and never updated or removed.
    The clock stamps readings submitted without a timestamp.
    """

    def __init__(self, clock: Clock = utc_now, id_factory: Callable[[], str] = new_id):
        self._clock = clock
        self._id_factory = id_factory
        self._readings: List[Reading] = []
        self._ids: set[str] = set()

    def add(self, data) -> Reading:
        """
        Store a reading and return it with its generated id.

        `data` is a ReadingCreate or a plain dict of its fields. Invalid input
        raises ValidationError and leaves the store untouched.
        """
        if not isinstance(data, ReadingCreate):
            try:
                data = ReadingCreate.model_validate(data)
            except pydantic.ValidationError as exc:
                raise ValidationError("Invalid reading", _field_errors(exc)) from exc

        reading_id = self._id_factory()
        if reading_id in self._ids:
            raise RuntimeError(f"id factory returned a duplicate id: {reading_id}")

        reading = Reading(
            id=reading_id,
            building=data.building,
            room=data.room,
            device=data.device,
            timestamp=data.timestamp or self._clock(),
            kwh=data.kwh,
        )
        self._readings.append(reading)
        self._ids.add(reading_id)
        logger.debug(f"Stored reading {reading.id} ({reading.building}, {reading.kwh} kWh)")
        return reading

    def all(self) -> List[Reading]:
        return list(self._readings)

    def __len__(self) -> int:
        return len(self._readings)
