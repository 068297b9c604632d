from datetime import datetime, timezone
from decimal import Decimal

import pytest

from campus_energy.services import aggregator
from campus_energy.services.reading_store import ReadingStore


def _readings(clock, rows):
    store = ReadingStore(clock=clock)
    for building, hour, kwh in rows:
        store.add(
            {
                "building": building,
                "room": "r",
                "device": "d",
                "kwh": kwh,
                "timestamp": datetime(2025, 9, 1, hour, 15, tzinfo=timezone.utc),
            }
        )
    return store.all()


CAMPUS = [
    ("A", 8, 2.2),
    ("A", 9, 3.5),
    ("B", 10, 5.8),
    ("Biblioteca", 11, 1.4),
    ("Gimnasio", 12, 4.1),
]


def test_total_of_campus_readings_is_exact(clock):
    readings = _readings(clock, CAMPUS)
    assert aggregator.total(readings) == Decimal("17.0")


def test_empty_input_is_not_an_error():
    assert aggregator.total([]) == 0
    hours = aggregator.by_hour([])
    assert [b.hour for b in hours] == [f"{h:02d}" for h in range(24)]
    assert all(b.kwh == 0 for b in hours)
    assert aggregator.by_entity([]) == {}


def test_by_hour_buckets_by_utc_hour(clock):
    readings = _readings(clock, [("A", 8, 1.5), ("B", 8, 0.25), ("A", 23, 2)])
    hours = {b.hour: b.kwh for b in aggregator.by_hour(readings)}

    assert len(hours) == 24
    assert hours["08"] == Decimal("1.75")
    assert hours["23"] == Decimal("2")
    assert hours["00"] == 0


def test_single_hour_input_still_has_24_buckets(clock):
    readings = _readings(clock, [("A", 5, 1)])
    assert len(aggregator.by_hour(readings)) == 24


@pytest.mark.parametrize(
    "rows",
    [
        CAMPUS,
        [("A", 0, 0.1), ("A", 0, 0.2), ("B", 23, 0.3)],
        [("X", h, 0.07 * (h + 1)) for h in range(24)] * 3,
    ],
)
def test_series_sum_to_total(clock, rows):
    readings = _readings(clock, rows)
    expected = aggregator.total(readings)

    assert sum(b.kwh for b in aggregator.by_hour(readings)) == expected
    assert sum(aggregator.by_entity(readings).values()) == expected


def test_by_entity_groups_by_building_in_first_occurrence_order(clock):
    readings = _readings(clock, CAMPUS)
    result = aggregator.by_entity(readings)

    assert list(result) == ["A", "B", "Biblioteca", "Gimnasio"]
    assert result["A"] == Decimal("5.7")


def test_by_entity_accepts_a_custom_key(clock):
    readings = _readings(clock, CAMPUS)
    by_hour_label = aggregator.by_entity(readings, key=aggregator.hour_of)
    assert by_hour_label["10"] == Decimal("5.8")


def test_buildings_and_filter(clock):
    readings = _readings(clock, CAMPUS)

    assert aggregator.buildings(readings) == ["A", "B", "Biblioteca", "Gimnasio"]
    assert [r.kwh for r in aggregator.filter_by_building(readings, "A")] == [
        Decimal("2.2"),
        Decimal("3.5"),
    ]
    assert aggregator.filter_by_building(readings, "Nowhere") == []
    assert len(aggregator.filter_by_building(readings, None)) == 5
    assert len(aggregator.filter_by_building(readings, aggregator.ALL_BUILDINGS)) == 5
