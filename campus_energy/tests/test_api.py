import pytest


def test_root_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["message"] == "Campus Energy Manager API is running"

    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["readings"] == 5
    assert body["alerts"] == 3
    assert body["recommendations"] == 3


def test_dashboard_metrics(client):
    r = client.get("/api/dashboard/metrics")
    assert r.status_code == 200
    data = r.json()

    assert data["total_kwh"] == pytest.approx(17.0)
    assert data["cost_estimate"] == pytest.approx(3.74)
    assert data["co2_estimate"] == pytest.approx(6.8)
    assert [b["hour"] for b in data["hour_series"]] == [f"{h:02d}" for h in range(24)]
    hours = {b["hour"]: b["kwh"] for b in data["hour_series"]}
    assert hours["10"] == pytest.approx(5.8)
    assert hours["00"] == 0
    assert [e["name"] for e in data["entity_series"]] == ["A", "B", "Biblioteca", "Gimnasio"]
    assert len(data["active_alerts"]) == 3


def test_add_and_list_readings(client):
    r = client.post(
        "/api/readings",
        json={
            "building": "A",
            "room": "102",
            "device": "Proyector",
            "kwh": 1.3,
            "timestamp": "2025-09-01T15:05:00Z",
        },
    )
    assert r.status_code == 201
    created = r.json()
    assert created["id"]
    assert created["kwh"] == pytest.approx(1.3)

    r = client.get("/api/readings", params={"building": "A"})
    assert r.status_code == 200
    assert [x["room"] for x in r.json()] == ["101", "101", "102"]

    r = client.get("/api/dashboard/metrics")
    assert r.json()["total_kwh"] == pytest.approx(18.3)


def test_reading_without_timestamp_gets_one(client):
    r = client.post(
        "/api/readings",
        json={"building": "Gimnasio", "room": "Sala pesas", "device": "Luces", "kwh": 0.5},
    )
    assert r.status_code == 201
    assert r.json()["timestamp"]


@pytest.mark.parametrize(
    "payload",
    [
        {"building": "A", "room": "101", "device": "Luces", "kwh": -2},
        {"building": "A", "room": "101", "device": "Luces", "kwh": "mucho"},
        {"building": "", "room": "101", "device": "Luces", "kwh": 2},
        {"building": "A", "room": "101", "device": "Luces"},
    ],
)
def test_invalid_reading_returns_422_and_is_not_stored(client, payload):
    r = client.post("/api/readings", json=payload)
    assert r.status_code == 422
    assert r.json()["detail"]

    assert len(client.get("/api/readings").json()) == 5


def test_buildings(client):
    r = client.get("/api/readings/buildings")
    assert r.status_code == 200
    assert r.json() == ["A", "B", "Biblioteca", "Gimnasio"]


def test_toggle_alert_round_trip(client):
    alerts = client.get("/api/alerts").json()
    alert_id = alerts[1]["id"]

    r = client.post(f"/api/alerts/{alert_id}/toggle")
    assert r.status_code == 200
    assert r.json()["status"] == "Resolved"

    resolved = client.get("/api/alerts", params={"status": "Resolved"}).json()
    assert [a["id"] for a in resolved] == [alert_id]
    assert len(client.get("/api/dashboard/metrics").json()["active_alerts"]) == 2

    r = client.post(f"/api/alerts/{alert_id}/toggle")
    assert r.json() == alerts[1]


def test_toggle_unknown_alert_is_404(client):
    r = client.post("/api/alerts/does-not-exist/toggle")
    assert r.status_code == 404
    assert r.json()["kind"] == "Alert"


def test_bad_alert_status_filter_is_422(client):
    r = client.get("/api/alerts", params={"status": "Snoozed"})
    assert r.status_code == 422


def test_apply_recommendation(client):
    recs = client.get("/api/recommendations").json()
    assert [r["applied"] for r in recs] == [False, False, False]
    rec_id = recs[0]["id"]

    first = client.post(f"/api/recommendations/{rec_id}/apply")
    second = client.post(f"/api/recommendations/{rec_id}/apply")
    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert first.json()["applied"] is True

    r = client.post("/api/recommendations/unknown/apply")
    assert r.status_code == 404
    assert [x["applied"] for x in client.get("/api/recommendations").json()] == [True, False, False]


def test_simulation(client):
    r = client.post("/api/simulations", json={"reduction_percent": 15})
    assert r.status_code == 200
    data = r.json()

    assert data["scenario"] == "Apagado inteligente"
    assert data["saved_kwh"] == pytest.approx(2.55)
    assert data["saved_cost"] == pytest.approx(0.561)
    assert data["saved_emissions"] == pytest.approx(1.02)
    assert data["remaining_kwh"] == pytest.approx(14.45)
    assert [p["name"] for p in data["comparison"]] == ["Actual", "Scenario"]


def test_simulation_over_100_percent_clamps(client):
    r = client.post(
        "/api/simulations",
        json={"reduction_percent": 120, "scenario": "Sensores presencia"},
    )
    assert r.status_code == 200
    assert r.json()["remaining_kwh"] == 0
    assert r.json()["scenario"] == "Sensores presencia"


def test_scenarios(client):
    r = client.get("/api/simulations/scenarios")
    assert r.status_code == 200
    assert "Horario valle" in r.json()
