"""Mini README: Tests for the FastAPI planning service.

Uses FastAPI's TestClient to exercise the health check and the plan-route
endpoint, including the error responses for bad regions and failed searches.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from droneroute.interface import create_application


def square(name: str, lng: float, lat: float, half: float) -> dict:
    return {
        "name": name,
        "vertices": [
            {"lng": lng - half, "lat": lat - half},
            {"lng": lng + half, "lat": lat - half},
            {"lng": lng + half, "lat": lat + half},
            {"lng": lng - half, "lat": lat + half},
        ],
    }


def test_health_reports_base() -> None:
    client = TestClient(create_application())
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert set(response.json()["base"]) == {"lng", "lat"}


def test_plan_route_returns_waypoints() -> None:
    client = TestClient(create_application())
    response = client.post(
        "/plan-route",
        json={
            "start": {"lng": -3.192473, "lat": 55.942617},
            "destination": {"lng": -3.191473, "lat": 55.942617},
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["waypoints"][-1]["heading"] == 999.0
    assert payload["step_count"] == len(payload["waypoints"])
    assert payload["waypoints"][0]["previous_position"] == {"lng": -3.192473, "lat": 55.942617}


def test_plan_route_rejects_malformed_region() -> None:
    client = TestClient(create_application())
    response = client.post(
        "/plan-route",
        json={
            "start": {"lng": -3.192473, "lat": 55.942617},
            "destination": {"lng": -3.191473, "lat": 55.942617},
            "no_fly_zones": [{"name": "line", "vertices": [{"lng": 0, "lat": 0}, {"lng": 1, "lat": 1}]}],
        },
    )
    assert response.status_code == 400


def test_plan_route_reports_no_route() -> None:
    client = TestClient(create_application())
    response = client.post(
        "/plan-route",
        json={
            "start": {"lng": -3.19, "lat": 55.944},
            "destination": {"lng": -3.18, "lat": 55.944},
            "no_fly_zones": [square("Cage", -3.19, 55.944, 0.001)],
        },
    )
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "NoRouteFound"
