from __future__ import annotations

from dataclasses import replace

from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.controllers.allocation_controller import router as allocation_router
from backend.services.allocation_service import RoomAllocationService
from backend.utils.config import get_settings


def _build_test_app(room_capacity: int = 4) -> FastAPI:
    get_settings.cache_clear()
    settings = replace(get_settings(), room_capacity=room_capacity)

    app = FastAPI()
    app.include_router(allocation_router)
    app.state.allocation_service = RoomAllocationService(settings=settings)
    return app


def test_health_reports_capacity():
    client = TestClient(_build_test_app(room_capacity=3))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "room_capacity": 3}


def test_distribute_returns_sorted_rooms():
    client = TestClient(_build_test_app())

    response = client.post(
        "/distribute",
        json={"room_count": 2, "adults": 2, "seniors": 2, "children": 1},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["rooms"] == [
        {"adults": 2, "seniors": 0, "children": 1},
        {"adults": 0, "seniors": 2, "children": 0},
    ]
    assert body["status"] == "allocated"
    assert body["feasible"] is True
    assert body["senior_only_rooms"] == 1
    assert body["room_capacity"] == 4


def test_impossible_distribution_is_not_an_http_error():
    client = TestClient(_build_test_app())

    response = client.post(
        "/distribute",
        json={"room_count": 1, "adults": 0, "seniors": 0, "children": 2},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["rooms"] == []
    assert body["status"] == "infeasible"
    assert body["feasible"] is False


def test_non_positive_room_count_is_infeasible():
    client = TestClient(_build_test_app())

    response = client.post(
        "/distribute",
        json={"room_count": -1, "adults": 1, "seniors": 0, "children": 0},
    )

    assert response.status_code == 200
    assert response.json()["rooms"] == []


def test_negative_people_count_is_rejected():
    client = TestClient(_build_test_app())

    response = client.post(
        "/distribute",
        json={"room_count": 2, "adults": -1, "seniors": 2, "children": 1},
    )

    assert response.status_code == 422


def test_missing_field_is_rejected():
    client = TestClient(_build_test_app())

    response = client.post("/distribute", json={"room_count": 2, "adults": 2})

    assert response.status_code == 422


def test_service_is_created_lazily_when_missing():
    get_settings.cache_clear()
    app = FastAPI()
    app.include_router(allocation_router)
    client = TestClient(app)

    response = client.post(
        "/distribute",
        json={"room_count": 1, "adults": 1, "seniors": 0, "children": 0},
    )

    assert response.status_code == 200
    assert response.json()["rooms"] == [{"adults": 1, "seniors": 0, "children": 0}]
    assert isinstance(app.state.allocation_service, RoomAllocationService)
