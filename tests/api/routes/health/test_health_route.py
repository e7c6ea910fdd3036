"""Testes dos endpoints de serviço e do handler de 404."""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.routes.health.router import health_check, service_info
from app.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.mark.asyncio
async def test_health_check_reports_ok() -> None:
    payload = await health_check()

    assert payload["status"] == "ok"
    assert payload["message"] == "Voice Scheduling Backend is running"
    assert datetime.fromisoformat(payload["timestamp"]).tzinfo is not None


@pytest.mark.asyncio
async def test_service_info_lists_endpoints() -> None:
    payload = await service_info()

    assert payload["endpoints"] == {"health": "/health", "createEvent": "/webhook/create-event"}


def test_health_route_over_http(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.headers["x-correlation-id"]


def test_root_route_over_http(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Voice Scheduling Backend API"


@pytest.mark.parametrize(
    ("method", "path"),
    [("GET", "/nope"), ("POST", "/webhook/other"), ("GET", "/webhook/create-event")],
)
def test_unknown_routes_return_not_found_payload(
    client: TestClient,
    method: str,
    path: str,
) -> None:
    response = client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {
        "error": "Endpoint not found",
        "availableEndpoints": {"health": "/health", "createEvent": "/webhook/create-event"},
    }


def test_correlation_id_header_is_echoed(client: TestClient) -> None:
    response = client.get("/health", headers={"x-correlation-id": "corr-123"})

    assert response.headers["x-correlation-id"] == "corr-123"
