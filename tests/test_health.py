"""Health check endpoint tests."""

from httpx import AsyncClient


async def test_health_reports_version_and_db(client: AsyncClient):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "0.1.0"
    assert data["status"] in {"ok", "degraded"}
    assert data["db"] in {"ok", "error"}


async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/api/v1/health", headers={"X-Request-Id": "req-123"})
    assert response.headers["X-Request-Id"] == "req-123"


async def test_request_id_is_generated(client: AsyncClient):
    response = await client.get("/api/v1/health")
    assert response.headers["X-Request-Id"]


async def test_unknown_route_is_problem_json(client: AsyncClient):
    response = await client.get("/api/v1/logo/nope")
    assert response.status_code == 404
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["instance"] == "/api/v1/logo/nope"
