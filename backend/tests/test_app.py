"""
Employee List Backend — App-Level Tests
=========================================

What:  Health endpoint, frontend serving and request-ID propagation.
"""

import pytest
from httpx import ASGITransport, AsyncClient


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_connected(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["dbState"] == 1
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_without_database(self, unavailable_client):
        response = await unavailable_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "degraded"
        assert body["dbState"] == 0
        assert body["database"] == "disabled"


class TestFrontend:

    @pytest.mark.asyncio
    async def test_root_serves_entry_document(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<app-root>" in response.text

    @pytest.mark.asyncio
    async def test_static_assets_are_served(self, test_client):
        response = await test_client.get("/main.js")

        assert response.status_code == 200
        assert "employee list" in response.text

    @pytest.mark.asyncio
    async def test_root_without_bundle_is_404(self, database, tmp_path, monkeypatch):
        from employee_api.config import settings
        from employee_api.main import create_app

        monkeypatch.setattr(settings, "frontend_dist", str(tmp_path / "not-built"))
        app = create_app(database=database)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/")
            api_response = await client.get("/api/employeelist")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
        assert api_response.status_code == 200


class TestRoutingErrors:

    @pytest.mark.asyncio
    async def test_unknown_api_path_uses_error_body(self, test_client):
        response = await test_client.get("/api/nope", headers={"X-Request-ID": "trace-789"})

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["request_id"] == "trace-789"
        assert "detail" not in body

    @pytest.mark.asyncio
    async def test_wrong_method_uses_error_body(self, test_client):
        response = await test_client.patch("/api/employeelist", json={})

        assert response.status_code == 405
        body = response.json()
        assert body["error"] == "http_error"
        assert set(body) == {"error", "message", "details", "request_id"}


class TestRequestId:

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/employeelist", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/api/employeelist")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.get(
            "/api/employeelist/not-a-valid-id", headers={"X-Request-ID": "trace-456"}
        )

        assert response.json()["request_id"] == "trace-456"
