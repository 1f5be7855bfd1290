"""Tests for the /health endpoint."""

from unittest.mock import AsyncMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from equity_exchange.api.routes.health import router


def _make_app(openai_client=None) -> FastAPI:
    app = FastAPI()
    app.include_router(router)
    app.state.openai = openai_client
    return app


class TestHealthRoute:
    def test_health_without_openai(self):
        client = TestClient(_make_app())
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "model_scoring": False}

    def test_health_ok(self):
        mock_openai = AsyncMock()
        mock_openai.health_check = AsyncMock(return_value={"healthy": True, "chat_model": "m"})
        client = TestClient(_make_app(mock_openai))
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "model_scoring": True}

    def test_health_openai_down(self):
        mock_openai = AsyncMock()
        mock_openai.health_check = AsyncMock(
            return_value={"healthy": False, "error": "Connection refused"}
        )
        client = TestClient(_make_app(mock_openai))
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "degraded"
        assert body["model_scoring"] is False
        assert body["error"] == "Connection refused"
