"""Tests for the FastAPI app startup/shutdown and route wiring."""

from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient


def _settings(api_key: str = "") -> MagicMock:
    return MagicMock(
        OPENAI_API_KEY=api_key,
        OPENAI_CHAT_MODEL="gpt-4o-mini",
        STRICT_SAFE_RENDERING=False,
        LOG_LEVEL="INFO",
        LOG_JSON=False,
    )


class TestAppLifespan:
    @patch("equity_exchange.api.main.get_settings")
    @patch("equity_exchange.api.main.OpenAIClient")
    def test_without_api_key(self, mock_openai, mock_settings):
        mock_settings.return_value = _settings()

        from equity_exchange.api.main import app

        with TestClient(app) as client:
            assert app.state.openai is None
            assert app.state.scorer.model_enabled is False
            resp = client.get("/health")
            assert resp.json() == {"status": "ok", "model_scoring": False}

        mock_openai.assert_not_called()

    @patch("equity_exchange.api.main.get_settings")
    @patch("equity_exchange.api.main.OpenAIClient")
    def test_with_api_key(self, mock_openai, mock_settings):
        mock_settings.return_value = _settings("sk-test")
        instance = AsyncMock()
        instance.chat_model = "gpt-4o-mini"
        instance.health_check = AsyncMock(return_value={"healthy": True})
        mock_openai.return_value = instance

        from equity_exchange.api.main import app

        with TestClient(app) as client:
            assert app.state.scorer.model_enabled is True
            resp = client.get("/health")
            assert resp.json() == {"status": "ok", "model_scoring": True}

        mock_openai.assert_called_once_with(api_key="sk-test", chat_model="gpt-4o-mini")
        instance.close.assert_awaited_once()


class TestAppRouteWiring:
    @patch("equity_exchange.api.main.get_settings")
    def test_routes_registered(self, mock_settings):
        mock_settings.return_value = _settings()

        from equity_exchange.api.main import app

        paths = {route.path for route in app.routes}
        assert {
            "/health",
            "/matching/score",
            "/matching/equity-range",
            "/safe/render",
            "/safe/generate",
            "/safe/sign",
        } <= paths

    @patch("equity_exchange.api.main.get_settings")
    def test_score_route_serves_heuristic(self, mock_settings, sample_startup):
        mock_settings.return_value = _settings()

        from equity_exchange.api.main import app

        with TestClient(app) as client:
            resp = client.post("/matching/score", json={"startup": sample_startup})

        assert resp.status_code == 200
        assert resp.json()["data"]["source"] == "heuristic"
