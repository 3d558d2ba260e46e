# =============================================================================
# tests/test_health.py - Health Endpoint and Runner Tests
# =============================================================================

from unittest.mock import MagicMock, patch

import app.main as main_module
from app.config import settings
from lib.supabase_client import MockFestivalStore


def test_health_reports_store_mode(store_client):
    api = store_client(MockFestivalStore())

    response = api.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["store_mode"] == "mock"


def test_ready_when_store_answers(client):
    response = client.get("/api/health/ready")

    assert response.json()["status"] == "ready"
    assert response.json()["store"] == "live: healthy"


def test_degraded_when_store_down(store_client):
    store = MagicMock()
    store.mode = "live"
    store.ping.return_value = False
    api = store_client(store)

    response = api.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"


def test_root(client):
    assert client.get("/").json()["name"] == "FestiFind API"


def test_runner_uses_configured_host_and_port():
    with patch.object(main_module.uvicorn, "run") as run:
        main_module.run()

    run.assert_called_once_with(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
