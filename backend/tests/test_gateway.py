import pytest

from backend.gateway.server import create_app, cors_origins, DEFAULT_CORS_ORIGINS

@pytest.fixture
def gateway_client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()

def test_ping(gateway_client):
    response = gateway_client.get("/")
    assert response.status_code == 200
    assert response.get_json() == {"status": "gateway_ok"}

def test_health(gateway_client):
    response = gateway_client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}

def test_studio_routes_mounted_under_api(gateway_client):
    response = gateway_client.get("/api/styles")
    assert response.status_code == 200
    assert "swap" in response.get_json()

def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://studio.example.com, https://admin.example.com")
    assert cors_origins() == ["https://studio.example.com", "https://admin.example.com"]

    monkeypatch.setenv("CORS_ORIGINS", "")
    assert cors_origins() == DEFAULT_CORS_ORIGINS
