import pytest

from core.config import DEV_CORS_ORIGINS, get_cors_origins


@pytest.fixture
def app_client():
    from app import app

    app.config["TESTING"] = True
    return app.test_client()


def test_health_check(app_client):
    resp = app_client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "message": "Backend is running"}


def test_root(app_client):
    resp = app_client.get("/")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_submit_form_is_mounted_under_api(app_client):
    resp = app_client.post("/api/submit-form", json={"name": "No type"})
    assert resp.status_code == 500
    assert "Invalid or missing user type" in resp.get_json()["message"]


def test_cors_headers_for_allowed_origin(app_client):
    resp = app_client.get("/health", headers={"Origin": "http://localhost:3000"})
    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"


def test_cors_origins_are_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    assert get_cors_origins() == ["https://a.example", "https://b.example"]


def test_cors_origins_required_in_production(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("FLASK_ENV", raising=False)
    with pytest.raises(ValueError, match="CORS_ORIGINS"):
        get_cors_origins()


def test_cors_origins_default_in_development(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.setenv("FLASK_ENV", "development")
    assert get_cors_origins() == DEV_CORS_ORIGINS.split(",")
