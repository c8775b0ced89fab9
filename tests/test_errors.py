from fastapi.testclient import TestClient

from mediflow.config import settings
from mediflow.main import app

client = TestClient(app)


def test_unknown_route_uses_error_envelope():
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_wrong_method_uses_error_envelope():
    response = client.get("/api/extract-form")
    assert response.status_code == 405
    assert response.json()["success"] is False


def test_invalid_json_is_bad_request():
    response = client.post(
        "/api/validate-medications",
        content=b'{"medications": [',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"].startswith("Invalid JSON body")


def test_body_over_limit_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "MAX_BODY_SIZE", 16)
    response = client.post(
        "/api/extract-form", json={"image": "x" * 100})
    assert response.status_code == 413
    assert response.json() == {"success": False, "error": "Request body too large"}


def test_cors_preflight_allows_any_origin():
    response = client.options(
        "/api/extract-form",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "http://example.com")


def test_cors_header_on_simple_request():
    response = client.get("/health", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] in ("*", "http://example.com")


def test_chunked_body_over_limit_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "MAX_BODY_SIZE", 16)

    def chunks():
        for _ in range(10):
            yield b"x" * 8

    response = client.post(
        "/api/extract-form",
        content=chunks(),
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 413
    assert response.json() == {"success": False, "error": "Request body too large"}


def test_json_primitive_body_is_bad_request():
    response = client.post(
        "/api/extract-form",
        content=b'"hello"',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"].startswith("Invalid JSON body")
