from __future__ import annotations

from fastapi.testclient import TestClient

from fakeauth.main import app

client = TestClient(app, follow_redirects=False)


def test_health_returns_ok() -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_fakeauth_route_registered() -> None:
    resp = client.get("/fakeauth", params={"redirect_uri": "https://x/cb"})
    assert resp.status_code == 302


def test_login_route_registered() -> None:
    resp = client.get("/login", params={"responseurl": "https://x/cb?code=1"})
    assert resp.status_code == 200


def test_faketoken_route_registered() -> None:
    resp = client.post("/faketoken", data={"grant_type": "authorization_code"})
    assert resp.status_code == 200


def test_unknown_route_returns_404() -> None:
    resp = client.get("/oauth/authorize")
    assert resp.status_code == 404
