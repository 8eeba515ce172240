"""Demo: walk the fake authorization-code flow using FastAPI TestClient.

Run with:
    python scripts/demo_flow.py
"""

from __future__ import annotations

from urllib.parse import parse_qs, unquote, urlparse

from fastapi.testclient import TestClient

from fakeauth.main import app

CLIENT_ID = "demo-client"
CLIENT_SECRET = "demo-secret"
REDIRECT_URI = "https://oauth-redirect.googleusercontent.com/r/demo-project"
STATE = "demo-state"


def main() -> None:
    client = TestClient(app, follow_redirects=False)

    # ── Step 1: GET /fakeauth ───────────────────────────────────────
    r = client.get(
        "/fakeauth",
        params={
            "response_type": "code",
            "client_id": CLIENT_ID,
            "redirect_uri": REDIRECT_URI,
            "scope": "https://www.googleapis.com/auth/homegraph",
            "state": STATE,
        },
    )
    location = r.headers["location"]
    print(f"1. GET  /fakeauth          → {r.status_code}  {location[:60]}…")
    ticket = unquote(location.split("responseurl=", 1)[1])
    print(f"   consent ticket          = {ticket}")

    # ── Step 2: GET /login (consent page) ───────────────────────────
    r = client.get("/login", params={"responseurl": ticket})
    print(f"2. GET  /login             → {r.status_code}  (consent form HTML)")

    # ── Step 3: POST /login (grant consent) ─────────────────────────
    r = client.post("/login", data={"responseurl": ticket})
    callback = r.headers["location"]
    print(f"3. POST /login             → {r.status_code}  {callback}")
    query = parse_qs(urlparse(callback).query)
    code = query["code"][0]
    assert query["state"] == [STATE], "state mismatch!"

    # ── Step 4: POST /faketoken (authorization_code) ────────────────
    r = client.post(
        "/faketoken",
        data={
            "grant_type": "authorization_code",
            "client_id": CLIENT_ID,
            "client_secret": CLIENT_SECRET,
            "code": code,
            "redirect_uri": REDIRECT_URI,
        },
    )
    tokens = r.json()
    print(f"4. POST /faketoken (code)  → {r.status_code}  {tokens}")

    # ── Step 5: POST /faketoken (refresh_token, JSON body) ──────────
    r = client.post(
        "/faketoken",
        json={
            "grant_type": "refresh_token",
            "client_id": CLIENT_ID,
            "client_secret": CLIENT_SECRET,
            "refresh_token": tokens["refresh_token"],
        },
    )
    print(f"5. POST /faketoken (refresh) → {r.status_code}  {r.json()}")


if __name__ == "__main__":
    main()
