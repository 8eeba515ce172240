from __future__ import annotations

from urllib.parse import unquote

import pytest
from fastapi.testclient import TestClient

from tests.conftest import REDIRECT_URI, STATE


def test_get_redirects_to_login(
    client: TestClient, authorize_params: dict[str, str]
) -> None:
    resp = client.get("/fakeauth", params=authorize_params)
    assert resp.status_code == 302
    assert resp.headers["location"].startswith("/login?responseurl=")


def test_location_decodes_to_redirect_uri_with_code_and_state(
    client: TestClient, authorize_params: dict[str, str]
) -> None:
    resp = client.get("/fakeauth", params=authorize_params)
    location = resp.headers["location"]
    decoded = unquote(location[location.index("=") + 1 :])
    assert decoded.startswith(REDIRECT_URI + "?")
    assert "code=" in decoded
    assert f"state={STATE}" in decoded


def test_repeated_requests_are_identical(
    client: TestClient, authorize_params: dict[str, str]
) -> None:
    first = client.get("/fakeauth", params=authorize_params)
    second = client.get("/fakeauth", params=authorize_params)
    assert first.headers["location"] == second.headers["location"]


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("client_id", "invalid-client"),
        ("response_type", "unsupported_type"),
        ("redirect_uri", "invalid-uri"),
    ],
)
def test_invalid_parameters_still_redirect(
    client: TestClient, authorize_params: dict[str, str], name: str, value: str
) -> None:
    resp = client.get("/fakeauth", params={**authorize_params, name: value})
    assert resp.status_code == 302


def test_post_returns_plain_text_notice(client: TestClient) -> None:
    resp = client.post("/fakeauth")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "/fakeauth should be a GET\n"


def test_put_returns_plain_text_notice(client: TestClient) -> None:
    resp = client.put("/fakeauth")
    assert resp.status_code == 200
    assert resp.text == "/fakeauth should be a GET\n"
