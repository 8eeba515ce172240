from __future__ import annotations

from fastapi.testclient import TestClient

REDIRECT_URL = "https://example.com/callback?code=123&state=test"


def test_get_renders_consent_page(client: TestClient) -> None:
    resp = client.get("/login", params={"responseurl": REDIRECT_URL})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "Link this service to Google" in resp.text
    assert REDIRECT_URL in resp.text


def test_get_embeds_decoded_value_in_hidden_field(client: TestClient) -> None:
    # responseurl arrives percent-encoded on the wire and is decoded once.
    resp = client.get(
        "/login?responseurl=https%3A%2F%2Fexample.com%2Fcallback%3Fcode%3D123%26state%3Dtest"
    )
    assert f"name='responseurl' value='{REDIRECT_URL}'/>" in resp.text


def test_post_form_redirects_to_responseurl(client: TestClient) -> None:
    resp = client.post("/login", data={"responseurl": REDIRECT_URL})
    assert resp.status_code == 302
    assert resp.headers["location"] == REDIRECT_URL


def test_post_query_parameter_also_accepted(client: TestClient) -> None:
    resp = client.post("/login", params={"responseurl": REDIRECT_URL})
    assert resp.status_code == 302
    assert resp.headers["location"] == REDIRECT_URL


def test_post_form_value_wins_over_query(client: TestClient) -> None:
    resp = client.post(
        "/login",
        params={"responseurl": "https://query.example/cb"},
        data={"responseurl": REDIRECT_URL},
    )
    assert resp.headers["location"] == REDIRECT_URL


def test_post_multipart_form_is_accepted(client: TestClient) -> None:
    resp = client.post(
        "/login",
        data={"responseurl": REDIRECT_URL},
        files={"ignored": ("x.txt", b"x")},
    )
    assert resp.status_code == 302
    assert resp.headers["location"] == REDIRECT_URL


def test_get_shows_angle_brackets_verbatim(client: TestClient) -> None:
    ticket = "https://x/cb?code=xxxxxx&state=<s>"
    resp = client.get("/login", params={"responseurl": ticket})
    assert ticket in resp.text


def test_get_writes_single_quote_as_entity(client: TestClient) -> None:
    ticket = "https://x/cb?code=xxxxxx&state=it's"
    resp = client.get("/login", params={"responseurl": ticket})
    assert "value='https://x/cb?code=xxxxxx&state=it&#x27;s'/>" in resp.text
    # What a browser submits after decoding the entity redirects unchanged.
    post = client.post("/login", data={"responseurl": ticket})
    assert post.headers["location"] == ticket
