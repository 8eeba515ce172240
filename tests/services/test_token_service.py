from __future__ import annotations

import pytest

from fakeauth.services.token_service import handle_token, issue_tokens


def test_authorization_code_grant_includes_refresh_token() -> None:
    result = handle_token("POST", {"grant_type": "authorization_code"})
    assert result.status_code == 200
    assert result.media_type == "application/json"
    assert result.body == {
        "token_type": "bearer",
        "access_token": "123access",
        "refresh_token": "123refresh",
        "expires_in": 86400,
    }


def test_refresh_grant_omits_refresh_token_key() -> None:
    result = handle_token("POST", {"grant_type": "refresh_token"})
    assert result.status_code == 200
    assert isinstance(result.body, dict)
    assert "refresh_token" not in result.body
    assert result.body == {
        "token_type": "bearer",
        "access_token": "123access",
        "expires_in": 86400,
    }


@pytest.mark.parametrize("params", [{"grant_type": "invalid_grant_type"}, {}])
def test_unknown_or_missing_grant_falls_through_to_code_shape(
    params: dict[str, str],
) -> None:
    result = handle_token("POST", params)
    assert isinstance(result.body, dict)
    assert result.body["refresh_token"] == "123refresh"


def test_other_parameters_are_ignored() -> None:
    result = handle_token(
        "POST",
        {
            "grant_type": "authorization_code",
            "client_id": "nobody",
            "client_secret": "wrong",
            "code": "not-the-code",
            "redirect_uri": "elsewhere",
        },
    )
    assert result.status_code == 200
    assert result.body["access_token"] == "123access"  # type: ignore[index]


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
def test_non_post_gets_plain_text_notice(method: str) -> None:
    result = handle_token(method, {"grant_type": "authorization_code"})
    assert result.status_code == 200
    assert result.media_type == "text/plain"
    assert result.body == "/faketoken should be a POST\n"


def test_issue_tokens_is_fresh_per_call() -> None:
    first = issue_tokens("authorization_code")
    second = issue_tokens("authorization_code")
    assert first is not second
    assert first == second
