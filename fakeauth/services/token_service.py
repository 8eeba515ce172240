"""Token step: hand out the fixed token payload.

Nothing in the request is checked.  The grant type only decides whether a
refresh token is included: a refresh exchange gets a new access token and
no refresh token; every other grant type, including an unknown or missing
one, gets the full authorization-code payload.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from fakeauth.core.metrics import TOKENS_ISSUED
from fakeauth.models.handler_response import HandlerResponse
from fakeauth.models.tokens import REFRESH_TOKEN, TokenPair
from fakeauth.services.method_guard import wrong_method

logger = logging.getLogger(__name__)

TOKEN_PATH = "/faketoken"

GRANT_AUTHORIZATION_CODE = "authorization_code"
GRANT_REFRESH_TOKEN = "refresh_token"


def issue_tokens(grant_type: str | None) -> TokenPair:
    if grant_type == GRANT_REFRESH_TOKEN:
        return TokenPair()
    # Unknown and missing grant types land here too; clients written against
    # this server rely on getting a refresh token back in that case.
    return TokenPair(refresh_token=REFRESH_TOKEN)


def _exchange(params: Mapping[str, str]) -> HandlerResponse:
    grant_type = params.get("grant_type")
    logger.info(
        "FAKE OAUTH [token] step 1: received token request  "
        "grant_type=%s client_id=%s",
        grant_type,
        params.get("client_id"),
        extra={"grant_type": grant_type},
    )

    tokens = issue_tokens(grant_type)
    label = (
        grant_type
        if grant_type in (GRANT_AUTHORIZATION_CODE, GRANT_REFRESH_TOKEN)
        else "other"
    )
    TOKENS_ISSUED.labels(grant_type=label).inc()
    logger.info(
        "FAKE OAUTH [token] step 2: token issued  refresh_token=%s expires_in=%d",
        "yes" if tokens.refresh_token else "no",
        tokens.expires_in,
    )
    return HandlerResponse.json(tokens.to_payload())


_METHODS: dict[str, Callable[[Mapping[str, str]], HandlerResponse]] = {
    "POST": _exchange,
}


def handle_token(method: str, params: Mapping[str, str]) -> HandlerResponse:
    handler = _METHODS.get(method.upper())
    if handler is None:
        return wrong_method(TOKEN_PATH, "POST")
    return handler(params)
