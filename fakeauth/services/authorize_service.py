"""Authorization step: turn an authorization request into a consent redirect.

The "consent ticket" is the client's redirect_uri with the fixed
authorization code and the caller's state already appended, i.e. the exact
URL the browser should land on once consent is granted.  It travels to the
consent page as a single query value, percent-encoded exactly once here
and decoded exactly once by the HTTP layer on the way in to /login.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from urllib.parse import quote, urlencode

from fakeauth.core.metrics import AUTHORIZATIONS
from fakeauth.models.authorization_request import AuthorizationRequest
from fakeauth.models.handler_response import HandlerResponse
from fakeauth.models.tokens import AUTHORIZATION_CODE
from fakeauth.services.consent_service import CONSENT_PATH, TICKET_PARAM
from fakeauth.services.method_guard import wrong_method

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/fakeauth"


def build_consent_ticket(redirect_uri: str, state: str | None) -> str:
    """Append code (and state, when the request had one) to redirect_uri."""
    params = {"code": AUTHORIZATION_CODE}
    if state is not None:
        params["state"] = state
    separator = "&" if "?" in redirect_uri else "?"
    return f"{redirect_uri}{separator}{urlencode(params)}"


def encode_ticket(ticket: str) -> str:
    return quote(ticket, safe="")


def consent_location(ticket: str) -> str:
    return f"{CONSENT_PATH}?{TICKET_PARAM}={encode_ticket(ticket)}"


def _authorize(params: Mapping[str, str]) -> HandlerResponse:
    auth_request = AuthorizationRequest.from_params(params)
    logger.info(
        "FAKE OAUTH [authorize] step 1: received authorization request  "
        "client_id=%s response_type=%s redirect_uri=%s scope=%s",
        auth_request.client_id,
        auth_request.response_type,
        auth_request.redirect_uri,
        auth_request.scope,
    )

    ticket = build_consent_ticket(auth_request.redirect_uri, auth_request.state)
    location = consent_location(ticket)
    AUTHORIZATIONS.inc()
    logger.info(
        "FAKE OAUTH [authorize] step 2: redirecting to consent  ticket=%s", ticket
    )
    return HandlerResponse.redirect(location)


_METHODS: dict[str, Callable[[Mapping[str, str]], HandlerResponse]] = {
    "GET": _authorize,
}


def handle_authorize(method: str, params: Mapping[str, str]) -> HandlerResponse:
    handler = _METHODS.get(method.upper())
    if handler is None:
        return wrong_method(AUTHORIZE_PATH, "GET")
    return handler(params)
