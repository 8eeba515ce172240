from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import Response

from fakeauth.api.transport import request_params, to_response
from fakeauth.services.consent_service import CONSENT_PATH, handle_consent

router = APIRouter(tags=["fake-oauth"])


@router.api_route(CONSENT_PATH, methods=["GET", "POST"], response_model=None)
async def login(request: Request) -> Response:
    """Consent page. GET renders the form, POST completes the redirect."""
    params = await request_params(request)
    return to_response(handle_consent(request.method, params))
