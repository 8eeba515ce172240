from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import Response

from fakeauth.api.transport import request_params, to_response
from fakeauth.services.authorize_service import AUTHORIZE_PATH, handle_authorize

router = APIRouter(tags=["fake-oauth"])


@router.api_route(
    AUTHORIZE_PATH,
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_model=None,
)
async def fakeauth(request: Request) -> Response:
    """Authorization endpoint. GET redirects to the consent page."""
    params = await request_params(request)
    return to_response(handle_authorize(request.method, params))
