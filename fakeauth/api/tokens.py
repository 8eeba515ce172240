from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import Response

from fakeauth.api.transport import request_params, to_response
from fakeauth.services.token_service import TOKEN_PATH, handle_token

router = APIRouter(tags=["fake-oauth"])


@router.api_route(
    TOKEN_PATH,
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_model=None,
)
async def faketoken(request: Request) -> Response:
    """Token endpoint. Accepts form-encoded or JSON bodies."""
    params = await request_params(request)
    return to_response(handle_token(request.method, params))
