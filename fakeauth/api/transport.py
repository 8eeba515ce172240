"""Glue between Starlette requests/responses and the pure flow handlers.

The handlers in fakeauth/services/ take (method, params) and return a
HandlerResponse.  This module builds the params mapping the way a servlet
container would (query string first, request body on top) and turns the
HandlerResponse back into a Starlette response.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from fakeauth.models.handler_response import HandlerResponse

logger = logging.getLogger(__name__)

_BODY_METHODS = ("POST", "PUT", "PATCH")
_SCALARS = (str, int, float, bool)


def flatten_json_object(payload: dict[str, Any]) -> dict[str, str]:
    """Keep the scalar members of a JSON object, rendered as form values.

    Strings pass through; numbers and booleans keep their JSON spelling
    ("true", "1.5"); null, arrays and nested objects are dropped.
    """
    return {
        str(key): value if isinstance(value, str) else json.dumps(value)
        for key, value in payload.items()
        if isinstance(value, _SCALARS)
    }


async def _json_params(request: Request) -> dict[str, str]:
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Unparseable JSON body on %s, ignoring it", request.url.path)
        return {}
    if not isinstance(payload, dict):
        logger.warning(
            "JSON body on %s is not an object, ignoring it", request.url.path
        )
        return {}
    return flatten_json_object(payload)


async def _form_params(request: Request) -> dict[str, str]:
    try:
        form = await request.form()
    except (StarletteHTTPException, MultiPartException):
        logger.warning("Unparseable form body on %s, ignoring it", request.url.path)
        return {}
    # Uploaded files carry no flow parameters.
    return {key: value for key, value in form.items() if isinstance(value, str)}


async def request_params(request: Request) -> dict[str, str]:
    """Flatten query string and body into one str → str mapping.

    Query values are already percent-decoded by Starlette; that is the one
    decode a consent ticket gets on its way into /login.  Body values win
    over query values of the same name.
    """
    params = dict(request.query_params)
    if request.method not in _BODY_METHODS:
        return params

    content_type = request.headers.get("content-type", "")
    if "json" in content_type:
        params.update(await _json_params(request))
    elif content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        params.update(await _form_params(request))
    return params


def to_response(result: HandlerResponse) -> Response:
    if isinstance(result.body, dict):
        return JSONResponse(
            content=result.body,
            status_code=result.status_code,
            headers=result.headers,
        )
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
        media_type=result.media_type,
    )
