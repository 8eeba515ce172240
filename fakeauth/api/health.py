"""Health and readiness endpoints.

/health answers "is the process up?" and lists the flow endpoints so a
person pointing a client at this server can check the paths at a glance.
/ready always succeeds: there are no backing services to wait on.
"""

from __future__ import annotations

from fastapi import APIRouter, Response

from fakeauth.services.authorize_service import AUTHORIZE_PATH
from fakeauth.services.consent_service import CONSENT_PATH
from fakeauth.services.token_service import TOKEN_PATH

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "endpoints": {
            "authorize": AUTHORIZE_PATH,
            "consent": CONSENT_PATH,
            "token": TOKEN_PATH,
        },
    }


@router.get("/ready")
async def ready() -> Response:
    return Response(status_code=200)
