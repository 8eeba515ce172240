from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class HandlerResponse:
    """What a flow handler wants sent back; the HTTP layer emits it as-is."""

    status_code: int
    media_type: str | None = None
    body: str | dict[str, Any] = ""
    headers: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def redirect(location: str) -> HandlerResponse:
        return HandlerResponse(status_code=302, headers={"Location": location})

    @staticmethod
    def text(body: str) -> HandlerResponse:
        return HandlerResponse(status_code=200, media_type="text/plain", body=body)

    @staticmethod
    def html(body: str) -> HandlerResponse:
        return HandlerResponse(status_code=200, media_type="text/html", body=body)

    @staticmethod
    def json(payload: dict[str, Any]) -> HandlerResponse:
        return HandlerResponse(
            status_code=200, media_type="application/json", body=payload
        )
