"""Request context middleware — assigns an ID to every request.

An account-linking test drives three endpoints in quick succession, often
several flows at once.  Tagging each log line with a request ID keeps the
interleaved "FAKE OAUTH [...]" steps of concurrent flows apart.

The ID lives in a ContextVar rather than a thread-local: Starlette serves
many requests on one event-loop thread, and each task gets its own copy
of the context.
"""

from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


def _install_record_factory() -> None:
    """Stamp every LogRecord, from any logger, with the current request ID.

    Logger filters only run on the logger a record is created on, so a
    filter on the root would miss every fakeauth.services.* record.
    """
    base_factory = logging.getLogRecordFactory()
    if getattr(base_factory, "_stamps_request_id", False):
        return

    def factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.request_id = request_id_var.get()  # type: ignore[attr-defined]
        return record

    factory._stamps_request_id = True  # type: ignore[attr-defined]
    logging.setLogRecordFactory(factory)


_install_record_factory()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assign a request ID, time the request and log one summary line.

    1. Reuses the caller's X-Request-ID header or generates a UUID4
    2. Stores it in request_id_var for the duration of the request
    3. Logs method, path, status and duration on completion
    4. Echoes the ID back in the X-Request-ID response header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        req_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        token = request_id_var.set(req_id)

        try:
            start = time.monotonic()
            response = await call_next(request)
            duration_ms = round((time.monotonic() - start) * 1000, 1)

            logger.info(
                "%s %s → %d (%.1fms)",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = req_id
        return response
