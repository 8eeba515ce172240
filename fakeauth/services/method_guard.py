from __future__ import annotations

import logging

from fakeauth.core.metrics import WRONG_METHOD
from fakeauth.models.handler_response import HandlerResponse

logger = logging.getLogger(__name__)


def wrong_method(path: str, expected: str) -> HandlerResponse:
    """Plain-text notice sent instead of a 405.

    Status stays 200 so the endpoint is always reachable from a browser
    address bar or a bare curl while poking at the fake server by hand.
    """
    WRONG_METHOD.labels(endpoint=path).inc()
    logger.info("FAKE OAUTH wrong method  path=%s expected=%s", path, expected)
    return HandlerResponse.text(f"{path} should be a {expected}\n")
