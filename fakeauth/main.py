from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fakeauth.api.authorize import router as authorize_router
from fakeauth.api.consent import router as consent_router
from fakeauth.api.health import router as health_router
from fakeauth.api.metrics_endpoint import router as metrics_router
from fakeauth.api.tokens import router as token_router
from fakeauth.core.config import SETTINGS
from fakeauth.core.logging import setup_logging
from fakeauth.middleware.metrics import MetricsMiddleware
from fakeauth.middleware.request_context import RequestContextMiddleware

# Configure logging before anything else runs.
setup_logging(SETTINGS.log_level, json_format=SETTINGS.log_json)

logger = logging.getLogger(__name__)

# only app setup + router registration

app = FastAPI(
    title="fake-oauth-server",
    docs_url="/docs" if SETTINGS.is_dev else None,
    redoc_url="/redoc" if SETTINGS.is_dev else None,
)

# Credentials stay off so a "*" origin list remains valid.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Middleware execution order: last-added runs first (outermost layer).
# RequestContext (outermost) → Metrics → CORS → route handler
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestContextMiddleware)

app.include_router(metrics_router)
app.include_router(health_router)
app.include_router(authorize_router)
app.include_router(consent_router)
app.include_router(token_router)

logger.info(
    "fake-oauth-server started  env=%s log_level=%s port=%d docs=%s",
    SETTINGS.app_env,
    SETTINGS.log_level,
    SETTINGS.port,
    "on" if SETTINGS.is_dev else "off",
)
