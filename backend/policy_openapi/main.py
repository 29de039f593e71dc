"""Policy OpenAPI — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PolicyOpenAPIError → plain-text diagnostics
    - CORS configured from settings (not hardcoded)
    - A corrupt template is logged on startup but never prevents the process from serving

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Template warm check on startup: a configuration defect shows up in logs before
      the first request, while requests still get a 500 instead of a dead process
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from policy_openapi.core.errors import TemplateCorruptionError
from policy_openapi.infrastructure.observability import setup_logging
from policy_openapi.infrastructure.template_store import get_template_store
from policy_openapi.config import get_settings
from policy_openapi.api.error_handlers import register_error_handlers
from policy_openapi.api.routes import health, openapi

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        get_template_store().load()
    except TemplateCorruptionError as exc:
        logger.error(
            f"OpenAPI template is invalid: {exc.message}", extra=exc.to_log_extra(),
        )
    logger.info(
        "Policy OpenAPI started",
        extra={"path_prefix": settings.path_prefix},
    )
    yield
    logger.info("Policy OpenAPI shutting down")


app = FastAPI(
    title="Policy OpenAPI", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(openapi.router)

register_error_handlers(app)
