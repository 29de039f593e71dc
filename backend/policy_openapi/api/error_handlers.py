"""Error Handlers — global exception handlers for the policy OpenAPI service.

Invariants:
    - PolicyOpenAPIError → plain-text body carrying the diagnostic message, exc.http_status
    - Exception (catch-all) → structured JSON, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (PolicyOpenAPIError), catch-all (Exception)
    - Plain text for domain errors: the endpoint's contract is a document or a diagnostic,
      not a JSON error envelope
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from policy_openapi.core.errors import PolicyOpenAPIError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register template/serialization error handler."""

    @app.exception_handler(PolicyOpenAPIError)
    async def policy_openapi_error_handler(request: Request, exc: PolicyOpenAPIError):
        """Handle all document rendering errors."""
        logger.error(
            f"PolicyOpenAPIError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return PlainTextResponse(
            status_code=exc.http_status, content=exc.message,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
