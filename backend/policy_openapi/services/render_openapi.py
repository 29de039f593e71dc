"""OpenAPI Rendering — per-request pipeline: fresh template → inject → rewrite → JSON.

Invariants:
    - Every call starts from store.load(): the working document is never shared
      across requests and never reused within one (injection is not idempotent)
    - rewrite_paths applied exactly once per call, after injection
    - Injection mismatches are logged and never change the outcome
    - Only TemplateCorruptionError / DocumentSerializationError escape

Design Decisions:
    - Imperative shell around the pure core: logging decisions live here, not in core/
    - No caching of the rendered body: each request re-derives it (ADR: no cross-request cache)
"""

import logging
from typing import Iterable

from policy_openapi.config import Settings
from policy_openapi.core.document_codec import serialize_document
from policy_openapi.core.domain_types import DESIGNATED_ROUTE
from policy_openapi.core.errors import ErrorCategory, ErrorSeverity
from policy_openapi.core.inject_params import add_mandatory_params
from policy_openapi.core.rewrite_paths import rewrite_paths
from policy_openapi.infrastructure.template_store import TemplateStore
from policy_openapi.schemas.openapi import OpenAPIDocument

logger = logging.getLogger(__name__)


def build_openapi_document(
    store: TemplateStore, path_prefix: str, mandatory_params: Iterable[str],
) -> OpenAPIDocument:
    """Load a fresh document and apply injection then prefix rewriting."""
    document = store.load()

    report = add_mandatory_params(document, DESIGNATED_ROUTE, mandatory_params)
    _log_injection_report(report)

    document.paths = rewrite_paths(document.paths, path_prefix)
    return document


def render_openapi(store: TemplateStore, settings: Settings) -> str:
    """Build the customized document for this deployment and serialize it."""
    document = build_openapi_document(
        store, settings.path_prefix, settings.mandatory_params,
    )
    return serialize_document(document)


def _log_injection_report(report: dict) -> None:
    route_key = report.get("route_key")
    if report["status"] == "error":
        logger.error(
            report["message"],
            extra={
                "error_code": report["error_code"],
                "route_key": route_key,
                "category": ErrorCategory.STRUCTURE.value,
                "severity": ErrorSeverity.WARNING.value,
            },
        )
        return
    if report["status"] == "skipped":
        logger.debug(f"No {route_key} route in template, nothing injected")
        return
    for err in report["errors"]:
        logger.error(
            err["message"],
            extra={
                "error_code": err["error_code"],
                "route_key": route_key,
                "parameter_name": err["name"],
                "category": ErrorCategory.STRUCTURE.value,
            },
        )
