"""OpenAPI Route — serves the deployment-customized policy-engine document.

Invariants:
    - GET /openapi returns 200 application/json with the transformed document
    - Template/serialization failures surface as 500 text/plain via the domain error handler
    - Settings and template store injected as dependencies (overridable in tests)

Design Decisions:
    - Thin route delegates to services.render_openapi (ADR: functional core, imperative shell)
    - include_in_schema=False: this endpoint serves another document, it is not part of it
"""

from fastapi import APIRouter, Depends, Response

from policy_openapi.config import Settings, get_settings
from policy_openapi.infrastructure.template_store import TemplateStore, get_template_store
from policy_openapi.services.render_openapi import render_openapi

router = APIRouter(tags=["openapi"])


@router.get("/openapi", include_in_schema=False)
async def get_openapi_document(
    settings: Settings = Depends(get_settings),
    store: TemplateStore = Depends(get_template_store),
):
    """Return the OpenAPI document with mandatory params and path prefix applied."""
    body = render_openapi(store, settings)
    return Response(content=body, media_type="application/json")
