"""Mandatory Parameter Injection — adds deployment-required query parameters to one route.

Invariants:
    - add_mandatory_params MUTATES the given document and returns a status descriptor
    - Only the PathItem variant is mutated; a Reference entry is left untouched
    - Structural mismatches never raise: they are reported as status="error" or
      listed under "errors", and the rest of the document is unaffected
    - Pre-existing parameters are preserved in place; injected ones are appended
    - NOT idempotent: a second call on the same document duplicates every name.
      Callers must always start from a freshly loaded template.

Design Decisions:
    - Parameters built from PARAMETER_TEMPLATE through the same validator used for
      parsing, so an injected entry is indistinguishable from a declared one
    - Status dicts over exceptions: the shell decides what to log (ADR: functional core)
"""

import copy
from typing import Iterable

from policy_openapi.core.domain_types import RouteKey
from policy_openapi.core.errors import (
    NON_QUERY_PARAMETER, REFERENCE_NOT_MUTABLE, ROUTE_NOT_FOUND,
)
from policy_openapi.schemas.openapi import (
    OpenAPIDocument, PathItem, QueryParameter, parameter_adapter,
)


PARAMETER_TEMPLATE: dict = {
    "in": "query",
    "name": "TEMPLATE",
    "required": True,
    "schema": {"type": "string"},
}


def build_mandatory_param(name: str):
    """Build one parameter entry from PARAMETER_TEMPLATE with the given name."""
    data = copy.deepcopy(PARAMETER_TEMPLATE)
    data["name"] = name
    return parameter_adapter.validate_python(data)


def add_mandatory_params(
    document: OpenAPIDocument, route_key: RouteKey, names: Iterable[str],
) -> dict:
    """Append a required string query parameter per name to document.paths[route_key]."""
    entry = document.paths.get(route_key)
    if entry is None:
        return {
            "status": "skipped",
            "reason": ROUTE_NOT_FOUND,
            "route_key": route_key,
        }

    if not isinstance(entry, PathItem):
        return {
            "status": "error",
            "error_code": REFERENCE_NOT_MUTABLE,
            "route_key": route_key,
            "message": "reference manipulation for paths not allowed",
        }

    injected: list[QueryParameter] = []
    errors: list[dict] = []
    for name in names:
        param = build_mandatory_param(name)
        if not isinstance(param, QueryParameter):
            errors.append({
                "error_code": NON_QUERY_PARAMETER,
                "name": name,
                "message": "non-query parameters not allowed",
            })
            continue
        injected.append(param)

    if injected:
        # Reassign so the field counts as set for exclude_unset serialization
        entry.parameters = [*entry.parameters, *injected]

    return {
        "status": "ok",
        "route_key": route_key,
        "injected": [p.name for p in injected],
        "errors": errors,
    }
