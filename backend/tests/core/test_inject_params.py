"""Mandatory Parameter Injection — tests for add_mandatory_params.

Tests cover:
    - Each name becomes exactly one required string query parameter
    - Pre-existing parameters preserved unchanged and in order
    - Non-idempotence: a second call duplicates every name
    - Absent route is a successful no-op
    - Reference entry is left untouched and reported as a recoverable error
    - A template that is not a query parameter is skipped per name, not fatal
"""

import json

from policy_openapi.core import inject_params
from policy_openapi.core.document_codec import serialize_document
from policy_openapi.core.errors import (
    NON_QUERY_PARAMETER, REFERENCE_NOT_MUTABLE, ROUTE_NOT_FOUND,
)
from policy_openapi.core.inject_params import add_mandatory_params, build_mandatory_param
from policy_openapi.schemas.openapi import PathItem, QueryParameter, Reference


MARKERS = {"MARKER1", "MARKER2"}


def _query_params(item: PathItem, name: str) -> list[QueryParameter]:
    return [
        p for p in item.parameters
        if isinstance(p, QueryParameter) and p.name == name
    ]


# ─── PathItem ────────────────────────────────────────────────────

def test_inject_adds_required_string_query_param_per_name(document):
    result = add_mandatory_params(document, "/graph", MARKERS)

    assert result["status"] == "ok"
    assert set(result["injected"]) == MARKERS
    assert result["errors"] == []
    item = document.paths["/graph"]
    for name in MARKERS:
        matches = _query_params(item, name)
        assert len(matches) == 1
        assert matches[0].required is True
        assert matches[0].schema_ == {"type": "string"}
        assert matches[0].location == "query"


def test_inject_preserves_existing_params(document):
    item = document.paths["/graph"]
    before = list(item.parameters)
    snapshot = [p.model_dump(by_alias=True) for p in before]

    add_mandatory_params(document, "/graph", MARKERS)

    assert len(item.parameters) == len(before) + len(MARKERS)
    for i, param in enumerate(before):
        assert item.parameters[i] is param
        assert param.model_dump(by_alias=True) == snapshot[i]


def test_inject_twice_duplicates_params(document):
    add_mandatory_params(document, "/graph", MARKERS)
    add_mandatory_params(document, "/graph", MARKERS)

    item = document.paths["/graph"]
    for name in MARKERS:
        assert len(_query_params(item, name)) == 2


def test_inject_with_no_names_leaves_item_unchanged(document):
    before = list(document.paths["/graph"].parameters)
    result = add_mandatory_params(document, "/graph", set())
    assert result["status"] == "ok"
    assert result["injected"] == []
    assert document.paths["/graph"].parameters == before


def test_inject_into_item_without_parameters_is_serialized(document):
    add_mandatory_params(document, "/health", {"MARKER1"})

    output = json.loads(serialize_document(document))
    assert output["paths"]["/health"]["parameters"] == [
        {"in": "query", "name": "MARKER1", "required": True, "schema": {"type": "string"}},
    ]


def test_inject_output_contains_markers(document):
    add_mandatory_params(document, "/graph", MARKERS)
    output = serialize_document(document)
    for marker in MARKERS:
        assert marker in output, f"marker {marker} not found in output: {output}"


# ─── Tolerated mismatches ────────────────────────────────────────

def test_inject_absent_route_is_noop(document):
    keys_before = set(document.paths)
    result = add_mandatory_params(document, "/missing", MARKERS)
    assert result["status"] == "skipped"
    assert result["reason"] == ROUTE_NOT_FOUND
    assert set(document.paths) == keys_before


def test_inject_reference_is_recoverable_error(document):
    entry = document.paths["/shared"]
    result = add_mandatory_params(document, "/shared", MARKERS)

    assert result["status"] == "error"
    assert result["error_code"] == REFERENCE_NOT_MUTABLE
    assert document.paths["/shared"] is entry
    assert isinstance(entry, Reference)
    assert entry.model_dump(by_alias=True) == {"$ref": "#/components/pathItems/Shared"}


def test_inject_reference_leaves_other_routes_untouched(document):
    graph_before = document.paths["/graph"].model_dump(by_alias=True)
    add_mandatory_params(document, "/shared", MARKERS)
    assert document.paths["/graph"].model_dump(by_alias=True) == graph_before


def test_inject_skips_non_query_template(document, monkeypatch):
    monkeypatch.setattr(inject_params, "PARAMETER_TEMPLATE", {
        "in": "header",
        "name": "TEMPLATE",
        "required": True,
        "schema": {"type": "string"},
    })
    before = list(document.paths["/graph"].parameters)

    result = add_mandatory_params(document, "/graph", MARKERS)

    assert result["status"] == "ok"
    assert result["injected"] == []
    assert {e["name"] for e in result["errors"]} == MARKERS
    assert all(e["error_code"] == NON_QUERY_PARAMETER for e in result["errors"])
    assert document.paths["/graph"].parameters == before


# ─── build_mandatory_param ───────────────────────────────────────

def test_build_mandatory_param_does_not_share_schema():
    a = build_mandatory_param("A")
    b = build_mandatory_param("B")
    a.schema_["format"] = "uuid"
    assert b.schema_ == {"type": "string"}
    assert inject_params.PARAMETER_TEMPLATE["schema"] == {"type": "string"}
