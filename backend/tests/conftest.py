"""Root conftest — shared documents and settings for every test layer.

Invariants:
    - Tests never read a developer's .env or shell environment for customization settings
    - document_data() returns a NEW dict on every call (tests may mutate freely)
"""

import json

import pytest

from policy_openapi.core.document_codec import parse_document


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for var in ("PATH_PREFIX", "MANDATORY_PARAMS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)


def _document_data() -> dict:
    return {
        "openapi": "3.0.0",
        "info": {"title": "Policy Engine", "version": "1.0.0"},
        "paths": {
            "/graph": {
                "parameters": [
                    {
                        "in": "header",
                        "name": "X-Request-Id",
                        "required": False,
                        "schema": {"type": "string"},
                    },
                    {
                        "in": "query",
                        "name": "channel",
                        "required": False,
                        "schema": {"type": "string"},
                    },
                ],
                "get": {"responses": {"200": {"description": "graph"}}},
            },
            "/shared": {"$ref": "#/components/pathItems/Shared"},
            "/health": {"get": {"responses": {"200": {"description": "ok"}}}},
        },
        "components": {"schemas": {"Graph": {"type": "object"}}},
    }


@pytest.fixture
def document_data():
    """Factory for a small OpenAPI document with item, reference and bare routes."""
    return _document_data


@pytest.fixture
def document(document_data):
    """Parsed working document built from document_data()."""
    return parse_document(json.dumps(document_data()))
