"""Service test fixtures — deployment settings + FastAPI test client.

Invariants:
    - get_settings overridden with the test deployment (prefix + mandatory params)
    - get_template_store overridable per test via the `use_store` fixture
    - dependency_overrides cleared after every test

Design Decisions:
    - httpx ASGITransport over TestClient: same async client the app is exercised with elsewhere
"""

import pytest
from httpx import ASGITransport, AsyncClient

from policy_openapi.config import Settings, get_settings
from policy_openapi.infrastructure.template_store import get_template_store
from policy_openapi.main import app

from tests.services.deployment import TEST_MANDATORY_PARAMS, TEST_PREFIX


@pytest.fixture
def settings():
    return Settings(path_prefix=TEST_PREFIX, mandatory_params=TEST_MANDATORY_PARAMS)


@pytest.fixture
def use_store():
    """Replace the template store for the duration of a test."""
    def _use(store):
        app.dependency_overrides[get_template_store] = lambda: store
    return _use


@pytest.fixture
async def client(settings):
    """FastAPI test client with settings overridden."""
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def lenient_client(settings):
    """Client that returns 500 responses instead of re-raising unhandled errors."""
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
