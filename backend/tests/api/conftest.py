"""API test fixtures — fresh UserRegistry + FastAPI test client.

Invariants:
    - Every test gets an empty registry
    - get_registry dependency overridden to return that registry
    - registry module singleton patched so readiness sees the same instance

Design Decisions:
    - ASGITransport without lifespan: fixtures own setup, so tests never share users
"""

import pytest
from httpx import ASGITransport, AsyncClient

import user_api.infrastructure.registry as registry_module
from user_api.core.user_registry import UserRegistry
from user_api.infrastructure.registry import get_registry
from user_api.main import app


@pytest.fixture
def registry():
    return UserRegistry()


@pytest.fixture
async def client(registry):
    """FastAPI test client with registry dependency overridden."""
    app.dependency_overrides[get_registry] = lambda: registry

    original = registry_module.user_registry
    registry_module.user_registry = registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    registry_module.user_registry = original
