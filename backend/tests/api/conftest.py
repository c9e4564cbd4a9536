"""Route test fixtures — FastAPI test clients wired to in-memory services.

Invariants:
    - Every test gets a fresh in-memory SQLite database (via the root fixtures)
    - get_identity_service / get_todo_service overridden to return the test services
    - dependency_overrides cleared after each client so tests stay isolated

Design Decisions:
    - ASGITransport does not run the lifespan, so nothing touches the configured
      database URLs; the overrides are the only path to a service
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.api.dependencies import get_identity_service, get_todo_service
from todo_api.main_identity import app as identity_app
from todo_api.main_todo import app as todo_app


@pytest.fixture
async def identity_client(identity_service):
    """Identity API client backed by the test identity service."""
    identity_app.dependency_overrides[get_identity_service] = lambda: identity_service
    async with AsyncClient(
        transport=ASGITransport(app=identity_app), base_url="http://test",
    ) as c:
        yield c
    identity_app.dependency_overrides.clear()


@pytest.fixture
async def todo_client(todo_service):
    """Todo API client backed by the test todo service."""
    todo_app.dependency_overrides[get_todo_service] = lambda: todo_service
    async with AsyncClient(
        transport=ASGITransport(app=todo_app), base_url="http://test",
    ) as c:
        yield c
    todo_app.dependency_overrides.clear()
