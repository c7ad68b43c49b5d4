"""API test fixtures - FastAPI test client over a fresh MovieStore.

Invariants:
    - Every test gets its own MovieStore, injected through get_movie_store
    - Tokens come from the API_KEYS set in the root conftest

Design Decisions:
    - ASGITransport does not run the lifespan, so the store dependency is overridden directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from movies_api.api.dependencies import get_movie_store
from movies_api.core.movie_store import MovieStore
from movies_api.main import app


@pytest.fixture
def store() -> MovieStore:
    return MovieStore()


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_movie_store] = lambda: store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def dune_payload() -> dict:
    return {"title": "Dune", "year_of_release": 1984, "genres": ["Sci-Fi"]}
