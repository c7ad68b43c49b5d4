"""Request Dependencies - hands the app-owned MovieStore to route handlers.

Invariants:
    - The store lives on app.state, created by the lifespan in main.py
    - Tests override get_movie_store via app.dependency_overrides
"""

from fastapi import Request

from movies_api.core.movie_store import MovieStore


def get_movie_store(request: Request) -> MovieStore:
    return request.app.state.movie_store
