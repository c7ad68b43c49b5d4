"""Movie Routes - HTTP surface over MovieStore.

Invariants:
    - Routes never contain business logic: map request -> store call -> match outcome
    - Every outcome variant of every store operation is handled explicitly
    - GET /{id_or_slug}: a parseable UUID is looked up by id, anything else by slug
    - Handlers are sync `def`: FastAPI runs them in its threadpool, MovieStore is thread-safe

Design Decisions:
    - Failure variants raised as MoviesApiError subclasses so error_handlers.py owns the envelope
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from movies_api.api.dependencies import get_movie_store
from movies_api.api.identity import Identity, require_authenticated, require_claim
from movies_api.api.mapping import (
    map_create_request,
    map_movie_response,
    map_movies_response,
    map_update_request,
    map_validation_failed,
)
from movies_api.core.domain_types import ClaimName, MovieId
from movies_api.core.errors import ResourceNotFoundError
from movies_api.core.movie_store import MovieStore
from movies_api.core.outcomes import Found, NotFound, Success, Updated, ValidationFailed
from movies_api.schemas.movie import (
    CreateMovieRequest,
    MovieResponse,
    MoviesResponse,
    UpdateMovieRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/movies", tags=["movies"])


@router.post(
    "", response_model=MovieResponse, status_code=status.HTTP_201_CREATED,
)
def create_movie(
    body: CreateMovieRequest,
    response: Response,
    store: MovieStore = Depends(get_movie_store),
    _: Identity = Depends(require_authenticated),
):
    """Create a movie. The id is assigned here, the slug derived from title and year."""
    movie = map_create_request(body)
    match store.create(movie):
        case Success():
            response.headers["Location"] = f"{router.prefix}/{movie.id}"
            return map_movie_response(movie)
        case ValidationFailed() as failed:
            raise map_validation_failed(failed)


@router.get("/{id_or_slug}", response_model=MovieResponse)
def get_movie(id_or_slug: str, store: MovieStore = Depends(get_movie_store)):
    """Fetch by id when the path parses as a UUID, otherwise by slug."""
    try:
        outcome = store.get_by_id(MovieId(UUID(id_or_slug)))
    except ValueError:
        outcome = store.get_by_slug(id_or_slug)

    match outcome:
        case Found(movie=movie):
            return map_movie_response(movie)
        case NotFound():
            raise ResourceNotFoundError("Movie", id_or_slug)


@router.get("", response_model=MoviesResponse)
def list_movies(
    store: MovieStore = Depends(get_movie_store),
    _: Identity = Depends(require_claim(ClaimName.ADMIN)),
):
    return map_movies_response(store.get_all())


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: UUID,
    body: UpdateMovieRequest,
    store: MovieStore = Depends(get_movie_store),
    _: Identity = Depends(require_authenticated),
):
    movie = map_update_request(body, movie_id)
    match store.update(movie):
        case Updated(movie=updated):
            return map_movie_response(updated)
        case NotFound():
            raise ResourceNotFoundError("Movie", str(movie_id))
        case ValidationFailed() as failed:
            raise map_validation_failed(failed)


@router.delete("/{movie_id}", status_code=status.HTTP_200_OK)
def delete_movie(
    movie_id: UUID,
    store: MovieStore = Depends(get_movie_store),
    _: Identity = Depends(require_claim(ClaimName.ADMIN)),
):
    """Admin only. require_claim implies authentication."""
    match store.delete_by_id(MovieId(movie_id)):
        case Success():
            return {"status": "deleted", "id": str(movie_id)}
        case NotFound():
            raise ResourceNotFoundError("Movie", str(movie_id))
