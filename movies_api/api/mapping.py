"""Contract Mapping - request schemas -> Movie, Movie/outcomes -> response schemas.

Invariants:
    - Create assigns a fresh uuid4; update takes the id from the path
    - Slug always derived from title and year; clients never send it
"""

from uuid import UUID, uuid4

from movies_api.core.domain_types import MovieId
from movies_api.core.errors import MovieValidationError
from movies_api.core.movie import Movie, generate_slug
from movies_api.core.outcomes import ValidationFailed
from movies_api.schemas.movie import (
    CreateMovieRequest,
    MovieResponse,
    MoviesResponse,
    UpdateMovieRequest,
)


def map_create_request(request: CreateMovieRequest) -> Movie:
    return _to_movie(request, MovieId(uuid4()))


def map_update_request(request: UpdateMovieRequest, movie_id: UUID) -> Movie:
    return _to_movie(request, MovieId(movie_id))


def _to_movie(request: CreateMovieRequest | UpdateMovieRequest, movie_id: MovieId) -> Movie:
    return Movie(
        id=movie_id,
        slug=generate_slug(request.title, request.year_of_release),
        title=request.title,
        year_of_release=request.year_of_release,
        genres=tuple(request.genres),
    )


def map_movie_response(movie: Movie) -> MovieResponse:
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        slug=movie.slug,
        year_of_release=movie.year_of_release,
        genres=list(movie.genres),
    )


def map_movies_response(movies: list[Movie]) -> MoviesResponse:
    return MoviesResponse(items=[map_movie_response(m) for m in movies])


def map_validation_failed(failed: ValidationFailed) -> MovieValidationError:
    return MovieValidationError(failed.to_details())
