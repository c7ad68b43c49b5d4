"""Movie Store - in-memory record store with a primary and a secondary index.

Invariants:
    - Primary index: MovieId -> Movie. Secondary index: Slug -> MovieId
    - I1: every slug in the secondary index resolves to a stored record carrying exactly that slug
    - I2: no two distinct ids are reachable through the same slug
    - I3: at most one record per id
    - Every operation runs entirely under one lock spanning both indexes, so
      readers never see one index mutated without the other
    - Expected failures are returned as outcome values (core/outcomes.py), never raised

Design Decisions:
    - Explicit instance owned by the app lifespan and injected into routes; no module-level store
    - RLock over Lock: the validator is caller-supplied and may read back through the store
    - update() does not re-check slug collisions against OTHER records (kept as observed);
      update/delete only drop a secondary entry that still points at their own id,
      so a colliding update can never orphan another record's slug
"""

import logging
import threading

from movies_api.core.domain_types import MovieId, is_blank_slug, is_empty_movie_id
from movies_api.core.movie import Movie
from movies_api.core.outcomes import (
    CreateOutcome,
    DeleteOutcome,
    Found,
    LookupOutcome,
    NotFound,
    Success,
    UpdateOutcome,
    Updated,
    ValidationFailed,
)
from movies_api.core.validation import (
    MovieValidator,
    slug_taken_failure,
    validate_movie_shape,
)

logger = logging.getLogger(__name__)


class MovieStore:
    """Owns both indexes and performs the CRUD operations over them."""

    def __init__(self, validator: MovieValidator = validate_movie_shape) -> None:
        self._validator = validator
        self._lock = threading.RLock()
        self._movies: dict[MovieId, Movie] = {}
        self._slug_to_id: dict[str, MovieId] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    # ─── Commands ────────────────────────────────────────────────

    def create(self, movie: Movie) -> CreateOutcome:
        """Validate, then index slug and record together."""
        with self._lock:
            failures = list(self._validator(movie))
            if not is_blank_slug(movie.slug) and movie.slug in self._slug_to_id:
                failures.append(slug_taken_failure())
            if failures:
                logger.debug(
                    "Create rejected",
                    extra={"movie_id": str(movie.id), "slug": movie.slug},
                )
                return ValidationFailed.of(failures)

            previous = self._movies.get(movie.id)
            if previous is not None:
                logger.warning(
                    "Create overwrote an existing record",
                    extra={"movie_id": str(movie.id), "slug": previous.slug},
                )
                self._drop_slug(previous)

            self._slug_to_id[movie.slug] = movie.id
            self._movies[movie.id] = movie

        logger.info(
            "Movie created", extra={"movie_id": str(movie.id), "slug": movie.slug},
        )
        return Success()

    def update(self, movie: Movie) -> UpdateOutcome:
        """Replace an existing record, moving its slug entry if the slug changed."""
        with self._lock:
            failures = list(self._validator(movie))
            if failures:
                logger.debug("Update rejected", extra={"movie_id": str(movie.id)})
                return ValidationFailed.of(failures)

            existing = self._movies.get(movie.id)
            if existing is None:
                return NotFound()

            self._drop_slug(existing)
            self._slug_to_id[movie.slug] = movie.id
            self._movies[movie.id] = movie

        logger.info(
            "Movie updated", extra={"movie_id": str(movie.id), "slug": movie.slug},
        )
        return Updated(movie)

    def delete_by_id(self, movie_id: MovieId) -> DeleteOutcome:
        with self._lock:
            removed = self._movies.pop(movie_id, None)
            if removed is None:
                return NotFound()
            self._drop_slug(removed)

        logger.info(
            "Movie deleted", extra={"movie_id": str(movie_id), "slug": removed.slug},
        )
        return Success()

    # ─── Queries ─────────────────────────────────────────────────

    def get_by_id(self, movie_id: MovieId) -> LookupOutcome:
        if is_empty_movie_id(movie_id):
            return NotFound()
        with self._lock:
            movie = self._movies.get(movie_id)
        if movie is None:
            return NotFound()
        return Found(movie)

    def get_by_slug(self, slug: str) -> LookupOutcome:
        if is_blank_slug(slug):
            return NotFound()
        with self._lock:
            movie_id = self._slug_to_id.get(slug)
            movie = self._movies.get(movie_id) if movie_id is not None else None
        if movie is None:
            if movie_id is not None:
                logger.error("Dangling slug entry", extra={"slug": slug})
            return NotFound()
        return Found(movie)

    def get_all(self) -> list[Movie]:
        """Point-in-time snapshot. Order is not part of the contract."""
        with self._lock:
            return list(self._movies.values())

    # ─── Internals ───────────────────────────────────────────────

    def _drop_slug(self, movie: Movie) -> None:
        """Remove movie's slug entry if it still points at movie. Caller holds the lock."""
        if self._slug_to_id.get(movie.slug) == movie.id:
            del self._slug_to_id[movie.slug]
