"""Validation Gate - field-shape rules applied to a candidate Movie before mutation.

Invariants:
    - All functions are PURE: no IO, no store access, no side effects
    - Each check returns a ValidationFailure on violation, None on success
    - validate_movie_shape runs EVERY check and keeps their order (all failures reported, not first-wins)
    - The slug-uniqueness rule is NOT here: it needs store state, MovieStore adds it on create

Design Decisions:
    - MovieValidator is a Protocol: the store accepts any callable with this shape,
      so callers can swap in stricter or looser rules without subclassing
    - Current year is injectable so the year rule is deterministic in tests
"""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from movies_api.core.domain_types import MovieField, is_blank_slug, is_empty_movie_id
from movies_api.core.movie import Movie

SLUG_TAKEN_MESSAGE = "This movie already exists in the system"


@dataclass(frozen=True)
class ValidationFailure:
    """One field-level violation."""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class MovieValidator(Protocol):
    """Structural contract for the shape validator injected into MovieStore."""
    def __call__(self, movie: Movie) -> list[ValidationFailure]: ...


def check_id(movie: Movie) -> ValidationFailure | None:
    if is_empty_movie_id(movie.id):
        return ValidationFailure(MovieField.ID.value, "'Id' must not be empty.")
    return None


def check_title(movie: Movie) -> ValidationFailure | None:
    if not movie.title or not movie.title.strip():
        return ValidationFailure(MovieField.TITLE.value, "'Title' must not be empty.")
    return None


def check_slug(movie: Movie) -> ValidationFailure | None:
    if is_blank_slug(movie.slug):
        return ValidationFailure(MovieField.SLUG.value, "'Slug' must not be empty.")
    return None


def check_year_of_release(movie: Movie, current_year: int) -> ValidationFailure | None:
    if movie.year_of_release > current_year:
        return ValidationFailure(
            MovieField.YEAR_OF_RELEASE.value,
            f"'Year Of Release' must be less than or equal to '{current_year}'.",
        )
    return None


def check_genres(movie: Movie) -> ValidationFailure | None:
    if not movie.genres:
        return ValidationFailure(MovieField.GENRES.value, "'Genres' must not be empty.")
    if any(not g or not g.strip() for g in movie.genres):
        return ValidationFailure(
            MovieField.GENRES.value, "'Genres' must not contain empty entries.",
        )
    return None


def validate_movie_shape(
    movie: Movie, current_year: int | None = None,
) -> list[ValidationFailure]:
    """Run all shape checks. Empty list means the movie is acceptable."""
    year = current_year if current_year is not None else date.today().year
    checks = (
        check_id(movie),
        check_title(movie),
        check_slug(movie),
        check_year_of_release(movie, year),
        check_genres(movie),
    )
    return [failure for failure in checks if failure is not None]


def slug_taken_failure() -> ValidationFailure:
    """Store-owned rule: reported on create when the slug is already indexed."""
    return ValidationFailure(MovieField.SLUG.value, SLUG_TAKEN_MESSAGE)
