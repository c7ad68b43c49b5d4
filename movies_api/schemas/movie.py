"""Movie Schemas - Pydantic models for the movies API boundary.

Invariants:
    - Request models carry no id and no slug: the id is assigned on create (or taken
      from the path on update) and the slug is derived from title and year
    - Empty strings/lists are allowed through here so the validation gate reports them
      as field-level failures in its own envelope

Design Decisions:
    - field_validator for side-effect-free transforms (strip) keeps models pure
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class _MovieRequest(BaseModel):
    title: str
    year_of_release: int
    genres: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip()

    @field_validator("genres")
    @classmethod
    def strip_genres(cls, v: list[str]) -> list[str]:
        return [g.strip() for g in v]


class CreateMovieRequest(_MovieRequest):
    """Movie creation payload."""


class UpdateMovieRequest(_MovieRequest):
    """Full replacement payload for an existing movie."""


class MovieResponse(BaseModel):
    """Public-facing movie data."""
    id: UUID
    title: str
    slug: str
    year_of_release: int
    genres: list[str]


class MoviesResponse(BaseModel):
    items: list[MovieResponse]
