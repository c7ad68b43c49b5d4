"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - MovieId wraps a UUID; the all-zero UUID (EMPTY_MOVIE_ID) never identifies a record
    - Slug wraps a non-empty str; a blank slug is never a lookup key
    - Claim names are Enums, no raw string matching in route guards

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

MovieId = NewType("MovieId", UUID)
Slug = NewType("Slug", str)

EMPTY_MOVIE_ID = MovieId(UUID(int=0))


def is_empty_movie_id(movie_id: UUID | None) -> bool:
    """True for None and for the all-zero UUID."""
    return movie_id is None or movie_id == EMPTY_MOVIE_ID


def is_blank_slug(slug: str | None) -> bool:
    return slug is None or not slug.strip()


# ─── Enums ───────────────────────────────────────────────────────

class MovieField(str, Enum):
    """Field names reported in validation failures."""
    ID = "id"
    SLUG = "slug"
    TITLE = "title"
    YEAR_OF_RELEASE = "year_of_release"
    GENRES = "genres"


class ClaimName(str, Enum):
    """Claims carried by an authenticated identity."""
    ADMIN = "admin"
    TRUSTED_MEMBER = "trusted_member"
