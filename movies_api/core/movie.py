"""Movie Record - the immutable entity held by the record store.

Invariants:
    - Movie is frozen: the store swaps whole records, never mutates one in place
    - id is caller-assigned; nothing in core/ generates identifiers
    - slug is carried on the record; generate_slug is a helper for callers, the store never derives it

Design Decisions:
    - genres stored as tuple so two equal records compare and hash equal
"""

import re
from dataclasses import dataclass, field, replace

from movies_api.core.domain_types import MovieId, Slug

_SLUG_STRIP = re.compile(r"[^0-9A-Za-z _-]")


@dataclass(frozen=True)
class Movie:
    """A movie record. Everything except id and slug is opaque payload to the store."""

    id: MovieId
    slug: Slug
    title: str
    year_of_release: int
    genres: tuple[str, ...] = field(default_factory=tuple)

    def with_slug(self, slug: str) -> "Movie":
        return replace(self, slug=Slug(slug))


def generate_slug(title: str, year_of_release: int) -> Slug:
    """Derive the human-readable key, e.g. ("Dune", 1984) -> "dune-1984"."""
    cleaned = _SLUG_STRIP.sub("", title).strip().lower()
    cleaned = re.sub(r"\s+", "-", cleaned)
    return Slug(f"{cleaned}-{year_of_release}")
