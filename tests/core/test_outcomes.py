"""Operation Outcomes - tests for the tagged-union variants.

Tests cover:
    - ValidationFailed refuses an empty failure list
    - to_details keeps (field, message) order
    - Variants are matchable with structural pattern matching
"""

from uuid import uuid4

import pytest

from movies_api.core.domain_types import MovieId, Slug
from movies_api.core.movie import Movie
from movies_api.core.outcomes import Found, NotFound, Success, Updated, ValidationFailed
from movies_api.core.validation import ValidationFailure


def test_validation_failed_requires_failures():
    with pytest.raises(ValueError):
        ValidationFailed(())


def test_validation_failed_details_preserve_order():
    failed = ValidationFailed.of([
        ValidationFailure("title", "'Title' must not be empty."),
        ValidationFailure("slug", "This movie already exists in the system"),
    ])
    assert failed.to_details() == [
        {"field": "title", "message": "'Title' must not be empty."},
        {"field": "slug", "message": "This movie already exists in the system"},
    ]


def test_variants_match_structurally():
    movie = Movie(MovieId(uuid4()), Slug("dune-1984"), "Dune", 1984, ("Sci-Fi",))

    def describe(outcome):
        match outcome:
            case Found(movie=m):
                return f"found {m.slug}"
            case Updated(movie=m):
                return f"updated {m.slug}"
            case NotFound():
                return "missing"
            case Success():
                return "ok"

    assert describe(Found(movie)) == "found dune-1984"
    assert describe(Updated(movie)) == "updated dune-1984"
    assert describe(NotFound()) == "missing"
    assert describe(Success()) == "ok"


def test_stateless_variants_compare_equal():
    assert Success() == Success()
    assert NotFound() == NotFound()
    assert Success() != NotFound()
