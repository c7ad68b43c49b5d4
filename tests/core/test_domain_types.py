"""Domain Types - verifies identity wrappers, sentinels and enum values.

Tests:
    - NewType wrappers exist and are callable
    - EMPTY_MOVIE_ID is the all-zero UUID and counts as empty
    - Blank slug detection covers None, "" and whitespace
    - Enums serialize to their string values
"""

from uuid import UUID, uuid4

from movies_api.core.domain_types import (
    MovieId, Slug, EMPTY_MOVIE_ID,
    MovieField, ClaimName,
    is_empty_movie_id, is_blank_slug,
)


def test_identity_types_wrap_primitives():
    uid = uuid4()
    assert MovieId(uid) == uid
    assert Slug("dune-1984") == "dune-1984"


def test_empty_movie_id_is_all_zero_uuid():
    assert EMPTY_MOVIE_ID == UUID("00000000-0000-0000-0000-000000000000")
    assert is_empty_movie_id(EMPTY_MOVIE_ID)
    assert is_empty_movie_id(None)
    assert not is_empty_movie_id(uuid4())


def test_blank_slug_detection():
    assert is_blank_slug(None)
    assert is_blank_slug("")
    assert is_blank_slug("   ")
    assert not is_blank_slug("dune-1984")


def test_movie_field_values_match_record_attributes():
    assert {f.value for f in MovieField} == {
        "id", "slug", "title", "year_of_release", "genres",
    }


def test_claim_names_serialize_to_string_values():
    assert ClaimName.ADMIN.value == "admin"
    assert ClaimName("trusted_member") is ClaimName.TRUSTED_MEMBER
