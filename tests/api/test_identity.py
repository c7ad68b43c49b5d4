"""Identity & Claims - tests for token parsing and claim-gated dependencies.

Tests cover:
    - parse_claims tolerates whitespace and skips malformed entries
    - get_identity resolves known bearer tokens only
    - require_authenticated / require_claim raise the right errors
"""

import pytest

from movies_api.api.identity import (
    Identity,
    get_identity,
    parse_claims,
    require_authenticated,
    require_claim,
)
from movies_api.config import Settings
from movies_api.core.domain_types import ClaimName
from movies_api.core.errors import ForbiddenError, UnauthorizedError


def _settings() -> Settings:
    return Settings(api_keys={"secret": "admin=true", "plain": ""})


def test_parse_claims_basic():
    assert parse_claims("admin=true, trusted_member=false") == {
        "admin": "true", "trusted_member": "false",
    }


def test_parse_claims_skips_malformed_entries():
    assert parse_claims("admin, =x, ok=1,") == {"ok": "1"}


def test_get_identity_known_token():
    identity = get_identity("Bearer secret", _settings())
    assert identity == Identity(token="secret", claims={"admin": "true"})


@pytest.mark.parametrize("header", [None, "", "Bearer", "Basic secret", "Bearer nope"])
def test_get_identity_unknown_or_malformed_is_anonymous(header):
    assert get_identity(header, _settings()) is None


def test_require_authenticated_rejects_anonymous():
    with pytest.raises(UnauthorizedError):
        require_authenticated(None)


def test_require_claim_accepts_matching_claim():
    identity = Identity("secret", {"admin": "true"})
    check = require_claim(ClaimName.ADMIN)
    assert check(identity) is identity


def test_require_claim_rejects_wrong_value():
    check = require_claim(ClaimName.ADMIN)
    with pytest.raises(ForbiddenError) as exc_info:
        check(Identity("x", {"admin": "false"}))
    assert exc_info.value.http_status == 403
    assert exc_info.value.claim == "admin"


def test_require_claim_accepts_plain_string_name():
    check = require_claim("region", "eu")
    identity = Identity("x", {"region": "eu"})
    assert check(identity) is identity
