"""Identity & Claims - bearer-token authentication and claim-gated dependencies.

Invariants:
    - Tokens resolve only through Settings.api_keys; unknown token == anonymous
    - require_authenticated raises UnauthorizedError (401)
    - require_claim raises UnauthorizedError when anonymous, ForbiddenError (403) when the claim mismatches
    - Claims never reach core/: the store is unaware of who calls it

Design Decisions:
    - Claims encoded as "name=value,name=value" strings so they fit in a single env var entry
"""

import logging
from dataclasses import dataclass, field

from fastapi import Depends, Header

from movies_api.config import Settings, get_settings
from movies_api.core.domain_types import ClaimName
from movies_api.core.errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    token: str
    claims: dict[str, str] = field(default_factory=dict)

    def has_claim(self, name: str, value: str) -> bool:
        return self.claims.get(name) == value


def parse_claims(raw: str) -> dict[str, str]:
    """'admin=true, trusted_member=true' -> {'admin': 'true', 'trusted_member': 'true'}."""
    claims: dict[str, str] = {}
    for part in raw.split(","):
        name, sep, value = part.partition("=")
        name = name.strip()
        if name and sep:
            claims[name] = value.strip()
    return claims


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_identity(
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> Identity | None:
    """Resolve the caller, or None for anonymous requests."""
    token = _bearer_token(authorization)
    if token is None or token not in settings.api_keys:
        return None
    return Identity(token=token, claims=parse_claims(settings.api_keys[token]))


def require_authenticated(
    identity: Identity | None = Depends(get_identity),
) -> Identity:
    if identity is None:
        raise UnauthorizedError()
    return identity


def require_claim(name: ClaimName | str, value: str = "true"):
    """Build a dependency that admits only identities carrying name=value."""
    claim = name.value if isinstance(name, ClaimName) else name

    def _dependency(identity: Identity = Depends(require_authenticated)) -> Identity:
        if not identity.has_claim(claim, value):
            logger.warning("Claim check failed", extra={"claim": claim})
            raise ForbiddenError(claim)
        return identity

    return _dependency
