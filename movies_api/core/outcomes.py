"""Operation Outcomes - tagged-union result variants returned by MovieStore.

Invariants:
    - One variant per outcome; every store operation returns a union of these
    - ValidationFailed.failures is never empty
    - Variants are frozen values: safe to share across threads

Design Decisions:
    - Frozen dataclasses + structural `match` at call sites instead of exceptions:
      expected failures stay on the same path as success
    - Per-operation aliases (CreateOutcome, ...) document exactly which variants a caller must handle
"""

from dataclasses import dataclass
from typing import Union

from movies_api.core.movie import Movie
from movies_api.core.validation import ValidationFailure


@dataclass(frozen=True)
class Success:
    """Mutation applied; nothing to return."""


@dataclass(frozen=True)
class Found:
    movie: Movie


@dataclass(frozen=True)
class Updated:
    movie: Movie


@dataclass(frozen=True)
class NotFound:
    """No record matched the identifier or slug."""


@dataclass(frozen=True)
class ValidationFailed:
    failures: tuple[ValidationFailure, ...]

    def __post_init__(self):
        if not self.failures:
            raise ValueError("ValidationFailed requires at least one failure")

    @classmethod
    def of(cls, failures: list[ValidationFailure]) -> "ValidationFailed":
        return cls(tuple(failures))

    def to_details(self) -> list[dict]:
        """Ordered (field, message) pairs ready for a client-facing payload."""
        return [f.to_dict() for f in self.failures]


CreateOutcome = Union[Success, ValidationFailed]
LookupOutcome = Union[Found, NotFound]
UpdateOutcome = Union[Updated, NotFound, ValidationFailed]
DeleteOutcome = Union[Success, NotFound]
