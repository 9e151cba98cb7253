"""Error taxonomy and the Result wrapper returned by mutating operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class RosterError(Exception):
    """Base class for every expected failure in the package."""


class ValidationError(RosterError):
    """Empty name, missing required field or otherwise malformed input."""


class DuplicateError(ValidationError):
    """Value already present (categories, shift codes)."""


class DuplicateIdError(DuplicateError):
    """A staff member with the same id already exists in the roster."""


class NotFoundError(RosterError):
    """Staff id, category or week does not exist."""


class SourceNotFoundError(NotFoundError):
    """The source week of a copy has no saved schedule."""


class PersistenceFailure(RosterError):
    """The storage layer reported a failure."""


class SuspiciousDeletionError(RosterError):
    """A settings save would delete every category while staff or shift types remain."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation: either a value or an error, never both.

    Errors are carried as values so callers decide whether to raise.
    """

    value: Optional[T] = None
    error: Optional[RosterError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RosterError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok
