"""Boundary Protocols: contracts between the core and whatever fetches or validates.

Invariants:
    - Core NEVER writes to a RemoteSource, it only reads the five status fields
    - A Validator returns ValidationSuccess or ValidationFailure, never raises for bad input
    - ValidationFailure keeps the raw value it was given

Design Decisions:
    - Protocol over ABC: any fetch layer exposing the fields is usable as-is
    - Issue is a frozen dataclass so a failure can be compared and hashed in tests
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class RemoteSource(Protocol[T_co]):
    """Read-only view of an asynchronous fetch's current status and result.

    `is_error` implies `error` is not None. `data` is only set once the source
    has succeeded at least once, and stays set through later refetches.
    """

    @property
    def data(self) -> T_co | None: ...

    @property
    def error(self) -> Any: ...

    @property
    def is_pending(self) -> bool: ...

    @property
    def is_fetching(self) -> bool: ...

    @property
    def is_error(self) -> bool: ...


@dataclass(frozen=True)
class Issue:
    """One problem found by a validator."""
    path: tuple[str | int, ...]
    message: str
    code: str = "invalid"

    @property
    def dotted_path(self) -> str:
        return ".".join(str(part) for part in self.path) or "<root>"


@dataclass(frozen=True)
class ValidationSuccess(Generic[T]):
    value: T
    valid: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ValidationFailure:
    issues: tuple[Issue, ...]
    raw: Any
    valid: bool = field(default=False, init=False)


class Validator(Protocol[T_co]):
    """Pure, synchronous shape check of an untrusted value."""

    def __call__(self, value: Any) -> "ValidationSuccess[T_co] | ValidationFailure": ...
