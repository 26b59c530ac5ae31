"""Fetch State: immutable snapshot of a remote source, usable wherever RemoteSource is expected.

Invariants:
    - is_error=True requires a non-None error (ValueError otherwise)
    - A snapshot is never mutated; lifecycle steps return new snapshots
    - refetching() keeps the previous data and only flips is_fetching
"""

from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FetchState(Generic[T]):
    """Point-in-time status of one fetch, as exposed by a fetch layer."""

    data: T | None = None
    error: Any = None
    is_pending: bool = False
    is_fetching: bool = False
    is_error: bool = False

    def __post_init__(self) -> None:
        if self.is_error and self.error is None:
            raise ValueError("FetchState with is_error=True must carry an error")

    @classmethod
    def pending(cls) -> "FetchState[T]":
        """First load in flight, nothing received yet."""
        return cls(is_pending=True, is_fetching=True)

    @classmethod
    def success(cls, data: T) -> "FetchState[T]":
        return cls(data=data)

    @classmethod
    def refetching(cls, data: T) -> "FetchState[T]":
        """Background refresh over previously received data."""
        return cls(data=data, is_fetching=True)

    @classmethod
    def failure(cls, error: Any, data: T | None = None) -> "FetchState[T]":
        """Fetch failed. `data` is the last good payload, if any."""
        return cls(data=data, error=error, is_error=True)

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def start_refetch(self) -> "FetchState[T]":
        return replace(self, is_fetching=True)
