"""Active Query Filtering: drops disabled query definitions before evaluation.

Invariants:
    - Order preserving: output lists follow input order (stable partition)
    - Disabled definitions appear in neither output
    - enabled defaults to True
"""

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from querygate.core.domain_types import QueryKey
from querygate.core.source_protocols import RemoteSource, Validator

T = TypeVar("T")


@dataclass(frozen=True)
class QueryDefinition(Generic[T]):
    """A keyed source with the validator its data must satisfy.

    Rebuilt by the caller for every evaluation. Keys should be unique within
    one list; on duplicates the last definition wins in the output record.
    """
    key: QueryKey
    source: RemoteSource[Any]
    validator: Validator[T]
    enabled: bool = True


@dataclass(frozen=True)
class ActiveQueries:
    sources: list[RemoteSource[Any]]
    active: list[QueryDefinition[Any]]


def filter_active(definitions: Sequence[QueryDefinition[Any]]) -> ActiveQueries:
    """Split out the enabled definitions and their raw sources."""
    active = [d for d in definitions if d.enabled]
    return ActiveQueries(sources=[d.source for d in active], active=active)
