"""Single and Unvalidated Boundaries: directive evaluation without the multi-query fold.

Invariants:
    - Same loading rule as the combined boundary: pending, or opt-in refetch without data
    - evaluate_query / evaluate_sources pass data through untouched (no validator)
    - evaluate_sources reports the first erroring source in list order
    - evaluate_validated treats a fetch that failed before first success as Loading
"""

from typing import Any, Sequence, TypeVar

from querygate.core.fold_queries import Directive, Errored, Loading, Ready, is_loading
from querygate.core.resolve_outcome import (
    Pending, SourceFailed, Valid, ValidationFailed, resolve,
)
from querygate.core.source_protocols import RemoteSource, Validator

T = TypeVar("T")


def evaluate_query(source: RemoteSource[T], *, loader_on_fetch: bool = False) -> Directive:
    """One source, data passed through as-is."""
    if is_loading([source], loader_on_fetch):
        return Loading()
    if source.is_error:
        return Errored(source.error)
    return Ready(source.data)


def evaluate_validated(
    source: RemoteSource[Any],
    validator: Validator[T],
    *,
    message: str | None = None,
    loader_on_fetch: bool = False,
) -> Directive:
    """One source checked against one validator."""
    if is_loading([source], loader_on_fetch):
        return Loading()
    match resolve(source, validator, message):
        case Pending():
            return Loading()
        case SourceFailed(error=error) | ValidationFailed(error=error):
            return Errored(error)
        case Valid(data=data):
            return Ready(data)


def evaluate_sources(
    sources: Sequence[RemoteSource[Any]], *, loader_on_fetch: bool = False,
) -> Directive:
    """Several sources, no validation; Ready carries their data in input order."""
    if is_loading(sources, loader_on_fetch):
        return Loading()
    for source in sources:
        if source.is_error:
            return Errored(source.error)
    return Ready([source.data for source in sources])
