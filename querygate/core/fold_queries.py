"""Query Folding: the one place where loading detection and list-order short-circuit live.

Invariants:
    - All functions are PURE: validators are the only code invoked
    - Disabled definitions are dropped before anything else is inspected
    - Any pending source wins over every other state (loading)
    - Definitions are resolved left to right; the first failure stops the fold and
      no later definition's validator runs
    - The failure sink decides what a failure becomes (returned directive or raised error)

Design Decisions:
    - Render-style and throw-style evaluators differ only in their sink and in
      loader_on_fetch, so both report the same error for the same inputs
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from querygate.core.domain_types import DirectiveKind
from querygate.core.filter_active import QueryDefinition, filter_active
from querygate.core.resolve_outcome import (
    Pending, SourceFailed, Valid, ValidationFailed, ValidationOutcome, resolve,
)
from querygate.core.source_protocols import RemoteSource

T = TypeVar("T")


# ─── Directives ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Loading:
    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.LOADING


@dataclass(frozen=True)
class Errored:
    error: Any

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.ERROR


@dataclass(frozen=True)
class Ready(Generic[T]):
    data: T

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.VALID


Directive = Loading | Errored | Ready

Failure = SourceFailed | ValidationFailed
FailureSink = Callable[[Failure], Directive]


# ─── Loading detection ───────────────────────────────────────────

def is_loading(sources: Iterable[RemoteSource[Any]], loader_on_fetch: bool = False) -> bool:
    """Pending anywhere, or (opt-in) refetching while some source has no data yet."""
    sources = list(sources)
    has_data = all(s.data is not None for s in sources)
    is_pending = any(s.is_pending for s in sources)
    is_fetching = any(s.is_fetching for s in sources)
    return is_pending or (loader_on_fetch and is_fetching and not has_data)


# ─── Fold ────────────────────────────────────────────────────────

def resolve_member(definition: QueryDefinition[Any], message: str | None = None) -> ValidationOutcome:
    """Resolve one member of a multi-source evaluation.

    Unlike resolve() on its own, an erroring source is a failure here even if it
    never delivered data: once nothing is pending, an error is the verdict.
    A synthesized ParseError is tagged with the failing definition's key.
    """
    source = definition.source
    if not source.is_pending and source.is_error:
        return SourceFailed(source.error)
    outcome = resolve(source, definition.validator, message)
    if isinstance(outcome, ValidationFailed):
        outcome.error.context.query_key = definition.key
    return outcome


def return_failure(outcome: Failure) -> Directive:
    return Errored(outcome.error)


def fold_definitions(
    definitions: Sequence[QueryDefinition[Any]],
    on_failure: FailureSink = return_failure,
    message: str | None = None,
) -> Directive:
    """Validate definitions in order into one record, stopping at the first failure."""
    record: dict[str, Any] = {}
    for definition in definitions:
        outcome = resolve_member(definition, message)
        match outcome:
            case Valid(data=data):
                record[definition.key] = data
            case SourceFailed() | ValidationFailed():
                return on_failure(outcome)
            case Pending():
                return Loading()
    return Ready(record)


def evaluate_definitions(
    definitions: Sequence[QueryDefinition[Any]],
    *,
    loader_on_fetch: bool,
    on_failure: FailureSink = return_failure,
    message: str | None = None,
) -> Directive:
    """Filter, detect loading, then fold. Shared by every multi-source evaluator."""
    active = filter_active(definitions)
    if is_loading(active.sources, loader_on_fetch):
        return Loading()
    return fold_definitions(active.active, on_failure, message)
