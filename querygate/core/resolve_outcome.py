"""Outcome Resolution: one source + one validator -> exactly one verdict.

Invariants:
    - All functions are PURE: no IO, no logging, no mutation of the source
    - resolve() returns exactly one of Pending, SourceFailed, ValidationFailed, Valid
    - A source that errored before ever delivering data resolves to Pending
    - The validator only runs on sources that are neither pending nor erroring
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from querygate.core.domain_types import OutcomeKind
from querygate.core.errors import ParseError
from querygate.core.source_protocols import RemoteSource, ValidationFailure, Validator

T = TypeVar("T")


@dataclass(frozen=True)
class Pending:
    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.PENDING


@dataclass(frozen=True)
class SourceFailed:
    """Transport failure relayed from the source, never constructed by the core."""
    error: Any

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.SOURCE_ERROR


@dataclass(frozen=True)
class ValidationFailed:
    error: ParseError
    raw: Any

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.VALIDATION_ERROR


@dataclass(frozen=True)
class Valid(Generic[T]):
    data: T

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.VALID


ValidationOutcome = Pending | SourceFailed | ValidationFailed | Valid


def validate_data(data: Any, validator: Validator[T], message: str | None = None) -> ValidationFailed | Valid[T]:
    """Run the validator and wrap a failure into a ParseError."""
    result = validator(data)
    if isinstance(result, ValidationFailure):
        error = ParseError(message=message, issues=list(result.issues), raw=result.raw)
        return ValidationFailed(error=error, raw=result.raw)
    return Valid(result.value)


def resolve(
    source: RemoteSource[Any], validator: Validator[T], message: str | None = None,
) -> ValidationOutcome:
    """Resolve a single source into a ValidationOutcome.

    Pending and failed-before-first-success are folded together: both block
    rendering the same way for a single inline loader.
    """
    if source.is_pending or (source.is_error and source.data is None):
        return Pending()
    if source.is_error:
        return SourceFailed(source.error)
    return validate_data(source.data, validator, message)
