"""Multi-Query Loader: throw-style evaluation for call sites under a shared error boundary.

Invariants:
    - Loading is returned, never raised
    - The loader shows during any refetch while some source still has no data
    - Source errors are raised as the same object (traceback reset); never wrapped when already an exception
    - Validation failures raise the synthesized ParseError
    - Same list order and short-circuit as evaluate_combined: both report the same error
"""

from typing import Any, NoReturn, Sequence

from querygate.core.errors import SourceFetchError
from querygate.core.filter_active import QueryDefinition
from querygate.core.fold_queries import Failure, Loading, Ready, evaluate_definitions


def raise_failure(outcome: Failure) -> NoReturn:
    """Raise the failure's error unchanged; non-exception payloads get a carrier."""
    error = outcome.error
    if isinstance(error, BaseException):
        # the source keeps this object across evaluations; start a fresh traceback each raise
        raise error.with_traceback(None)
    raise SourceFetchError(error)


def evaluate_or_throw(
    definitions: Sequence[QueryDefinition[Any]],
    message: str | None = None,
) -> Loading | dict[str, Any]:
    """Return the validated record, Loading, or raise the first failure."""
    directive = evaluate_definitions(
        definitions, loader_on_fetch=True, on_failure=raise_failure, message=message,
    )
    if isinstance(directive, Ready):
        return directive.data
    return Loading()
