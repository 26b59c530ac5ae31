"""Combined Boundary: render-style evaluation of several validated queries.

Invariants:
    - Never raises for loading, source or validation failures; all are returned as directives
    - Ready.data holds exactly the enabled definitions' keys
    - Errored carries the first failing definition's error (list order)
    - loader_on_fetch=False (default) keeps cached data on screen during refetches
"""

from typing import Any, Sequence

from querygate.core.filter_active import QueryDefinition
from querygate.core.fold_queries import Directive, evaluate_definitions


def evaluate_combined(
    definitions: Sequence[QueryDefinition[Any]],
    *,
    loader_on_fetch: bool = False,
    message: str | None = None,
) -> Directive:
    """Evaluate all definitions into Loading, Errored or Ready({key: value}).

    `message` replaces the default ParseError message on validation failures.
    """
    return evaluate_definitions(
        definitions, loader_on_fetch=loader_on_fetch, message=message,
    )
