"""Render Boundaries: turn a directive into whatever the caller renders.

Invariants:
    - Exactly one presenter runs per render() call, chosen by the directive kind
    - Default presenters: a fresh copy of LOADING_VIEW for loading, present_error() payload for errors
    - loader_on_fetch=None and message=None fall back to Settings
    - Evaluation stays in core/; this module only dispatches and logs

Design Decisions:
    - Presenters are plain callables so any view layer (templates, JSON, CLI) can plug in
"""

import logging
from typing import Any, Callable, Sequence

from querygate.config import get_settings
from querygate.core.combined_boundary import evaluate_combined
from querygate.core.filter_active import QueryDefinition
from querygate.core.fold_queries import Directive, Errored, Loading, Ready
from querygate.core.single_boundary import evaluate_validated
from querygate.core.source_protocols import RemoteSource, Validator
from querygate.presentation import present_error

logger = logging.getLogger(__name__)

LOADING_VIEW = {"status": "loading"}


def default_loading() -> Any:
    return dict(LOADING_VIEW)


def render(
    directive: Directive,
    on_ready: Callable[[Any], Any],
    *,
    on_loading: Callable[[], Any] | None = None,
    on_error: Callable[[Any, str | None], Any] | None = None,
    message: str | None = None,
) -> Any:
    """Dispatch a directive to the matching presenter and return what it produced."""
    match directive:
        case Loading():
            logger.debug("Data is loading", extra={"directive": directive.kind.value})
            return (on_loading or default_loading)()
        case Errored(error=error):
            logger.warning(
                f"Boundary caught an error: {error!r}",
                extra={
                    "directive": directive.kind.value,
                    "error_code": getattr(error, "code", None),
                },
            )
            return (on_error or present_error)(error, message)
        case Ready(data=data):
            return on_ready(data)
    raise TypeError(f"Not a directive: {directive!r}")


def render_combined(
    definitions: Sequence[QueryDefinition[Any]],
    on_ready: Callable[[dict[str, Any]], Any],
    *,
    loader_on_fetch: bool | None = None,
    message: str | None = None,
    on_loading: Callable[[], Any] | None = None,
    on_error: Callable[[Any, str | None], Any] | None = None,
) -> Any:
    """Evaluate several validated queries and render the result."""
    settings = get_settings()
    if loader_on_fetch is None:
        loader_on_fetch = settings.loader_on_fetch
    directive = evaluate_combined(
        definitions,
        loader_on_fetch=loader_on_fetch,
        message=message or settings.validation_message,
    )
    return render(directive, on_ready, on_loading=on_loading, on_error=on_error, message=message)


def render_validated(
    source: RemoteSource[Any],
    validator: Validator[Any],
    on_ready: Callable[[Any], Any],
    *,
    loader_on_fetch: bool | None = None,
    message: str | None = None,
    on_loading: Callable[[], Any] | None = None,
    on_error: Callable[[Any, str | None], Any] | None = None,
) -> Any:
    """Evaluate one validated query and render the result."""
    settings = get_settings()
    if loader_on_fetch is None:
        loader_on_fetch = settings.loader_on_fetch
    directive = evaluate_validated(
        source, validator,
        message=message or settings.validation_message,
        loader_on_fetch=loader_on_fetch,
    )
    return render(directive, on_ready, on_loading=on_loading, on_error=on_error, message=message)
