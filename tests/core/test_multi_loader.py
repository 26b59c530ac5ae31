"""Multi-Query Loader: tests for throw-style evaluate_or_throw().

Tests cover:
    - Loading returned (never raised) on pending or fetch-without-data
    - Source exceptions raised as the same object
    - Non-exception error payloads raised inside SourceFetchError
    - Validation failures raise ParseError with raw data
    - Same error as evaluate_combined for the same inputs
"""

import pytest

from querygate.core.combined_boundary import evaluate_combined
from querygate.core.errors import HttpResponseError, ParseError, SourceFetchError
from querygate.core.fetch_state import FetchState
from querygate.core.filter_active import QueryDefinition
from querygate.core.fold_queries import Loading
from querygate.core.multi_loader import evaluate_or_throw
from querygate.core.source_protocols import Issue, ValidationFailure, ValidationSuccess


def _ok(value):
    return ValidationSuccess(value)


def _requires_list(value):
    if isinstance(value, list):
        return ValidationSuccess(value)
    return ValidationFailure(issues=(Issue((), "Expected array"),), raw=value)


# ─── Loading ─────────────────────────────────────────────────────

def test_pending_returns_loading_even_with_errors_elsewhere():
    result = evaluate_or_throw([
        QueryDefinition("a", FetchState.failure(HttpResponseError(500)), _ok),
        QueryDefinition("b", FetchState.pending(), _ok),
    ])
    assert result == Loading()


def test_fetching_without_data_returns_loading():
    result = evaluate_or_throw([
        QueryDefinition("a", FetchState.success([1]), _requires_list),
        QueryDefinition("b", FetchState(is_fetching=True), _requires_list),
    ])
    assert isinstance(result, Loading)


def test_refetch_with_data_everywhere_returns_record():
    result = evaluate_or_throw([
        QueryDefinition("a", FetchState.refetching([1]), _requires_list),
        QueryDefinition("b", FetchState.success([2]), _requires_list),
    ])
    assert result == {"a": [1], "b": [2]}


# ─── Raising ─────────────────────────────────────────────────────

def test_source_exception_raised_unwrapped():
    error = HttpResponseError(404, "Movie not found")
    with pytest.raises(HttpResponseError) as exc_info:
        evaluate_or_throw([
            QueryDefinition("movie", FetchState.failure(error), _ok),
            QueryDefinition("credits", FetchState.success([]), _requires_list),
        ])
    assert exc_info.value is error


def test_plain_exception_from_source_raised_as_is():
    error = ConnectionError("connection reset")
    with pytest.raises(ConnectionError, match="connection reset"):
        evaluate_or_throw([QueryDefinition("movie", FetchState.failure(error), _ok)])


def test_non_exception_payload_raised_in_carrier():
    with pytest.raises(SourceFetchError) as exc_info:
        evaluate_or_throw([QueryDefinition("movie", FetchState.failure("HTTP 404"), _ok)])
    assert exc_info.value.error == "HTTP 404"


def test_validation_failure_raises_parse_error():
    raw = {"notAnArray": True}
    with pytest.raises(ParseError) as exc_info:
        evaluate_or_throw([
            QueryDefinition("movie", FetchState.success({"title": "Arrival"}), _ok),
            QueryDefinition("credits", FetchState.success(raw), _requires_list),
        ])
    assert exc_info.value.raw is raw


def test_message_forwarded_to_parse_error():
    with pytest.raises(ParseError, match="Credits invalid"):
        evaluate_or_throw(
            [QueryDefinition("credits", FetchState.success({}), _requires_list)],
            message="Credits invalid",
        )


def test_disabled_definitions_excluded_from_record():
    result = evaluate_or_throw([
        QueryDefinition("a", FetchState.success([1]), _requires_list),
        QueryDefinition("b", FetchState.failure("HTTP 500"), _ok, enabled=False),
    ])
    assert result == {"a": [1]}


# ─── Parity with evaluate_combined ───────────────────────────────

def test_reports_same_error_as_combined_for_mixed_failures():
    source_error = HttpResponseError(500)
    defs = [
        QueryDefinition("a", FetchState.success([1]), _requires_list),
        QueryDefinition("b", FetchState.success({"bad": 1}), _requires_list),
        QueryDefinition("c", FetchState.failure(source_error), _ok),
    ]
    combined = evaluate_combined(defs)
    with pytest.raises(ParseError) as exc_info:
        evaluate_or_throw(defs)
    assert combined.error.raw == exc_info.value.raw


def test_first_erroring_source_in_list_order_raised():
    first, second = HttpResponseError(502), HttpResponseError(503)
    with pytest.raises(HttpResponseError) as exc_info:
        evaluate_or_throw([
            QueryDefinition("a", FetchState.success([1]), _requires_list),
            QueryDefinition("b", FetchState.failure(first), _ok),
            QueryDefinition("c", FetchState.failure(second), _ok),
        ])
    assert exc_info.value is first


def test_first_failure_in_list_order_raised_before_later_validation_error():
    source_error = HttpResponseError(503, "Seats unavailable")
    calls = []

    def _tracking(value):
        calls.append(value)
        return _requires_list(value)

    with pytest.raises(HttpResponseError) as exc_info:
        evaluate_or_throw([
            QueryDefinition("a", FetchState.success([1]), _requires_list),
            QueryDefinition("b", FetchState.failure(source_error), _ok),
            QueryDefinition("c", FetchState.success({"bad": 1}), _tracking),
        ])
    assert exc_info.value is source_error
    assert calls == []


# ─── Repeated evaluation ─────────────────────────────────────────

def _traceback_depth(error: BaseException) -> int:
    depth, tb = 0, error.__traceback__
    while tb is not None:
        depth, tb = depth + 1, tb.tb_next
    return depth


def test_reraising_same_source_error_does_not_grow_traceback():
    error = ConnectionError("connection reset")
    defs = [QueryDefinition("movie", FetchState.failure(error), _ok)]
    depths = []
    for _ in range(3):
        with pytest.raises(ConnectionError) as exc_info:
            evaluate_or_throw(defs)
        assert exc_info.value is error
        depths.append(_traceback_depth(exc_info.value))
    assert depths[0] == depths[1] == depths[2]
