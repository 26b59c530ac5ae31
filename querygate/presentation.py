"""Error Presentation: default wording and payloads for errors surfaced by a boundary.

Invariants:
    - Pure: no logging, no IO; callers decide where the text goes
    - describe_error() never raises, whatever object it is given
    - present_error() never leaks details of unknown exceptions
"""

from dataclasses import dataclass
from typing import Any

from querygate.core.errors import (
    ErrorSeverity, HttpResponseError, ParseError, QueryGateError,
)

GENERIC_MESSAGE = "Something Went Wrong."


@dataclass(frozen=True)
class StatusText:
    text: str
    subtitle: str


HTTP_STATUS_TEXT: dict[int, StatusText] = {
    400: StatusText("Bad Request", "The server could not understand your request. Please check your input."),
    401: StatusText("Unauthorized", "You must be logged in to access this resource."),
    403: StatusText("Forbidden", "You don't have permission to access this page."),
    404: StatusText("Not Found", "We couldn't find what you were looking for."),
    405: StatusText("Method Not Allowed", "The action you tried is not allowed on this page."),
    408: StatusText("Request Timeout", "The request took too long. Please try again."),
    409: StatusText("Conflict", "There was a conflict with your request. Please refresh or try again."),
    429: StatusText("Too Many Requests", "You've made too many requests. Please wait and try again later."),
    500: StatusText("Server Error", "Something went wrong on our end. We're working on it."),
    502: StatusText("Bad Gateway", "The server received an invalid response. Please try again later."),
    503: StatusText("Service Unavailable", "The server is temporarily unavailable. Please try again later."),
    504: StatusText("Gateway Timeout", "The server took too long to respond. Please try again later."),
}


def http_status_text(status: int) -> StatusText:
    known = HTTP_STATUS_TEXT.get(status)
    if known is not None:
        return known
    return StatusText("A Network Error Occurred", f"HTTP Code : {status}")


def describe_error(error: Any, display_message: str | None = None) -> str:
    """One-line, user-facing description of an error."""
    if display_message:
        return display_message
    match error:
        case HttpResponseError(status=status, detail=detail):
            return f"{status} : {detail}" if detail else f"Network Attempt Failed With Code {status}"
        case ParseError():
            return "Failed To Validate Data"
        case BaseException():
            return str(error) or GENERIC_MESSAGE
        case str() if error:
            return error
    return GENERIC_MESSAGE


def present_error(error: Any, message: str | None = None) -> dict:
    """REST-style error payload for a boundary's error path."""
    if isinstance(error, QueryGateError):
        body = error.to_response()
        body["error"]["message"] = describe_error(error, message)
        return body
    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": message or GENERIC_MESSAGE,
            "category": "internal",
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }
