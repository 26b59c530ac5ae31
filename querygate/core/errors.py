"""Error Hierarchy: typed, categorized exceptions for fetch and validation failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ParseError always carries the structured issue list AND the raw value received
    - HttpResponseError.http_status mirrors the upstream response status
    - to_response() produces the REST envelope consumed by error boundaries

Design Decisions:
    - Single hierarchy with QueryGateError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from querygate.core.source_protocols import Issue


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for diagnostics."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    query_key: str | None = None
    url: str | None = None
    debug_info: dict[str, Any] | None = None


class QueryGateError(Exception):
    """Base exception for all querygate errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "query_key": self.context.query_key,
                    "url": self.context.url,
                },
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

DEFAULT_PARSE_MESSAGE = "Invalid Data."


class ParseError(QueryGateError):
    """Fetched data did not satisfy its validator."""

    def __init__(
        self,
        message: str | None = None,
        issues: "list[Issue] | None" = None,
        raw: Any = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or DEFAULT_PARSE_MESSAGE, "PARSE_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 502,
        )
        self.issues = list(issues or [])
        self.raw = raw

    @property
    def paths(self) -> list[str]:
        return [issue.dotted_path for issue in self.issues]

    def __str__(self) -> str:
        if not self.issues:
            return self.message
        return f"{self.message} Failed paths: {', '.join(self.paths)}"

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["issues"] = [
            {"path": issue.dotted_path, "message": issue.message, "code": issue.code}
            for issue in self.issues
        ]
        return body


# ─── Source Errors ──────────────────────────────────────────────

class HttpResponseError(QueryGateError):
    """Upstream HTTP response was not OK."""

    def __init__(
        self,
        status: int,
        message: str | None = None,
        url: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = replace(context) if context is not None else ErrorContext()
        if url is not None:
            ctx.url = url
        super().__init__(
            message or f"HTTP Code : {status}", "HTTP_RESPONSE_ERROR",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR, ctx, status,
        )
        self.status = status
        self.detail = message
        self.url = ctx.url


class SourceFetchError(QueryGateError):
    """A source reported an error payload that is not an exception."""

    def __init__(self, error: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Source failed to fetch data: {error}", "SOURCE_FETCH_ERROR",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR, context, 502,
        )
        self.error = error
