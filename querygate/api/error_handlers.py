"""Error Handlers: FastAPI exception handlers acting as the shared error boundary.

Invariants:
    - QueryGateError → its own http_status and to_response() body (ParseError adds issues)
    - The failing query key, when known, is logged and returned in error.context
    - Exception (catch-all) → never leaks internal details, 500

Design Decisions:
    - Two-layer handler: domain (QueryGateError), catch-all (Exception)
    - Routes built on evaluate_or_throw need no try/except; failures land here
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from querygate.core.errors import ErrorSeverity, QueryGateError
from querygate.presentation import describe_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_query_gate_error_handler(app)
    _register_generic_error_handler(app)


def _register_query_gate_error_handler(app: FastAPI) -> None:

    @app.exception_handler(QueryGateError)
    async def query_gate_error_handler(request: Request, exc: QueryGateError):
        level = logging.WARNING if exc.http_status < 500 else logging.ERROR
        logger.log(
            level,
            f"{exc.code} on {request.url.path}: {exc}",
            extra={
                "error_code": exc.code,
                "query_key": exc.context.query_key,
                "path": request.url.path,
            },
        )
        body = exc.to_response()
        body["error"]["message"] = describe_error(exc)
        return JSONResponse(status_code=exc.http_status, content=body)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
