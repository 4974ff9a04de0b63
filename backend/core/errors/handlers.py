"""FastAPI Exception Handlers

Turns AppErrorException and unexpected exceptions into JSON error
responses. The correlation ID bound by the request middleware is copied
into the error, so the body matches the ``X-Correlation-ID`` header.
"""
from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.logging import get_logger

from .types import AppError, AppErrorException, ErrorCode, ErrorContext, Result

log = get_logger("grammar.errors")


def _correlation_id(request: Request) -> str | None:
    bound = structlog.contextvars.get_contextvars().get("correlation_id")
    return bound or request.headers.get("X-Correlation-ID")


def result_to_response(error: AppError) -> JSONResponse:
    """Log the error and render it with the status its code maps to."""
    status_code = error.code.http_status

    log_method = log.warning if status_code < 500 else log.error
    log_method(
        "error_response",
        error_code=error.code.name,
        message=error.message,
        category=error.code.category,
        origin=error.context.origin,
        metadata=error.metadata,
    )

    return JSONResponse(status_code=status_code, content=error.to_dict())


async def app_error_handler(request: Request, exc: AppErrorException) -> JSONResponse:
    error = exc.error.with_context(
        request_id=request.headers.get("X-Request-ID"),
        correlation_id=_correlation_id(request),
    )
    return result_to_response(error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: the client gets a generic message, the log gets the traceback."""
    error = AppError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message="An unexpected error occurred",
        context=ErrorContext(origin="unhandled"),
        cause=exc,
    ).with_context(
        request_id=request.headers.get("X-Request-ID"),
        correlation_id=_correlation_id(request),
    )

    log.exception(
        "unhandled_exception",
        error_type=type(exc).__name__,
        error_message=str(exc),
    )

    return result_to_response(error)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppErrorException, app_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def raise_result(result: Result) -> None:
    """Raise the error of an Err so the registered handler renders it."""
    if result.is_err():
        raise AppErrorException(result.unwrap_err())
