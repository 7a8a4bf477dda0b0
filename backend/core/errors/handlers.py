"""HTTP boundary for AppErrors.

Route handlers leave the Result monad through ``raise_result`` /
``raise_error``; the handlers registered here turn the exception back into
the JSON body produced by ``AppError.to_dict``.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.logging import api_logger

from .types import AppError, ErrorCode, ErrorContext

log = api_logger()


class AppErrorException(Exception):
    """Carries an AppError through FastAPI's exception machinery."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))


def raise_error(error: AppError) -> None:
    raise AppErrorException(error)


def raise_result(result) -> None:
    """Raise if ``result`` is an Err; no-op for Ok."""
    if result.is_err():
        raise AppErrorException(result.unwrap_err())


def result_to_response(error: AppError) -> JSONResponse:
    status = error.code.http_status
    # Client-side problems (bad filters, missing rows, coverage gaps) are warnings
    emit = log.warning if status < 500 else log.error
    emit(
        "request_failed",
        status=status,
        code=error.code.name,
        reason=error.message,
        origin=error.context.origin,
        correlation_id=error.context.correlation_id,
        metadata=error.metadata,
    )
    return JSONResponse(status_code=status, content=error.to_dict())


async def _handle_app_error(request: Request, exc: AppErrorException) -> JSONResponse:
    error = exc.error.with_context(
        correlation_id=request.headers.get("X-Correlation-ID"),
        request_id=request.headers.get("X-Request-ID"),
    )
    return result_to_response(error)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    error = AppError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message="An unexpected error occurred",
        context=ErrorContext(origin=f"{request.method} {request.url.path}"),
        cause=exc,
    )
    log.exception("unhandled_exception", error_type=type(exc).__name__, path=request.url.path)
    return result_to_response(error)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppErrorException, _handle_app_error)
    app.add_exception_handler(Exception, _handle_unexpected)
