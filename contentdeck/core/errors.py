"""Error taxonomy and its mapping to JSON error responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


class AppError(Exception):
    """Base exception for request handling."""

    status_code = 500


class ValidationError(AppError):
    """Raised when a required field is missing or empty."""

    status_code = 400


class NotFoundError(AppError):
    """Raised when the referenced id does not exist in the store."""

    status_code = 404


class StoreError(AppError):
    """Raised on any underlying persistence failure."""

    status_code = 500


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _handle_client_error(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc.status_code, str(exc))


async def _handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    # Detail stays in the server log; clients get the generic message.
    logger.error("store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return _error_response(500, SERVER_ERROR_MESSAGE)


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("rejected request %s %s: %s", request.method, request.url.path, exc.errors())
    return _error_response(400, "Invalid request")


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(500, SERVER_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error mapping on an application."""
    app.add_exception_handler(ValidationError, _handle_client_error)
    app.add_exception_handler(NotFoundError, _handle_client_error)
    app.add_exception_handler(StoreError, _handle_store_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
