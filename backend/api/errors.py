"""Boundary translation from internal failures to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import AuthenticationError, BoardError, InternalError, ValidationError
from services.auth import clear_auth_cookie

logger = logging.getLogger(__name__)


def board_error_response(request: Request, exc: BoardError) -> JSONResponse:
    response = JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    if isinstance(exc, AuthenticationError):
        clear_auth_cookie(response, request.app.state.settings)
    return response


async def handle_board_error(request: Request, exc: BoardError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error(
            "Internal error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return board_error_response(request, InternalError())
    return board_error_response(request, exc)


async def handle_request_validation_error(request: Request, exc: Exception) -> JSONResponse:
    logger.debug("Malformed request on %s %s: %s", request.method, request.url.path, exc)
    return board_error_response(request, ValidationError())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": InternalError.default_detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BoardError, handle_board_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
