"""
Centralized exception handling for API endpoints.

Failures after routing are answered with HTTP 200 and the
``{"error": ...}`` envelope. Only method rejection uses an error status.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from notify_relay.models.errors import ErrorCode, RelayError

logger = logging.getLogger(__name__)


async def relay_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Render a RelayError as the error envelope.

    Args:
        request: The incoming HTTP request
        exc: The relay error (must be RelayError)

    Returns:
        JSONResponse with status 200 and {"error": message}
    """
    if not isinstance(exc, RelayError):
        raise exc

    logger.info(f"{request.url.path}: {exc.code.value}")
    return JSONResponse(status_code=200, content=exc.to_dict())


async def method_not_allowed_handler(request: Request, exc: Exception) -> Response:
    """
    Answer 405 in plain text; other HTTP errors keep FastAPI's handling.

    Args:
        request: The incoming HTTP request
        exc: The HTTP exception raised by routing

    Returns:
        Plain-text 405 response, or FastAPI's default rendering
    """
    if not isinstance(exc, StarletteHTTPException):
        raise exc

    if exc.status_code == 405:
        logger.info(f"{request.url.path}: {ErrorCode.METHOD_NOT_ALLOWED.value}")
        return PlainTextResponse(
            "Method not allowed", status_code=405, headers=exc.headers
        )
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers on the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
