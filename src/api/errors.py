"""Error envelope and exception handlers.

Every error response has the shape ``{"error": "<message>"}``.
"""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
GENERIC_ERROR = "Something went wrong!"


class APIError(Exception):
    """Error raised by a route, surfaced with its own message."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return error_response(exc.message, exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Map framework HTTP errors (unknown routes, wrong methods) to the envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(ROUTE_NOT_FOUND, exc.status_code)
    return error_response(str(exc.detail), exc.status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for exceptions that escaped a route."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(GENERIC_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)
