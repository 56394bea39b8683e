"""
Translation of failures into JSON error responses.

Stores never raise for expected failures; they return ``None``,
``False`` or an outcome object and the route handlers turn those into
``HTTPException`` (404) or ``PayloadRejected`` (400).  This module
registers the handlers that render every error with the same
``{"message": ...}`` body, adding ``errors`` for rejected payloads.
Anything else that escapes a handler is an internal fault and is
reported as 500 with the exception's message.
"""

import logging
from typing import Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class PayloadRejected(Exception):
    """A request payload failed the configured validation strategy."""

    def __init__(self, errors: Iterable[str], message: str = "Validation failed") -> None:
        self.errors: List[str] = list(errors)
        self.message = message
        super().__init__(message)


def format_error_location(loc: Iterable) -> str:
    """Render a pydantic error location, e.g. ``category.1``."""
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _payload_rejected_handler(request: Request, exc: PayloadRejected) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, "; ".join(exc.errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "errors": exc.errors},
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [f"{format_error_location(err['loc'])}: {err['msg']}" for err in exc.errors()]
    logger.info("Malformed request %s %s: %s", request.method, request.url.path, "; ".join(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Malformed request", "errors": errors},
    )


async def _internal_fault_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc) or exc.__class__.__name__},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(PayloadRejected, _payload_rejected_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _internal_fault_handler)
