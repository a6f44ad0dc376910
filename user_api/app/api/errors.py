"""
Translation of failures into HTTP responses.

This is the only place that knows which status code belongs to which
error.  Every error response has the body ``{"error": "<message>"}``;
unexpected exceptions are logged with their traceback and reported to
the client as ``internal error`` without further detail.
"""

import logging
import re
from http import HTTPStatus
from typing import Dict, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..domain.errors import InvalidArgumentError, NotFoundError, UserError, ValidationError


logger = logging.getLogger(__name__)

MAX_ID = 2**63 - 1
MIN_ID = -(2**63)
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class BadRequestError(UserError):
    """The request itself could not be understood."""

    default_message = "bad request"


STATUS_BY_ERROR: Dict[Type[UserError], int] = {
    ValidationError: 400,
    InvalidArgumentError: 400,
    BadRequestError: 400,
    NotFoundError: 404,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def parse_user_id(raw: str) -> int:
    """Parse a path identifier as a signed 64‑bit decimal integer."""
    if not _ID_PATTERN.fullmatch(raw):
        raise BadRequestError("invalid id")
    value = int(raw)
    if not MIN_ID <= value <= MAX_ID:
        raise BadRequestError("invalid id")
    return value


async def handle_user_error(request: Request, exc: UserError) -> JSONResponse:
    status_code = 500
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            status_code = STATUS_BY_ERROR[error_type]
            break
    if status_code >= 500:
        logger.error("Unmapped user error on %s %s: %s", request.method, request.url.path, exc)
        return error_response(status_code, "internal error")
    return error_response(status_code, exc.message)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Rejected request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, "invalid JSON")


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        message = HTTPStatus(exc.status_code).phrase.lower()
    except ValueError:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "internal error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on ``app``."""
    app.add_exception_handler(UserError, handle_user_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
