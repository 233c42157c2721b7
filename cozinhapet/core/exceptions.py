"""Application errors and the handlers that render them as JSON.

Storage functions and endpoints raise the ``AppError`` subclasses below; the
handlers registered in ``cozinhapet.main`` turn them into ``{"message", "error"?}``
bodies with the matching status code.
"""
import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, error: Any = None) -> None:
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Invalid data provided"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Not authorized"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class DuplicateKeyError(AppError):
    """A uniqueness invariant would be violated (username, email, favorite or follow pair)."""

    status_code = 400
    default_message = "Already exists"

    def __init__(self, message: Optional[str] = None, constraint: Optional[str] = None) -> None:
        self.constraint = constraint
        super().__init__(message)


def _body(message: str, error: Any = None) -> dict:
    body: dict[str, Any] = {"message": message}
    if error is not None:
        body["error"] = error
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(_body(exc.message, exc.error)),
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("validation failed on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(_body("Invalid data provided", exc.errors())),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=_body("Server error"))
