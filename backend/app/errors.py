"""
Error types of the users API and their mapping onto HTTP responses.

Two kinds exist: the client sent something that does not parse
(``InvalidRequestError``, 400) or it referenced a user that does not
exist (``UserNotFoundError``, 404). Framework validation failures are
folded into the first kind so clients never see a 422.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.logger import get_logger

logger = get_logger(__name__)

INVALID_ID_MESSAGE = "Invalid ID format"
INVALID_REQUEST_MESSAGE = "Invalid request"
NOT_FOUND_MESSAGE = "User not found"


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequestError(ApiError):
    status_code = 400
    message = INVALID_REQUEST_MESSAGE


class UserNotFoundError(ApiError):
    status_code = 404
    message = NOT_FOUND_MESSAGE


def validation_message(exc: RequestValidationError) -> str:
    """Pick the client-facing message; a bad path id wins over a bad body."""
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc and loc[0] == "path":
            return INVALID_ID_MESSAGE
    return INVALID_REQUEST_MESSAGE


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        "request_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        reason=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return await api_error_handler(request, InvalidRequestError(validation_message(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
