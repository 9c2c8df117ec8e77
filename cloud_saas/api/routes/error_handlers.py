"""
Exception handlers rendering every error as ``{"msg": ...}``.

Controllers turn client-caused domain errors into HTTPExceptions; whatever
domain error escapes them (storage, hashing, SMTP) is internal and answered
with its generic user message.
"""
# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...core.exceptions import (
    AccountError,
    AuthenticationError,
    InternalError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _status_for(exception: AccountError) -> int:
    if isinstance(exception, InternalError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(exception, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    return status.HTTP_400_BAD_REQUEST


def register_exception_handlers(application: FastAPI) -> None:
    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exception: StarletteHTTPException):
        return JSONResponse(
            status_code=exception.status_code,
            content={"msg": str(exception.detail)},
            headers=getattr(exception, "headers", None),
        )

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exception: RequestValidationError):
        logger.debug(f"Rejected malformed body on {request.url.path}: {exception.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"msg": ValidationError.default_user_message},
        )

    @application.exception_handler(AccountError)
    async def account_error_handler(request: Request, exception: AccountError):
        status_code = _status_for(exception)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exception.message}", exc_info=exception)
        return JSONResponse(status_code=status_code, content={"msg": exception.user_message})

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exception: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=exception)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Server error"},
        )
