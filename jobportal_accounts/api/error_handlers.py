"""
Maps account exceptions to HTTP responses.

Every failure leaves through one of these handlers, so every request gets a
``{"success": false, "message": ...}`` body.
"""

# Standard library imports
import logging
from typing import Dict, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..application.dto.response_dto import MessageResponse
from ..domain.exceptions import (
    AccountError,
    AuthError,
    ConflictError,
    NotAuthenticatedError,
    NotFoundError,
    UploadError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error. Please try again later."

STATUS_BY_ERROR: Dict[Type[AccountError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    AuthError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_400_BAD_REQUEST,
    NotAuthenticatedError: status.HTTP_401_UNAUTHORIZED,
    UploadError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(error: AccountError) -> int:
    """Most specific mapped class wins; unknown AccountError subclasses are 500."""
    for cls in type(error).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(message: str, status_code: int) -> JSONResponse:
    payload = MessageResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return error_response(exc.user_message, status_code)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} rejected: malformed request {exc.errors()}")
    return error_response("Invalid request payload.", status.HTTP_400_BAD_REQUEST)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(AccountError, account_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
