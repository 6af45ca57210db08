"""Exception handlers translating errors into the response envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gram.domain.error import (
    AuthRequiredError,
    DomainError,
    NotFoundError,
    SelfActionForbiddenError,
    TransientStoreError,
)
from gram.interface.api.envelope import ErrorEnvelope

INVALID_INPUT_MESSAGE = "Invalid request. Please check your input."

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    AuthRequiredError: status.HTTP_401_UNAUTHORIZED,
    SelfActionForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    TransientStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope response."""
    return JSONResponse(
        status_code=status_code, content=ErrorEnvelope(message=message).model_dump()
    )


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (most specific class wins)."""
    for cls in type(error).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logfire.info(
        "Domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
    )
    return error_response(status_code, exc.public_message)


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logfire.info("Invalid input", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_INPUT_MESSAGE)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.info(
        "Request validation failed", path=request.url.path, errors=str(exc.errors())
    )
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_INPUT_MESSAGE)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, DomainError.public_message
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register envelope-producing handlers on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
