"""Interface layer errors.

Domain and adapter exceptions are translated into JSON responses shaped
``{"error": <message>, "details": <object or null>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from praxis.adapter.error import ProviderError
from praxis.domain.error import (
    AuthError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses come before DomainError
STATUS_CODES: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def error_response(
    status_code: int, message: str, details: dict | list | None = None
) -> JSONResponse:
    """Build the JSON error body."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "details": details},
    )


def status_code_for(exc: Exception) -> int:
    for exc_type, status_code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = status_code_for(exc)

    details = None
    if isinstance(exc, ConflictError) and exc.existing_id:
        details = {"existingId": exc.existing_id}
    elif isinstance(exc, AuthError):
        details = {"code": exc.code}

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc}")

    message = exc.code if isinstance(exc, AuthError) else str(exc)
    return error_response(status_code, message, details)


async def handle_provider_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"42 API failure on {request.url.path}: {exc}")
    return error_response(
        status.HTTP_502_BAD_GATEWAY,
        "42 API unavailable",
        {"statusCode": getattr(exc, "status_code", None)},
    )


async def handle_request_validation_error(
    request: Request, exc: Exception
) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
            for error in errors
        ],
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ProviderError, handle_provider_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
