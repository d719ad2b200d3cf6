"""Centralized exception handlers for the FastAPI application.

Domain and auth exceptions are mapped to HTTP responses with a consistent
error format, so routers never build error responses themselves.

Error Response Format:
    {
        "error": "Human-readable error message"
    }

Request validation failures add a field-level breakdown:
    {
        "error": "Validation failed",
        "details": {"formErrors": [...], "fieldErrors": {"mobile": [...]}}
    }

Usage:
    from farmbook.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from farmbook.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    PersistenceError,
    ValidationError,
)
from farmbook_auth import (
    AuthError,
    ConfigurationError,
    CorruptCredentialError,
    InvalidCredentialsError,
    TokenError,
    TokenVerificationError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_MOBILE: status.HTTP_400_BAD_REQUEST,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_IDENTITY: status.HTTP_409_CONFLICT,
    # 500 Internal Server Error
    ErrorCode.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

VALIDATION_FAILED_MESSAGE = "Validation failed"
INTERNAL_ERROR_MESSAGE = "An internal error occurred"
UNAUTHORIZED_MESSAGE = "Unauthorized"


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, PersistenceError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    return status.HTTP_400_BAD_REQUEST


def _get_status_for_auth_error(exc: AuthError) -> int:
    if isinstance(exc, (TokenError, InvalidCredentialsError)):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, WeakPasswordError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, (CorruptCredentialError, ConfigurationError)):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {"error": message}
    if details is not None:
        content["details"] = details

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _error_message(error: dict[str, Any]) -> str:
    # Custom validators raise ValueError; use its text without pydantic's prefix
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and ctx.get("error") is not None:
        return str(ctx["error"])
    return str(error.get("msg", "Invalid value"))


def flatten_validation_errors(errors: list[dict[str, Any]]) -> dict[str, Any]:
    """Group validation errors into form-level and per-field messages.

    Field keys are the wire (camelCase) names. Errors not tied to a body
    field, such as a missing or unparsable body, go to ``formErrors``.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}

    for error in errors:
        loc = [part for part in error.get("loc", ()) if part != "body"]
        message = _error_message(error)

        if loc and isinstance(loc[0], str):
            field_errors.setdefault(loc[0], []).append(message)
        else:
            form_errors.append(message)

    return {"formErrors": form_errors, "fieldErrors": field_errors}


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        details = flatten_validation_errors(list(exc.errors()))
        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            sorted(details["fieldErrors"]),
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=VALIDATION_FAILED_MESSAGE,
            details=details,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(status_code=status_code, message=exc.message)

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle authentication errors.

        Token failures other than expiry and bad signatures collapse to a
        generic "Unauthorized".
        """
        status_code = _get_status_for_auth_error(exc)
        message = exc.message
        if isinstance(exc, TokenVerificationError):
            message = UNAUTHORIZED_MESSAGE

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Auth failure on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
            )
        else:
            logger.debug(
                "Auth rejected on %s %s: %s",
                request.method,
                request.url.path,
                exc.message,
            )

        return _create_error_response(status_code=status_code, message=message)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the specific handlers above.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
        )
