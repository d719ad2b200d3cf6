"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
domain layer. Domain exceptions carry an explicit ``ErrorCode`` so the
presentation layer picks an HTTP status from the code, never from the
message text.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_MOBILE = "INVALID_MOBILE"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"

    # Persistence Errors (500)
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException, ValueError):
    """Raised when input validation fails.

    Also a ``ValueError`` so pydantic validators report it as a field error.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an entity would collide with an existing one."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class PersistenceError(DomainException):
    """Raised when storage does not behave as expected."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PERSISTENCE_FAILURE,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
