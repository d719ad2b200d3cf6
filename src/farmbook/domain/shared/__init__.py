"""Shared domain primitives: time helpers and the exception hierarchy."""

from farmbook.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    PersistenceError,
    ValidationError,
)
from farmbook.domain.shared.time import utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "PersistenceError",
    "ValidationError",
    "utc_now",
]
