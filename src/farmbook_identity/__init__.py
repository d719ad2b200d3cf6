"""Farmbook identity: users, the credential store and authentication."""

from farmbook_identity.application.context import UserContext
from farmbook_identity.application.services import AuthenticationService
from farmbook_identity.domain.user import (
    DuplicateIdentityError,
    Email,
    Gender,
    InvalidEmailError,
    InvalidMobileError,
    MobileNumber,
    PersistenceFailureError,
    User,
    UserRepository,
    UserRole,
)

__all__ = [
    "AuthenticationService",
    "DuplicateIdentityError",
    "Email",
    "Gender",
    "InvalidEmailError",
    "InvalidMobileError",
    "MobileNumber",
    "PersistenceFailureError",
    "User",
    "UserContext",
    "UserRepository",
    "UserRole",
]
