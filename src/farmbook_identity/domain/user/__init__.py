"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, name, email, mobile, role, password hash)
- Uniqueness of email and mobile
- The credential store port (UserRepository)
"""

from farmbook_identity.domain.user.aggregates import User
from farmbook_identity.domain.user.exceptions import (
    DuplicateIdentityError,
    InvalidEmailError,
    InvalidMobileError,
    PersistenceFailureError,
)
from farmbook_identity.domain.user.repositories import UserRepository
from farmbook_identity.domain.user.value_objects import (
    Email,
    Gender,
    MobileNumber,
    UserRole,
)

__all__ = [
    "DuplicateIdentityError",
    "Email",
    "Gender",
    "InvalidEmailError",
    "InvalidMobileError",
    "MobileNumber",
    "PersistenceFailureError",
    "User",
    "UserRepository",
    "UserRole",
]
