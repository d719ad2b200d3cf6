"""Farmbook Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the farm bookkeeping domain. It handles:
- Password hashing (scrypt, ``salt:digest``)
- JWT token issuance and verification
- Bearer token extraction from request headers

Architecture:
    farmbook_auth/
    ├── services/           # Pure logic (password hashing, JWT, bearer)
    ├── durations.py        # Token lifetime parsing ("7d", "12h", ...)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from farmbook_auth import JWTService, PasswordHashingService
"""

from farmbook_auth.durations import parse_duration
from farmbook_auth.exceptions import (
    AuthError,
    ConfigurationError,
    CorruptCredentialError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    TokenError,
    TokenExpiredError,
    TokenVerificationError,
    WeakPasswordError,
)
from farmbook_auth.schemas import TokenClaims, TokenPayload
from farmbook_auth.services import (
    JWTService,
    PasswordHashingService,
    extract_bearer_token,
)

__all__ = [
    # Services
    "JWTService",
    "PasswordHashingService",
    "extract_bearer_token",
    "parse_duration",
    # Schemas
    "TokenClaims",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "ConfigurationError",
    "CorruptCredentialError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "TokenError",
    "TokenExpiredError",
    "TokenVerificationError",
    "WeakPasswordError",
]
