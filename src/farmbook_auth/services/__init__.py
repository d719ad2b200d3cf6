"""Authentication services.

Provides password hashing, JWT token management and bearer extraction.
"""

from farmbook_auth.services.bearer import extract_bearer_token
from farmbook_auth.services.jwt_service import JWTService
from farmbook_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
    "extract_bearer_token",
]
