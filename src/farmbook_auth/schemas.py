"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims embedded in a session token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address, empty when the user has none
    mobile
        The user's 10-digit mobile number
    name
        The user's display name
    role
        Numeric role code (0 super-admin, 1 admin, 2 consumer)
    """

    user_id: UUID
    email: str
    mobile: str
    name: str
    role: int


@dataclass(frozen=True)
class TokenPayload:
    """Decoded and verified token payload."""

    user_id: UUID
    email: str
    mobile: str
    name: str
    role: int
    issued_at: datetime
    expires_at: datetime

    @property
    def claims(self) -> TokenClaims:
        """Return the identity claims without the timestamps."""
        return TokenClaims(
            user_id=self.user_id,
            email=self.email,
            mobile=self.mobile,
            name=self.name,
            role=self.role,
        )

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=timezone.utc) >= self.expires_at
