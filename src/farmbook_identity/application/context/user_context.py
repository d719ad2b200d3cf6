"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from farmbook_identity.domain.user.value_objects import UserRole

if TYPE_CHECKING:
    from farmbook_auth import TokenPayload
    from farmbook_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user."""

    user_id: UUID
    email: str
    mobile: str
    name: str
    role: UserRole = UserRole.CONSUMER

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(
            user_id=user.id,
            email=user.email or "",
            mobile=user.mobile,
            name=user.name,
            role=user.role,
        )

    @classmethod
    def from_payload(cls, payload: TokenPayload) -> UserContext:
        return cls(
            user_id=payload.user_id,
            email=payload.email,
            mobile=payload.mobile,
            name=payload.name,
            role=UserRole(payload.role),
        )

    def __str__(self) -> str:
        return f"UserContext({self.mobile})"

    def __repr__(self) -> str:
        return (
            f"UserContext(user_id={self.user_id}, "
            f"mobile={self.mobile!r}, role={self.role.name})"
        )
