"""User repository interface (the credential store port)."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from farmbook_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, compared trimmed and lowercased."""

    @abstractmethod
    async def find_by_mobile(self, mobile: str) -> Optional[User]:
        """Find a user by mobile number (trimmed, exact match).

        Blank input returns None without querying.
        """

    @abstractmethod
    async def assert_unique(self, email: Optional[str], mobile: str) -> None:
        """Fail with DuplicateIdentityError if email or mobile is taken.

        Email is checked first, then mobile. Read-only.
        """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Check uniqueness, insert the user and return the stored record.

        The returned aggregate still carries the password hash.
        """

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
