"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmbook.domain.shared.time import ensure_tz_aware
from farmbook_identity.domain.user import (
    DuplicateIdentityError,
    Email,
    PersistenceFailureError,
    User,
    UserRepository,
)
from farmbook_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email or not email.strip():
            return None

        stmt = select(UserModel).where(UserModel.email == Email.normalize(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_mobile(self, mobile: str) -> Optional[User]:
        if not mobile or not mobile.strip():
            return None

        stmt = select(UserModel).where(UserModel.mobile == mobile.strip())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def assert_unique(self, email: Optional[str], mobile: str) -> None:
        if email and await self.find_by_email(email) is not None:
            raise DuplicateIdentityError("email", Email.normalize(email))

        if await self.find_by_mobile(mobile) is not None:
            raise DuplicateIdentityError("mobile", mobile.strip())

    async def create(self, user: User) -> User:
        await self.assert_unique(user.email, user.mobile)

        self._session.add(self._map_to_model(user))
        try:
            await self._session.flush()
        except IntegrityError as e:
            # Lost a race against a concurrent signup; the unique index held
            await self._session.rollback()
            raise await self._identify_collision(user) from e

        logger.info("Created user: %s (mobile: %s)", user.id, user.mobile)

        stored = await self.find_by_id(user.id)
        if stored is None:
            raise PersistenceFailureError
        return stored

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _identify_collision(
        self,
        user: User,
    ) -> DuplicateIdentityError | PersistenceFailureError:
        if user.email and await self.find_by_email(user.email) is not None:
            return DuplicateIdentityError("email", user.email)
        if await self.find_by_mobile(user.mobile) is not None:
            return DuplicateIdentityError("mobile", user.mobile)

        logger.error("Integrity error creating user %s with no colliding row", user.id)
        return PersistenceFailureError("Failed to create user")

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            mobile=model.mobile,
            password_hash=model.password_hash,
            email=model.email,
            gender=model.gender,
            address=model.address,
            role=model.role,
            is_active=model.is_active,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            mobile=user.mobile,
            gender=user.gender.value if user.gender else None,
            address=user.address,
            role=int(user.role),
            password_hash=user.password_hash,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
